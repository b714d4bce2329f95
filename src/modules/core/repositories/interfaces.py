"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Handler code
depends on this abstraction, never on Django ORM directly.

Every operation is a coroutine: each call is one independent round
trip to the backing store, with no transaction spanning several calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its identity, or ``None`` when absent."""

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Return every entity as an eagerly loaded list."""

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Persist a new entity and return it with its identity assigned."""

    @abstractmethod
    async def update(self, entity: T) -> None:
        """Write the current state of an already persisted entity."""

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Physically remove a persisted entity."""
