"""Domain bus interfaces for in-process command/query dispatch."""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, Type, TypeVar

R = TypeVar("R", contravariant=True)


class IRequestHandler(Protocol, Generic[R]):
    """Handler interface for a single command or query type."""

    async def handle(self, request: R) -> Any: ...


HandlerFactory = Callable[[], IRequestHandler[Any]]


class IDispatcher(Protocol):
    """Mediator interface: routes a request value to its one handler."""

    def register(self, request_type: Type[Any], factory: HandlerFactory) -> None: ...

    def is_registered(self, request_type: Type[Any]) -> bool: ...

    async def send(self, request: Any) -> Any: ...
