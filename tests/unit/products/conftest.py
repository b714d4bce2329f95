"""Fixtures shared by the product unit tests.

``FakeProductRepository`` implements the same abstract interface as the
Django repository but keeps everything in a dict: no database, no I/O.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from modules.products.entities import Product
from modules.products.repositories.interfaces import IProductRepository


class FakeProductRepository(IProductRepository):
    def __init__(self) -> None:
        self._store: Dict[int, Product] = {}
        self._next_id = 1
        self.updated: List[int] = []
        self.deleted: List[int] = []

    async def get_by_id(self, id: int) -> Optional[Product]:
        stored = self._store.get(id)
        return self._copy(stored) if stored is not None else None

    async def get_all(self) -> List[Product]:
        return [self._copy(product) for product in self._store.values()]

    async def add(self, entity: Product) -> Product:
        stored = Product._from_storage(
            id=self._next_id,
            name=entity.name,
            description=entity.description,
            price=entity.price,
            stock_quantity=entity.stock_quantity,
        )
        self._store[stored.id] = stored
        self._next_id += 1
        return self._copy(stored)

    async def update(self, entity: Product) -> None:
        self._store[entity.id] = self._copy(entity)
        self.updated.append(entity.id)

    async def delete(self, entity: Product) -> None:
        del self._store[entity.id]
        self.deleted.append(entity.id)

    @staticmethod
    def _copy(product: Product) -> Product:
        return Product._from_storage(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock_quantity=product.stock_quantity,
        )


@pytest.fixture()
def fake_repo():
    return FakeProductRepository()


@pytest.fixture()
async def stored_product(fake_repo):
    return await fake_repo.add(
        Product(
            name="Widget",
            description="A fine widget",
            price=Decimal("19.99"),
            stock_quantity=10,
        )
    )
