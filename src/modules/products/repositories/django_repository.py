"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's async QuerySet API.
Error handling follows the Null Object pattern for reads: ``get_by_id``
returns ``None`` for a missing row and the handler decides what absence
means.  Database failures are re-raised as ``StorageError``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

import structlog

from django.db import DatabaseError

from modules.products.entities import Product
from modules.products.models import ProductModel
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.exceptions import StorageError

logger = structlog.get_logger(__name__)


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except DatabaseError as exc:
        logger.error("product.storage_failed", operation=operation, error=str(exc))
        raise StorageError(f"Product storage failed during {operation}.") from exc


def _to_entity(row: ProductModel) -> Product:
    return Product._from_storage(
        id=row.id,
        name=row.name,
        description=row.description,
        price=row.price,
        stock_quantity=row.stock_quantity,
    )


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    async def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` if it does not exist."""
        with _storage_errors("get_by_id"):
            row = await ProductModel.objects.filter(pk=id).afirst()
        return _to_entity(row) if row is not None else None

    async def get_all(self) -> List[Product]:
        with _storage_errors("get_all"):
            return [_to_entity(row) async for row in ProductModel.objects.all()]

    async def add(self, entity: Product) -> Product:
        """Insert a new row; the returned entity carries the generated id."""
        with _storage_errors("add"):
            row = await ProductModel.objects.acreate(
                name=entity.name,
                description=entity.description,
                price=entity.price,
                stock_quantity=entity.stock_quantity,
            )
        logger.info("product.saved", product_id=row.id)
        return _to_entity(row)

    async def update(self, entity: Product) -> None:
        """Overwrite the stored row with the entity's state.

        No version check: concurrent writers race and the last one wins.
        """
        with _storage_errors("update"):
            updated = await ProductModel.objects.filter(pk=entity.id).aupdate(
                name=entity.name,
                description=entity.description,
                price=entity.price,
                stock_quantity=entity.stock_quantity,
            )
        if not updated:
            logger.warning("product.update_missed", product_id=entity.id)

    async def delete(self, entity: Product) -> None:
        with _storage_errors("delete"):
            deleted, _ = await ProductModel.objects.filter(pk=entity.id).adelete()
        if not deleted:
            raise StorageError(f"Product {entity.id} could not be deleted: no such row.")
        logger.info("product.removed", product_id=entity.id)
