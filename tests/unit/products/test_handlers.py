"""Unit tests for the Product command/query handlers.

Covers:
- CreateProductHandler: happy path, validation before persistence.
- GetProductByIdHandler / GetAllProductsHandler: found, absent, empty.
- UpdateProductHandler: happy path, not found, invalid values.
- DeleteProductHandler: happy path, not found (not idempotent).
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from modules.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from modules.products.dtos import ProductDto
from modules.products.exceptions import InvalidProductArgument, ProductNotFound
from modules.products.handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    GetAllProductsHandler,
    GetProductByIdHandler,
    UpdateProductHandler,
)
from modules.products.queries import GetAllProductsQuery, GetProductByIdQuery
from modules.products.validators import CommandValidator
from shared.domain.exceptions import StorageError, ValidationFailure

pytestmark = pytest.mark.unit


def _update_command(id: int, **overrides) -> UpdateProductCommand:
    defaults = {
        "id": id,
        "name": "Widget Updated",
        "description": "Updated",
        "price": Decimal("25.00"),
        "stock_quantity": 200,
    }
    defaults.update(overrides)
    return UpdateProductCommand(**defaults)


# ===========================================================================
# CreateProductHandler
# ===========================================================================


class TestCreateProduct:
    async def test_success(self, fake_repo):
        handler = CreateProductHandler(fake_repo)
        command = CreateProductCommand(
            name="Widget", description="", price=Decimal("9.99"), stock_quantity=5
        )

        dto = await handler.handle(command)

        assert isinstance(dto, ProductDto)
        assert dto.id > 0
        assert dto.name == "Widget"
        assert dto.description == ""
        assert dto.price == Decimal("9.99")
        assert dto.stock_quantity == 5

    async def test_round_trips_through_get_by_id(self, fake_repo):
        created = await CreateProductHandler(fake_repo).handle(
            CreateProductCommand(
                name="Gadget", description="Red", price=Decimal("1.50"), stock_quantity=0
            )
        )

        fetched = await GetProductByIdHandler(fake_repo).handle(
            GetProductByIdQuery(id=created.id)
        )

        assert fetched == created

    async def test_validation_runs_before_persistence(self):
        repo = AsyncMock()
        handler = CreateProductHandler(repo)

        with pytest.raises(ValidationFailure) as exc_info:
            await handler.handle(CreateProductCommand(name="", price=Decimal("1")))

        assert "Name" in exc_info.value.errors
        repo.add.assert_not_called()

    async def test_entity_rules_still_apply_without_validator(self, fake_repo):
        handler = CreateProductHandler(fake_repo, validator=CommandValidator([]))

        with pytest.raises(InvalidProductArgument):
            await handler.handle(CreateProductCommand(name="Widget", price=Decimal("0")))

        assert await fake_repo.get_all() == []

    async def test_storage_error_propagates(self):
        repo = AsyncMock()
        repo.add.side_effect = StorageError("boom")

        with pytest.raises(StorageError):
            await CreateProductHandler(repo).handle(
                CreateProductCommand(name="Widget", price=Decimal("1"))
            )


# ===========================================================================
# Queries
# ===========================================================================


class TestGetProductById:
    async def test_found(self, fake_repo, stored_product):
        dto = await GetProductByIdHandler(fake_repo).handle(
            GetProductByIdQuery(id=stored_product.id)
        )
        assert dto.id == stored_product.id
        assert dto.name == "Widget"

    async def test_absent_returns_none(self, fake_repo):
        dto = await GetProductByIdHandler(fake_repo).handle(GetProductByIdQuery(id=999))
        assert dto is None


class TestGetAllProducts:
    async def test_empty(self, fake_repo):
        assert await GetAllProductsHandler(fake_repo).handle(GetAllProductsQuery()) == []

    async def test_maps_every_product(self, fake_repo, stored_product):
        await CreateProductHandler(fake_repo).handle(
            CreateProductCommand(name="Gadget", price=Decimal("2"))
        )

        dtos = await GetAllProductsHandler(fake_repo).handle(GetAllProductsQuery())

        assert [dto.name for dto in dtos] == ["Widget", "Gadget"]


# ===========================================================================
# UpdateProductHandler
# ===========================================================================


class TestUpdateProduct:
    async def test_success(self, fake_repo, stored_product):
        await UpdateProductHandler(fake_repo).handle(_update_command(stored_product.id))

        product = await fake_repo.get_by_id(stored_product.id)
        assert product.name == "Widget Updated"
        assert product.description == "Updated"
        assert product.price == Decimal("25.00")
        assert product.stock_quantity == 200
        assert fake_repo.updated == [stored_product.id]

    async def test_not_found_raises(self, fake_repo):
        with pytest.raises(ProductNotFound) as exc_info:
            await UpdateProductHandler(fake_repo).handle(_update_command(999))

        assert exc_info.value.product_id == 999
        assert fake_repo.updated == []

    async def test_validation_failure_leaves_storage_unchanged(
        self, fake_repo, stored_product
    ):
        with pytest.raises(ValidationFailure):
            await UpdateProductHandler(fake_repo).handle(
                _update_command(stored_product.id, price=Decimal("0"))
            )

        product = await fake_repo.get_by_id(stored_product.id)
        assert product.price == Decimal("19.99")
        assert fake_repo.updated == []

    async def test_entity_rejection_skips_update(self, fake_repo, stored_product):
        handler = UpdateProductHandler(fake_repo, validator=CommandValidator([]))

        with pytest.raises(InvalidProductArgument):
            await handler.handle(_update_command(stored_product.id, stock_quantity=-1))

        assert fake_repo.updated == []
        product = await fake_repo.get_by_id(stored_product.id)
        assert product.stock_quantity == 10


# ===========================================================================
# DeleteProductHandler
# ===========================================================================


class TestDeleteProduct:
    async def test_success(self, fake_repo, stored_product):
        await DeleteProductHandler(fake_repo).handle(
            DeleteProductCommand(id=stored_product.id)
        )

        assert await fake_repo.get_by_id(stored_product.id) is None
        assert fake_repo.deleted == [stored_product.id]

    async def test_not_found_raises(self, fake_repo):
        with pytest.raises(ProductNotFound):
            await DeleteProductHandler(fake_repo).handle(DeleteProductCommand(id=999))

        assert fake_repo.deleted == []

    async def test_second_delete_raises(self, fake_repo, stored_product):
        handler = DeleteProductHandler(fake_repo)
        await handler.handle(DeleteProductCommand(id=stored_product.id))

        with pytest.raises(ProductNotFound):
            await handler.handle(DeleteProductCommand(id=stored_product.id))
