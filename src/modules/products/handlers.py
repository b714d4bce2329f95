"""Command and query handlers for the Product aggregate.

One handler per use case.  Each receives its repository through the
constructor and orchestrates: validate -> build/mutate entity ->
repository call -> DTO mapping.  Handlers never catch errors; every
failure bubbles up to the global exception handler.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import structlog

from modules.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from modules.products.dtos import ProductDto
from modules.products.entities import Product
from modules.products.exceptions import ProductNotFound
from modules.products.queries import GetAllProductsQuery, GetProductByIdQuery
from modules.products.repositories.interfaces import IProductRepository
from modules.products.validators import (
    CommandValidator,
    create_product_validator,
    update_product_validator,
)
from shared.domain.bus import IDispatcher, IRequestHandler

logger = structlog.get_logger(__name__)


class CreateProductHandler(IRequestHandler[CreateProductCommand]):
    def __init__(
        self,
        repository: IProductRepository,
        validator: CommandValidator = create_product_validator,
    ) -> None:
        self._repo = repository
        self._validator = validator

    async def handle(self, request: CreateProductCommand) -> ProductDto:
        """Create a product.

        Raises:
            ValidationFailure: if any field rule fails.
            InvalidProductArgument: if the entity rejects the values.
            StorageError: if the insert fails.
        """
        self._validator.validate(request)

        product = Product(
            name=request.name,
            description=request.description,
            price=request.price,
            stock_quantity=request.stock_quantity,
        )
        created = await self._repo.add(product)
        logger.info("product.created", product_id=created.id, name=created.name)
        return ProductDto.from_entity(created)


class GetProductByIdHandler(IRequestHandler[GetProductByIdQuery]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: GetProductByIdQuery) -> Optional[ProductDto]:
        """Return the product, or ``None`` when it does not exist."""
        product = await self._repo.get_by_id(request.id)
        if product is None:
            return None
        return ProductDto.from_entity(product)


class GetAllProductsHandler(IRequestHandler[GetAllProductsQuery]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: GetAllProductsQuery) -> List[ProductDto]:
        products = await self._repo.get_all()
        return [ProductDto.from_entity(product) for product in products]


class UpdateProductHandler(IRequestHandler[UpdateProductCommand]):
    def __init__(
        self,
        repository: IProductRepository,
        validator: CommandValidator = update_product_validator,
    ) -> None:
        self._repo = repository
        self._validator = validator

    async def handle(self, request: UpdateProductCommand) -> None:
        """Replace every mutable field of an existing product.

        Raises:
            ValidationFailure: if any field rule fails.
            ProductNotFound: if no product has ``request.id``.
            InvalidProductArgument: if the entity rejects the values.
        """
        self._validator.validate(request)

        product = await self._repo.get_by_id(request.id)
        if product is None:
            logger.warning("product.not_found", product_id=request.id, action="update")
            raise ProductNotFound(request.id)

        product.update_details(request.name, request.description, request.price)
        product.update_stock(request.stock_quantity)

        await self._repo.update(product)
        logger.info("product.updated", product_id=product.id)


class DeleteProductHandler(IRequestHandler[DeleteProductCommand]):
    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    async def handle(self, request: DeleteProductCommand) -> None:
        """Delete a product.  Deleting an unknown id is an error, not a no-op.

        Raises:
            ProductNotFound: if no product has ``request.id``.
        """
        product = await self._repo.get_by_id(request.id)
        if product is None:
            logger.warning("product.not_found", product_id=request.id, action="delete")
            raise ProductNotFound(request.id)

        await self._repo.delete(product)
        logger.info("product.deleted", product_id=request.id)


def register_handlers(
    dispatcher: IDispatcher,
    repository_factory: Callable[[], IProductRepository],
) -> None:
    """Bind every product request type to a handler built per dispatch."""
    dispatcher.register(
        CreateProductCommand, lambda: CreateProductHandler(repository_factory())
    )
    dispatcher.register(
        UpdateProductCommand, lambda: UpdateProductHandler(repository_factory())
    )
    dispatcher.register(
        DeleteProductCommand, lambda: DeleteProductHandler(repository_factory())
    )
    dispatcher.register(
        GetProductByIdQuery, lambda: GetProductByIdHandler(repository_factory())
    )
    dispatcher.register(
        GetAllProductsQuery, lambda: GetAllProductsHandler(repository_factory())
    )
