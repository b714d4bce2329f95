"""Product DTOs for the API boundary.

``ProductDto`` is the only shape that leaves the handlers: views never
see the entity.  Serialised with camelCase keys
(``stock_quantity`` -> ``stockQuantity``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.products.entities import Product


class ProductDto(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: int
    name: str
    description: str
    price: Decimal
    stock_quantity: int

    @classmethod
    def from_entity(cls, product: Product) -> ProductDto:
        """Field-for-field projection of a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock_quantity=product.stock_quantity,
        )
