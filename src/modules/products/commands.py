"""Product commands: requests that change state.

Immutable Pydantic models parsed straight from the JSON body (camelCase
keys).  Missing fields fall back to empty/zero values so that omissions
are reported by the command validators rather than by the parser.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Command(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class CreateProductCommand(Command):
    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0


class UpdateProductCommand(Command):
    id: int = 0
    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock_quantity: int = 0


class DeleteProductCommand(Command):
    id: int
