"""Product aggregate root.

Business rules implemented:
- RN-PRO-001: Name is required, not blank, at most 100 characters.
- RN-PRO-002: Description is optional, at most 500 characters.
- RN-PRO-003: Price must be greater than zero and fit decimal(18, 2).
- RN-PRO-004: Stock quantity cannot be negative or exceed the integer column.

The entity is the only authority over its own field legality.  State
changes go through ``update_details`` / ``update_stock``; each call either
applies completely or raises without touching any field.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from modules.products.exceptions import InvalidProductArgument

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
PRICE_INTEGER_DIGITS = 16
PRICE_DECIMAL_PLACES = 2
STOCK_MAX_QUANTITY = 2_147_483_647

_CENT = Decimal("0.01")

PriceLike = Union[Decimal, int, float, str]


def _check_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidProductArgument("Product name cannot be empty.", field="name")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidProductArgument(
            f"Product name cannot exceed {NAME_MAX_LENGTH} characters.", field="name"
        )
    return name


def _check_description(description: Optional[str]) -> str:
    description = description or ""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvalidProductArgument(
            f"Product description cannot exceed {DESCRIPTION_MAX_LENGTH} characters.",
            field="description",
        )
    return description


def _check_price(price: PriceLike) -> Decimal:
    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except InvalidOperation:
        raise InvalidProductArgument("Price must be a number.", field="price") from None
    if not value.is_finite() or value <= 0:
        raise InvalidProductArgument("Price must be positive.", field="price")
    if not price_fits_column(value):
        raise InvalidProductArgument(
            f"Price must have at most {PRICE_INTEGER_DIGITS} integer digits "
            f"and {PRICE_DECIMAL_PLACES} decimal places.",
            field="price",
        )
    return value


def price_fits_column(value: Decimal) -> bool:
    """True when ``value`` is stored in decimal(18, 2) without rounding."""
    if not value.is_finite():
        return False
    # adjusted() is the exponent of the leading digit: 16 digits -> 15.
    if value.adjusted() >= PRICE_INTEGER_DIGITS:
        return False
    return value == value.quantize(_CENT)


def _check_stock(quantity: int) -> int:
    if quantity < 0:
        raise InvalidProductArgument(
            "Stock quantity cannot be negative.", field="stock_quantity"
        )
    if quantity > STOCK_MAX_QUANTITY:
        raise InvalidProductArgument(
            f"Stock quantity cannot exceed {STOCK_MAX_QUANTITY}.",
            field="stock_quantity",
        )
    return quantity


class Product:
    """A sellable item with its price and available stock."""

    def __init__(
        self,
        name: str,
        description: Optional[str],
        price: PriceLike,
        stock_quantity: int,
    ) -> None:
        # All checks run before any assignment: no half-built instance.
        name = _check_name(name)
        description = _check_description(description)
        price = _check_price(price)
        stock_quantity = _check_stock(stock_quantity)

        self._id: Optional[int] = None
        self._name = name
        self._description = description
        self._price = price
        self._stock_quantity = stock_quantity

    @classmethod
    def _from_storage(
        cls,
        id: int,
        name: str,
        description: str,
        price: Decimal,
        stock_quantity: int,
    ) -> Product:
        """Rehydrate a stored row without re-checking invariants.

        Persistence layer only: rows were validated when they were written.
        """
        product = cls.__new__(cls)
        product._id = id
        product._name = name
        product._description = description
        product._price = price
        product._stock_quantity = stock_quantity
        return product

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def update_details(
        self, name: str, description: Optional[str], price: PriceLike
    ) -> None:
        """Replace name, description and price in one all-or-nothing step."""
        name = _check_name(name)
        description = _check_description(description)
        price = _check_price(price)

        self._name = name
        self._description = description
        self._price = price

    def update_stock(self, quantity: int) -> None:
        self._stock_quantity = _check_stock(quantity)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Product(id={self._id!r}, name={self._name!r})"
