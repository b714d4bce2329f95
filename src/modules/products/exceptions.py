"""Product domain exceptions.

Raised by the entity and the handlers when business rules are violated.
They specialise the shared error kinds so the global exception handler
can translate them without knowing about products.
"""

from __future__ import annotations

from shared.domain.exceptions import InvalidArgument, NotFound


class ProductNotFound(NotFound):
    """The requested product does not exist."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with id {product_id} was not found.")
        self.product_id = product_id


class InvalidProductArgument(InvalidArgument):
    """A product invariant was violated (reports the offending field)."""
