"""Declarative field rules for product commands.

Each rule is a ``(field, predicate, message)`` tuple.  A validator runs
every rule and collects all failures, grouped by field, before raising a
single ``ValidationFailure``.  Field names in the report use PascalCase
(``stock_quantity`` -> ``StockQuantity``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, List, NamedTuple, Sequence

from pydantic.alias_generators import to_pascal

from modules.products.entities import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_INTEGER_DIGITS,
    STOCK_MAX_QUANTITY,
    price_fits_column,
)
from shared.domain.exceptions import ValidationFailure


class Rule(NamedTuple):
    field: str
    predicate: Callable[[Any], bool]
    message: str


def _not_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _max_length(limit: int) -> Callable[[Any], bool]:
    return lambda value: value is None or len(value) <= limit


PRODUCT_FIELD_RULES: List[Rule] = [
    Rule("name", _not_blank, "Name is required."),
    Rule(
        "name",
        _max_length(NAME_MAX_LENGTH),
        f"Name must not exceed {NAME_MAX_LENGTH} characters.",
    ),
    Rule(
        "description",
        _max_length(DESCRIPTION_MAX_LENGTH),
        f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters.",
    ),
    Rule("price", lambda value: value > Decimal("0"), "Price must be greater than 0."),
    Rule(
        "price",
        price_fits_column,
        f"Price must have at most {PRICE_INTEGER_DIGITS} integer digits "
        f"and {PRICE_DECIMAL_PLACES} decimal places.",
    ),
    Rule("stock_quantity", lambda value: value >= 0, "StockQuantity cannot be negative."),
    Rule(
        "stock_quantity",
        lambda value: value <= STOCK_MAX_QUANTITY,
        f"StockQuantity must not exceed {STOCK_MAX_QUANTITY}.",
    ),
]


class CommandValidator:
    """Evaluates a rule set against a command (collect-all, no short-circuit)."""

    def __init__(self, rules: Sequence[Rule]) -> None:
        self._rules = list(rules)

    def errors_for(self, command: Any) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for rule in self._rules:
            if not rule.predicate(getattr(command, rule.field)):
                errors.setdefault(to_pascal(rule.field), []).append(rule.message)
        return errors

    def validate(self, command: Any) -> None:
        errors = self.errors_for(command)
        if errors:
            raise ValidationFailure(errors)


create_product_validator = CommandValidator(PRODUCT_FIELD_RULES)
update_product_validator = CommandValidator(PRODUCT_FIELD_RULES)
