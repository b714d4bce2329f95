"""Storage row for the Product aggregate.

Only the repository touches this model.  It mirrors the entity's fields
and carries the same rules as database constraints, but it is never
handed to handlers or views: they work with ``entities.Product``.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.products.entities import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH


class ProductModel(models.Model):
    """One row of the ``products`` table."""

    id = models.AutoField(primary_key=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH, blank=True, default=""
    )
    price = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock_quantity = models.IntegerField()

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock_quantity__gte=0),
                name="products_stock_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
