"""Product repository interface.

Narrows ``IRepository`` to the Product aggregate; handlers depend on
this contract only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.entities import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""
