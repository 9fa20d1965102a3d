"""Data Transfer Objects: plain containers that cross layer boundaries.

Request bodies arrive as loosely-typed mappings. They are parsed here,
once, into strictly-typed structures so nothing downstream ever sees an
unvalidated value. ProductPatch lives in the domain so repositories can
accept it; it is re-exported for callers of this module.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.product_patch import UPDATABLE_FIELDS, ProductPatch, require_mapping
from catalog.domain.model.value_objects import Price, ProductName, Stock

__all__ = ["UPDATABLE_FIELDS", "NewProduct", "ProductPatch"]


@dataclass(frozen=True)
class NewProduct:
    """Input: a validated product to be created."""

    name: ProductName
    price: Price
    stock: Stock = Stock(0)

    @classmethod
    def from_mapping(cls, data: object) -> NewProduct:
        """Build from a request body; unknown keys are ignored.

        ``name`` and ``price`` are required, ``stock`` defaults to 0.
        """
        data = require_mapping(data)
        return cls(
            name=ProductName.of(data.get("name")),
            price=Price.of(data.get("price")),
            stock=Stock.of(data["stock"]) if "stock" in data else Stock(0),
        )
