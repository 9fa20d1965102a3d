"""Partial update of a Product.

A patch names only the fields to change; the rest keep their stored
values. Writable columns are fixed here and never derived from input.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Price, ProductName, Stock

# Columns a client may write, in the order assignments are emitted.
UPDATABLE_FIELDS = ("name", "price", "stock")


def require_mapping(data: object) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return data


@dataclass(frozen=True)
class ProductPatch:
    """``None`` means "not supplied" and the column is left untouched."""

    name: ProductName | None = None
    price: Price | None = None
    stock: Stock | None = None

    @classmethod
    def from_mapping(cls, data: object) -> ProductPatch:
        """Build from a request body.

        Keys outside UPDATABLE_FIELDS are silently discarded. Each present
        key is validated; an explicit ``null`` counts as present and is
        rejected.
        """
        data = require_mapping(data)
        return cls(
            name=ProductName.of(data["name"]) if "name" in data else None,
            price=Price.of(data["price"]) if "price" in data else None,
            stock=Stock.of(data["stock"]) if "stock" in data else None,
        )

    def assignments(self) -> Iterator[tuple[str, object]]:
        """Yield ``(column, raw value)`` for supplied fields in column order."""
        values = {
            "name": None if self.name is None else self.name.value,
            "price": None if self.price is None else self.price.amount,
            "stock": None if self.stock is None else self.stock.value,
        }
        for column in UPDATABLE_FIELDS:
            if values[column] is not None:
                yield column, values[column]

    def is_empty(self) -> bool:
        return self.name is None and self.price is None and self.stock is None
