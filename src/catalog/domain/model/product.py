"""Product entity.

The only aggregate in the catalog. Its identity is assigned by storage
and never changes; every other field may be replaced through a partial
update.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.value_objects import Price, ProductId, ProductName, Stock


@dataclass(frozen=True)
class Product:
    """A product row as read back from storage.

    Frozen because storage is authoritative: a changed product is a new
    row read, never an in-place mutation.
    """

    id: ProductId
    name: ProductName
    price: Price
    stock: Stock

    def to_dict(self) -> dict:
        """JSON representation with numeric fields as numbers, not strings."""
        return {
            "id": self.id.value,
            "name": self.name.value,
            "price": self.price.amount,
            "stock": self.stock.value,
        }
