"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and in the test fakes.

Implementations raise StorageError for any execution failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.product_patch import ProductPatch
from catalog.domain.model.value_objects import Price, ProductId, ProductName, Stock


class ProductRepository(ABC):

    @abstractmethod
    def ping(self) -> None:
        """Round-trip a trivial statement; raise StorageError if unreachable."""

    @abstractmethod
    def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, name: ProductName, price: Price, stock: Stock) -> Product:
        """Insert a new row and return it with its storage-assigned ID."""

    @abstractmethod
    def update(self, product_id: ProductId, patch: ProductPatch) -> Product | None:
        """Write the supplied fields in one statement.

        Returns the full updated row, or None when no row matched.
        The patch must not be empty.
        """

    @abstractmethod
    def delete(self, product_id: ProductId) -> bool:
        """Remove a row; return whether one was deleted."""
