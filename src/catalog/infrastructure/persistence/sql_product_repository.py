"""SQL implementation of ProductRepository.

Backed by a pooled SQLAlchemy Engine. Each call checks a connection out
of the pool for the duration of one statement and returns it on exit,
whether the statement succeeded or raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from sqlalchemy import text
from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from catalog.domain.model.product_patch import ProductPatch
from catalog.domain.exceptions import StorageError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Price, ProductId, ProductName, Stock
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.update_builder import TABLE, build_update

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, price, stock"


class SqlProductRepository(ProductRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- ProductRepository interface ------------------------------------------

    def ping(self) -> None:
        self._execute("SELECT 1")

    def get_by_id(self, product_id: ProductId) -> Product | None:
        rows = self._execute(
            f"SELECT {_COLUMNS} FROM {TABLE} WHERE id = :p1", {"p1": product_id.value}
        )
        return _row_to_product(rows[0]) if rows else None

    def list_all(self) -> list[Product]:
        rows = self._execute(f"SELECT {_COLUMNS} FROM {TABLE} ORDER BY id")
        return [_row_to_product(row) for row in rows]

    def add(self, name: ProductName, price: Price, stock: Stock) -> Product:
        rows = self._execute(
            f"INSERT INTO {TABLE} (name, price, stock) VALUES (:p1, :p2, :p3) "
            f"RETURNING {_COLUMNS}",
            {"p1": name.value, "p2": price.amount, "p3": stock.value},
        )
        return _row_to_product(rows[0])

    def update(self, product_id: ProductId, patch: ProductPatch) -> Product | None:
        sql, params = build_update(product_id, patch)
        rows = self._execute(sql, params)
        return _row_to_product(rows[0]) if rows else None

    def delete(self, product_id: ProductId) -> bool:
        return self._execute_count(
            f"DELETE FROM {TABLE} WHERE id = :p1", {"p1": product_id.value}
        ) > 0

    # --- Execution helpers ----------------------------------------------------

    def _execute(self, sql: str, params: Mapping[str, object] | None = None) -> list[Mapping]:
        """Run one statement and return its rows as mappings."""
        try:
            with self._engine.begin() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                return [dict(row) for row in result.mappings()] if result.returns_rows else []
        except SQLAlchemyError as exc:
            logger.exception("Statement failed: %s", sql)
            raise StorageError("Storage operation failed") from exc

    def _execute_count(self, sql: str, params: Mapping[str, object]) -> int:
        """Run one statement and return the number of rows it affected."""
        try:
            with self._engine.begin() as conn:
                result: CursorResult = conn.execute(text(sql), dict(params))
                return result.rowcount
        except SQLAlchemyError as exc:
            logger.exception("Statement failed: %s", sql)
            raise StorageError("Storage operation failed") from exc


def _row_to_product(row: Mapping) -> Product:
    """Normalise driver types: NUMERIC arrives as Decimal (or text), stock as int-like."""
    return Product(
        id=ProductId(int(row["id"])),
        name=ProductName(row["name"]),
        price=Price(float(row["price"])),
        stock=Stock(int(row["stock"])),
    )
