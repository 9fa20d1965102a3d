"""Partial-update statement builder.

Emits a parameterised ``UPDATE`` touching only the columns present in a
ProductPatch. Column names come from the fixed UPDATABLE_FIELDS tuple,
never from client input; values only ever travel as bind parameters.
"""

from __future__ import annotations

from catalog.domain.model.product_patch import ProductPatch
from catalog.domain.model.value_objects import ProductId

TABLE = "products"


def placeholder(position: int) -> str:
    """Named bind parameter for the 1-based ``position``."""
    return f"p{position}"


def build_update(product_id: ProductId, patch: ProductPatch) -> tuple[str, dict[str, object]]:
    """Return ``(sql, params)`` for a single-statement partial update.

    Placeholders are numbered from 1 in column order; the ID always binds
    to the last one. Raises ValueError for an empty patch, which would
    otherwise produce ``SET`` with no assignments.
    """
    fragments: list[str] = []
    params: dict[str, object] = {}

    for position, (column, value) in enumerate(patch.assignments(), start=1):
        key = placeholder(position)
        fragments.append(f"{column} = :{key}")
        params[key] = value

    if not fragments:
        raise ValueError("Cannot build an UPDATE with no assignments")

    id_key = placeholder(len(fragments) + 1)
    params[id_key] = product_id.value

    sql = (
        f"UPDATE {TABLE} SET {', '.join(fragments)} "
        f"WHERE id = :{id_key} RETURNING id, name, price, stock"
    )
    return sql, params
