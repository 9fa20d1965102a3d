"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.domain.model.product_patch import ProductPatch
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | int, fields: object) -> Product:
        """Apply a partial update and return the full resulting row.

        Both the ID and every supplied field are validated before storage
        is touched. The existence check and the write are separate
        statements with no transaction between them; a concurrent delete
        surfaces as EntityNotFoundError from either step.
        """
        pid = ProductId.of(product_id)
        patch = fields if isinstance(fields, ProductPatch) else ProductPatch.from_mapping(fields)

        current = self._product_repo.get_by_id(pid)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{pid}' not found")

        if patch.is_empty():
            return current

        updated = self._product_repo.update(pid, patch)
        if updated is None:
            raise EntityNotFoundError(f"Product with ID '{pid}' not found")

        logger.info(
            "Updated product %s (%s)",
            pid,
            ", ".join(column for column, _ in patch.assignments()),
        )
        return updated
