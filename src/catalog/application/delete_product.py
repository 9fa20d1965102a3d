"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | int) -> None:
        """Delete a product. A zero row count means it never existed."""
        pid = ProductId.of(product_id)
        if not self._product_repo.delete(pid):
            raise EntityNotFoundError(f"Product with ID {pid} not found.")
        logger.info("Deleted product %s", pid)
