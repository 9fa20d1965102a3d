"""Application service: Show Product use case."""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import ProductId
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | int) -> Product:
        pid = ProductId.of(product_id)
        product = self._product_repo.get_by_id(pid)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{pid}' not found")
        return product
