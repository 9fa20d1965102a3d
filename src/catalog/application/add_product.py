"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import NewProduct
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, data: object) -> Product:
        """Add a new product to the catalog. Storage assigns the ID."""
        new = data if isinstance(data, NewProduct) else NewProduct.from_mapping(data)

        product = self._product_repo.add(new.name, new.price, new.stock)
        logger.info("Added product %s '%s'", product.id, product.name)
        return product
