"""Application service: Health Check use case."""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.exceptions import StorageError
from catalog.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class HealthStatus:
    """Output: service and database status as reported to the caller."""

    status: str
    database: str

    @property
    def healthy(self) -> bool:
        return self.status == "ok"


class CheckHealthHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> HealthStatus:
        try:
            self._product_repo.ping()
        except StorageError:
            return HealthStatus(status="error", database="disconnected")
        return HealthStatus(status="ok", database="connected")
