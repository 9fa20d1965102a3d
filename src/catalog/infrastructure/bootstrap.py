"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from catalog.infrastructure.config import DatabaseSettings, load_env_file
from catalog.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)


@lru_cache(maxsize=None)
def engine() -> Engine:
    """One pooled engine per process; connections are checked out per statement."""
    load_env_file()
    settings = DatabaseSettings.from_env()
    return create_engine(settings.url(), pool_pre_ping=True)


def product_repository() -> SqlProductRepository:
    return SqlProductRepository(engine())
