import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from catalog.infrastructure.persistence.sql_product_repository import SqlProductRepository

SCHEMA = """
CREATE TABLE products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name VARCHAR(255) NOT NULL,
    price NUMERIC(10, 2) NOT NULL CHECK (price >= 0),
    stock INTEGER NOT NULL DEFAULT 0 CHECK (stock >= 0)
)
"""


@pytest.fixture
def engine():
    """In-memory SQLite shared across pool checkouts."""
    eng = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with eng.begin() as conn:
        conn.execute(text(SCHEMA))
    yield eng
    eng.dispose()


@pytest.fixture
def sql_repo(engine):
    return SqlProductRepository(engine)
