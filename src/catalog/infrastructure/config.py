"""Environment-driven configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import URL

DEFAULT_HTTP_HOST = "127.0.0.1"
DEFAULT_HTTP_PORT = 3000

_REQUIRED = ("PG_HOST", "PG_USER", "PG_PASSWORD", "PG_DATABASE", "PG_PORT")


def load_env_file(path: str | None = None) -> bool:
    """Load a .env file into os.environ without overriding variables already set.

    Without ``path`` the nearest .env from the working directory upwards is used.
    Returns whether a file was found.
    """
    return load_dotenv(path or find_dotenv(usecwd=True), override=False)


class ConfigurationError(Exception):
    """Required settings are missing or malformed."""


@dataclass(frozen=True)
class DatabaseSettings:
    host: str
    user: str
    password: str
    database: str
    port: int

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DatabaseSettings:
        """Read PG_* variables; every missing one is reported at once."""
        env = os.environ if environ is None else environ
        missing = [name for name in _REQUIRED if not env.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        try:
            port = int(env["PG_PORT"])
        except ValueError as exc:
            raise ConfigurationError(f"PG_PORT must be an integer, got {env['PG_PORT']!r}") from exc

        return cls(
            host=env["PG_HOST"],
            user=env["PG_USER"],
            password=env["PG_PASSWORD"],
            database=env["PG_DATABASE"],
            port=port,
        )

    def url(self) -> URL:
        return URL.create(
            "postgresql+psycopg2",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )


def http_address(environ: Mapping[str, str] | None = None) -> tuple[str, int]:
    """Listen address for ``catalog serve`` from PRODUCTS_HOST / PRODUCTS_PORT."""
    env = os.environ if environ is None else environ
    raw_port = env.get("PRODUCTS_PORT", str(DEFAULT_HTTP_PORT))
    try:
        port = int(raw_port)
    except ValueError as exc:
        raise ConfigurationError(f"PRODUCTS_PORT must be an integer, got {raw_port!r}") from exc
    return env.get("PRODUCTS_HOST", DEFAULT_HTTP_HOST), port
