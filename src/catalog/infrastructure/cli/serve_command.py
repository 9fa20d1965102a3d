"""CLI command that runs the HTTP API."""

from __future__ import annotations

import click

from catalog.infrastructure.config import ConfigurationError, http_address


@click.command("serve")
@click.option("--host", default=None, help="Interface to bind (default: PRODUCTS_HOST or 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: PRODUCTS_PORT or 3000).")
def serve(host: str | None, port: int | None) -> None:
    """Run the products API."""
    from catalog.infrastructure.http.app import create_app

    try:
        env_host, env_port = http_address()
        app = create_app()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))

    host = env_host if host is None else host
    port = env_port if port is None else port
    click.echo(f"Server running on http://{host}:{port}")
    app.run(host=host, port=port, threaded=True)
