import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.serve_command import serve
from catalog.infrastructure.config import load_env_file

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Catalog: Products REST API"""
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)
    load_env_file()


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
