"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import NewProduct, ProductPatch
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import ConfigurationError


def _repository() -> ProductRepository:
    from catalog.infrastructure.bootstrap import product_repository

    try:
        return product_repository()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))


def _display_product(p: Product) -> None:
    click.echo(f"Product #{p.id}  {p.name}")
    click.echo(f"  Price: {p.price}")
    click.echo(f"  Stock: {p.stock}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", type=float, required=True, help="Price (e.g. 15.00).")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock.")
def product_add(name: str, price: float, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=_repository())

    try:
        product = handler.handle(
            NewProduct.from_mapping({"name": name, "price": price, "stock": stock})
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=_repository())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id.value:<6} {p.name.value:<20} {str(p.price):>10} {p.stock.value:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=_repository())

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", type=float, default=None, help="New price (e.g. 29.99).")
@click.option("--stock", type=int, default=None, help="New stock level.")
def product_update(
    product_id: str, name: str | None, price: float | None, stock: int | None
) -> None:
    """Update only the fields given; the rest are left as they are."""
    supplied = {
        key: value
        for key, value in (("name", name), ("price", price), ("stock", stock))
        if value is not None
    }
    handler = UpdateProductHandler(product_repo=_repository())

    try:
        product = handler.handle(product_id, ProductPatch.from_mapping(supplied))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
