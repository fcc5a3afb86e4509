"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_stock import UpdateStockHandler
from storefront.config import Settings
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=None, type=int, help="Units in stock (default 0).")
@click.option("--image", default="", help="Image URL.")
@click.option("--description", default="", help="Free-text description.")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    stock: int | None,
    image: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(
            name=name, price=price, stock=stock, image=image, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository(settings))

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
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>7}")


@click.command("update-stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--stock", required=True, type=int, help="New stock level.")
@click.pass_obj
def product_update_stock(settings: Settings, product_id: int, stock: int) -> None:
    """Overwrite a product's stock level."""
    handler = UpdateStockHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(product_id=product_id, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock of '{product.name}' set to {product.stock}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(settings))

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' deleted.")
