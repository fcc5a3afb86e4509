import click

from storefront.config import Settings
from storefront.infrastructure.cli.order_commands import (
    order_delete,
    order_export,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update_stock,
)
from storefront.infrastructure.cli.serve_command import serve


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — product catalog and order ledger"""
    ctx.obj = Settings.from_env()


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
order.add_command(order_delete)
order.add_command(order_export)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update_stock)
