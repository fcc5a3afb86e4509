"""CLI commands for the order ledger.

These always work on the on-disk ledger (``orders.json`` in the data
directory); an in-memory ledger only exists inside a running server.
"""

from __future__ import annotations

from pathlib import Path

import click

from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.export_orders import ExportOrdersHandler
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.config import Settings
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.bootstrap import persistent_order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer.name}")
    if dto.customer.phone:
        click.echo(f"Phone:    {dto.customer.phone}")
    if dto.customer.address:
        click.echo(f"Address:  {dto.customer.address}")
    if dto.customer.note:
        click.echo(f"Note:     {dto.customer.note}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*37}")
    for item in dto.items:
        click.echo(f"  {item.name:<20} {item.quantity:>5} {item.price:>10}")


@click.command("list")
@click.pass_obj
def order_list(settings: Settings) -> None:
    """List every order in the ledger."""
    handler = ListOrdersHandler(order_repo=persistent_order_repository(settings))

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Status':<8} {'Items':>5}  Created")
    click.echo("-" * 70)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.customer.name:<20} {o.status:<8} {len(o.items):>5}  {o.created_at}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=persistent_order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
@click.pass_obj
def order_status(settings: Settings, order_id: int, status: str) -> None:
    """Set the status of an order."""
    handler = UpdateOrderStatusHandler(order_repo=persistent_order_repository(settings))

    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} status set to '{status}'.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_obj
def order_delete(settings: Settings, order_id: int) -> None:
    """Delete an order. Its id is never handed out again."""
    handler = DeleteOrderHandler(order_repo=persistent_order_repository(settings))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} ({dto.customer.name}) deleted.")


@click.command("export")
@click.option(
    "--output",
    "output",
    default="orders.csv",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the CSV file.",
)
@click.pass_obj
def order_export(settings: Settings, output: Path) -> None:
    """Export all orders as a CSV file (one row per item)."""
    handler = ExportOrdersHandler(order_repo=persistent_order_repository(settings))

    try:
        payload = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    output.write_bytes(payload)
    click.echo(f"Orders exported to {output}")
