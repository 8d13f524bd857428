"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.add_item_to_order import AddItemToOrderHandler
from storefront.application.advance_order import AdvanceOrderHandler
from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.confirm_order import ConfirmOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.find_orders import FindOrdersHandler
from storefront.application.remove_item_from_order import RemoveItemFromOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order_status import OrderStatus
from storefront.infrastructure.bootstrap import default_currency, unit_of_work_factory
from storefront.infrastructure.cli.options import address_options, build_address

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"Deliver:  {dto.delivery_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
    else:
        click.echo(f"  {'Item':<36} {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
        click.echo(f"  {'-'*89}")
        for item in dto.items:
            click.echo(
                f"  {item.id:<36} {item.product_name:<20} {item.quantity:>5} "
                f"{item.unit_price:>12} {item.total_price:>12}"
            )
        click.echo(f"  {'-'*89}")

    click.echo(f"  {'Order Total':<63} {dto.total_amount:>26}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@address_options
def order_create(customer_id: str, **address_fields: str) -> None:
    """Open a new, empty order for a customer."""
    handler = CreateOrderHandler(unit_of_work_factory(), currency=default_currency())

    try:
        dto = handler.handle(customer_id, build_address(**address_fields))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = FindOrdersHandler(unit_of_work_factory())

    try:
        dto = handler.by_id(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--customer", "customer_id", default=None, help="Only this customer's orders.")
@click.option("--status", default=None, type=_STATUS_CHOICE, help="Only orders in this status.")
def order_list(customer_id: str | None, status: str | None) -> None:
    """List orders by customer and/or status."""
    if customer_id is None and status is None:
        raise click.UsageError("Pass --customer, --status or both")

    handler = FindOrdersHandler(unit_of_work_factory())
    wanted = OrderStatus(status.upper()) if status else None

    try:
        if customer_id is not None:
            orders = handler.by_customer(customer_id, wanted)
        else:
            orders = handler.by_status(wanted)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36} {'Status':<10} {'Items':>5} {'Total':>14}")
    click.echo("-" * 68)
    for o in orders:
        click.echo(f"{o.id:<36} {o.status:<10} {len(o.items):>5} {o.total_amount:>14}")


@click.command("add-item")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int)
def order_add_item(order_id: str, product_id: str, quantity: int) -> None:
    """Add a product to a pending order (takes it out of stock)."""
    handler = AddItemToOrderHandler(unit_of_work_factory())

    try:
        dto = handler.handle(order_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("remove-item")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--item", "item_id", required=True, help="Order item ID.")
def order_remove_item(order_id: str, item_id: str) -> None:
    """Remove an item from a pending order (returns it to stock)."""
    handler = RemoveItemFromOrderHandler(unit_of_work_factory())

    try:
        dto = handler.handle(order_id, item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("confirm")
@click.option("--id", "order_id", required=True, help="Order ID to confirm.")
def order_confirm(order_id: str) -> None:
    """Confirm a pending order."""
    handler = ConfirmOrderHandler(unit_of_work_factory())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} confirmed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Order ID to cancel.")
def order_cancel(order_id: str) -> None:
    """Cancel an order (returns its items to stock)."""
    handler = CancelOrderHandler(unit_of_work_factory())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} cancelled.")


@click.command("advance")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--to",
    "target",
    required=True,
    type=click.Choice(["PREPARING", "SHIPPED", "DELIVERED"], case_sensitive=False),
)
def order_advance(order_id: str, target: str) -> None:
    """Move a confirmed order through preparation, shipping and delivery."""
    handler = AdvanceOrderHandler(unit_of_work_factory())

    try:
        dto = handler.handle(order_id, OrderStatus(target.upper()))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {dto.status}.")
