"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.create_product import CreateProductHandler
from storefront.application.find_products import FindProductsHandler
from storefront.application.manage_stock import ManageStockHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import default_currency, unit_of_work_factory


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True)
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--currency", default=None, help="Currency code (defaults to the store currency).")
@click.option("--stock", "stock_quantity", default=0, type=int, show_default=True)
@click.option("--category", required=True)
def product_add(
    name: str,
    description: str,
    price: str,
    currency: str | None,
    stock_quantity: int,
    category: str,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(unit_of_work_factory())

    try:
        dto = handler.handle(
            name=name,
            description=description,
            price=price,
            currency=currency or default_currency(),
            stock_quantity=stock_quantity,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} ({dto.stock_quantity} in stock)")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--search", default=None, help="Name fragment to look for.")
@click.option("--available", "only_available", is_flag=True, help="Only products that can be sold now.")
def product_list(category: str | None, search: str | None, only_available: bool) -> None:
    """List active products in the catalog."""
    handler = FindProductsHandler(unit_of_work_factory())

    try:
        if category:
            products = handler.by_category(category)
        elif search:
            products = handler.by_name(search)
        elif only_available:
            products = handler.available()
        else:
            products = handler.all_active()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Category':<12} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 90)
    for p in products:
        click.echo(f"{p.id:<36} {p.name:<20} {p.category:<12} {p.price:>12} {p.stock_quantity:>6}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True)
@click.option("--description", required=True)
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--currency", default=None)
@click.option("--stock", "stock_quantity", required=True, type=int)
@click.option("--category", required=True)
def product_update(
    product_id: str,
    name: str,
    description: str,
    price: str,
    currency: str | None,
    stock_quantity: int,
    category: str,
) -> None:
    """Replace a product's catalog information."""
    handler = UpdateProductHandler(unit_of_work_factory())

    try:
        dto = handler.handle(
            product_id=product_id,
            name=name,
            description=description,
            price=price,
            currency=currency or default_currency(),
            stock_quantity=stock_quantity,
            category=category,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated: {dto.name} at {dto.price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--add", "to_add", type=int, default=None, help="Units to add.")
@click.option("--remove", "to_remove", type=int, default=None, help="Units to remove.")
def product_stock(product_id: str, to_add: int | None, to_remove: int | None) -> None:
    """Adjust a product's stock."""
    if (to_add is None) == (to_remove is None):
        raise click.UsageError("Pass exactly one of --add or --remove")

    handler = ManageStockHandler(unit_of_work_factory())

    try:
        if to_add is not None:
            dto = handler.add(product_id, to_add)
        else:
            dto = handler.remove(product_id, to_remove)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' now has {dto.stock_quantity} in stock")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_deactivate(product_id: str) -> None:
    """Take a product off sale."""
    handler = ManageStockHandler(unit_of_work_factory())

    try:
        handler.set_active(product_id, active=False)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deactivated.")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_activate(product_id: str) -> None:
    """Put a product back on sale."""
    handler = ManageStockHandler(unit_of_work_factory())

    try:
        handler.set_active(product_id, active=True)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} activated.")
