import click

from storefront.infrastructure.cli.customer_commands import (
    customer_deactivate,
    customer_register,
    customer_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_add_item,
    order_advance,
    order_cancel,
    order_confirm,
    order_create,
    order_list,
    order_remove_item,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_list,
    product_stock,
    product_update,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override STOREFRONT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Storefront — orders, catalog and stock"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
customer.add_command(customer_deactivate)
customer.add_command(customer_register)
customer.add_command(customer_show)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_list)
product.add_command(product_stock)
product.add_command(product_update)
order.add_command(order_add_item)
order.add_command(order_advance)
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_remove_item)
order.add_command(order_show)
