"""CLI commands for customers."""

from __future__ import annotations

import click

from storefront.application.register_customer import RegisterCustomerHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work_factory
from storefront.infrastructure.cli.options import address_options, build_address


def _display_customer(dto) -> None:
    click.echo(f"Customer {dto.id}  (active={dto.active})")
    click.echo(f"Name:    {dto.full_name}")
    click.echo(f"Email:   {dto.email}")
    if dto.phone:
        click.echo(f"Phone:   {dto.phone}")
    if dto.address:
        click.echo(f"Address: {dto.address}")


@click.command("register")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--email", required=True)
@click.option("--phone", default=None)
@address_options
def customer_register(
    first_name: str,
    last_name: str,
    email: str,
    phone: str | None,
    **address_fields: str,
) -> None:
    """Register a new customer."""
    handler = RegisterCustomerHandler(unit_of_work_factory())

    try:
        dto = handler.handle(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            address=build_address(**address_fields),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)


@click.command("show")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_show(customer_id: str) -> None:
    """Show a customer."""
    handler = RegisterCustomerHandler(unit_of_work_factory())

    try:
        dto = handler.show(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_customer(dto)


@click.command("deactivate")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_deactivate(customer_id: str) -> None:
    """Stop a customer from placing new orders."""
    handler = RegisterCustomerHandler(unit_of_work_factory())

    try:
        handler.set_active(customer_id, active=False)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} deactivated.")
