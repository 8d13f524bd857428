"""Shared click options."""

from __future__ import annotations

import click

from storefront.domain.model.value_objects import Address


def address_options(func):
    """Add the address fields as options; see ``build_address``."""
    options = [
        click.option("--street", required=True),
        click.option("--number", required=True),
        click.option("--complement", default=None),
        click.option("--neighborhood", required=True),
        click.option("--city", required=True),
        click.option("--state", required=True),
        click.option("--zip", "zip_code", required=True, help="Zip / postal code."),
        click.option("--country", default="Brasil", show_default=True),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_address(
    street: str,
    number: str,
    complement: str | None,
    neighborhood: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
) -> Address:
    return Address(
        street=street,
        number=number,
        complement=complement,
        neighborhood=neighborhood,
        city=city,
        state=state,
        zip_code=zip_code,
        country=country,
    )
