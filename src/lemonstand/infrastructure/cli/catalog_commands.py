"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from lemonstand.application.dto import format_money
from lemonstand.domain.exceptions import DomainException
from lemonstand.infrastructure import bootstrap


@click.command("list")
def catalog_list() -> None:
    """Fetch a fresh catalog and list it (prices change on every fetch)."""
    handler = bootstrap.fetch_catalog_handler()

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<32} {'Price':>8} {'Lemons':>7}")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<32} {format_money(p.price):>8} {p.lemons:>7}")
