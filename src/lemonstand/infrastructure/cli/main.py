import logging

import click

from lemonstand.infrastructure.cli.catalog_commands import catalog_list
from lemonstand.infrastructure.cli.serve_command import serve
from lemonstand.infrastructure.cli.shop_commands import shop
from lemonstand.infrastructure.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to LOG_LEVEL or INFO).",
)
def cli(log_level: str | None) -> None:
    """Lemon Stand: a toy lemonade storefront"""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )


@cli.group()
def catalog() -> None:
    """Inspect the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
cli.add_command(serve)
cli.add_command(shop)
