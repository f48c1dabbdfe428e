"""Interactive storefront session.

The shop command is the text counterpart of the storefront page: one
SessionState lives for the duration of the command, each typed command
maps to one application handler, and every domain error is shown to the
user instead of ending the session.
"""

from __future__ import annotations

from typing import Callable

import click

from lemonstand.application.add_to_cart import AddToCartHandler
from lemonstand.application.checkout import CheckoutHandler
from lemonstand.application.dto import SessionDTO
from lemonstand.application.load_catalog import LoadCatalogHandler
from lemonstand.application.remove_from_cart import RemoveFromCartHandler
from lemonstand.application.show_session import ShowSessionHandler
from lemonstand.application.toggle_cart import ToggleCartHandler
from lemonstand.application.trade_lemons import BuyLemonsHandler, SellLemonsHandler
from lemonstand.domain.exceptions import DomainException
from lemonstand.domain.model.session import SessionState
from lemonstand.domain.model.stand import LEMON_BUY_PRICE, LEMON_SELL_PRICE
from lemonstand.infrastructure import bootstrap

HELP_TEXT = f"""\
Commands:
  products      list the products for sale
  add ID        add product ID to the cart
  remove POS    remove the cart entry at position POS
  cart          show / hide the cart
  close         hide the cart
  checkout      buy everything in the cart
  buy           buy one lemon (-${LEMON_BUY_PRICE:.2f})
  sell          sell one lemon (+${LEMON_SELL_PRICE:.2f})
  status        show profit and lemon stock
  help          show this text
  quit          leave the stand"""


# --- Display helpers ------------------------------------------------------------


def _display_status(dto: SessionDTO) -> None:
    click.echo(
        f"Total Profit: {dto.profit}  |  Lemons in Stock: {dto.lemons_stock}"
        f"  |  Cart ({dto.cart_count})"
    )


def _display_products(dto: SessionDTO) -> None:
    if not dto.catalog:
        click.echo("No products available.")
        return

    click.echo(f"  {'ID':<5} {'Name':<32} {'Price':>8} {'Lemons':>7}")
    click.echo(f"  {'-'*55}")
    for p in dto.catalog:
        click.echo(f"  {p.id:<5} {p.name:<32} {p.price:>8} {p.lemons:>7}")


def _display_cart(dto: SessionDTO) -> None:
    click.echo("Your Cart")
    if not dto.cart:
        click.echo("  No items in cart.")
    else:
        for line in dto.cart:
            click.echo(
                f"  [{line.position}] {line.product_name} - {line.price} "
                f"(Lemons: {line.lemons})"
            )
    click.echo(f"Total Lemons Used: {dto.lemons_used}")
    click.echo(f"Total: {dto.cart_total}")


# --- Commands -------------------------------------------------------------------


def _parse_int(args: list[str], what: str) -> int:
    if len(args) != 1:
        raise click.BadParameter(f"Expected exactly one {what}.")
    try:
        return int(args[0])
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{args[0]}'.")


def _cmd_products(session: SessionState, args: list[str]) -> None:
    _display_products(ShowSessionHandler(session).handle())


def _cmd_add(session: SessionState, args: list[str]) -> None:
    line = AddToCartHandler(session).handle(_parse_int(args, "product ID"))
    click.echo(f"Added {line.product_name} ({line.price}) to the cart.")


def _cmd_remove(session: SessionState, args: list[str]) -> None:
    line = RemoveFromCartHandler(session).handle(_parse_int(args, "cart position"))
    click.echo(f"Removed {line.product_name} from the cart.")


def _cmd_cart(session: SessionState, args: list[str]) -> None:
    if ToggleCartHandler(session).handle():
        _display_cart(ShowSessionHandler(session).handle())
    else:
        click.echo("Cart closed.")


def _cmd_close(session: SessionState, args: list[str]) -> None:
    ToggleCartHandler(session).handle(visible=False)
    click.echo("Cart closed.")


def _cmd_checkout(session: SessionState, args: list[str]) -> None:
    receipt = CheckoutHandler(session).handle()
    click.echo(f"Purchase complete! {receipt.items_sold} item(s) for {receipt.total}.")
    click.echo(f"Total Profit: {receipt.profit}")


def _cmd_buy(session: SessionState, args: list[str]) -> None:
    stand = BuyLemonsHandler(session).handle()
    click.echo(f"Bought a lemon. Lemons in Stock: {stand.lemons_stock}, Profit: {stand.profit}")


def _cmd_sell(session: SessionState, args: list[str]) -> None:
    stand = SellLemonsHandler(session).handle()
    click.echo(f"Sold a lemon. Lemons in Stock: {stand.lemons_stock}, Profit: {stand.profit}")


def _cmd_status(session: SessionState, args: list[str]) -> None:
    _display_status(ShowSessionHandler(session).handle())


def _cmd_help(session: SessionState, args: list[str]) -> None:
    click.echo(HELP_TEXT)


COMMANDS: dict[str, Callable[[SessionState, list[str]], None]] = {
    "products": _cmd_products,
    "add": _cmd_add,
    "remove": _cmd_remove,
    "cart": _cmd_cart,
    "close": _cmd_close,
    "checkout": _cmd_checkout,
    "buy": _cmd_buy,
    "sell": _cmd_sell,
    "status": _cmd_status,
    "help": _cmd_help,
}

QUIT_WORDS = {"quit", "exit", "q"}


def run_command(session: SessionState, raw: str) -> bool:
    """Execute one typed command.  Returns False when the user quits."""
    parts = raw.split()
    if not parts:
        return True

    name, args = parts[0].lower(), parts[1:]
    if name in QUIT_WORDS:
        return False

    command = COMMANDS.get(name)
    if command is None:
        click.echo(f"Unknown command '{name}'. Type 'help' for a list.")
        return True

    try:
        command(session, args)
    except (DomainException, click.BadParameter) as exc:
        click.echo(f"Error: {exc}")
    return True


@click.command("shop")
@click.option(
    "--api-url",
    default=None,
    help="Load the catalog from a running storefront API instead of in-process.",
)
def shop(api_url: str | None) -> None:
    """Open the lemonade stand for an interactive session."""
    session = SessionState()

    loader = LoadCatalogHandler(session, bootstrap.product_feed(api_url))
    if not loader.handle():
        click.echo("Could not load products; the catalog is empty.")

    click.echo("Lemonade Stand")
    _cmd_status(session, [])
    _cmd_products(session, [])
    click.echo("Type 'help' for commands.")

    while True:
        try:
            raw = click.prompt("lemonstand", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            break
        if not run_command(session, raw):
            break

    click.echo("Goodbye!")
