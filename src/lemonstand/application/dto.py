"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the presentation layers (CLI, API) and the
application layer without exposing domain internals.  Money is
pre-formatted, e.g. "$3.25".
"""

from __future__ import annotations

from dataclasses import dataclass


def format_money(amount: float) -> str:
    return f"${amount:.2f}"


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: one catalog entry as displayed to the user."""

    id: int
    name: str
    price: str
    lemons: int
    image: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: one cart entry; ``position`` is what ``remove`` expects."""

    position: int
    product_name: str
    price: str
    lemons: int


@dataclass(frozen=True)
class StandDTO:
    profit: str
    lemons_stock: int


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the result of a successful checkout."""

    items_sold: int
    total: str
    profit: str


@dataclass(frozen=True)
class SessionDTO:
    """Output: a full snapshot of the session for rendering."""

    profit: str
    lemons_stock: int
    lemons_used: int
    cart_total: str
    cart_count: int
    cart_visible: bool
    cart: list[CartLineDTO]
    catalog: list[ProductLineDTO]
