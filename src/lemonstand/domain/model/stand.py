"""LemonStand aggregate: the stand's cash and lemon inventory.

Lemons in stock are physical inventory.  They are deliberately not linked
to the cart's ``lemons_used`` estimate: checking out a cart never
consumes stock, and adding to the cart never checks it.
"""

from __future__ import annotations

from dataclasses import dataclass

from lemonstand.domain.exceptions import (
    InsufficientFundsError,
    OutOfStockError,
    ValidationError,
)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
STARTING_PROFIT = 100.0
STARTING_STOCK = 20
LEMON_BUY_PRICE = 5.0
LEMON_SELL_PRICE = 3.0


@dataclass
class LemonStand:
    """Aggregate root for profit and lemon stock.

    Invariants:
    - ``lemons_stock`` is never negative
    - buying a lemon never takes ``profit`` below zero
    """

    profit: float = STARTING_PROFIT
    lemons_stock: int = STARTING_STOCK

    def buy_lemon(self) -> None:
        """Buy one lemon for LEMON_BUY_PRICE.

        Raises InsufficientFundsError if profit cannot cover it.
        """
        if self.profit < LEMON_BUY_PRICE:
            raise InsufficientFundsError(
                f"Not enough money to buy lemons "
                f"(need ${LEMON_BUY_PRICE:.2f}, have ${self.profit:.2f})"
            )
        self.lemons_stock += 1
        self.profit -= LEMON_BUY_PRICE

    def sell_lemon(self) -> None:
        """Sell one lemon for LEMON_SELL_PRICE.

        Raises OutOfStockError if the stock is empty.
        """
        if self.lemons_stock <= 0:
            raise OutOfStockError("No lemons left to sell")
        self.lemons_stock -= 1
        self.profit += LEMON_SELL_PRICE

    def record_revenue(self, amount: float) -> None:
        """Add checkout revenue to profit."""
        if amount < 0:
            raise ValidationError(f"Revenue cannot be negative, got {amount}")
        self.profit += amount
