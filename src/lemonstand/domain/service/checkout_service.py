"""Domain service: Checkout.

Checkout spans two aggregates: the Cart is emptied and its total is
credited to the LemonStand.  The cart is validated before either
aggregate is touched so a failed checkout changes nothing.

Lemon stock is not deducted here; ``lemons_used`` is only an estimate
and stays disconnected from physical stock.
"""

from __future__ import annotations

import logging

from lemonstand.domain.exceptions import EmptyCartError
from lemonstand.domain.model.cart import Cart
from lemonstand.domain.model.stand import LemonStand

logger = logging.getLogger(__name__)


class CheckoutService:

    def checkout(self, cart: Cart, stand: LemonStand) -> float:
        """Sell everything in the cart and return the amount collected."""
        if cart.is_empty:
            raise EmptyCartError("Your cart is empty!")

        total = cart.total
        stand.record_revenue(total)
        cart.clear()

        logger.debug("Checkout collected %.2f, profit now %.2f", total, stand.profit)
        return total
