"""Application service: Checkout use case.

Delegates to the Checkout domain service, which credits the cart total
to the stand and empties the cart.  Lemon stock is left alone.
"""

from __future__ import annotations

from lemonstand.application.dto import ReceiptDTO, format_money
from lemonstand.domain.model.session import SessionState
from lemonstand.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self) -> ReceiptDTO:
        items_sold = self._session.cart.count

        svc = CheckoutService()
        total = svc.checkout(self._session.cart, self._session.stand)

        return ReceiptDTO(
            items_sold=items_sold,
            total=format_money(total),
            profit=format_money(self._session.stand.profit),
        )
