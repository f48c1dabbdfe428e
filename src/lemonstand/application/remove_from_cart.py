"""Application service: Remove From Cart use case."""

from __future__ import annotations

from lemonstand.application.dto import CartLineDTO, format_money
from lemonstand.domain.model.session import SessionState


class RemoveFromCartHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self, position: int) -> CartLineDTO:
        """Remove the single cart entry at *position*.

        Other entries for the same product stay in the cart.  An
        out-of-range position raises InvalidCartPositionError.
        """
        removed = self._session.cart.remove_at(position)
        return CartLineDTO(
            position=position,
            product_name=removed.name,
            price=format_money(removed.price),
            lemons=removed.lemons,
        )
