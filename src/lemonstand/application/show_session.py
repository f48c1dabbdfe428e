"""Application service: Show Session use case (query)."""

from __future__ import annotations

from lemonstand.application.dto import (
    CartLineDTO,
    ProductLineDTO,
    SessionDTO,
    format_money,
)
from lemonstand.domain.model.session import SessionState


class ShowSessionHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self) -> SessionDTO:
        session = self._session
        return SessionDTO(
            profit=format_money(session.stand.profit),
            lemons_stock=session.stand.lemons_stock,
            lemons_used=session.cart.lemons_used,
            cart_total=format_money(session.cart.total),
            cart_count=session.cart.count,
            cart_visible=session.cart_visible,
            cart=[
                CartLineDTO(
                    position=i,
                    product_name=item.name,
                    price=format_money(item.price),
                    lemons=item.lemons,
                )
                for i, item in enumerate(session.cart.items)
            ],
            catalog=[
                ProductLineDTO(
                    id=p.id,
                    name=p.name,
                    price=format_money(p.price),
                    lemons=p.lemons,
                    image=p.image,
                )
                for p in session.catalog
            ],
        )
