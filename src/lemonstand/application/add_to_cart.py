"""Application service: Add To Cart use case."""

from __future__ import annotations

from lemonstand.application.dto import CartLineDTO, format_money
from lemonstand.domain.model.session import SessionState


class AddToCartHandler:

    def __init__(self, session: SessionState) -> None:
        self._session = session

    def handle(self, product_id: int) -> CartLineDTO:
        """Add a catalog product to the end of the cart.

        The same product may be added any number of times.  Lemon stock
        is not checked.
        """
        product = self._session.find_product(product_id)
        cart = self._session.cart
        cart.add(product)
        return CartLineDTO(
            position=cart.count - 1,
            product_name=product.name,
            price=format_money(product.price),
            lemons=product.lemons,
        )
