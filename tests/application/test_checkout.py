"""Integration tests for the Checkout use case."""

import pytest

from lemonstand.application.add_to_cart import AddToCartHandler
from lemonstand.application.checkout import CheckoutHandler
from lemonstand.application.load_catalog import LoadCatalogHandler
from lemonstand.domain.exceptions import EmptyCartError
from lemonstand.domain.model.session import SessionState
from tests.fakes import FakeProductFeed, make_product


class TestCheckoutHappyPath:

    def test_margarita_end_to_end(self):
        session = SessionState()
        feed = FakeProductFeed([make_product(id=0, name="Margarita", price=3.0, lemons=2)])
        LoadCatalogHandler(session, feed).handle()

        AddToCartHandler(session).handle(session.catalog[0].id)
        assert [p.name for p in session.cart.items] == ["Margarita"]
        assert session.cart.lemons_used == 2

        receipt = CheckoutHandler(session).handle()

        assert session.stand.profit == 103.0
        assert session.cart.items == []
        assert session.cart.lemons_used == 0
        assert receipt.items_sold == 1
        assert receipt.total == "$3.00"
        assert receipt.profit == "$103.00"

    def test_profit_grows_by_cart_total(self):
        session = SessionState()
        session.replace_catalog([
            make_product(id=0, price=2.37, lemons=1),
            make_product(id=1, price=4.91, lemons=5),
        ])
        for product_id in (0, 1, 1):
            AddToCartHandler(session).handle(product_id)
        total_before = session.cart.total

        CheckoutHandler(session).handle()

        assert session.stand.profit == pytest.approx(100.0 + total_before)

    def test_checkout_leaves_stock_unchanged(self):
        session = SessionState()
        session.replace_catalog([make_product(id=0, lemons=5)])
        AddToCartHandler(session).handle(0)

        CheckoutHandler(session).handle()

        assert session.stand.lemons_stock == 20


class TestCheckoutEmptyCart:

    def test_empty_cart_rejected_without_change(self):
        session = SessionState()
        with pytest.raises(EmptyCartError, match="Your cart is empty"):
            CheckoutHandler(session).handle()
        assert session.stand.profit == 100.0
        assert session.cart.items == []
        assert session.cart.lemons_used == 0
