"""Integration tests for the cart use cases (add, remove, toggle, show)."""

import pytest

from lemonstand.application.add_to_cart import AddToCartHandler
from lemonstand.application.remove_from_cart import RemoveFromCartHandler
from lemonstand.application.show_session import ShowSessionHandler
from lemonstand.application.toggle_cart import ToggleCartHandler
from lemonstand.domain.exceptions import EntityNotFoundError, InvalidCartPositionError
from lemonstand.domain.model.session import SessionState
from tests.fakes import make_product


def _session() -> SessionState:
    session = SessionState()
    session.replace_catalog([
        make_product(id=0, name="Margarita", price=3.0, lemons=2),
        make_product(id=1, name="Mojito", price=4.5, lemons=1),
    ])
    return session


class TestAddToCart:

    def test_add_by_product_id(self):
        session = _session()
        line = AddToCartHandler(session).handle(1)
        assert line.product_name == "Mojito"
        assert line.position == 0
        assert line.price == "$4.50"
        assert session.cart.lemons_used == 1

    def test_unknown_product_rejected(self):
        session = _session()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(session).handle(99)
        assert session.cart.is_empty

    def test_add_ignores_lemon_stock(self):
        session = _session()
        session.stand.lemons_stock = 0
        AddToCartHandler(session).handle(0)
        AddToCartHandler(session).handle(0)
        assert session.cart.lemons_used == 4
        assert session.stand.lemons_stock == 0


class TestRemoveFromCart:

    def test_remove_one_of_duplicates(self):
        session = _session()
        add = AddToCartHandler(session)
        add.handle(0)
        add.handle(1)
        add.handle(0)

        line = RemoveFromCartHandler(session).handle(2)

        assert line.product_name == "Margarita"
        assert [p.name for p in session.cart.items] == ["Margarita", "Mojito"]
        assert session.cart.lemons_used == 3

    def test_invalid_position_rejected(self):
        session = _session()
        AddToCartHandler(session).handle(0)
        with pytest.raises(InvalidCartPositionError):
            RemoveFromCartHandler(session).handle(5)
        assert session.cart.lemons_used == 2


class TestToggleCart:

    def test_toggle_flips_visibility(self):
        session = _session()
        handler = ToggleCartHandler(session)
        assert handler.handle() is True
        assert handler.handle() is False

    def test_explicit_close(self):
        session = _session()
        session.cart_visible = True
        assert ToggleCartHandler(session).handle(visible=False) is False
        assert session.cart_visible is False

    def test_toggle_has_no_domain_effect(self):
        session = _session()
        AddToCartHandler(session).handle(0)
        ToggleCartHandler(session).handle()
        assert session.cart.count == 1
        assert session.stand.profit == 100.0


class TestShowSession:

    def test_snapshot(self):
        session = _session()
        AddToCartHandler(session).handle(0)
        AddToCartHandler(session).handle(1)

        dto = ShowSessionHandler(session).handle()

        assert dto.profit == "$100.00"
        assert dto.lemons_stock == 20
        assert dto.lemons_used == 3
        assert dto.cart_total == "$7.50"
        assert dto.cart_count == 2
        assert [line.position for line in dto.cart] == [0, 1]
        assert [p.name for p in dto.catalog] == ["Margarita", "Mojito"]

    def test_snapshot_before_catalog_loaded(self):
        dto = ShowSessionHandler(SessionState()).handle()
        assert dto.catalog == []
        assert dto.cart == []
        assert dto.cart_total == "$0.00"
