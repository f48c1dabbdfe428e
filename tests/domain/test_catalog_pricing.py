"""Unit tests for the Catalog Pricing domain service."""

import random

import pytest

from lemonstand.domain.model.drink import DrinkRecord
from lemonstand.domain.service.catalog_pricing import CatalogPricingService
from tests.fakes import FakeRandom

DRINKS = [
    DrinkRecord(name="Margarita", thumbnail="https://img/margarita.jpg"),
    DrinkRecord(name="Whiskey Sour", thumbnail=None),
    DrinkRecord(name="Mojito", thumbnail="https://img/mojito.jpg"),
]


class TestPriceCatalog:

    def test_ids_follow_upstream_order(self):
        products = CatalogPricingService(random.Random(1)).price_catalog(DRINKS)
        assert [(p.id, p.name) for p in products] == [
            (0, "Margarita"),
            (1, "Whiskey Sour"),
            (2, "Mojito"),
        ]

    def test_missing_thumbnail_falls_back_to_default(self):
        svc = CatalogPricingService(random.Random(1), default_image="/fallback.png")
        products = svc.price_catalog(DRINKS)
        assert products[0].image == "https://img/margarita.jpg"
        assert products[1].image == "/fallback.png"

    def test_price_and_lemons_drawn_from_random_source(self):
        rng = FakeRandom(floats=[0.0, 0.5], ints=[1, 5])
        products = CatalogPricingService(rng).price_catalog(DRINKS[:2])
        assert products[0].price == 2.0
        assert products[1].price == pytest.approx(3.5)
        assert [p.lemons for p in products] == [1, 5]
        assert rng.randint_bounds == [(1, 5), (1, 5)]

    def test_values_stay_in_range(self):
        svc = CatalogPricingService(random.Random(42))
        drinks = [DrinkRecord(name=f"Drink {i}") for i in range(500)]
        for product in svc.price_catalog(drinks):
            assert 2.0 <= product.price < 5.0
            assert isinstance(product.lemons, int)
            assert 1 <= product.lemons <= 5

    def test_repeated_fetches_reprice(self):
        svc = CatalogPricingService(random.Random(7))
        first = svc.price_catalog(DRINKS)
        second = svc.price_catalog(DRINKS)
        assert [p.price for p in first] != [p.price for p in second]

    def test_empty_drink_list(self):
        assert CatalogPricingService().price_catalog([]) == []
