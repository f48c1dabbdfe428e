"""Integration tests for the FetchCatalog use case.

Uses an in-memory drink source: no network.
"""

import random

import pytest

from lemonstand.application.fetch_catalog import FetchCatalogHandler
from lemonstand.domain.exceptions import CatalogFetchError, UpstreamUnavailableError
from lemonstand.domain.model.drink import DrinkRecord
from lemonstand.domain.service.catalog_pricing import CatalogPricingService
from tests.fakes import FakeDrinkSource, FakeRandom


def _drinks():
    return [
        DrinkRecord(name="Margarita", thumbnail="https://img/m.jpg"),
        DrinkRecord(name="Lemon Drop"),
    ]


class TestFetchCatalogHappyPath:

    def test_returns_priced_products(self):
        source = FakeDrinkSource(_drinks())
        pricing = CatalogPricingService(FakeRandom(floats=[0.25, 0.75], ints=[2, 4]))
        handler = FetchCatalogHandler(source, pricing)

        products = handler.handle()

        assert [p.name for p in products] == ["Margarita", "Lemon Drop"]
        assert products[0].price == pytest.approx(2.75)
        assert products[1].lemons == 4
        assert products[1].image == "/default-lemonade.jpg"

    def test_one_upstream_call_per_fetch(self):
        source = FakeDrinkSource(_drinks())
        handler = FetchCatalogHandler(source, CatalogPricingService(random.Random(0)))
        handler.handle()
        handler.fetch_products()
        assert source.calls == 2


class TestFetchCatalogFailures:

    def test_upstream_error_propagates(self):
        handler = FetchCatalogHandler(FakeDrinkSource(error=UpstreamUnavailableError(503)))
        with pytest.raises(UpstreamUnavailableError) as info:
            handler.handle()
        assert info.value.status_code == 503

    def test_fetch_error_propagates(self):
        handler = FetchCatalogHandler(FakeDrinkSource(error=CatalogFetchError("boom")))
        with pytest.raises(CatalogFetchError, match="boom"):
            handler.handle()
