"""Application service: Fetch Catalog use case.

Pulls the drink list from the drink source and prices it.  This is the
server-side half of the catalog flow; the HTTP endpoint and the
in-process storefront both go through it.
"""

from __future__ import annotations

import logging

from lemonstand.domain.model.product import Product
from lemonstand.domain.repository.drink_source import DrinkSource
from lemonstand.domain.repository.product_feed import ProductFeed
from lemonstand.domain.service.catalog_pricing import CatalogPricingService

logger = logging.getLogger(__name__)


class FetchCatalogHandler(ProductFeed):

    def __init__(
        self,
        drink_source: DrinkSource,
        pricing: CatalogPricingService | None = None,
    ) -> None:
        self._drink_source = drink_source
        self._pricing = pricing if pricing is not None else CatalogPricingService()

    def handle(self) -> list[Product]:
        """Fetch drinks once and turn them into a priced catalog.

        Errors from the drink source (UpstreamUnavailableError,
        CatalogFetchError) propagate unchanged.
        """
        drinks = self._drink_source.list_drinks()
        products = self._pricing.price_catalog(drinks)
        logger.info("Fetched catalog with %d product(s)", len(products))
        return products

    # --- ProductFeed interface ------------------------------------------------

    def fetch_products(self) -> list[Product]:
        return self.handle()
