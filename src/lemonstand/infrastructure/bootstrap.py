"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers
and reads settings.  Every other module depends only on abstractions.
"""

from __future__ import annotations

from lemonstand.application.fetch_catalog import FetchCatalogHandler
from lemonstand.domain.repository.product_feed import ProductFeed
from lemonstand.domain.service.catalog_pricing import CatalogPricingService
from lemonstand.infrastructure.config import settings
from lemonstand.infrastructure.http.api_product_feed import ApiProductFeed
from lemonstand.infrastructure.http.cocktaildb import CocktailDbDrinkSource


def drink_source() -> CocktailDbDrinkSource:
    return CocktailDbDrinkSource(
        base_url=settings.cocktaildb_url,
        ingredient=settings.catalog_ingredient,
        timeout=settings.http_timeout,
    )


def fetch_catalog_handler() -> FetchCatalogHandler:
    return FetchCatalogHandler(
        drink_source=drink_source(),
        pricing=CatalogPricingService(default_image=settings.default_image),
    )


def product_feed(api_url: str | None = None) -> ProductFeed:
    """Catalog feed for a storefront session.

    With *api_url* the catalog comes from a running storefront API,
    otherwise it is fetched in-process.
    """
    if api_url:
        return ApiProductFeed(api_url, timeout=settings.http_timeout)
    return fetch_catalog_handler()
