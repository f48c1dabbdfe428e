"""Abstract feed of priced products, as consumed by a storefront session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lemonstand.domain.model.product import Product


class ProductFeed(ABC):

    @abstractmethod
    def fetch_products(self) -> list[Product]:
        """Return a fresh catalog snapshot, or raise a CatalogError."""
