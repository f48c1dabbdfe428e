"""ProductFeed that reads the catalog from a running storefront API."""

from __future__ import annotations

import logging

import httpx

from lemonstand.domain.exceptions import CatalogFetchError, ValidationError
from lemonstand.domain.model.product import Product
from lemonstand.domain.repository.product_feed import ProductFeed

logger = logging.getLogger(__name__)


class ApiProductFeed(ProductFeed):

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/api/products"
        self._client = client
        self._timeout = timeout

    def fetch_products(self) -> list[Product]:
        try:
            if self._client is not None:
                response = self._client.get(self._url)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(self._url)
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise CatalogFetchError(f"Failed to fetch products: {exc}") from exc

        if not response.is_success:
            detail = body.get("error") if isinstance(body, dict) else None
            raise CatalogFetchError(
                f"Failed to fetch products (HTTP {response.status_code}"
                + (f": {detail})" if detail else ")")
            )

        if not isinstance(body, list):
            raise CatalogFetchError("Failed to fetch products: expected a JSON array")

        try:
            return [Product.from_dict(raw) for raw in body]
        except ValidationError as exc:
            raise CatalogFetchError(f"Failed to fetch products: {exc}") from exc
