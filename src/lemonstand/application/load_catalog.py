"""Application service: Load Catalog use case.

Replaces the session's catalog with a fresh snapshot from the product
feed.  A failed load is logged and otherwise ignored: the session keeps
whatever catalog it had (possibly none) and nothing is retried.
"""

from __future__ import annotations

import logging

from lemonstand.domain.exceptions import DomainException
from lemonstand.domain.model.session import SessionState
from lemonstand.domain.repository.product_feed import ProductFeed

logger = logging.getLogger(__name__)


class LoadCatalogHandler:

    def __init__(self, session: SessionState, feed: ProductFeed) -> None:
        self._session = session
        self._feed = feed

    def handle(self) -> bool:
        """Return True if the catalog was replaced."""
        try:
            products = self._feed.fetch_products()
        except DomainException as exc:
            logger.error("Error fetching products: %s", exc)
            return False

        self._session.replace_catalog(products)
        logger.info("Catalog loaded (%d product(s))", len(products))
        return True
