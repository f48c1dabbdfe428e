"""Storefront HTTP API.

Serves the priced catalog at ``GET /api/products``.  Catalog failures
never escape as a crash; they become a 500 with a fixed-shape body
``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse

from lemonstand.application.fetch_catalog import FetchCatalogHandler
from lemonstand.domain.exceptions import UpstreamUnavailableError
from lemonstand.infrastructure import bootstrap

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "Failed to fetch data"
FETCH_ERROR_MESSAGE = "Error fetching products"


def _build_router(handler_factory: Callable[[], FetchCatalogHandler]) -> APIRouter:
    router = APIRouter()

    @router.get("/api/products")
    def get_products():
        """Fetch drinks upstream and return them as priced products."""
        handler = handler_factory()
        try:
            products = handler.handle()
        except UpstreamUnavailableError as exc:
            logger.error("Upstream drink catalog unavailable: %s", exc)
            return JSONResponse({"error": UPSTREAM_ERROR_MESSAGE}, status_code=500)
        except Exception:
            logger.exception("Error fetching products")
            return JSONResponse({"error": FETCH_ERROR_MESSAGE}, status_code=500)

        return [product.to_dict() for product in products]

    @router.get("/health")
    def health():
        return {"status": "ok"}

    return router


def create_app(
    handler_factory: Callable[[], FetchCatalogHandler] = bootstrap.fetch_catalog_handler,
) -> FastAPI:
    app = FastAPI(title="Lemon Stand API")
    app.include_router(_build_router(handler_factory))
    return app


app = create_app()
