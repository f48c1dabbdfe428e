"""CLI command that runs the storefront API."""

from __future__ import annotations

import click
import uvicorn

from lemonstand.infrastructure.config import settings


@click.command("serve")
@click.option("--host", default=None, help="Bind address (defaults to API_HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to API_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Serve GET /api/products with uvicorn."""
    uvicorn.run(
        "lemonstand.infrastructure.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )
