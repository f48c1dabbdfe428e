"""Runtime settings, read from the environment (and ``.env`` if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(dotenv_path=Path.cwd() / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return float(v)


@dataclass(frozen=True)
class Settings:
    cocktaildb_url: str
    catalog_ingredient: str
    default_image: str
    http_timeout: float
    api_host: str
    api_port: int
    log_level: str


def load_settings() -> Settings:
    return Settings(
        cocktaildb_url=_get_env(
            "COCKTAILDB_URL", default="https://www.thecocktaildb.com/api/json/v1/1"
        ) or "",
        catalog_ingredient=_get_env("CATALOG_INGREDIENT", default="lemon") or "lemon",
        default_image=_get_env("DEFAULT_PRODUCT_IMAGE", default="/default-lemonade.jpg")
        or "/default-lemonade.jpg",
        http_timeout=_get_float("HTTP_TIMEOUT", default=10.0),
        api_host=_get_env("API_HOST", default="127.0.0.1") or "127.0.0.1",
        api_port=_get_int("API_PORT", default=8000),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    )


settings = load_settings()
