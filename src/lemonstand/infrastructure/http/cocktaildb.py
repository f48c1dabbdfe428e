"""TheCocktailDB-backed implementation of DrinkSource."""

from __future__ import annotations

import logging

import httpx

from lemonstand.domain.exceptions import CatalogFetchError, UpstreamUnavailableError
from lemonstand.domain.model.drink import DrinkRecord
from lemonstand.domain.repository.drink_source import DrinkSource

logger = logging.getLogger(__name__)


class CocktailDbDrinkSource(DrinkSource):
    """Lists drinks that contain a fixed ingredient.

    One request per call, no retries.  ``client`` is injectable so tests
    can supply an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        ingredient: str,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/filter.php"
        self._ingredient = ingredient
        self._client = client
        self._timeout = timeout

    # --- DrinkSource interface ------------------------------------------------

    def list_drinks(self) -> list[DrinkRecord]:
        try:
            if self._client is not None:
                response = self._get(self._client)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = self._get(client)
        except httpx.HTTPError as exc:
            raise CatalogFetchError(f"Request to drink catalog failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "Drink catalog answered HTTP %s for ingredient %r",
                response.status_code,
                self._ingredient,
            )
            raise UpstreamUnavailableError(response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise CatalogFetchError("Drink catalog returned a non-JSON body") from exc

        return self._parse(data)

    # --- Internal helpers -----------------------------------------------------

    def _get(self, client: httpx.Client) -> httpx.Response:
        logger.debug("GET %s i=%s", self._url, self._ingredient)
        return client.get(self._url, params={"i": self._ingredient})

    @staticmethod
    def _parse(data: object) -> list[DrinkRecord]:
        # TheCocktailDB sends {"drinks": null} or {"drinks": "None Found"}
        # when nothing matches.
        drinks = data.get("drinks") if isinstance(data, dict) else None
        if not isinstance(drinks, list):
            raise CatalogFetchError("Drink catalog response has no drinks list")

        records: list[DrinkRecord] = []
        for raw in drinks:
            if not isinstance(raw, dict) or not raw.get("strDrink"):
                raise CatalogFetchError(f"Drink record without a name: {raw!r}")
            records.append(
                DrinkRecord(
                    name=raw["strDrink"],
                    thumbnail=raw.get("strDrinkThumb") or None,
                )
            )
        return records
