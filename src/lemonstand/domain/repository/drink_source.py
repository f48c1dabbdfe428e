"""Abstract source of drink records.

Defined in the domain layer so the catalog logic never depends on the
HTTP client.  The concrete TheCocktailDB adapter lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lemonstand.domain.model.drink import DrinkRecord


class DrinkSource(ABC):

    @abstractmethod
    def list_drinks(self) -> list[DrinkRecord]:
        """Return the drinks matching the source's fixed filter, in order.

        Raises UpstreamUnavailableError on a non-success answer and
        CatalogFetchError on any other failure.
        """
