"""Domain service: Catalog Pricing.

Turns upstream drink records into Products.  Prices and lemon costs are
drawn at random for every call, so two fetches of the same drinks give
different numbers.  The random source is injected so tests can pass a
seeded generator.
"""

from __future__ import annotations

import random

from lemonstand.domain.model.drink import DrinkRecord
from lemonstand.domain.model.product import DEFAULT_IMAGE, Product

MIN_PRICE = 2.0
MAX_PRICE = 5.0  # exclusive
MIN_LEMONS = 1
MAX_LEMONS = 5  # inclusive


class CatalogPricingService:

    def __init__(
        self,
        rng: random.Random | None = None,
        default_image: str = DEFAULT_IMAGE,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._default_image = default_image

    def price_catalog(self, drinks: list[DrinkRecord]) -> list[Product]:
        """Build one Product per drink; ``id`` is the drink's position."""
        return [self._to_product(i, drink) for i, drink in enumerate(drinks)]

    def _to_product(self, index: int, drink: DrinkRecord) -> Product:
        return Product(
            id=index,
            name=drink.name,
            price=self._rng.random() * (MAX_PRICE - MIN_PRICE) + MIN_PRICE,
            image=drink.thumbnail or self._default_image,
            lemons=self._rng.randint(MIN_LEMONS, MAX_LEMONS),
        )
