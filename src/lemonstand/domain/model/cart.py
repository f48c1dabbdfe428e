"""Cart aggregate: the products a user intends to buy.

The cart is an ordered list that may hold the same product more than
once.  Entries are addressed by position, never by product id.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lemonstand.domain.exceptions import InvalidCartPositionError
from lemonstand.domain.model.product import Product


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - ``lemons_used`` equals the sum of ``lemons`` over ``items``
    - ``lemons_used`` is kept up to date on every mutation rather than
      recomputed, so every mutation must go through this class
    """

    items: list[Product] = field(default_factory=list)
    lemons_used: int = 0

    def add(self, product: Product) -> None:
        """Append a product.  Lemon stock is not consulted."""
        self.items.append(product)
        self.lemons_used += product.lemons

    def remove_at(self, position: int) -> Product:
        """Remove exactly the entry at *position* and return it.

        Raises InvalidCartPositionError (leaving the cart untouched) when
        the position is out of range.  Negative positions are rejected
        rather than counted from the end.
        """
        if not 0 <= position < len(self.items):
            raise InvalidCartPositionError(
                f"No cart entry at position {position} "
                f"(cart has {len(self.items)} item(s))"
            )
        removed = self.items.pop(position)
        self.lemons_used -= removed.lemons
        return removed

    def clear(self) -> None:
        self.items = []
        self.lemons_used = 0

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> float:
        return sum(item.price for item in self.items)

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items
