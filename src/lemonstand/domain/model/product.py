"""Product: a priced drink in the storefront catalog.

Products are created once per catalog fetch and never change afterwards.
A new fetch produces new Products (with new prices) rather than
updating the old ones.
"""

from __future__ import annotations

from dataclasses import dataclass

from lemonstand.domain.exceptions import ValidationError

DEFAULT_IMAGE = "/default-lemonade.jpg"


@dataclass(frozen=True)
class Product:
    """A drink offered for sale.

    ``id`` is the drink's position in the catalog snapshot it came from,
    so it is only unique within that snapshot.
    """

    id: int
    name: str
    price: float
    image: str
    lemons: int

    def __post_init__(self) -> None:
        if not isinstance(self.lemons, int) or isinstance(self.lemons, bool):
            raise ValidationError(
                f"Lemon cost must be an integer, got {type(self.lemons).__name__}"
            )
        if self.lemons <= 0:
            raise ValidationError("Lemon cost must be positive")
        if self.price < 0:
            raise ValidationError(f"Product price cannot be negative, got {self.price}")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "lemons": self.lemons,
        }

    @staticmethod
    def from_dict(raw: dict) -> Product:
        """Rebuild a Product from its JSON form (as served by the API)."""
        try:
            return Product(
                id=int(raw["id"]),
                name=str(raw["name"]),
                price=float(raw["price"]),
                image=raw.get("image") or DEFAULT_IMAGE,
                lemons=int(raw["lemons"]),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ValidationError(f"Malformed product record: {raw!r}") from exc
