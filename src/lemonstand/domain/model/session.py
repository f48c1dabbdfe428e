"""SessionState: everything one storefront session owns.

A session starts with default values and an empty catalog.  The catalog
arrives later (asynchronously, from the product feed) and is replaced
wholesale, so a load that finishes mid-session never disturbs the cart
or the stand.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lemonstand.domain.exceptions import EntityNotFoundError
from lemonstand.domain.model.cart import Cart
from lemonstand.domain.model.product import Product
from lemonstand.domain.model.stand import LemonStand


@dataclass
class SessionState:

    catalog: tuple[Product, ...] = ()
    cart: Cart = field(default_factory=Cart)
    stand: LemonStand = field(default_factory=LemonStand)
    cart_visible: bool = False

    @property
    def catalog_loaded(self) -> bool:
        return bool(self.catalog)

    def replace_catalog(self, products: list[Product]) -> None:
        self.catalog = tuple(products)

    def find_product(self, product_id: int) -> Product:
        for product in self.catalog:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product with ID {product_id} not found in catalog")
