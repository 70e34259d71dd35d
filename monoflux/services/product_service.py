"""Product Service - multi-value producers over a fixed product catalog.

Invariants:
    - Seed is a tuple of 5 frozen Products, owned here, never mutated
    - Every operation returns a fresh async iterator in seed order
    - Filters never reorder and never drop a qualifying item
"""

import logging
from collections.abc import AsyncIterator, Iterable

from monoflux.core.publishers import (
    concat, distinct, filter_items, from_iterable, map_items,
)
from monoflux.models.product import Product

logger = logging.getLogger(__name__)

SEED_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=999.99, quantity=5),
    Product(id=2, name="Mouse", price=29.99, quantity=50),
    Product(id=3, name="Keyboard", price=79.99, quantity=30),
    Product(id=4, name="Monitor", price=299.99, quantity=10),
    Product(id=5, name="Headphones", price=149.99, quantity=25),
)

# Price ceilings for the combined listing, emitted in this order
COMBINED_PRICE_TIERS: tuple[float, ...] = (100.0, 500.0)


class ProductService:
    """Read-only catalog exposing filtered and projected product streams."""

    def __init__(self, products: Iterable[Product] = SEED_PRODUCTS):
        self._products = tuple(products)

    def get_all_products(self) -> AsyncIterator[Product]:
        return from_iterable(self._products)

    def get_products_by_max_price(self, max_price: float) -> AsyncIterator[Product]:
        """Products with price <= max_price."""
        logger.debug("Filtering products by max price %s", max_price)
        return filter_items(
            self.get_all_products(), lambda p: p.price <= max_price,
        )

    def get_low_stock_products(self, threshold: int) -> AsyncIterator[Product]:
        """Products with quantity strictly below threshold."""
        logger.debug("Filtering products by stock threshold %s", threshold)
        return filter_items(
            self.get_all_products(), lambda p: p.quantity < threshold,
        )

    def get_product_names(self) -> AsyncIterator[str]:
        return map_items(self.get_all_products(), lambda p: p.name)

    def get_combined_products(self) -> AsyncIterator[Product]:
        """Concatenate each price tier's listing, dropping repeated products.

        Repeats are detected by full-field equality, so the cheapest tier that
        contains a product decides its position.
        """
        return distinct(concat(*(
            self.get_products_by_max_price(ceiling)
            for ceiling in COMBINED_PRICE_TIERS
        )))
