"""ProductService tests - seed order, filters, projection, combined listing.

Tests cover:
    - get_all_products emits the 5 seed items in order
    - price/stock filters keep exactly the qualifying items, order preserved
    - get_product_names mirrors get_all_products
    - each call yields an independent iterator
    - get_combined_products concatenates tiers and drops repeats
"""

import pytest

from monoflux.core.publishers import collect
from monoflux.models.product import Product
from monoflux.services.product_service import SEED_PRODUCTS, ProductService


async def test_get_all_products_returns_seed_in_order(product_service):
    products = await collect(product_service.get_all_products())
    assert [p.name for p in products] == [
        "Laptop", "Mouse", "Keyboard", "Monitor", "Headphones",
    ]


@pytest.mark.parametrize("max_price", [-1.0, 0.0, 29.99, 100.0, 299.99, 500.0, 1e6])
async def test_get_products_by_max_price_matches_predicate(product_service, max_price):
    result = await collect(product_service.get_products_by_max_price(max_price))
    assert result == [p for p in SEED_PRODUCTS if p.price <= max_price]


async def test_get_products_by_max_price_100(product_service):
    result = await collect(product_service.get_products_by_max_price(100.0))
    assert [p.name for p in result] == ["Mouse", "Keyboard"]


@pytest.mark.parametrize("threshold", [0, 5, 6, 15, 20, 26, 51])
async def test_get_low_stock_products_matches_predicate(product_service, threshold):
    result = await collect(product_service.get_low_stock_products(threshold))
    assert result == [p for p in SEED_PRODUCTS if p.quantity < threshold]


async def test_get_low_stock_products_threshold_20(product_service):
    result = await collect(product_service.get_low_stock_products(20))
    assert [(p.name, p.quantity) for p in result] == [("Laptop", 5), ("Monitor", 10)]


async def test_get_product_names_projects_all_products(product_service):
    names = await collect(product_service.get_product_names())
    products = await collect(product_service.get_all_products())
    assert len(names) == len(products)
    assert names == [p.name for p in products]


async def test_each_call_returns_fresh_iterator(product_service):
    first = product_service.get_all_products()
    assert (await first.__anext__()).name == "Laptop"
    second = await collect(product_service.get_all_products())
    assert len(second) == 5
    assert (await first.__anext__()).name == "Mouse"
    await first.aclose()


async def test_get_combined_products_orders_cheap_tier_first(product_service):
    combined = await collect(product_service.get_combined_products())
    assert [p.name for p in combined] == ["Mouse", "Keyboard", "Monitor", "Headphones"]
    assert len(set(combined)) == len(combined)


async def test_combined_dedup_uses_full_field_equality():
    twin = Product(id=2, name="Mouse", price=29.99, quantity=49)
    service = ProductService([
        Product(id=2, name="Mouse", price=29.99, quantity=50),
        twin,
    ])
    combined = await collect(service.get_combined_products())
    assert len(combined) == 2
    assert combined[1] == twin


async def test_seed_is_not_mutated_by_consumers(product_service):
    products = await collect(product_service.get_all_products())
    products.clear()
    assert len(await collect(product_service.get_all_products())) == 5
