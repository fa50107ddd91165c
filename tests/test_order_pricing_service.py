# tests/test_order_pricing_service.py

import uuid

import pytest

from client_orders.domain.exceptions import InvalidProductException
from client_orders.domain.models import OrderLine, Product
from client_orders.domain.services import OrderPricingService

PEN = Product(id=uuid.uuid4(), name="Pen", price=1.5)
BOOK = Product(id=uuid.uuid4(), name="Book", price=10.0)


def in_memory_catalog(*products):
    catalog = {product.id: product for product in products}
    calls = []

    async def find_product(product_id):
        calls.append(product_id)
        return catalog.get(product_id)

    return find_product, calls


async def test_sums_price_times_quantity():
    find_product, _ = in_memory_catalog(PEN, BOOK)
    pricing = OrderPricingService(find_product)
    total = await pricing.price_items([OrderLine(PEN.id, 2), OrderLine(BOOK.id, 1)])
    assert total == 13.0


async def test_first_unknown_product_aborts():
    missing = uuid.uuid4()
    find_product, calls = in_memory_catalog(PEN)
    pricing = OrderPricingService(find_product)

    with pytest.raises(InvalidProductException) as exc_info:
        await pricing.price_items([OrderLine(missing, 1), OrderLine(uuid.uuid4(), 1), OrderLine(PEN.id, 1)])

    assert exc_info.value.product_id == missing
    assert str(exc_info.value) == f"Invalid product ID: {missing}"
    assert calls == [missing]


async def test_empty_items_cost_nothing():
    find_product, _ = in_memory_catalog()
    assert await OrderPricingService(find_product).price_items([]) == 0


async def test_total_is_not_rounded():
    washer = Product(id=uuid.uuid4(), name="Washer", price=0.004)
    find_product, _ = in_memory_catalog(washer)
    assert await OrderPricingService(find_product).price_items([OrderLine(washer.id, 1)]) == 0.004
