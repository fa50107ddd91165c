# client_orders/domain/services/order_pricing_service.py

import logging
from typing import Any, Awaitable, Callable, Iterable, Optional

from client_orders.domain.exceptions import InvalidProductException
from client_orders.domain.models.order_domain_model import OrderLine
from client_orders.domain.models.product_domain_model import Product

logger = logging.getLogger(__name__)

ProductLookup = Callable[[Any], Awaitable[Optional[Product]]]


class OrderPricingService:
    """
    Domain service that computes the total price of an order.

    Prices are read from the catalog at the moment the order is written;
    nothing is cached, so a later price change only affects orders priced
    after it.
    """

    def __init__(self, find_product: ProductLookup):
        """
        Args:
            find_product: Async callable returning the product for an
                identifier, or None when it does not resolve
        """
        self.find_product = find_product

    async def price_items(self, items: Iterable[OrderLine]) -> float:
        """
        Resolve every item's product and return sum(price * quantity).

        Items are resolved in the given order and the first one that does
        not resolve aborts the whole operation.

        Raises:
            InvalidProductException: Naming the first unresolved product id
        """
        total = 0.0
        for item in items:
            product = await self.find_product(item.product_id)
            if product is None:
                logger.warning(f"Pricing aborted: product {item.product_id} not found")
                raise InvalidProductException(item.product_id)
            total += product.price * item.quantity
        return total
