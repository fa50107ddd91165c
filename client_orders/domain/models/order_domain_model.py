# client_orders/domain/models/order_domain_model.py

import enum
from dataclasses import dataclass
from typing import Any


class OrderStatus(str, enum.Enum):
    """Possible states of an order. Any state may replace any other."""
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELED = "canceled"


@dataclass(frozen=True)
class OrderLine:
    """A requested (product, quantity) pair, before the product is resolved."""
    product_id: Any  # raw identifier as received; resolution decides if it is valid
    quantity: int
