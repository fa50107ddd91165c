# client_orders/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

This module exports every SQLAlchemy model of the system so that the
metadata is complete wherever ``Base`` is used.
"""

from client_orders.adapters.outbound.persistence.models.base_model import Base
from client_orders.adapters.outbound.persistence.models.user_model import User
from client_orders.adapters.outbound.persistence.models.client_model import Client
from client_orders.adapters.outbound.persistence.models.product_model import Product
from client_orders.adapters.outbound.persistence.models.order_model import Order, OrderItem

__all__ = [
    # Base
    "Base",

    # Models
    "User",
    "Client",
    "Product",
    "Order",
    "OrderItem",
]
