# client_orders/domain/models/__init__.py

from client_orders.domain.models.order_domain_model import OrderLine, OrderStatus
from client_orders.domain.models.product_domain_model import Product

__all__ = ["OrderLine", "OrderStatus", "Product"]
