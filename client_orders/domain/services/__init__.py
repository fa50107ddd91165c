# client_orders/domain/services/__init__.py

from client_orders.domain.services.order_pricing_service import OrderPricingService

__all__ = ["OrderPricingService"]
