# client_orders/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that implement the use
cases of the API, organized by functional domain.
"""

from client_orders.application.use_cases.auth_use_cases import AsyncAuthService
from client_orders.application.use_cases.client_use_cases import AsyncClientService
from client_orders.application.use_cases.order_use_cases import AsyncOrderService

__all__ = [
    "AsyncAuthService",
    "AsyncClientService",
    "AsyncOrderService",
]
