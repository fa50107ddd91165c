# client_orders/shared/middleware/__init__.py

from client_orders.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    validation_exception_handler,
)
from client_orders.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "validation_exception_handler",
]
