# client_orders/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

One line per request once the response is known: method, path, status
and elapsed time. Outside production the query string and client host
are added.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from client_orders.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every handled request. 5xx answers are logged as errors and
    4xx answers as warnings.
    """

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        line = f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        if settings.ENVIRONMENT != "production":
            if request.query_params:
                line += f" | Query: {dict(request.query_params)}"
            line += f" | Client: {request.client.host if request.client else 'N/A'}"

        if response.status_code >= 500:
            logger.error(line)
        elif response.status_code >= 400:
            logger.warning(line)
        else:
            logger.info(line)

        return response
