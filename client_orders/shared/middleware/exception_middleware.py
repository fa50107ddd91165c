# client_orders/shared/middleware/exception_middleware.py

"""
Centralized error responses.

Every failure leaves the API as ``{"message", "code", "error"?}``. The
``error`` field carries the underlying cause and is omitted in
production. Request validation failures are reported as 400 with one
entry per offending field.
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware
from jose.exceptions import JWTError

from client_orders.domain.exceptions import DomainException
from client_orders.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# Domain 'internal_code' -> HTTP status
STATUS_BY_CODE = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "AUTHENTICATION_FAILED": status.HTTP_401_UNAUTHORIZED,
    "INVALID_CREDENTIALS": status.HTTP_400_BAD_REQUEST,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "INVALID_PRODUCT": status.HTTP_400_BAD_REQUEST,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(message: str, code: str, error: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """JSON body shared by every error response: ``{message, code, error?}``."""
    body = {"message": message, "code": code}
    if error and settings.ENVIRONMENT != "production":
        body["error"] = error
    body.update({key: value for key, value in extra.items() if value})
    return body


def _field_name(location) -> str:
    # ("body", "items", 0, "quantity") -> "items.0.quantity"
    return ".".join(str(part) for part in location if part not in ("body", "query", "path"))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report request validation failures as 400 with one entry per field.
    """
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]
    logger.warning(f"Validation failed on {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Validation failed", "INVALID_INPUT", errors=errors),
    )


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Turns exceptions escaping the routes into JSON error responses.

    Domain exceptions carry their own status through ``internal_code``;
    store and token library errors that were not translated on the way
    up get a generic answer.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)
        except DomainException as exc:
            return self._domain_error(request, exc)
        except IntegrityError as exc:
            logger.error(f"Untranslated integrity error on {request.url.path}: {exc.orig}")
            return self._respond(status.HTTP_409_CONFLICT, "Database integrity error", "RESOURCE_ALREADY_EXISTS", exc)
        except SQLAlchemyError as exc:
            logger.error(f"Database error ({type(exc).__name__}) on {request.url.path}")
            return self._respond(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal database error", "DATABASE_ERROR", exc)
        except JWTError as exc:
            logger.warning(f"Token error ({type(exc).__name__}) on {request.url.path}")
            return self._respond(status.HTTP_401_UNAUTHORIZED, "Invalid token", "AUTHENTICATION_FAILED")
        except Exception as exc:
            logger.exception(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}")
            return self._respond(
                status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "INTERNAL_SERVER_ERROR", exc
            )

    def _domain_error(self, request: Request, exc: DomainException) -> JSONResponse:
        status_code = STATUS_BY_CODE.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
        log = logger.error if status_code >= 500 else logger.warning
        log(f"{exc.internal_code} on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status_code,
            content=error_body(
                str(exc),
                exc.internal_code,
                error=str(exc.original_error) if exc.original_error else None,
                details=exc.details,
            ),
        )

    @staticmethod
    def _respond(status_code: int, message: str, code: str, cause: Optional[Exception] = None) -> JSONResponse:
        return JSONResponse(
            status_code=status_code,
            content=error_body(message, code, error=str(cause) if cause else None),
        )
