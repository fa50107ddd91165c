# client_orders/domain/exceptions.py

"""
Custom exceptions for the application.

Domain exceptions are framework independent. Each one carries an
``internal_code`` that the exception middleware maps to an HTTP status
code and a JSON error body.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for every error raised by the application layers.
    """

    internal_code: str = "DOMAIN_ERROR"

    def __init__(
            self,
            detail: str = "Domain error",
            internal_code: Optional[str] = None,
            details: Optional[Dict[str, Any]] = None,
            original_error: Optional[Exception] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        if internal_code is not None:
            self.internal_code = internal_code
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        return self.detail


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        super().__init__(detail=detail, details={"resource_id": str(resource_id)} if resource_id else None)
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Resource already exists (unique field conflict)."""

    internal_code = "RESOURCE_ALREADY_EXISTS"

    def __init__(self, detail: str = "Resource already exists", field: Optional[str] = None):
        super().__init__(detail=detail, details={"field": field} if field else None)


class InvalidInputException(DomainException):
    """Invalid input data."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Invalid input data", fields: Optional[Dict[str, str]] = None):
        super().__init__(detail=detail, details=fields)


class InvalidProductException(InvalidInputException):
    """An order item references a product that cannot be resolved."""

    internal_code = "INVALID_PRODUCT"

    def __init__(self, product_id: Any):
        super().__init__(detail=f"Invalid product ID: {product_id}", fields={"productId": str(product_id)})
        self.product_id = product_id


class AuthenticationException(DomainException):
    """Missing, malformed, tampered or expired bearer token."""

    internal_code = "AUTHENTICATION_FAILED"

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail=detail)


class InvalidTokenException(AuthenticationException):
    """Raised by the token service when a token cannot be verified."""

    def __init__(self, detail: str = "Invalid token", original_error: Optional[Exception] = None):
        super().__init__(detail=detail)
        self.original_error = original_error


class InvalidCredentialsException(DomainException):
    """Invalid login credentials."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail=detail)


class DatabaseOperationException(DomainException):
    """Error while executing a store operation."""

    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Error executing database operation",
                 original_error: Optional[Exception] = None):
        super().__init__(detail=detail, original_error=original_error)
