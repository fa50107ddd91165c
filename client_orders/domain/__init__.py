# client_orders/domain/__init__.py

"""
Main module for the application's domain components.

This module exports the domain exceptions.
"""

from client_orders.domain.exceptions import (
    DomainException,               # Pure domain base exception
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    InvalidInputException,
    InvalidProductException,
    AuthenticationException,
    InvalidTokenException,
    InvalidCredentialsException,
    DatabaseOperationException,
)
