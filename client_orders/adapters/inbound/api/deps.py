# client_orders/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication, database access and the
application services.
"""

import logging
from functools import lru_cache
from typing import Optional
from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.configuration.config import settings
from client_orders.adapters.outbound.persistence.database import get_db
from client_orders.adapters.outbound.security.token_service import JWTTokenService
from client_orders.application.ports.outbound import ITokenService
from client_orders.application.use_cases.auth_use_cases import AsyncAuthService
from client_orders.application.use_cases.client_use_cases import AsyncClientService
from client_orders.application.use_cases.order_use_cases import AsyncOrderService
from client_orders.domain.exceptions import AuthenticationException

# Configure logger
logger = logging.getLogger(__name__)

# Bearer scheme; errors are raised by require_auth with the API's own messages
bearer_scheme = HTTPBearer(auto_error=False, description="JWT obtained from /auth/login")

########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Token service
########################################################################

@lru_cache
def get_token_service() -> ITokenService:
    """Token service built from the process configuration."""
    return JWTTokenService(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


########################################################################
# Bearer token gate
########################################################################

async def require_auth(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        token_service: ITokenService = Depends(get_token_service),
) -> str:
    """
    Verify the ``Authorization: Bearer <token>`` header.

    Returns:
        The token subject (user id), also stored on ``request.state.user_id``

    Raises:
        AuthenticationException: If the header is missing or the token is invalid
    """
    if not request.headers.get("Authorization"):
        logger.warning(f"Access denied, no token: {request.method} {request.url.path}")
        raise AuthenticationException(detail="Access denied. No token provided.")

    if credentials is None:
        logger.warning(f"Access denied, malformed Authorization header: {request.url.path}")
        raise AuthenticationException(detail="Invalid token")

    user_id = token_service.verify(credentials.credentials)
    request.state.user_id = user_id
    return user_id


########################################################################
# Application services
########################################################################

def get_auth_service(
        db: AsyncSession = Depends(get_session),
        token_service: ITokenService = Depends(get_token_service),
) -> AsyncAuthService:
    return AsyncAuthService(db, token_service)


def get_client_service(db: AsyncSession = Depends(get_session)) -> AsyncClientService:
    return AsyncClientService(db)


def get_order_service(db: AsyncSession = Depends(get_session)) -> AsyncOrderService:
    return AsyncOrderService(db)
