# client_orders/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

This module implements the service for authentication operations:
registration and login.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.repositories.user_repository import user_repository
from client_orders.application.dtos.base_dto import MessageResponse
from client_orders.application.dtos.user_dto import UserCreate, UserLogin, TokenResponse
from client_orders.application.ports.inbound import IAuthUseCase
from client_orders.application.ports.outbound import ITokenService, IUserRepository
from client_orders.domain.exceptions import InvalidInputException, ResourceAlreadyExistsException

logger = logging.getLogger(__name__)


class AsyncAuthService(IAuthUseCase):
    """
    Service for user authentication.

    This class implements the business logic related to
    user registration and login.
    """

    def __init__(
            self,
            db_session: AsyncSession,
            token_service: ITokenService,
            users: IUserRepository = user_repository,
    ):
        """
        Initialize the service.

        Args:
            db_session: Active SQLAlchemy session
            token_service: Signs the access tokens handed out at login
            users: User repository
        """
        self.db = db_session
        self.token_service = token_service
        self.users = users

    async def register_user(self, user_input: UserCreate) -> MessageResponse:
        """
        Register a new user in the system.

        Raises:
            InvalidInputException: If the email is already in use
        """
        try:
            await self.users.create_with_password(self.db, obj_in=user_input)
        except ResourceAlreadyExistsException:
            raise InvalidInputException(detail="Email already in use", fields={"email": "already in use"})

        return MessageResponse(message="User registered successfully")

    async def login_user(self, credentials: UserLogin) -> TokenResponse:
        """
        Authenticate a user and generate an access token.

        Raises:
            InvalidCredentialsException: If credentials are invalid
        """
        user = await self.users.authenticate(
            self.db,
            email=credentials.email,
            password=credentials.password
        )

        token = self.token_service.issue(subject=str(user.id))
        logger.info(f"Successful login: {user.email}")
        return TokenResponse(token=token)
