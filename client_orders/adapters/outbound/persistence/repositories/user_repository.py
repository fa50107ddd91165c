# client_orders/adapters/outbound/persistence/repositories/user_repository.py

"""
Repository for user accounts.

Only the bcrypt hash of a password is ever stored; plain passwords
stop at ``create_with_password`` and ``authenticate``.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_orders.adapters.outbound.persistence.models import User
from client_orders.adapters.outbound.security.password_hasher import password_hasher
from client_orders.application.dtos.user_dto import UserCreate
from client_orders.application.ports.outbound import IUserRepository, IPasswordHasher
from client_orders.domain.exceptions import ResourceAlreadyExistsException, InvalidCredentialsException


class AsyncUserCRUD(AsyncCRUDBase[User, UserCreate, dict], IUserRepository[User]):
    """Users with email lookup, registration and credential checks."""

    def __init__(self, model=User, hasher: IPasswordHasher = password_hasher):
        super().__init__(model)
        self.hasher = hasher

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        return await self.get_by_field(db, "email", email)

    async def create_with_password(self, db: AsyncSession, *, obj_in: UserCreate) -> User:
        """
        Register a user.

        Raises:
            ResourceAlreadyExistsException: If the email is already registered,
                including when a concurrent registration wins the race
        """
        if await self.get_by_email(db, obj_in.email):
            self.logger.warning(f"Registration with existing email: {obj_in.email}")
            raise ResourceAlreadyExistsException(
                detail=f"User with email '{obj_in.email}' already exists",
                field="email"
            )

        return await self.create(
            db,
            obj_in={"name": obj_in.name, "email": obj_in.email, "password": self.hasher.hash(obj_in.password)},
        )

    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> User:
        """
        Return the user owning ``email`` when ``password`` matches its hash.

        Unknown email and wrong password fail the same way so the answer
        does not reveal which accounts exist.

        Raises:
            InvalidCredentialsException: If credentials are invalid
        """
        user = await self.get_by_email(db, email)
        if user is None or not self.hasher.verify(password, user.password):
            self.logger.warning(f"Rejected login for {email}")
            raise InvalidCredentialsException(detail="Invalid credentials")
        return user


# Public instance to be used by use cases
user_repository = AsyncUserCRUD(User)
