# client_orders/adapters/outbound/persistence/repositories/client_repository.py

"""
Repository for client operations.

This module implements the repository that performs database operations
related to clients, implementing the IClientRepository interface.
"""

from typing import Optional, List, Dict, Any, Tuple, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.sql import Select

from client_orders.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase, like_pattern
from client_orders.adapters.outbound.persistence.models import Client
from client_orders.application.dtos.client_dto import ClientCreate, ClientUpdate
from client_orders.application.ports.outbound import IClientRepository
from client_orders.domain.exceptions import ResourceAlreadyExistsException


class AsyncClientCRUD(AsyncCRUDBase[Client, ClientCreate, ClientUpdate], IClientRepository[Client]):
    """
    Async implementation of CRUD repository for the Client entity.

    Extends AsyncCRUDBase with substring search and an email
    uniqueness check ahead of the store constraint.
    """

    def base_query(self) -> Select:
        return select(Client).order_by(Client.created_at, Client.id)

    async def search(
            self, db: AsyncSession, *, skip: int, limit: int,
            name: Optional[str] = None, email: Optional[str] = None,
    ) -> Tuple[int, List[Client]]:
        """
        Page through clients whose name/email contain the given
        substrings, ignoring case.

        Args:
            db: Async database session
            skip: Number of records to skip
            limit: Maximum number of records to return
            name: Optional name substring
            email: Optional email substring

        Returns:
            Tuple (total matching clients, clients of the page)
        """
        query = self.base_query()
        if name:
            query = query.where(Client.name.ilike(like_pattern(name), escape="\\"))
        if email:
            query = query.where(Client.email.ilike(like_pattern(email), escape="\\"))
        return await self.paginate(db, query, skip=skip, limit=limit)

    async def create(self, db: AsyncSession, *, obj_in: Union[ClientCreate, Dict[str, Any]]) -> Client:
        email = obj_in["email"] if isinstance(obj_in, dict) else obj_in.email
        await self._ensure_email_available(db, email)
        return await super().create(db, obj_in=obj_in)

    async def update(
            self, db: AsyncSession, *, db_obj: Client, obj_in: Union[ClientUpdate, Dict[str, Any]]
    ) -> Client:
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        if update_data.get("email") and update_data["email"] != db_obj.email:
            await self._ensure_email_available(db, update_data["email"])
        return await super().update(db, db_obj=db_obj, obj_in=update_data)

    async def _ensure_email_available(self, db: AsyncSession, email: str) -> None:
        if await self.get_by_field(db, "email", email):
            self.logger.warning(f"Attempt to use an existing client email: {email}")
            raise ResourceAlreadyExistsException(
                detail=f"Client with email '{email}' already exists",
                field="email"
            )


# Public instance to be used by use cases
client_repository = AsyncClientCRUD(Client)
