# client_orders/application/use_cases/client_use_cases.py

"""
Service for client management.
"""

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.models import Client
from client_orders.adapters.outbound.persistence.repositories.client_repository import client_repository
from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from client_orders.application.ports.inbound import IClientUseCase
from client_orders.application.ports.outbound import IClientRepository
from client_orders.domain.exceptions import ResourceNotFoundException
from client_orders.shared.utils.input_validation import InputValidator
from client_orders.shared.utils.pagination import PageParams

logger = logging.getLogger(__name__)


class AsyncClientService(IClientUseCase):
    """
    Service for client management.

    Pass-through CRUD over the client repository; identifiers coming
    from the URL are parsed here so that a malformed id is reported as
    bad input rather than as a missing client.
    """

    def __init__(self, db_session: AsyncSession, clients: IClientRepository = client_repository):
        self.db_session = db_session
        self.clients = clients

    async def list_clients(
            self, params: PageParams, name: Optional[str] = None, email: Optional[str] = None
    ) -> PaginatedResponse[ClientOutput]:
        total, clients = await self.clients.search(
            self.db_session, skip=params.skip, limit=params.limit, name=name, email=email
        )
        return PaginatedResponse[ClientOutput].build(
            total=total,
            page=params.page,
            limit=params.limit,
            data=[ClientOutput.model_validate(client) for client in clients],
        )

    async def get_client(self, client_id: str) -> ClientOutput:
        return ClientOutput.model_validate(await self._get_or_404(client_id))

    async def create_client(self, data: ClientCreate) -> ClientOutput:
        client = await self.clients.create(self.db_session, obj_in=data)
        return ClientOutput.model_validate(client)

    async def update_client(self, client_id: str, data: ClientUpdate) -> ClientOutput:
        client = await self._get_or_404(client_id)
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return ClientOutput.model_validate(client)

        client = await self.clients.update(self.db_session, db_obj=client, obj_in=changes)
        return ClientOutput.model_validate(client)

    async def delete_client(self, client_id: str) -> MessageResponse:
        await self.clients.delete(self.db_session, id=InputValidator.require_uuid(client_id))
        return MessageResponse(message="Client deleted successfully")

    async def _get_or_404(self, client_id: str) -> Client:
        client = await self.clients.get(self.db_session, InputValidator.require_uuid(client_id))
        if not client:
            logger.warning(f"Client not found: ID {client_id}")
            raise ResourceNotFoundException(detail="Client not found", resource_id=client_id)
        return client
