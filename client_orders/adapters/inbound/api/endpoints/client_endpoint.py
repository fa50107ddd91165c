# client_orders/adapters/inbound/api/endpoints/client_endpoint.py

"""
Endpoints for client management.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from client_orders.adapters.inbound.api.deps import get_client_service
from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from client_orders.application.use_cases.client_use_cases import AsyncClientService
from client_orders.shared.utils.pagination import PageParams, pagination_params

logger = logging.getLogger(__name__)

router = APIRouter()

CLIENT_EXAMPLE = {
    "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "name": "John Doe",
    "email": "john.doe@example.com",
}

NOT_FOUND_RESPONSE = {
    "description": "Client not found",
    "content": {"application/json": {"example": {"message": "Client not found", "code": "RESOURCE_NOT_FOUND"}}},
}


@router.get(
    "",
    response_model=PaginatedResponse[ClientOutput],
    summary="List Clients - Paginated client list",
    description="Returns clients in creation order, optionally filtered by name and/or email "
                "(case-insensitive substring match).",
)
async def list_clients(
        params: PageParams = Depends(pagination_params),
        name: Optional[str] = Query(None, description="Filter by name (substring, case-insensitive)"),
        email: Optional[str] = Query(None, description="Filter by email (substring, case-insensitive)"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.list_clients(params=params, name=name, email=email)


@router.get(
    "/{client_id}",
    response_model=ClientOutput,
    summary="Get Client - Client by ID",
    responses={
        200: {"description": "Client data", "content": {"application/json": {"example": CLIENT_EXAMPLE}}},
        400: {"description": "Malformed ID"},
        404: NOT_FOUND_RESPONSE,
    },
)
async def get_client(
        client_id: str = Path(..., description="ID of the client"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.get_client(client_id)


@router.post(
    "",
    response_model=ClientOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Client - Register a new client",
    responses={
        201: {"description": "Client created", "content": {"application/json": {"example": CLIENT_EXAMPLE}}},
        409: {
            "description": "Email already used by another client",
            "content": {
                "application/json": {
                    "example": {
                        "message": "Client with email 'john.doe@example.com' already exists",
                        "code": "RESOURCE_ALREADY_EXISTS",
                    }
                }
            },
        },
    },
)
async def create_client(
        client_input: ClientCreate,
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.create_client(client_input)


@router.put(
    "/{client_id}",
    response_model=ClientOutput,
    summary="Update Client - Change name and/or email",
    description="Only the fields sent are changed.",
    responses={404: NOT_FOUND_RESPONSE, 409: {"description": "Email already used by another client"}},
)
async def update_client(
        client_input: ClientUpdate,
        client_id: str = Path(..., description="ID of the client to update"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.update_client(client_id, client_input)


@router.delete(
    "/{client_id}",
    response_model=MessageResponse,
    summary="Delete Client - Remove a client",
    responses={
        200: {
            "description": "Client removed",
            "content": {"application/json": {"example": {"message": "Client deleted successfully"}}},
        },
        404: NOT_FOUND_RESPONSE,
    },
)
async def delete_client(
        client_id: str = Path(..., description="ID of the client to delete"),
        service: AsyncClientService = Depends(get_client_service),
):
    return await service.delete_client(client_id)
