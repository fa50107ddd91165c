# client_orders/adapters/inbound/api/endpoints/client_order_endpoint.py

"""
Endpoints for the orders of one client.

Every route requires a bearer token. An order that exists but belongs
to another client is reported as not found.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from client_orders.adapters.inbound.api.deps import get_order_service, require_auth
from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.order_dto import OrderItemsInput, OrderOutput, OrderUpdate
from client_orders.application.use_cases.order_use_cases import AsyncOrderService
from client_orders.domain.models.order_domain_model import OrderStatus
from client_orders.shared.utils.pagination import PageParams, pagination_params

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_auth)])

UNAUTHORIZED_RESPONSE = {
    "description": "Missing or invalid bearer token",
    "content": {
        "application/json": {
            "example": {"message": "Access denied. No token provided.", "code": "AUTHENTICATION_FAILED"}
        }
    },
}


@router.get(
    "/{client_id}/orders",
    response_model=PaginatedResponse[OrderOutput],
    summary="List Client Orders - Orders of one client",
    responses={401: UNAUTHORIZED_RESPONSE},
)
async def list_client_orders(
        client_id: str = Path(..., description="ID of the client"),
        params: PageParams = Depends(pagination_params),
        order_status: Optional[OrderStatus] = Query(None, alias="status", description="Filter by status"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.list_orders(params=params, status=order_status, client_id=client_id)


@router.post(
    "/{client_id}/orders",
    response_model=OrderOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Client Order - Place an order for a client",
    responses={400: {"description": "Unknown client or product"}, 401: UNAUTHORIZED_RESPONSE},
)
async def create_client_order(
        order_input: OrderItemsInput,
        client_id: str = Path(..., description="ID of the client placing the order"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.create_order(client_id=client_id, items=order_input.items)


@router.get(
    "/{client_id}/orders/{order_id}",
    response_model=OrderOutput,
    summary="Get Client Order - One order of a client",
    responses={401: UNAUTHORIZED_RESPONSE, 404: {"description": "Order not found for this client"}},
)
async def get_client_order(
        client_id: str = Path(..., description="ID of the client"),
        order_id: str = Path(..., description="ID of the order"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.get_order(order_id, client_id=client_id)


@router.put(
    "/{client_id}/orders/{order_id}",
    response_model=OrderOutput,
    summary="Update Client Order - Replace the items of an order",
    description="The total is recomputed from the current product prices.",
    responses={401: UNAUTHORIZED_RESPONSE, 404: {"description": "Order not found for this client"}},
)
async def update_client_order(
        order_input: OrderItemsInput,
        client_id: str = Path(..., description="ID of the client"),
        order_id: str = Path(..., description="ID of the order to update"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.update_order(order_id, OrderUpdate(items=order_input.items), client_id=client_id)


@router.delete(
    "/{client_id}/orders/{order_id}",
    response_model=MessageResponse,
    summary="Delete Client Order - Remove an order of a client",
    responses={401: UNAUTHORIZED_RESPONSE, 404: {"description": "Order not found for this client"}},
)
async def delete_client_order(
        client_id: str = Path(..., description="ID of the client"),
        order_id: str = Path(..., description="ID of the order to delete"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.delete_order(order_id, client_id=client_id)
