# client_orders/adapters/inbound/api/endpoints/order_endpoint.py

"""
Endpoints for order management.

The total price is never accepted from the caller: it is computed from
the current product prices every time items are written.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query, status

from client_orders.adapters.inbound.api.deps import get_order_service
from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.order_dto import OrderCreate, OrderOutput, OrderUpdate
from client_orders.application.use_cases.order_use_cases import AsyncOrderService
from client_orders.domain.models.order_domain_model import OrderStatus
from client_orders.shared.utils.pagination import PageParams, pagination_params

logger = logging.getLogger(__name__)

router = APIRouter()

ORDER_EXAMPLE = {
    "id": "9b2f6c1e-8d44-4c3a-9a57-3f1c2b7d8e90",
    "clientId": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
    "client": {
        "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
        "name": "John Doe",
        "email": "john.doe@example.com",
    },
    "items": [
        {
            "productId": "5c0e1f7a-2b3d-4e5f-8a9b-0c1d2e3f4a5b",
            "quantity": 2,
            "product": {"id": "5c0e1f7a-2b3d-4e5f-8a9b-0c1d2e3f4a5b", "name": "Keyboard", "price": 10.0},
        }
    ],
    "totalPrice": 20.0,
    "status": "pending",
    "createdAt": "2024-01-01T00:00:00Z",
}

NOT_FOUND_RESPONSE = {
    "description": "Order not found",
    "content": {"application/json": {"example": {"message": "Order not found", "code": "RESOURCE_NOT_FOUND"}}},
}

INVALID_PRODUCT_RESPONSE = {
    "description": "Unknown client or product, or invalid items",
    "content": {
        "application/json": {
            "example": {"message": "Invalid product ID: 5c0e1f7a-2b3d-4e5f-8a9b-0c1d2e3f4a5b", "code": "INVALID_PRODUCT"}
        }
    },
}


@router.get(
    "",
    response_model=PaginatedResponse[OrderOutput],
    summary="List Orders - Paginated order list",
    description="Returns orders in creation order with client and products resolved, "
                "optionally filtered by status.",
)
async def list_orders(
        params: PageParams = Depends(pagination_params),
        order_status: Optional[OrderStatus] = Query(None, alias="status", description="Filter by status"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.list_orders(params=params, status=order_status)


@router.get(
    "/{order_id}",
    response_model=OrderOutput,
    summary="Get Order - Order by ID",
    responses={
        200: {"description": "Order data", "content": {"application/json": {"example": ORDER_EXAMPLE}}},
        404: NOT_FOUND_RESPONSE,
    },
)
async def get_order(
        order_id: str = Path(..., description="ID of the order"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.get_order(order_id)


@router.post(
    "",
    response_model=OrderOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Order - Place a pending order",
    description="Resolves every product, computes the total and stores the order as pending.",
    responses={
        201: {"description": "Order created", "content": {"application/json": {"example": ORDER_EXAMPLE}}},
        400: INVALID_PRODUCT_RESPONSE,
    },
)
async def create_order(
        order_input: OrderCreate,
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.create_order(client_id=order_input.client_id, items=order_input.items)


@router.put(
    "/{order_id}",
    response_model=OrderOutput,
    summary="Update Order - Replace items and/or set status",
    description="New items replace the old ones and the total is recomputed. "
                "The status may be set to any value.",
    responses={400: INVALID_PRODUCT_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def update_order(
        order_input: OrderUpdate,
        order_id: str = Path(..., description="ID of the order to update"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.update_order(order_id, order_input)


@router.patch(
    "/{order_id}/cancel",
    response_model=OrderOutput,
    summary="Cancel Order - Set status to canceled",
    responses={404: NOT_FOUND_RESPONSE},
)
async def cancel_order(
        order_id: str = Path(..., description="ID of the order to cancel"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.set_status(order_id, OrderStatus.CANCELED)


@router.delete(
    "/{order_id}",
    response_model=MessageResponse,
    summary="Delete Order - Remove an order",
    responses={
        200: {
            "description": "Order removed",
            "content": {"application/json": {"example": {"message": "Order deleted successfully"}}},
        },
        404: NOT_FOUND_RESPONSE,
    },
)
async def delete_order(
        order_id: str = Path(..., description="ID of the order to delete"),
        service: AsyncOrderService = Depends(get_order_service),
):
    return await service.delete_order(order_id)
