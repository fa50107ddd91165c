# client_orders/adapters/inbound/api/router.py

from fastapi import APIRouter
from client_orders.adapters.inbound.api.endpoints import (
    auth_endpoint,
    client_endpoint,
    client_order_endpoint,
    order_endpoint,
)

api_router = APIRouter()

# Public routes
api_router.include_router(auth_endpoint.router, prefix="/auth", tags=["Auth"])
api_router.include_router(client_endpoint.router, prefix="/clients", tags=["Clients"])
api_router.include_router(order_endpoint.router, prefix="/orders", tags=["Orders"])

# Bearer-protected routes nested under a client
api_router.include_router(client_order_endpoint.router, prefix="/clients", tags=["Client Orders"])
