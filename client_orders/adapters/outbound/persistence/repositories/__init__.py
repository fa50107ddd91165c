# client_orders/adapters/outbound/persistence/repositories/__init__.py

"""
CRUD (Create, Read, Update, Delete) module.

This module exports classes and instances of the CRUD repositories
for the different system entities, implementing the Repository pattern.
"""

# Import CRUD classes
from client_orders.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_orders.adapters.outbound.persistence.repositories.user_repository import AsyncUserCRUD
from client_orders.adapters.outbound.persistence.repositories.client_repository import AsyncClientCRUD
from client_orders.adapters.outbound.persistence.repositories.product_repository import AsyncProductCRUD
from client_orders.adapters.outbound.persistence.repositories.order_repository import AsyncOrderCRUD

# Import singleton CRUD instances
from client_orders.adapters.outbound.persistence.repositories.user_repository import user_repository
from client_orders.adapters.outbound.persistence.repositories.client_repository import client_repository
from client_orders.adapters.outbound.persistence.repositories.product_repository import product_repository
from client_orders.adapters.outbound.persistence.repositories.order_repository import order_repository

# Export all classes and instances
__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncUserCRUD",
    "AsyncClientCRUD",
    "AsyncProductCRUD",
    "AsyncOrderCRUD",

    # Instances
    "user_repository",
    "client_repository",
    "product_repository",
    "order_repository",
]
