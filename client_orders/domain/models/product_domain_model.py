# client_orders/domain/models/product_domain_model.py

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Product:
    """Domain model for a catalog product. Orders price against it at write time."""
    id: UUID
    name: str
    price: float
