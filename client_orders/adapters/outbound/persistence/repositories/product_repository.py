# client_orders/adapters/outbound/persistence/repositories/product_repository.py

"""
Repository for product lookups.

Products are read-only for the API; this repository resolves them
for order pricing and is used by the seed script to fill the catalog.
"""

from typing import Any, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_orders.adapters.outbound.persistence.models import Product
from client_orders.application.ports.outbound import IProductRepository
from client_orders.domain.models.product_domain_model import Product as DomainProduct
from client_orders.shared.utils.input_validation import InputValidator


class AsyncProductCRUD(AsyncCRUDBase[Product, dict, dict], IProductRepository[Product]):
    """Async implementation of CRUD repository for the Product entity."""

    async def find_for_pricing(self, db: AsyncSession, product_id: Any) -> Optional[DomainProduct]:
        """
        Resolve a product identifier as received in an order item.

        Malformed identifiers do not resolve, exactly like unknown ones.
        """
        parsed = InputValidator.parse_uuid(product_id)
        if parsed is None:
            return None

        product = await self.get(db, parsed)
        return self.to_domain(product) if product else None

    def to_domain(self, db_model: Product) -> DomainProduct:
        """
        Convert database model to domain model.

        Args:
            db_model: Product ORM model

        Returns:
            Domain model of product
        """
        return DomainProduct(id=db_model.id, name=db_model.name, price=db_model.price)


# Public instance to be used by use cases
product_repository = AsyncProductCRUD(Product)
