# client_orders/adapters/outbound/persistence/repositories/order_repository.py

"""
Repository for order operations.

This module implements the repository that performs database operations
related to orders and their items, implementing the IOrderRepository
interface. Every read resolves the referenced client and products.
"""

from typing import Any, List, Optional, Sequence, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select

from client_orders.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from client_orders.adapters.outbound.persistence.models import Order, OrderItem
from client_orders.application.ports.outbound import IOrderRepository
from client_orders.domain.exceptions import ResourceNotFoundException
from client_orders.domain.models.order_domain_model import OrderStatus

ItemRows = Sequence[Tuple[UUID, int]]


class AsyncOrderCRUD(AsyncCRUDBase[Order, dict, dict], IOrderRepository[Order]):
    """
    Async implementation of CRUD repository for the Order entity.

    Orders are written already priced: callers run the pricing service
    before any method here touches the store. Writes return the order
    re-read through ``get_detailed`` so references are always resolved.
    """

    def base_query(self) -> Select:
        return (
            select(Order)
            .options(
                selectinload(Order.client),
                selectinload(Order.items).selectinload(OrderItem.product),
            )
            .order_by(Order.created_at, Order.id)
            .execution_options(populate_existing=True)
        )

    async def get_detailed(self, db: AsyncSession, id: UUID, client_id: Optional[UUID] = None) -> Optional[Order]:
        """
        Get an order with its client and item products resolved.

        Args:
            db: Async database session
            id: Order ID
            client_id: When given, the order must belong to this client

        Returns:
            Order found or None
        """
        query = self.base_query().where(Order.id == id)
        if client_id is not None:
            query = query.where(Order.client_id == client_id)
        async with self._read(f"fetching order {id}"):
            return (await db.execute(query)).scalar_one_or_none()

    async def search(
            self, db: AsyncSession, *, skip: int, limit: int,
            status: Optional[str] = None, client_id: Optional[UUID] = None,
    ) -> Tuple[int, List[Order]]:
        query = self.base_query()
        if status:
            query = query.where(Order.status == status)
        if client_id is not None:
            query = query.where(Order.client_id == client_id)
        return await self.paginate(db, query, skip=skip, limit=limit)

    async def create_with_items(
            self, db: AsyncSession, *, client_id: UUID, items: ItemRows, total_price: float
    ) -> Order:
        """
        Persist a new pending order.

        Args:
            db: Async database session
            client_id: Owning client, already checked to exist
            items: (product_id, quantity) pairs, already priced
            total_price: Total computed by the pricing service
        """
        order = Order(
            client_id=client_id,
            total_price=total_price,
            status=OrderStatus.PENDING.value,
            items=self._build_items(items),
        )
        async with self._write(db, "create"):
            db.add(order)
            await db.commit()

        self.logger.info(f"Order created: {order.id} (client: {client_id}, total: {total_price})")
        return await self.get_detailed(db, order.id)

    async def replace_items(
            self, db: AsyncSession, *, db_obj: Order, items: ItemRows, total_price: float
    ) -> Order:
        """Swap the items of an order and store the recomputed total."""
        async with self._write(db, "update"):
            db_obj.items = self._build_items(items)
            db_obj.total_price = total_price
            await db.commit()

        self.logger.info(f"Order {db_obj.id} items replaced (total: {total_price})")
        return await self.get_detailed(db, db_obj.id)

    async def set_status(self, db: AsyncSession, *, db_obj: Order, status: OrderStatus) -> Order:
        """Overwrite the status of an order, whatever it was before."""
        await self.update(db, db_obj=db_obj, obj_in={"status": status.value})
        return await self.get_detailed(db, db_obj.id)

    async def delete(self, db: AsyncSession, *, id: Any, client_id: Optional[UUID] = None) -> Order:
        """
        Delete an order and its items, optionally scoped to its owning client.

        Raises:
            ResourceNotFoundException: If the order is not found (or belongs to another client)
        """
        order = await self.get_detailed(db, id, client_id=client_id)
        if not order:
            raise ResourceNotFoundException(detail="Order not found", resource_id=id)
        return await self.remove(db, order)

    @staticmethod
    def _build_items(items: ItemRows) -> List[OrderItem]:
        return [
            OrderItem(position=position, product_id=product_id, quantity=quantity)
            for position, (product_id, quantity) in enumerate(items)
        ]


# Public instance to be used by use cases
order_repository = AsyncOrderCRUD(Order)
