# client_orders/application/use_cases/order_use_cases.py

"""
Service for order management.

Orders are the only place with business logic: whenever items are
written, every product is resolved and the total recomputed before
anything reaches the store.
"""

import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.models import Order
from client_orders.adapters.outbound.persistence.repositories.client_repository import client_repository
from client_orders.adapters.outbound.persistence.repositories.order_repository import order_repository
from client_orders.adapters.outbound.persistence.repositories.product_repository import product_repository
from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.order_dto import OrderItemInput, OrderOutput, OrderUpdate
from client_orders.application.ports.inbound import IOrderUseCase
from client_orders.application.ports.outbound import IClientRepository, IOrderRepository, IProductRepository
from client_orders.domain.exceptions import InvalidInputException, ResourceNotFoundException
from client_orders.domain.models.order_domain_model import OrderStatus
from client_orders.domain.services.order_pricing_service import OrderPricingService
from client_orders.shared.utils.input_validation import InputValidator
from client_orders.shared.utils.pagination import PageParams

logger = logging.getLogger(__name__)


class AsyncOrderService(IOrderUseCase):
    """
    Service for order management.

    Every method accepts an optional ``client_id``: when given, the
    operation is scoped to that client's orders and an order owned by
    someone else is reported as not found.
    """

    def __init__(
            self,
            db_session: AsyncSession,
            orders: IOrderRepository = order_repository,
            clients: IClientRepository = client_repository,
            products: IProductRepository = product_repository,
    ):
        self.db_session = db_session
        self.orders = orders
        self.clients = clients
        self.pricing = OrderPricingService(
            find_product=lambda product_id: products.find_for_pricing(self.db_session, product_id)
        )

    async def list_orders(
            self, params: PageParams, status: Optional[OrderStatus] = None, client_id: Optional[str] = None
    ) -> PaginatedResponse[OrderOutput]:
        owner = InputValidator.require_uuid(client_id) if client_id is not None else None
        total, orders = await self.orders.search(
            self.db_session,
            skip=params.skip,
            limit=params.limit,
            status=status.value if status else None,
            client_id=owner,
        )
        return PaginatedResponse[OrderOutput].build(
            total=total,
            page=params.page,
            limit=params.limit,
            data=[OrderOutput.model_validate(order) for order in orders],
        )

    async def get_order(self, order_id: str, client_id: Optional[str] = None) -> OrderOutput:
        return OrderOutput.model_validate(await self._get_or_404(order_id, client_id))

    async def create_order(self, client_id: str, items: List[OrderItemInput]) -> OrderOutput:
        """
        Create a pending order.

        The client is resolved first, then every item is priced; the order
        is persisted only once both succeed.

        Raises:
            InvalidInputException: If the client does not exist
            InvalidProductException: If an item's product does not exist
        """
        owner = InputValidator.parse_uuid(client_id)
        if owner is None or not await self.clients.get(self.db_session, owner):
            logger.warning(f"Order rejected: client {client_id} not found")
            raise InvalidInputException(detail="Invalid client ID", fields={"clientId": str(client_id)})

        total_price = await self.pricing.price_items(item.to_line() for item in items)

        order = await self.orders.create_with_items(
            self.db_session,
            client_id=owner,
            items=self._resolved_items(items),
            total_price=total_price,
        )
        return OrderOutput.model_validate(order)

    async def update_order(self, order_id: str, data: OrderUpdate, client_id: Optional[str] = None) -> OrderOutput:
        """
        Replace the items (recomputing the total) and/or overwrite the status.

        Pricing runs before any change is written, so a failed lookup
        leaves the order untouched.
        """
        order = await self._get_or_404(order_id, client_id)

        if data.items is not None:
            total_price = await self.pricing.price_items(item.to_line() for item in data.items)
            order = await self.orders.replace_items(
                self.db_session,
                db_obj=order,
                items=self._resolved_items(data.items),
                total_price=total_price,
            )

        if data.status is not None:
            order = await self.orders.set_status(self.db_session, db_obj=order, status=data.status)

        return OrderOutput.model_validate(order)

    async def set_status(self, order_id: str, status: OrderStatus) -> OrderOutput:
        # No transition graph: any status may replace any other
        order = await self._get_or_404(order_id)
        order = await self.orders.set_status(self.db_session, db_obj=order, status=status)
        logger.info(f"Order {order_id} status set to {status.value}")
        return OrderOutput.model_validate(order)

    async def delete_order(self, order_id: str, client_id: Optional[str] = None) -> MessageResponse:
        owner = InputValidator.require_uuid(client_id) if client_id is not None else None
        await self.orders.delete(self.db_session, id=InputValidator.require_uuid(order_id), client_id=owner)
        return MessageResponse(message="Order deleted successfully")

    async def _get_or_404(self, order_id: str, client_id: Optional[str] = None) -> Order:
        owner = InputValidator.require_uuid(client_id) if client_id is not None else None
        order = await self.orders.get_detailed(
            self.db_session, InputValidator.require_uuid(order_id), client_id=owner
        )
        if not order:
            logger.warning(f"Order not found: ID {order_id}")
            raise ResourceNotFoundException(detail="Order not found", resource_id=order_id)
        return order

    @staticmethod
    def _resolved_items(items: List[OrderItemInput]) -> List[tuple]:
        # Only called after pricing succeeded, so every product id parses
        return [(UUID(item.product_id), item.quantity) for item in items]
