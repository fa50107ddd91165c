# client_orders/application/dtos/order_dto.py

"""
Schemas for orders.

Requests carry (productId, quantity) pairs only: the total price is
always computed server-side. Responses resolve the referenced client
and products for display.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, model_validator

from client_orders.application.dtos.base_dto import CustomBaseModel
from client_orders.domain.models.order_domain_model import OrderLine, OrderStatus


# order_items.quantity is a 32-bit INTEGER column
MAX_QUANTITY = 2**31 - 1


class OrderItemInput(CustomBaseModel):
    """Requested product and quantity."""
    product_id: str = Field(..., description="The product ID.")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Quantity of the product (at least 1).")

    def to_line(self) -> OrderLine:
        return OrderLine(product_id=self.product_id, quantity=self.quantity)


class OrderItemsInput(CustomBaseModel):
    """Items of an order created under a client, or replacing the items of an order."""
    items: List[OrderItemInput] = Field(..., min_length=1, description="Ordered, non-empty list of items")


class OrderCreate(OrderItemsInput):
    """Schema for creating an order."""
    client_id: str = Field(..., description="The ID of the client placing the order.")


class OrderUpdate(CustomBaseModel):
    """
    Schema for updating an order: new items (the total is recomputed),
    a new status, or both.
    """
    items: Optional[List[OrderItemInput]] = Field(None, min_length=1)
    status: Optional[OrderStatus] = Field(None, description="New order status.")

    @model_validator(mode="after")
    def require_a_change(self):
        if self.items is None and self.status is None:
            raise ValueError("Provide items and/or status to update")
        return self


class ClientSummary(CustomBaseModel):
    id: UUID
    name: str
    email: str


class ProductSummary(CustomBaseModel):
    id: UUID
    name: str
    price: float


class OrderItemOutput(CustomBaseModel):
    product_id: UUID
    quantity: int
    product: Optional[ProductSummary] = Field(None, description="Resolved product, null if it no longer exists")


class OrderOutput(CustomBaseModel):
    """
    Schema for returning an order with its references resolved.
    """
    id: UUID
    client_id: UUID
    client: Optional[ClientSummary] = Field(None, description="Resolved client, null if it no longer exists")
    items: List[OrderItemOutput]
    total_price: float
    status: OrderStatus
    created_at: datetime
