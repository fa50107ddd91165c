# client_orders/adapters/outbound/persistence/models/order_model.py

"""
Order and order item models.

Orders reference clients and products by identifier only: there is no
foreign key to either table, existence is checked by the application when
the order is written. The ``client`` and ``product`` relationships are
read-only lookups used to display the referenced records and resolve to
None when the target no longer exists.
"""

import uuid

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Uuid, CheckConstraint
from sqlalchemy.orm import relationship

from client_orders.adapters.outbound.persistence.models.base_model import Base
from client_orders.adapters.outbound.persistence.models.client_model import utcnow
from client_orders.domain.models.order_domain_model import OrderStatus


class Order(Base):
    """
    Order placed by a client.

    Attributes:
        id: Unique identifier generated by the store
        client_id: Identifier of the owning client
        total_price: Sum of price * quantity, computed server-side
        status: One of OrderStatus values
        created_at: Creation timestamp, never updated
        items: Ordered list of order items
        client: Resolved client (read-only)
    """
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    client_id = Column(Uuid, nullable=False, index=True)
    total_price = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default=OrderStatus.PENDING.value, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
        lazy="selectin",
    )

    client = relationship(
        "Client",
        primaryjoin="foreign(Order.client_id) == Client.id",
        viewonly=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, status={self.status}, total={self.total_price})>"


class OrderItem(Base):
    """
    Line of an order. Owned by its order and deleted with it.
    """
    __tablename__ = "order_items"
    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    product_id = Column(Uuid, nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="items")

    product = relationship(
        "Product",
        primaryjoin="foreign(OrderItem.product_id) == Product.id",
        viewonly=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity})>"
