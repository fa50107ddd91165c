# client_orders/adapters/outbound/persistence/models/client_model.py

"""
Client model.

A client is a customer that places orders. Orders point at it by id only.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid
from client_orders.adapters.outbound.persistence.models.base_model import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Client(Base):
    """
    Customer record.

    Attributes:
        id: Unique identifier generated by the store
        name: Client name
        email: Client email, unique across all clients
        created_at: Creation timestamp, used to keep listings in insertion order
    """
    __tablename__ = "clients"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, email={self.email})>"
