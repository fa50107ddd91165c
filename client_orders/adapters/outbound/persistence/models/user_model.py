# client_orders/adapters/outbound/persistence/models/user_model.py

"""
User model.

Users are the credential records used to obtain bearer tokens. They are
created at registration and read at login.
"""

import uuid

from sqlalchemy import Column, String, DateTime, Uuid
from client_orders.adapters.outbound.persistence.models.base_model import Base
from client_orders.adapters.outbound.persistence.models.client_model import utcnow


class User(Base):
    """
    System user.

    Attributes:
        id: Unique identifier of the user (UUID), used as the token subject
        name: Display name
        email: User email (used for login), unique
        password: bcrypt hash of the password, never the plain text
        created_at: Creation timestamp
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<User(email={self.email})>"
