# client_orders/adapters/outbound/persistence/models/product_model.py

import uuid

from sqlalchemy import Column, String, Float, CheckConstraint, Uuid
from client_orders.adapters.outbound.persistence.models.base_model import Base


class Product(Base):
    """
    Catalog product. Read-only for the API; orders are priced against it.
    """
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<Product(name={self.name}, price={self.price})>"
