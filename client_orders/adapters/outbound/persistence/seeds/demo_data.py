# client_orders/adapters/outbound/persistence/seeds/demo_data.py

"""
Seed script for the demo clients, catalog and orders.
"""

import logging
from typing import List
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.models import Client, Order, OrderItem, Product
from client_orders.domain.models.order_domain_model import OrderLine, OrderStatus
from client_orders.domain.models.product_domain_model import Product as DomainProduct
from client_orders.domain.services.order_pricing_service import OrderPricingService

logger = logging.getLogger(__name__)

# Clients
clients = [
    {"name": "John Doe", "email": "john@example.com"},
    {"name": "Jane Smith", "email": "jane@example.com"},
    {"name": "Alice Brown", "email": "alice@example.com"},
]

# Catalog
products = [
    {"name": "Mechanical Keyboard", "price": 89.90},
    {"name": "Wireless Mouse", "price": 25.50},
    {"name": "27in Monitor", "price": 249.00},
    {"name": "USB-C Hub", "price": 39.99},
    {"name": "Laptop Stand", "price": 19.90},
]

# One order per client: (catalog index, quantity) pairs
orders = [
    [(0, 1), (1, 2)],
    [(2, 1)],
    [(3, 3), (4, 1)],
]


async def clear_data(db: AsyncSession) -> None:
    """Remove every order, product and client."""
    for model in (OrderItem, Order, Product, Client):
        await db.execute(delete(model))
    await db.commit()
    logger.info("Existing clients, products and orders removed")


async def seed_clients(db: AsyncSession) -> List[Client]:
    created = [Client(**data) for data in clients]
    db.add_all(created)
    await db.commit()
    logger.info(f"{len(created)} clients seeded")
    return created


async def seed_catalog(db: AsyncSession) -> List[Product]:
    created = [Product(**data) for data in products]
    db.add_all(created)
    await db.commit()
    logger.info(f"{len(created)} products seeded")
    return created


async def seed_orders(db: AsyncSession, owners: List[Client], catalog: List[Product]) -> List[Order]:
    """
    Create one pending order per client, priced by the same service the
    API uses.
    """
    by_id = {
        product.id: DomainProduct(id=product.id, name=product.name, price=product.price)
        for product in catalog
    }

    async def find_product(product_id):
        return by_id.get(product_id)

    pricing = OrderPricingService(find_product=find_product)

    created = []
    for owner, lines in zip(owners, orders):
        items = [(catalog[index].id, quantity) for index, quantity in lines]
        total_price = await pricing.price_items(OrderLine(product_id=pid, quantity=qty) for pid, qty in items)
        created.append(
            Order(
                client_id=owner.id,
                total_price=total_price,
                status=OrderStatus.PENDING.value,
                items=[
                    OrderItem(position=position, product_id=pid, quantity=qty)
                    for position, (pid, qty) in enumerate(items)
                ],
            )
        )

    db.add_all(created)
    await db.commit()
    logger.info(f"{len(created)} orders seeded")
    return created
