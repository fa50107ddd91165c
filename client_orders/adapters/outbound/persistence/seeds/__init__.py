# client_orders/adapters/outbound/persistence/seeds/__init__.py

"""
Seeds for database initialization.

This module contains functions to populate the database with a demo
data set: a few clients, a small product catalog and one pending order
per client.
"""

import asyncio
import logging
from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.adapters.outbound.persistence.seeds.demo_data import clear_data, seed_catalog, seed_clients, seed_orders

# Configure logger
logger = logging.getLogger(__name__)


async def run_all_seeds(db: AsyncSession) -> None:
    """
    Execute all seed scripts in order.

    Existing clients, products and orders are removed first, so the
    result is the same every time it runs.

    Args:
        db: Async database session
    """
    logger.info("Starting execution of all seeds")

    # Order matters: orders are priced against the products just inserted
    await clear_data(db)
    clients = await seed_clients(db)
    products = await seed_catalog(db)
    await seed_orders(db, clients, products)

    logger.info("All seeds were executed successfully")


async def main() -> None:
    from client_orders.adapters.outbound.persistence.database import AsyncSessionLocal, create_tables, engine

    await create_tables()

    async with AsyncSessionLocal() as session:
        try:
            await run_all_seeds(session)
        except Exception as e:
            await session.rollback()
            logger.error(f"Error executing seeds: {str(e)}")
            raise

    await engine.dispose()


def run() -> None:
    """
    Entry point of the ``client-orders-seed`` command, also reachable with
    ``python -m client_orders.adapters.outbound.persistence.seeds``.
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    asyncio.run(main())
