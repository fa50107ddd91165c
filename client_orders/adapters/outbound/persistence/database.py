# client_orders/adapters/outbound/persistence/database.py

"""
Async engine and sessions.

One ``AsyncSession`` per unit of work: a request (``get_db``), a seed
run or a test. The session commits when the work finishes and rolls
back when it raises.
"""

import logging
from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker

from client_orders.adapters.configuration.config import settings
from client_orders.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    Pool options for the async engine. SQLite gets the driver defaults,
    server databases get a sized, pre-pinged pool.
    """
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": 20,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Session factory shared by the app, the seed script and the tests."""
    return async_sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


# Credentials stay out of the log
logger.info(f"Database: {make_url(settings.DATABASE_URL).render_as_string(hide_password=True)}")

engine = create_async_engine(settings.DATABASE_URL, echo=False, **engine_options(settings.DATABASE_URL))
AsyncSessionLocal = create_session_factory(engine)


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create every table registered on the ORM metadata that does not exist yet."""
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Session scoped to a ``with`` block, committed on success.

    Example:
        ```python
        async with get_db_context() as db:
            clients = (await db.execute(select(Client))).scalars().all()
        ```
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency providing the request's session."""
    async with get_db_context() as session:
        yield session
