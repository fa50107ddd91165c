# client_orders/adapters/outbound/persistence/repositories/base_repository.py

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Tuple, Type, TypeVar, Union
from sqlalchemy import func, inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from sqlalchemy.future import select
from sqlalchemy.sql import Select
from pydantic import BaseModel
import logging

from client_orders.adapters.outbound.persistence.models.base_model import Base
from client_orders.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException
)

# ORM model handled by a repository
ModelType = TypeVar("ModelType", bound=Base)
# Input DTOs accepted by create/update
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")


def like_pattern(value: str) -> str:
    """Build a LIKE pattern matching ``value`` as a literal substring (escape char is backslash)."""
    escaped = value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class AsyncCRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Async base class for implementing the Repository pattern.

    Reads go through ``_read`` and writes through ``_write``: both turn
    SQLAlchemy failures into domain exceptions, and writes roll the
    session back before raising.

    Attributes:
        model: SQLAlchemy model class
        logger: Logger named after the model
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model
        self.name = model.__name__
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    def base_query(self) -> Select:
        """Query every listing starts from. Subclasses add ordering or eager loads."""
        return select(self.model)

    @asynccontextmanager
    async def _read(self, what: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.logger.error(f"Error {what}: {e}")
            raise DatabaseOperationException(detail=f"Error {what}", original_error=e)

    @asynccontextmanager
    async def _write(self, db: AsyncSession, action: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            await db.rollback()
            self._raise_integrity_error(e, action=action)
        except SQLAlchemyError as e:
            await db.rollback()
            self.logger.error(f"Error on {action} {self.name}: {e}")
            raise DatabaseOperationException(detail=f"Error on {action} {self.name}", original_error=e)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Get an entity by ID.

        Returns:
            Entity found or None if it doesn't exist
        """
        return await self.get_by_field(db, "id", id)

    async def get_by_field(self, db: AsyncSession, field_name: str, value: Any) -> Optional[ModelType]:
        async with self._read(f"fetching {self.name} by {field_name}"):
            result = await db.execute(select(self.model).where(getattr(self.model, field_name) == value))
            return result.scalar_one_or_none()

    async def paginate(self, db: AsyncSession, query: Select, *, skip: int, limit: int) -> Tuple[int, List[ModelType]]:
        """
        Count the rows matched by ``query`` and fetch one page of them.

        Args:
            db: Async database session
            query: Filtered select over the model
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple (total, entities of the page)
        """
        async with self._read(f"listing {self.name}s"):
            count_query = select(func.count()).select_from(query.order_by(None).subquery())
            total = (await db.execute(count_query)).scalar_one()

            result = await db.execute(query.offset(skip).limit(limit))
            return total, list(result.scalars().all())

    async def list(self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **filters) -> List[ModelType]:
        """One page of entities, with optional equality filters on columns."""
        query = self.base_query()
        for field, value in filters.items():
            if value is not None and field in self._columns():
                query = query.where(getattr(self.model, field) == value)
        _, entities = await self.paginate(db, query, skip=skip, limit=limit)
        return entities

    async def create(self, db: AsyncSession, *, obj_in: Union[CreateSchemaType, Dict[str, Any]]) -> ModelType:
        """
        Create a new entity.

        Raises:
            ResourceAlreadyExistsException: If a uniqueness constraint is violated
            DatabaseOperationException: If another database error occurs
        """
        data = obj_in.model_dump() if isinstance(obj_in, BaseModel) else dict(obj_in)
        db_obj = self.model(**data)

        async with self._write(db, "create"):
            db.add(db_obj)
            await db.commit()
            await db.refresh(db_obj)

        self.logger.info(f"{self.name} created with ID: {db_obj.id}")
        return db_obj

    async def update(
            self, db: AsyncSession, *, db_obj: ModelType, obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Update an existing entity with the column fields present in ``obj_in``.

        Raises:
            ResourceAlreadyExistsException: If the update violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        changes = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        columns = self._columns()

        async with self._write(db, "update"):
            for field, value in changes.items():
                if field in columns:
                    setattr(db_obj, field, value)
            await db.commit()
            await db.refresh(db_obj)

        self.logger.info(f"{self.name} with ID {db_obj.id} updated")
        return db_obj

    async def delete(self, db: AsyncSession, *, id: Any) -> ModelType:
        """
        Remove an entity by ID.

        Raises:
            ResourceNotFoundException: If the entity doesn't exist
        """
        obj = await self.get(db, id)
        if not obj:
            raise ResourceNotFoundException(detail=f"{self.name} not found", resource_id=id)
        return await self.remove(db, obj)

    async def remove(self, db: AsyncSession, obj: ModelType) -> ModelType:
        """Delete an already loaded entity."""
        async with self._write(db, "delete"):
            await db.delete(obj)
            await db.commit()

        self.logger.info(f"{self.name} with ID {obj.id} removed")
        return obj

    def _columns(self) -> set:
        return {attr.key for attr in inspect(self.model).mapper.column_attrs}

    def _raise_integrity_error(self, error: IntegrityError, action: str) -> None:
        message = str(error).lower()
        if "unique" in message or "duplicate" in message:
            self.logger.warning(f"Uniqueness violation on {action} {self.name}: {error}")
            raise ResourceAlreadyExistsException(detail=f"{self.name} with these data already exists")
        self.logger.error(f"Integrity error on {action} {self.name}: {error}")
        raise DatabaseOperationException(detail=f"Error on {action} {self.name}", original_error=error)
