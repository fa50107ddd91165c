# client_orders/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import List, Optional, Dict, Any, Generic, Sequence, Tuple, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from client_orders.domain.models.product_domain_model import Product as DomainProduct

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic repository interface."""

    @abstractmethod
    async def get(self, db: AsyncSession, id: Any) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def list(self, db: AsyncSession, *, skip: int = 0, limit: int = 100, **filters) -> List[T]:
        """List entities with optional filters."""
        pass

    @abstractmethod
    async def create(self, db: AsyncSession, *, obj_in: Any) -> T:
        """Create a new entity."""
        pass

    @abstractmethod
    async def update(self, db: AsyncSession, *, db_obj: T, obj_in: Any) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def delete(self, db: AsyncSession, *, id: Any) -> T:
        """Delete an entity by ID."""
        pass


class IClientRepository(IRepository[T], ABC):
    """Client repository interface."""

    @abstractmethod
    async def search(
            self, db: AsyncSession, *, skip: int, limit: int,
            name: Optional[str] = None, email: Optional[str] = None,
    ) -> Tuple[int, List[T]]:
        """Return (total, page) of clients matching the substring filters."""
        pass


class IProductRepository(IRepository[T], ABC):
    """Product repository interface."""

    @abstractmethod
    async def find_for_pricing(self, db: AsyncSession, product_id: Any) -> Optional[DomainProduct]:
        """Resolve a product for pricing, None when the id does not resolve."""
        pass


class IOrderRepository(IRepository[T], ABC):
    """Order repository interface."""

    @abstractmethod
    async def get_detailed(self, db: AsyncSession, id: UUID, client_id: Optional[UUID] = None) -> Optional[T]:
        """Get an order with its client and item products resolved."""
        pass

    @abstractmethod
    async def search(
            self, db: AsyncSession, *, skip: int, limit: int,
            status: Optional[str] = None, client_id: Optional[UUID] = None,
    ) -> Tuple[int, List[T]]:
        """Return (total, page) of orders matching the filters."""
        pass

    @abstractmethod
    async def create_with_items(
            self, db: AsyncSession, *, client_id: UUID, items: Sequence[Tuple[UUID, int]], total_price: float
    ) -> T:
        """Persist a priced order with its items."""
        pass

    @abstractmethod
    async def replace_items(
            self, db: AsyncSession, *, db_obj: T, items: Sequence[Tuple[UUID, int]], total_price: float
    ) -> T:
        """Replace the items and total price of an order."""
        pass


class IUserRepository(IRepository[T], ABC):
    """User repository interface."""

    @abstractmethod
    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[T]:
        """Get user by email."""
        pass

    @abstractmethod
    async def create_with_password(self, db: AsyncSession, *, obj_in: Any) -> T:
        """Create user with hashed password."""
        pass

    @abstractmethod
    async def authenticate(self, db: AsyncSession, *, email: str, password: str) -> T:
        """Return the user when the credentials match."""
        pass


class IPasswordHasher(ABC):
    """One-way password hashing interface."""

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """Return the hash of a plain text password."""
        pass

    @abstractmethod
    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Check a plain text password against a stored hash."""
        pass


class ITokenService(ABC):
    """Token handling interface."""

    @abstractmethod
    def issue(self, subject: str) -> str:
        """Create a signed access token for the subject."""
        pass

    @abstractmethod
    def verify(self, token: str) -> str:
        """Verify a token and return its subject."""
        pass

    @abstractmethod
    def decode(self, token: str) -> Dict[str, Any]:
        """Verify a token and return all of its claims."""
        pass
