# client_orders/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List, Optional

from client_orders.application.dtos.base_dto import MessageResponse, PaginatedResponse
from client_orders.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from client_orders.application.dtos.order_dto import OrderItemInput, OrderOutput, OrderUpdate
from client_orders.application.dtos.user_dto import UserCreate, UserLogin, TokenResponse
from client_orders.domain.models.order_domain_model import OrderStatus
from client_orders.shared.utils.pagination import PageParams


class IAuthUseCase(ABC):
    """Interface for registration and login."""

    @abstractmethod
    async def register_user(self, user_input: UserCreate) -> MessageResponse:
        """Register a new user."""
        pass

    @abstractmethod
    async def login_user(self, credentials: UserLogin) -> TokenResponse:
        """Authenticate a user and return an access token."""
        pass


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def list_clients(
            self, params: PageParams, name: Optional[str] = None, email: Optional[str] = None
    ) -> PaginatedResponse[ClientOutput]:
        """List clients with pagination and substring filters."""
        pass

    @abstractmethod
    async def get_client(self, client_id: str) -> ClientOutput:
        """Get a client by ID."""
        pass

    @abstractmethod
    async def create_client(self, data: ClientCreate) -> ClientOutput:
        """Create a client."""
        pass

    @abstractmethod
    async def update_client(self, client_id: str, data: ClientUpdate) -> ClientOutput:
        """Update name and/or email of a client."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> MessageResponse:
        """Delete a client."""
        pass


class IOrderUseCase(ABC):
    """Interface for order-related use cases."""

    @abstractmethod
    async def list_orders(
            self, params: PageParams, status: Optional[OrderStatus] = None, client_id: Optional[str] = None
    ) -> PaginatedResponse[OrderOutput]:
        """List orders with pagination and an optional status filter."""
        pass

    @abstractmethod
    async def get_order(self, order_id: str, client_id: Optional[str] = None) -> OrderOutput:
        """Get an order by ID."""
        pass

    @abstractmethod
    async def create_order(self, client_id: str, items: List[OrderItemInput]) -> OrderOutput:
        """Create a priced order for an existing client."""
        pass

    @abstractmethod
    async def update_order(self, order_id: str, data: OrderUpdate, client_id: Optional[str] = None) -> OrderOutput:
        """Replace items (recomputing the total) and/or overwrite the status."""
        pass

    @abstractmethod
    async def set_status(self, order_id: str, status: OrderStatus) -> OrderOutput:
        """Overwrite the status of an order."""
        pass

    @abstractmethod
    async def delete_order(self, order_id: str, client_id: Optional[str] = None) -> MessageResponse:
        """Delete an order."""
        pass
