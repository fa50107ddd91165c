# client_orders/shared/utils/pagination.py

from dataclasses import dataclass

from fastapi import Query

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageParams:
    """Offset pagination request: 1-based page number and page size."""
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def pagination_params(
        page: int = Query(1, ge=1, description="Page number (default is 1)"),
        limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, description="Items per page (default is 10)"),
) -> PageParams:
    return PageParams(page=page, limit=limit)
