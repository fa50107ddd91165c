# client_orders/application/dtos/base_dto.py

"""
Base class for custom DTOs.

The API speaks camelCase JSON (``clientId``, ``totalPrice``) while the
Python side keeps snake_case attribute names.
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CustomBaseModel(BaseModel):
    """
    Base model for every DTO of the application.

    Serializes with camelCase aliases, accepts both camelCase and
    snake_case on input, and reads ORM objects through attributes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CustomBaseModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str = Field(..., description="Human readable outcome")


class PaginatedResponse(CustomBaseModel, Generic[T]):
    """
    One page of results with the information needed to fetch the others.
    """
    total: int = Field(..., description="Number of records matching the filters")
    page: int = Field(..., description="Current page (1-based)")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="ceil(total / limit)")
    data: List[T] = Field(default_factory=list)

    @classmethod
    def build(cls, *, total: int, page: int, limit: int, data: List[T]) -> "PaginatedResponse[T]":
        return cls(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit), data=data)
