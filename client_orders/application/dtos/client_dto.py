# client_orders/application/dtos/client_dto.py

"""
Schemas for client data.

This module defines the Pydantic DTOs for validation and serialization
of client data.
"""

from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from client_orders.application.dtos.base_dto import CustomBaseModel
from client_orders.shared.utils.input_validation import InputValidator


def _check_name(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    is_valid, error_msg = InputValidator.validate_name(value)
    if not is_valid:
        raise ValueError(error_msg)
    return InputValidator.sanitize_name(value)


class ClientCreate(CustomBaseModel):
    """
    Schema for creating a client.
    """
    name: str = Field(..., description="The name of the client.", examples=["John Doe"])
    email: EmailStr = Field(..., description="The email of the client.", examples=["john.doe@example.com"])

    @field_validator("name")
    def validate_name(cls, v):
        return _check_name(v)


class ClientUpdate(CustomBaseModel):
    """
    Schema for updating a client. Only the fields sent are changed.
    """
    name: Optional[str] = Field(None, description="Updated name of the client.")
    email: Optional[EmailStr] = Field(None, description="Updated email of the client.")

    @field_validator("name")
    def validate_name(cls, v):
        return _check_name(v)


class ClientOutput(CustomBaseModel):
    """
    Schema for returning client data.
    """
    id: UUID = Field(..., description="Unique identifier of the client")
    name: str
    email: str
