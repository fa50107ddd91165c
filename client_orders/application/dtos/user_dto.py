# client_orders/application/dtos/user_dto.py

"""
Schemas for user data: registration, login and token.
"""

from pydantic import EmailStr, Field, field_validator

from client_orders.application.dtos.base_dto import CustomBaseModel
from client_orders.shared.utils.input_validation import InputValidator


class UserCreate(CustomBaseModel):
    """
    Schema for registering a new user.
    """
    name: str = Field(..., description="User name")
    email: EmailStr = Field(..., description="User email. Must be valid and unique.")
    password: str = Field(..., description="User password, at least 6 characters.")

    @field_validator("name")
    def validate_name(cls, v):
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return InputValidator.sanitize_name(v)

    @field_validator("password")
    def validate_password(cls, v):
        is_valid, error_msg = InputValidator.validate_password(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserLogin(CustomBaseModel):
    """
    Schema for login credentials.
    """
    email: EmailStr = Field(..., description="Registered email")
    password: str = Field(..., min_length=1, description="Password")


class TokenResponse(CustomBaseModel):
    """
    Bearer token returned by a successful login.
    """
    token: str = Field(..., description="JWT access token, valid for one hour")
