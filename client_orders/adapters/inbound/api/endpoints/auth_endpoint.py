# client_orders/adapters/inbound/api/endpoints/auth_endpoint.py

"""
Endpoints for user registration and login.
"""

import logging
from fastapi import APIRouter, Depends, status

from client_orders.adapters.inbound.api.deps import get_auth_service
from client_orders.application.dtos.base_dto import MessageResponse
from client_orders.application.dtos.user_dto import UserCreate, UserLogin, TokenResponse
from client_orders.application.use_cases.auth_use_cases import AsyncAuthService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register - Create a user account",
    description="Creates a user whose password is stored as a bcrypt hash.",
    responses={
        201: {
            "description": "User created",
            "content": {"application/json": {"example": {"message": "User registered successfully"}}},
        },
        400: {
            "description": "Invalid data or email already in use",
            "content": {
                "application/json": {"example": {"message": "Email already in use", "code": "INVALID_INPUT"}}
            },
        },
    },
)
async def register(
        user_input: UserCreate,
        service: AsyncAuthService = Depends(get_auth_service),
):
    return await service.register_user(user_input)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login - Get an access token",
    description="Verifies email and password and returns a bearer token valid for one hour.",
    responses={
        200: {
            "description": "Access token",
            "content": {"application/json": {"example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}}},
        },
        400: {
            "description": "Unknown email or wrong password",
            "content": {
                "application/json": {"example": {"message": "Invalid credentials", "code": "INVALID_CREDENTIALS"}}
            },
        },
    },
)
async def login(
        credentials: UserLogin,
        service: AsyncAuthService = Depends(get_auth_service),
):
    return await service.login_user(credentials)
