# tests/test_token_service.py

from datetime import timedelta

import pytest
from jose import jwt

from client_orders.adapters.outbound.security.token_service import JWTTokenService
from client_orders.domain.exceptions import AuthenticationException, InvalidTokenException


@pytest.fixture
def service():
    return JWTTokenService("unit-test-secret", expires_minutes=60)


def test_verify_returns_the_subject(service):
    token = service.issue("user-1")
    assert service.verify(token) == "user-1"


def test_default_lifetime_is_one_hour(service):
    claims = service.decode(service.issue("user-1"))
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token(service):
    token = service.issue("user-1", expires_delta=timedelta(seconds=-10))
    with pytest.raises(InvalidTokenException):
        service.verify(token)


def test_malformed_token(service):
    with pytest.raises(AuthenticationException):
        service.verify("not.a.token")


def test_token_without_subject(service):
    token = jwt.encode({"exp": 9999999999}, "unit-test-secret", algorithm="HS256")
    with pytest.raises(InvalidTokenException):
        service.verify(token)


def test_secret_key_is_required():
    with pytest.raises(ValueError):
        JWTTokenService("")
