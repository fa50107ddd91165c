# tests/test_auth.py

from datetime import timedelta

from jose import jwt

from client_orders.adapters.configuration.config import settings
from client_orders.adapters.outbound.persistence.repositories.user_repository import user_repository
from client_orders.adapters.outbound.security.token_service import JWTTokenService

USER = {"name": "Ada Lovelace", "email": "ada@example.com", "password": "engine42"}


async def register(client, **overrides):
    return await client.post("/auth/register", json={**USER, **overrides})


async def test_register_then_login_issues_token_for_the_user(client, db_session):
    response = await register(client)
    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully"}

    login = await client.post("/auth/login", json={"email": USER["email"], "password": USER["password"]})
    assert login.status_code == 200
    token = login.json()["token"]

    user = await user_repository.get_by_email(db_session, USER["email"])
    assert user.password != USER["password"]
    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert claims["sub"] == str(user.id)
    assert claims["exp"] - claims["iat"] == 60 * 60


async def test_register_duplicate_email(client):
    await register(client)
    response = await register(client, name="Someone Else")
    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use"


async def test_register_validates_fields(client):
    response = await register(client, password="123", email="nope")
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["errors"]}
    assert {"password", "email"} <= fields


async def test_login_with_wrong_password_returns_no_token(client):
    await register(client)
    response = await client.post("/auth/login", json={"email": USER["email"], "password": "wrong-password"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid credentials"
    assert "token" not in response.json()


async def test_login_with_unknown_email(client):
    response = await client.post("/auth/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid credentials"


async def test_fresh_token_opens_protected_route(client, customer, auth_headers):
    response = await client.get(f"/clients/{customer['id']}/orders", headers=auth_headers)
    assert response.status_code == 200


async def test_tampered_token_is_rejected(client, customer, auth_headers):
    tampered = {"Authorization": auth_headers["Authorization"][:-2] + "xx"}
    response = await client.get(f"/clients/{customer['id']}/orders", headers=tampered)
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_token_signed_with_another_key_is_rejected(client, customer):
    token = JWTTokenService("another-secret").issue("someone")
    response = await client.get(f"/clients/{customer['id']}/orders", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


async def test_expired_token_is_rejected(client, customer):
    token = JWTTokenService(settings.SECRET_KEY).issue("someone", expires_delta=timedelta(minutes=-1))
    response = await client.get(f"/clients/{customer['id']}/orders", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_wrong_scheme_is_rejected(client, customer, auth_headers):
    token = auth_headers["Authorization"].split(" ", 1)[1]
    response = await client.get(f"/clients/{customer['id']}/orders", headers={"Authorization": f"Basic {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"
