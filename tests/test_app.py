# tests/test_app.py

import logging
import uuid

ORIGIN = "http://example.com"


async def test_swagger_ui_is_served(client):
    response = await client.get("/api-docs")
    assert response.status_code == 200
    assert "swagger-ui" in response.text.lower()


async def test_openapi_declares_bearer_scheme_without_422(client):
    document = (await client.get("/openapi.json")).json()

    schemes = document["components"]["securitySchemes"]
    assert schemes["HTTPBearer"] == {"type": "http", "scheme": "bearer", "description": "JWT obtained from /auth/login"}
    assert "HTTPValidationError" not in document["components"].get("schemas", {})
    for path in document["paths"].values():
        for operation in path.values():
            assert "422" not in operation["responses"]


async def test_success_responses_carry_cors_headers(client):
    response = await client.get("/clients", headers={"Origin": ORIGIN})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


async def test_error_responses_carry_cors_headers(client):
    response = await client.get(f"/clients/{uuid.uuid4()}", headers={"Origin": ORIGIN})
    assert response.status_code == 404
    assert response.json()["message"] == "Client not found"
    assert response.headers["access-control-allow-origin"] == "*"


async def test_auth_failures_carry_cors_headers(client):
    response = await client.get(f"/clients/{uuid.uuid4()}/orders", headers={"Origin": ORIGIN})
    assert response.status_code == 401
    assert response.headers["access-control-allow-origin"] == "*"


async def test_preflight_is_answered(client):
    response = await client.options(
        "/orders",
        headers={"Origin": ORIGIN, "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert "access-control-allow-methods" in response.headers


async def test_error_responses_are_request_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="client_orders.shared.middleware.logging_middleware")
    missing = uuid.uuid4()

    await client.get(f"/clients/{missing}")

    lines = [
        record.getMessage()
        for record in caplog.records
        if record.name == "client_orders.shared.middleware.logging_middleware"
    ]
    assert any(f"GET /clients/{missing} -> 404" in line for line in lines)
