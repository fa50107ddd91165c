# tests/test_clients.py

import uuid


async def test_root_reports_running(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "API is running..."}


async def test_create_then_get_returns_same_client(client):
    created = await client.post("/clients", json={"name": "Jane Smith", "email": "jane@example.com"})
    assert created.status_code == 201
    body = created.json()
    assert set(body) == {"id", "name", "email"}
    uuid.UUID(body["id"])

    fetched = await client.get(f"/clients/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


async def test_create_rejects_missing_or_invalid_fields(client):
    response = await client.post("/clients", json={"email": "not-an-email"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Validation failed"
    assert body["code"] == "INVALID_INPUT"
    fields = {error["field"] for error in body["errors"]}
    assert {"name", "email"} <= fields


async def test_create_rejects_blank_name(client):
    response = await client.post("/clients", json={"name": "   ", "email": "blank@example.com"})
    assert response.status_code == 400


async def test_duplicate_email_is_a_conflict(client, customer):
    response = await client.post("/clients", json={"name": "Other", "email": customer["email"]})
    assert response.status_code == 409
    assert response.json()["code"] == "RESOURCE_ALREADY_EXISTS"


async def test_list_paginates_in_creation_order(client):
    for index in range(3):
        await client.post("/clients", json={"name": f"Client {index}", "email": f"c{index}@example.com"})

    response = await client.get("/clients", params={"page": 2, "limit": 1})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 2
    assert body["limit"] == 1
    assert body["totalPages"] == 3
    assert [c["name"] for c in body["data"]] == ["Client 1"]


async def test_list_defaults_and_empty_result(client):
    body = (await client.get("/clients")).json()
    assert body == {"total": 0, "page": 1, "limit": 10, "totalPages": 0, "data": []}


async def test_list_rejects_out_of_range_pagination(client):
    assert (await client.get("/clients", params={"page": 0})).status_code == 400
    assert (await client.get("/clients", params={"limit": 0})).status_code == 400


async def test_list_accepts_large_page_size(client, customer):
    response = await client.get("/clients", params={"limit": 500})
    assert response.status_code == 200
    assert response.json()["limit"] == 500
    assert response.json()["totalPages"] == 1


async def test_list_filters_by_name_and_email_substring(client):
    await client.post("/clients", json={"name": "Alice Brown", "email": "alice@example.com"})
    await client.post("/clients", json={"name": "Bob Stone", "email": "bob@corp.io"})

    by_name = (await client.get("/clients", params={"name": "ALICE"})).json()
    assert [c["name"] for c in by_name["data"]] == ["Alice Brown"]

    by_email = (await client.get("/clients", params={"email": "corp"})).json()
    assert [c["email"] for c in by_email["data"]] == ["bob@corp.io"]

    # LIKE wildcards are matched literally
    wildcard = (await client.get("/clients", params={"name": "%"})).json()
    assert wildcard["total"] == 0


async def test_get_with_malformed_id_is_bad_request(client):
    response = await client.get("/clients/not-a-uuid")
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid ID format"


async def test_get_unknown_client_is_not_found(client):
    response = await client.get(f"/clients/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json()["message"] == "Client not found"


async def test_update_changes_only_supplied_fields(client, customer):
    response = await client.put(f"/clients/{customer['id']}", json={"name": "Johnny"})
    assert response.status_code == 200
    assert response.json() == {**customer, "name": "Johnny"}


async def test_update_to_taken_email_is_a_conflict(client, customer):
    other = (await client.post("/clients", json={"name": "Other", "email": "other@example.com"})).json()
    response = await client.put(f"/clients/{other['id']}", json={"email": customer["email"]})
    assert response.status_code == 409


async def test_update_unknown_client_is_not_found(client):
    response = await client.put(f"/clients/{uuid.uuid4()}", json={"name": "Ghost"})
    assert response.status_code == 404


async def test_delete_twice_is_not_found_the_second_time(client, customer):
    first = await client.delete(f"/clients/{customer['id']}")
    assert first.status_code == 200
    assert first.json() == {"message": "Client deleted successfully"}

    second = await client.delete(f"/clients/{customer['id']}")
    assert second.status_code == 404
    assert (await client.get(f"/clients/{customer['id']}")).status_code == 404
