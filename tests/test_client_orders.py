# tests/test_client_orders.py

import uuid


async def test_requires_a_token(client, customer):
    response = await client.get(f"/clients/{customer['id']}/orders")
    assert response.status_code == 401
    assert response.json()["message"] == "Access denied. No token provided."


async def test_create_and_list_orders_of_a_client(client, customer, products, auth_headers):
    widget = products[0]
    created = await client.post(
        f"/clients/{customer['id']}/orders",
        json={"items": [{"productId": str(widget.id), "quantity": 2}]},
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["totalPrice"] == 20
    assert created.json()["clientId"] == customer["id"]

    listed = await client.get(f"/clients/{customer['id']}/orders", headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()["total"] == 1
    assert listed.json()["data"][0]["id"] == created.json()["id"]


async def test_create_for_unknown_client_is_rejected(client, products, auth_headers):
    response = await client.post(
        f"/clients/{uuid.uuid4()}/orders",
        json={"items": [{"productId": str(products[0].id), "quantity": 1}]},
        headers=auth_headers,
    )
    assert response.status_code == 400


async def test_order_of_another_client_is_not_found(client, customer, products, auth_headers):
    other = (await client.post("/clients", json={"name": "Other", "email": "other@example.com"})).json()
    order = (
        await client.post(
            f"/clients/{customer['id']}/orders",
            json={"items": [{"productId": str(products[0].id), "quantity": 1}]},
            headers=auth_headers,
        )
    ).json()

    url = f"/clients/{other['id']}/orders/{order['id']}"
    assert (await client.get(url, headers=auth_headers)).status_code == 404
    assert (await client.delete(url, headers=auth_headers)).status_code == 404
    assert (await client.get(f"/orders/{order['id']}")).status_code == 200


async def test_update_and_delete_scoped_order(client, customer, products, auth_headers):
    widget, gadget = products
    order = (
        await client.post(
            f"/clients/{customer['id']}/orders",
            json={"items": [{"productId": str(widget.id), "quantity": 1}]},
            headers=auth_headers,
        )
    ).json()
    url = f"/clients/{customer['id']}/orders/{order['id']}"

    updated = await client.put(
        url, json={"items": [{"productId": str(gadget.id), "quantity": 2}]}, headers=auth_headers
    )
    assert updated.status_code == 200
    assert updated.json()["totalPrice"] == 5

    assert (await client.get(url, headers=auth_headers)).json()["totalPrice"] == 5
    assert (await client.delete(url, headers=auth_headers)).status_code == 200
    assert (await client.delete(url, headers=auth_headers)).status_code == 404
