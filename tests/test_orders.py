# tests/test_orders.py

import uuid

from sqlalchemy import func, select

from client_orders.adapters.outbound.persistence.models import Order, Product


async def create_order(client, customer, items):
    return await client.post("/orders", json={"clientId": customer["id"], "items": items})


async def test_total_is_computed_from_product_prices(client, customer, products):
    widget, gadget = products
    response = await create_order(
        client,
        customer,
        [{"productId": str(widget.id), "quantity": 2}, {"productId": str(gadget.id), "quantity": 3}],
    )
    assert response.status_code == 201
    body = response.json()
    assert body["totalPrice"] == 27.5
    assert body["status"] == "pending"
    assert body["clientId"] == customer["id"]
    assert body["client"] == customer
    assert [item["productId"] for item in body["items"]] == [str(widget.id), str(gadget.id)]
    assert body["items"][0]["product"] == {"id": str(widget.id), "name": "Widget", "price": 10.0}
    assert "createdAt" in body


async def test_caller_supplied_total_is_ignored(client, customer, products):
    widget = products[0]
    response = await client.post(
        "/orders",
        json={"clientId": customer["id"], "items": [{"productId": str(widget.id), "quantity": 2}], "totalPrice": 1},
    )
    assert response.status_code == 201
    assert response.json()["totalPrice"] == 20


async def test_unknown_product_rejects_and_persists_nothing(client, customer, products, db_session):
    missing = str(uuid.uuid4())
    response = await create_order(
        client,
        customer,
        [{"productId": str(products[0].id), "quantity": 1}, {"productId": missing, "quantity": 1}],
    )
    assert response.status_code == 400
    assert response.json()["message"] == f"Invalid product ID: {missing}"
    assert response.json()["code"] == "INVALID_PRODUCT"

    count = (await db_session.execute(select(func.count()).select_from(Order))).scalar_one()
    assert count == 0


async def test_malformed_product_id_counts_as_unknown(client, customer, products):
    response = await create_order(client, customer, [{"productId": "abc", "quantity": 1}])
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid product ID: abc"


async def test_unknown_client_is_rejected(client, products):
    response = await client.post(
        "/orders",
        json={"clientId": str(uuid.uuid4()), "items": [{"productId": str(products[0].id), "quantity": 1}]},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid client ID"


async def test_items_must_be_non_empty_with_positive_quantities(client, customer, products):
    assert (await create_order(client, customer, [])).status_code == 400
    response = await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 0}])
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


async def test_list_paginates_and_filters_by_status(client, customer, products):
    items = [{"productId": str(products[0].id), "quantity": 1}]
    ids = [(await create_order(client, customer, items)).json()["id"] for _ in range(3)]
    await client.patch(f"/orders/{ids[0]}/cancel")

    page = (await client.get("/orders", params={"page": 1, "limit": 2})).json()
    assert page["total"] == 3
    assert page["totalPages"] == 2
    assert len(page["data"]) == 2

    canceled = (await client.get("/orders", params={"status": "canceled"})).json()
    assert [order["id"] for order in canceled["data"]] == [ids[0]]


async def test_list_rejects_unknown_status(client):
    response = await client.get("/orders", params={"status": "lost"})
    assert response.status_code == 400


async def test_update_items_recomputes_total(client, customer, products):
    widget, gadget = products
    order = (await create_order(client, customer, [{"productId": str(widget.id), "quantity": 1}])).json()

    response = await client.put(f"/orders/{order['id']}", json={"items": [{"productId": str(gadget.id), "quantity": 4}]})
    assert response.status_code == 200
    body = response.json()
    assert body["totalPrice"] == 10
    assert [item["productId"] for item in body["items"]] == [str(gadget.id)]
    assert body["createdAt"] == order["createdAt"]


async def test_failed_repricing_leaves_order_untouched(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()

    response = await client.put(f"/orders/{order['id']}", json={"items": [{"productId": str(uuid.uuid4()), "quantity": 1}]})
    assert response.status_code == 400

    unchanged = (await client.get(f"/orders/{order['id']}")).json()
    assert unchanged["totalPrice"] == 10
    assert unchanged["items"] == order["items"]


async def test_update_requires_items_or_status(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()
    response = await client.put(f"/orders/{order['id']}", json={})
    assert response.status_code == 400


async def test_any_status_may_replace_any_other(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()

    delivered = await client.put(f"/orders/{order['id']}", json={"status": "delivered"})
    assert delivered.json()["status"] == "delivered"

    back = await client.put(f"/orders/{order['id']}", json={"status": "pending"})
    assert back.json()["status"] == "pending"


async def test_cancel_sets_canceled(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()
    response = await client.patch(f"/orders/{order['id']}/cancel")
    assert response.status_code == 200
    assert response.json()["status"] == "canceled"


async def test_cancel_unknown_order_is_not_found(client):
    response = await client.patch(f"/orders/{uuid.uuid4()}/cancel")
    assert response.status_code == 404


async def test_deleted_client_resolves_to_null(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()
    await client.delete(f"/clients/{customer['id']}")

    body = (await client.get(f"/orders/{order['id']}")).json()
    assert body["clientId"] == customer["id"]
    assert body["client"] is None


async def test_delete_twice_is_not_found_the_second_time(client, customer, products):
    order = (await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 1}])).json()

    first = await client.delete(f"/orders/{order['id']}")
    assert first.status_code == 200
    assert first.json() == {"message": "Order deleted successfully"}
    assert (await client.delete(f"/orders/{order['id']}")).status_code == 404


async def test_malformed_order_id_is_bad_request(client):
    assert (await client.get("/orders/123")).status_code == 400


async def test_total_keeps_sub_cent_prices(client, customer, db_session):
    screw = Product(name="Screw", price=0.004)
    db_session.add(screw)
    await db_session.commit()

    response = await create_order(client, customer, [{"productId": str(screw.id), "quantity": 1}])
    assert response.status_code == 201
    assert response.json()["totalPrice"] == 0.004


async def test_quantity_beyond_column_range_is_bad_request(client, customer, products):
    response = await create_order(client, customer, [{"productId": str(products[0].id), "quantity": 3_000_000_000}])
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
