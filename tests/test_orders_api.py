from uuid import uuid4

from conftest import place_order


def test_add_order_requires_phone_and_order(client):
    resp = client.post("/api/order/add-order", json={"name": "Asha", "order": {"totalAmount": 10}})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Phone and order details are required."

    resp = client.post("/api/order/add-order", json={"name": "Asha", "phone": "9876543210"})
    assert resp.status_code == 400


def test_add_order_requires_name_for_new_customer(client):
    resp = place_order(client, name=None)
    assert resp.status_code == 400
    assert client.get("/api/order/get-all-orders").status_code == 404
    assert client.get("/api/customer/get-all-customer").status_code == 404


def test_add_order_requires_total_amount(client):
    resp = client.post("/api/order/add-order", json={"name": "Asha", "phone": "1", "order": {"status": "Pending"}})
    assert resp.status_code == 400


def test_add_order_creates_customer(client):
    resp = place_order(client, total=200, due=50)
    assert resp.status_code == 201
    body = resp.json()
    order, customer = body["order"], body["customer"]

    assert order["customer"] == customer["id"]
    assert order["totalAmount"] == 200
    assert order["dueAmount"] == 50
    assert order["paidAmount"] == 150
    assert order["modeOfPayment"] == "Cash"
    assert order["items"] == []
    assert customer["orders"] == [order["id"]]
    assert customer["advancedAmount"] == 0
    # New customers are seeded with the order amounts before the order is added
    assert customer["totalAmountSpent"] == 400
    assert customer["dueAmount"] == 100


def test_add_order_existing_customer_updates_totals(client):
    client.post("/api/customer/add-customer", json={
        "name": "Asha", "phone": "9876543210", "totalAmountSpent": 500, "dueAmount": 30,
    })

    resp = place_order(client, total=200, due=50)
    customer = resp.json()["customer"]
    assert len(customer["orders"]) == 1
    assert customer["totalAmountSpent"] == 700
    assert customer["dueAmount"] == 80


def test_add_order_is_not_idempotent(client):
    client.post("/api/customer/add-customer", json={"name": "Asha", "phone": "9876543210"})

    place_order(client, total=200, due=50)
    resp = place_order(client, total=200, due=50)
    customer = resp.json()["customer"]
    assert len(customer["orders"]) == 2
    assert customer["totalAmountSpent"] == 400
    assert customer["dueAmount"] == 100
    assert len(client.get("/api/order/get-all-orders").json()["orders"]) == 2


def test_add_order_item(client):
    order_id = place_order(client).json()["order"]["id"]
    resp = client.post("/api/order/add-orderitem", json={
        "order": order_id, "itemName": "Headphones", "quantity": 2, "price": 75, "total": 150,
    })
    assert resp.status_code == 201
    item = resp.json()["item"]
    assert item["order"] == order_id
    assert item["itemName"] == "Headphones"
    assert item["quantity"] == 2
    assert item["total"] == 150

    # The order's item list is not back-linked
    order = client.get("/api/order/get-order-by-id", params={"id": order_id}).json()["order"]
    assert order["items"] == []


def test_add_order_item_accepts_unknown_order(client):
    resp = client.post("/api/order/add-orderitem", json={
        "order": str(uuid4()), "itemName": "Cable", "quantity": 1, "price": 5, "total": 5,
    })
    assert resp.status_code == 201


def test_add_order_item_does_not_touch_stock(client):
    client.post("/api/inventory/add-item", json={"itemName": "Cable", "itemPrice": 5, "itemInventory": 10})
    order_id = place_order(client).json()["order"]["id"]
    client.post("/api/order/add-orderitem", json={
        "order": order_id, "itemName": "Cable", "quantity": 3, "price": 5, "total": 15,
    })
    item = client.post("/api/inventory/get-item", json={"itemName": "Cable"}).json()["items"][0]
    assert item["itemInventory"] == 10
    assert item["totalSold"] == 0


def test_add_order_item_requires_all_fields(client):
    base = {"order": str(uuid4()), "itemName": "Cable", "quantity": 1, "price": 5, "total": 5}
    for field in base:
        payload = {k: v for k, v in base.items() if k != field}
        resp = client.post("/api/order/add-orderitem", json=payload)
        assert resp.status_code == 400
    assert client.post("/api/order/add-orderitem", json={**base, "quantity": 0}).status_code == 400


def test_add_order_item_malformed_order_id(client):
    resp = client.post("/api/order/add-orderitem", json={
        "order": "nope", "itemName": "Cable", "quantity": 1, "price": 5, "total": 5,
    })
    assert resp.status_code == 400


def test_get_all_orders_empty_is_not_found(client):
    resp = client.get("/api/order/get-all-orders")
    assert resp.status_code == 404
    assert resp.json()["message"] == "No orders found"


def test_get_customer_orders_populates_orders(client):
    first = place_order(client, total=100, due=10).json()["order"]
    place_order(client, total=40, due=0)

    resp = client.post("/api/order/get-customer-order", json={"phone": "9876543210"})
    assert resp.status_code == 200
    body = resp.json()
    assert [o["totalAmount"] for o in body["orders"]] == [100, 40]
    assert body["orders"][0]["id"] == first["id"]
    assert body["customer"]["orders"] == body["orders"]


def test_get_customer_orders_errors(client):
    assert client.post("/api/order/get-customer-order", json={}).status_code == 400
    assert client.post("/api/order/get-customer-order", json={"phone": "0000"}).status_code == 404


def test_get_order_by_id(client):
    order_id = place_order(client, remarks="gift wrap").json()["order"]["id"]

    resp = client.get("/api/order/get-order-by-id", params={"id": order_id})
    assert resp.status_code == 200
    assert resp.json()["order"]["remarks"] == "gift wrap"

    assert client.get("/api/order/get-order-by-id").status_code == 400
    assert client.get("/api/order/get-order-by-id", params={"id": str(uuid4())}).status_code == 404
    assert client.get("/api/order/get-order-by-id", params={"id": "bad"}).status_code == 500


def test_checkout_creates_order_and_lines(client):
    resp = client.post("/api/order/checkout", json={
        "name": "Asha",
        "phone": "9876543210",
        "order": {"totalAmount": 35, "dueAmount": 0, "paidAmount": 35, "modeOfPayment": "UPI"},
        "lines": [
            {"itemName": "Pen", "quantity": 3, "price": 10},
            {"itemName": "Notebook", "quantity": 1, "price": 5},
        ],
    })
    assert resp.status_code == 201
    body = resp.json()
    assert [(i["itemName"], i["total"]) for i in body["items"]] == [("Pen", 30), ("Notebook", 5)]
    assert all(i["order"] == body["order"]["id"] for i in body["items"])
    assert body["customer"]["orders"] == [body["order"]["id"]]


def test_checkout_rejects_bad_line_without_writing(client):
    resp = client.post("/api/order/checkout", json={
        "name": "Asha",
        "phone": "9876543210",
        "order": {"totalAmount": 10},
        "lines": [{"itemName": "Pen", "quantity": 0, "price": 10}],
    })
    assert resp.status_code == 400
    assert client.get("/api/order/get-all-orders").status_code == 404

    resp = client.post("/api/order/checkout", json={
        "name": "Asha", "phone": "9876543210", "order": {"totalAmount": 10}, "lines": ["Pen"],
    })
    assert resp.status_code == 400


def test_add_order_rejects_negative_amounts(client):
    assert place_order(client, total=-300, due=0).status_code == 400
    assert place_order(client, total=300, due=-80).status_code == 400
    assert place_order(client, discount=-1).status_code == 400
    assert client.get("/api/customer/get-all-customer").status_code == 404
    assert client.get("/api/order/get-all-orders").status_code == 404


def test_add_order_amounts_rounded_to_cents(client):
    client.post("/api/customer/add-customer", json={"name": "Asha", "phone": "9876543210"})

    place_order(client, total=0.004, due=0)
    resp = place_order(client, total=10.006, due=0)
    assert resp.json()["order"]["totalAmount"] == 10.01

    body = client.post("/api/order/get-customer-order", json={"phone": "9876543210"}).json()
    assert [o["totalAmount"] for o in body["orders"]] == [0, 10.01]
    assert body["customer"]["totalAmountSpent"] == 10.01


def test_timestamps_carry_utc_offset(client):
    order = place_order(client).json()["order"]
    assert order["createdAt"].endswith("+00:00")
    assert order["updatedAt"].endswith("+00:00")
