from fastapi.testclient import TestClient

from pharmacare.core.exceptions import format_validation_errors
from pharmacare.db.store import EntityStore
from pharmacare.main import create_app

NEW_MEDICATION = {
    "name": "Cetirizine",
    "category": "antihistamine",
    "description": "Allergy relief",
    "dosage": "10mg",
    "price": 4.2,
    "current_stock": 30,
    "minimum_stock": 10,
    "unit": "box",
    "supplier_id": 1,
}


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_security_headers(client):
    response = client.get("/api/medications")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_list_medications(client):
    response = client.get("/api/medications")
    assert response.status_code == 200
    body = response.json()
    assert [m["name"] for m in body][:2] == ["Amoxicillin", "Lisinopril"]
    assert body[0]["price"] == 12.5


def test_medication_crud(client):
    created = client.post("/api/medications", json=NEW_MEDICATION)
    assert created.status_code == 201
    medication = created.json()
    assert medication["id"] == 6
    assert medication["price"] == 4.2

    assert client.get(f"/api/medications/{medication['id']}").json() == medication

    updated = client.put(f"/api/medications/{medication['id']}", json={"current_stock": 2})
    assert updated.status_code == 200
    assert updated.json()["current_stock"] == 2
    assert updated.json()["name"] == "Cetirizine"

    assert client.delete(f"/api/medications/{medication['id']}").status_code == 204
    missing = client.get(f"/api/medications/{medication['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Medication not found"}


def test_create_medication_validation_error(client):
    payload = dict(NEW_MEDICATION)
    del payload["name"]
    payload["category"] = "candy"

    response = client.post("/api/medications", json=payload)

    assert response.status_code == 400
    message = response.json()["message"]
    assert message.startswith("Validation error:")
    assert '"body.name"' in message
    assert '"body.category"' in message
    assert len(client.get("/api/medications").json()) == 5


def test_negative_stock_rejected(client):
    response = client.put("/api/medications/1", json={"current_stock": -1})
    assert response.status_code == 400
    assert "current_stock" in response.json()["message"]


def test_update_unknown_medication(client):
    response = client.put("/api/medications/999", json={"current_stock": 1})
    assert response.status_code == 404


def test_low_stock_endpoint(client):
    response = client.get("/api/medications/low-stock")
    assert response.status_code == 200
    rows = response.json()
    assert [r["name"] for r in rows] == ["Amoxicillin", "Lisinopril", "Atorvastatin", "Metformin"]
    assert rows[0]["supplier"]["name"] == "MedSupply Inc."
    assert rows[1]["supplier"]["name"] == "PharmaDirect"


def test_low_stock_endpoint_after_supplier_deleted(client):
    assert client.delete("/api/suppliers/2").status_code == 204

    rows = client.get("/api/medications/low-stock").json()

    lisinopril = next(r for r in rows if r["name"] == "Lisinopril")
    assert lisinopril["supplier_id"] == 2
    assert lisinopril["supplier"]["id"] == 0
    assert lisinopril["supplier"]["name"] == "Unknown"


def test_search_endpoint(client):
    assert [m["name"] for m in client.get("/api/medications/search", params={"q": "amox"}).json()] == ["Amoxicillin"]
    assert client.get("/api/medications/search", params={"q": "zzz-no-match"}).json() == []


def test_supplier_and_customer_crud(client):
    supplier = client.post("/api/suppliers", json={"name": "New Vendor", "phone": "555-0000"})
    assert supplier.status_code == 201
    supplier_id = supplier.json()["id"]
    assert supplier_id == 4
    assert client.put(f"/api/suppliers/{supplier_id}", json={"notes": "Net 30"}).json()["notes"] == "Net 30"
    assert client.delete(f"/api/suppliers/{supplier_id}").status_code == 204
    assert client.delete(f"/api/suppliers/{supplier_id}").status_code == 404

    customer = client.post("/api/customers", json={"name": "Ann Lee", "phone": "555-1111", "email": "ann@example.com"})
    assert customer.status_code == 201
    assert customer.json()["email"] == "ann@example.com"
    bad = client.post("/api/customers", json={"name": "Ann Lee", "phone": "555-1111", "email": "not-an-email"})
    assert bad.status_code == 400


def test_customer_orders(client):
    response = client.get("/api/customers/1/orders")
    assert response.status_code == 200
    assert [o["order_number"] for o in response.json()] == ["ORD-5392"]
    assert client.get("/api/customers/99/orders").status_code == 404


def test_create_order(client):
    payload = {
        "order": {"customer_id": 1, "notes": "Walk-in"},
        "items": [
            {"medication_id": 1, "quantity": 2, "unit_price": 12.50},
            {"medication_id": 5, "quantity": 5, "unit_price": 6.99},
        ],
    }

    response = client.post("/api/orders", json=payload)

    assert response.status_code == 201
    order = response.json()
    assert order["total_amount"] == 59.95
    assert order["status"] == "pending"

    detail = client.get(f"/api/orders/{order['id']}").json()
    assert [i["total"] for i in detail["items"]] == [25.0, 34.95]
    assert detail["items"][0]["medication"]["name"] == "Amoxicillin"
    assert detail["customer"]["name"] == "John Smith"


def test_create_order_rejects_bad_line_without_writing(client):
    payload = {
        "order": {"customer_id": 1},
        "items": [
            {"medication_id": 1, "quantity": 1, "unit_price": 1},
            {"medication_id": 999, "quantity": 1, "unit_price": 1},
        ],
    }

    response = client.post("/api/orders", json=payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Medication 999 does not exist"
    assert len(client.get("/api/orders").json()) == 4


def test_create_order_requires_items(client):
    response = client.post("/api/orders", json={"order": {"customer_id": 1}, "items": []})
    assert response.status_code == 400
    response = client.post(
        "/api/orders",
        json={"order": {"customer_id": 1}, "items": [{"medication_id": 1, "quantity": 0, "unit_price": 1}]},
    )
    assert response.status_code == 400


def test_update_unknown_order_is_not_found(client):
    response = client.put("/api/orders/999", json={"customer_id": 999})
    assert response.status_code == 404
    assert response.json()["message"] == "Order not found"

    response = client.put("/api/orders/1", json={"customer_id": 999})
    assert response.status_code == 400
    assert response.json()["message"] == "Customer 999 does not exist"


def test_oversized_price_or_quantity_is_rejected(client):
    for line in (
        {"medication_id": 1, "quantity": 1, "unit_price": 1e27},
        {"medication_id": 1, "quantity": 1, "unit_price": 1.005},
        {"medication_id": 1, "quantity": 10 ** 30, "unit_price": 1},
    ):
        response = client.post("/api/orders", json={"order": {"customer_id": 1}, "items": [line]})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Validation error:")

    supply = client.post(
        "/api/supply-orders",
        json={"order": {"supplier_id": 1}, "items": [{"medication_id": 1, "quantity": 1, "unit_price": 1e27}]},
    )
    assert supply.status_code == 400
    assert client.put("/api/medications/1", json={"price": 1e27}).status_code == 400
    assert len(client.get("/api/orders").json()) == 4


def test_unexpected_error_returns_generic_message(seeded_store, monkeypatch):
    from pharmacare.services import dashboard_service

    def broken(store, now=None):
        raise RuntimeError("store exploded")

    monkeypatch.setattr(dashboard_service, "get_dashboard_stats", broken)
    client = TestClient(create_app(store=seeded_store), raise_server_exceptions=False)

    response = client.get("/api/dashboard/stats")

    assert response.status_code == 500
    assert response.json() == {"message": "An internal error occurred. Please try again later."}


def test_recent_orders(client):
    response = client.get("/api/orders/recent", params={"limit": 3})
    assert [o["order_number"] for o in response.json()] == ["ORD-5392", "ORD-5391", "ORD-5390"]
    assert len(client.get("/api/orders/recent").json()) == 4


def test_order_status(client):
    response = client.patch("/api/orders/2/status", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["status"] == "completed"

    assert client.patch("/api/orders/2/status", json={"status": "shipped"}).status_code == 400
    assert client.patch("/api/orders/99/status", json={"status": "completed"}).status_code == 404


def test_delete_order(client):
    assert client.delete("/api/orders/1").status_code == 204
    assert client.get("/api/orders/1").status_code == 404
    assert client.get("/api/orders/1").json() == {"message": "Order not found"}


def test_supply_order_receipt_restocks(client):
    before = client.get("/api/medications/1").json()["current_stock"]

    response = client.patch("/api/supply-orders/1/status", json={"status": "received"})

    assert response.status_code == 200
    assert response.json()["received_date"] is not None
    assert client.get("/api/medications/1").json()["current_stock"] == before + 50


def test_create_supply_order(client):
    payload = {
        "order": {"supplier_id": 2},
        "items": [{"medication_id": 2, "quantity": 20, "unit_price": 11.00}],
    }
    response = client.post("/api/supply-orders", json=payload)
    assert response.status_code == 201
    order = response.json()
    assert order["total_amount"] == 220.0
    assert order["received_date"] is None

    detail = client.get(f"/api/supply-orders/{order['id']}").json()
    assert detail["supplier"]["name"] == "PharmaDirect"
    assert client.delete(f"/api/supply-orders/{order['id']}").status_code == 204


def test_dashboard_stats(client):
    response = client.get("/api/dashboard/stats")
    assert response.status_code == 200
    stats = response.json()
    assert stats["total_medications"] == 5
    assert stats["low_stock_items"] == 4
    assert stats["medications_growth"] == 3.2
    assert set(stats["sales_data"]) == {"total_sales", "customers", "orders", "avg_order_value"}


def test_login_strips_password(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "password"})
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["username"] == "admin"
    assert user["role"] == "admin"
    assert "password" not in user


def test_login_failure(client):
    for body in ({"username": "admin", "password": "nope"}, {"username": "ghost", "password": "password"}):
        response = client.post("/api/auth/login", json=body)
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}


def test_users_never_expose_password(client):
    created = client.post(
        "/api/users",
        json={"username": "pharm1", "password": "pw", "name": "Pat", "role": "pharmacist"},
    )
    assert created.status_code == 201
    assert "password" not in created.json()
    assert all("password" not in u for u in client.get("/api/users").json())

    duplicate = client.post("/api/users", json={"username": "pharm1", "password": "pw", "name": "Other"})
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "Username 'pharm1' is already taken"


def test_unknown_route_uses_message_payload(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_rate_limit_returns_429(monkeypatch):
    from pharmacare.core.config import settings

    monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", True)
    monkeypatch.setattr(settings, "RATE_LIMIT_REQUESTS", 2)
    limited = TestClient(create_app(store=EntityStore()))

    statuses = [limited.get("/api/medications").status_code for _ in range(3)]

    assert statuses == [200, 200, 429]
    assert limited.get("/health").status_code == 200


def test_format_validation_errors():
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("body", "price"), "msg": "Input should be greater than or equal to 0"},
    ]
    assert format_validation_errors(errors) == (
        'Validation error: Field required at "body.name"; '
        'Input should be greater than or equal to 0 at "body.price"'
    )
