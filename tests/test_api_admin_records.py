from sqlalchemy.exc import OperationalError

from conftest import auth_headers, make_car


def test_branches_public_list_is_active_and_sorted(client, admin):
    headers = auth_headers(admin)
    client.post("/api/branches", json={"name": "Uptown"}, headers=headers)
    downtown = client.post("/api/branches", json={"name": "Downtown", "opening_time": "08:00"}, headers=headers)
    client.post("/api/branches", json={"name": "Airport"}, headers=headers)
    client.put("/api/branches", json={"id": downtown.json()["branch"]["id"], "is_active": False}, headers=headers)

    active = client.get("/api/branches").json()["branches"]
    every = client.get("/api/branches?active_only=false").json()["branches"]

    assert [b["name"] for b in active] == ["Airport", "Uptown"]
    assert [b["name"] for b in every] == ["Airport", "Downtown", "Uptown"]


def test_branch_requires_name(client, admin):
    response = client.post("/api/branches", json={"address": "Somewhere"}, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json() == {"error": "Branch name is required"}


def test_branch_update_requires_id(client, admin):
    response = client.put("/api/branches", json={"name": "X"}, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json() == {"error": "Branch ID required"}


def test_customer_cannot_create_branch(client, customer):
    response = client.post("/api/branches", json={"name": "Rogue"}, headers=auth_headers(customer))

    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}


def test_expenses_are_admin_only(client, customer):
    response = client.get("/api/expenses", headers=auth_headers(customer))

    assert response.status_code == 403


def test_expense_filters_and_total_amount(client, db, admin, car):
    other = make_car(db, brand="Ford", model="Ranger")
    headers = auth_headers(admin)
    for car_id, kind, amount, day in [
        (car.id, "fuel", 1500, "2025-05-01"),
        (car.id, "repair", 8000, "2025-05-10"),
        (other.id, "fuel", 2000, "2025-05-20"),
        (car.id, "fuel", 1200, "2025-06-02"),
    ]:
        created = client.post("/api/expenses", json={
            "car_id": car_id, "expense_type": kind, "amount": amount, "expense_date": day,
        }, headers=headers)
        assert created.status_code == 201

    may_fuel = client.get(
        "/api/expenses?type=fuel&start_date=2025-05-01&end_date=2025-05-31", headers=headers
    ).json()
    first_car = client.get(f"/api/expenses?car_id={car.id}&limit=2", headers=headers).json()

    assert may_fuel["total"] == 2
    assert may_fuel["totalAmount"] == 3500
    assert first_car["total"] == 3
    assert len(first_car["items"]) == 2
    assert first_car["totalPages"] == 2
    assert first_car["totalAmount"] == 10700
    assert first_car["items"][0]["expense_date"] == "2025-06-02"


def test_expense_requires_fields(client, admin):
    response = client.post("/api/expenses", json={"expense_type": "fuel"}, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_notifications_endpoint(client, db, customer, admin, car):
    client.post("/api/inquiries", json={
        "car_id": car.id,
        "pickup_date": "2025-06-01",
        "return_date": "2025-06-05",
        "pickup_location": "Main Branch",
    }, headers=auth_headers(customer))

    inbox = client.get("/api/notifications", headers=auth_headers(admin)).json()
    assert inbox["unreadCount"] == 1
    notification_id = inbox["notifications"][0]["id"]

    marked = client.put("/api/notifications", json={"notification_id": notification_id}, headers=auth_headers(admin))
    assert marked.json() == {"message": "Notification marked as read"}
    assert client.get("/api/notifications", headers=auth_headers(admin)).json()["unreadCount"] == 0

    missing = client.put("/api/notifications", json={}, headers=auth_headers(admin))
    assert missing.status_code == 400
    assert missing.json() == {"error": "Notification ID required"}


def test_health(client):
    response = client.get("/api/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_hides_database_error_details(client, db, monkeypatch):
    def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("password authentication failed for user carrental"))

    monkeypatch.setattr(db, "execute", broken_execute)

    response = client.get("/api/health/")

    assert response.status_code == 200
    assert response.json() == {"status": "unhealthy", "api": "online", "database": "offline"}
    assert "carrental" not in response.text
