from jose import jwt

from app.core.config import settings
from app.core.security import create_access_token
from app.models import Notification
from conftest import auth_headers, make_car, make_inquiry

INQUIRY_BODY = {
    "car_id": "C123",
    "pickup_date": "2025-06-01",
    "return_date": "2025-06-05",
    "pickup_location": "Main Branch",
}


def test_customer_creates_inquiry_and_admins_are_notified(client, db, customer, admin, second_admin, car):
    response = client.post("/api/inquiries", json=INQUIRY_BODY, headers=auth_headers(customer))

    assert response.status_code == 201
    inquiry = response.json()["inquiry"]
    assert inquiry["status"] == "pending"
    assert inquiry["user_id"] == customer.id
    assert inquiry["cars"]["brand"] == "Toyota"
    assert inquiry["cars"]["price_per_day"] == 1800.0

    notifications = db.query(Notification).all()
    assert {n.user_id for n in notifications} == {admin.id, second_admin.id}
    assert all("Toyota Vios" in n.message for n in notifications)


def test_client_supplied_status_is_ignored_on_create(client, customer, car):
    body = dict(INQUIRY_BODY, status="closed")

    response = client.post("/api/inquiries", json=body, headers=auth_headers(customer))

    assert response.status_code == 201
    assert response.json()["inquiry"]["status"] == "pending"


def test_create_missing_fields_returns_400(client, customer, car):
    body = {k: v for k, v in INQUIRY_BODY.items() if k != "pickup_location"}

    response = client.post("/api/inquiries", json=body, headers=auth_headers(customer))

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


def test_create_for_unavailable_car_returns_400(client, db, customer):
    make_car(db, id="C123", available=False)

    response = client.post("/api/inquiries", json=INQUIRY_BODY, headers=auth_headers(customer))

    assert response.status_code == 400
    assert response.json() == {"error": "Car is not available"}


def test_create_for_unknown_car_returns_404(client, customer):
    response = client.post("/api/inquiries", json=INQUIRY_BODY, headers=auth_headers(customer))

    assert response.status_code == 404
    assert response.json() == {"error": "Car not found"}


def test_get_without_authorization_header(client, customer, car, db):
    inquiry = make_inquiry(db, customer, car)

    response = client.get(f"/api/inquiries/{inquiry.id}")

    assert response.status_code == 401
    assert response.json() == {"error": "No token provided"}


def test_get_with_non_bearer_header(client):
    response = client.get("/api/inquiries/abc", headers={"Authorization": "Token abc"})

    assert response.status_code == 401
    assert response.json() == {"error": "No token provided"}


def test_get_with_garbage_token(client):
    response = client.get("/api/inquiries/abc", headers={"Authorization": "Bearer garbage"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}


def test_other_customer_cannot_read_inquiry(client, db, customer, other_customer, car):
    inquiry = make_inquiry(db, customer, car)

    response = client.get(f"/api/inquiries/{inquiry.id}", headers=auth_headers(other_customer))

    assert response.status_code == 404
    assert "inquiry" not in response.json()


def test_owner_reads_inquiry(client, db, customer, car):
    inquiry = make_inquiry(db, customer, car)

    response = client.get(f"/api/inquiries/{inquiry.id}", headers=auth_headers(customer))

    assert response.status_code == 200
    assert response.json()["inquiry"]["id"] == inquiry.id


def test_list_pagination_envelope(client, db, customer, admin, car):
    for _ in range(25):
        make_inquiry(db, customer, car)

    response = client.get("/api/inquiries?page=2&limit=10", headers=auth_headers(admin))

    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 10
    assert body["total"] == 25
    assert body["totalPages"] == 3
    assert body["page"] == 2
    assert body["limit"] == 10


def test_list_rejects_page_zero(client, customer):
    response = client.get("/api/inquiries?page=0", headers=auth_headers(customer))

    assert response.status_code == 400
    assert "error" in response.json()


def test_admin_responds_and_owner_is_notified(client, db, customer, admin, car):
    inquiry = make_inquiry(db, customer, car)

    response = client.put(
        f"/api/inquiries/{inquiry.id}",
        json={"status": "responded", "admin_response": "Available, see you Monday"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    body = response.json()["inquiry"]
    assert body["status"] == "responded"
    assert body["admin_response"] == "Available, see you Monday"

    notifications = db.query(Notification).all()
    assert len(notifications) == 1
    assert notifications[0].user_id == customer.id
    assert notifications[0].message == "Your inquiry for Toyota Vios has been responded"


def test_customer_cannot_update_status(client, db, customer, car):
    inquiry = make_inquiry(db, customer, car)

    response = client.put(
        f"/api/inquiries/{inquiry.id}", json={"status": "closed"}, headers=auth_headers(customer)
    )

    assert response.status_code == 403
    assert response.json() == {"error": "Unauthorized"}
    assert db.query(Notification).count() == 0


def test_invalid_status_returns_400(client, db, customer, admin, car):
    inquiry = make_inquiry(db, customer, car)

    response = client.put(
        f"/api/inquiries/{inquiry.id}", json={"status": "approved"}, headers=auth_headers(admin)
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid status"}


def test_stale_admin_token_is_checked_against_stored_role(client, db, customer, car):
    inquiry = make_inquiry(db, customer, car)
    # Token claims admin, but the stored profile is a client
    token = create_access_token(customer.id, customer.email, "admin")

    response = client.put(
        f"/api/inquiries/{inquiry.id}",
        json={"status": "closed"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 403


def test_signed_token_with_wrong_claim_type_is_unauthorized(client, customer):
    token = jwt.encode({"userId": 123}, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    response = client.get("/api/inquiries", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid token"}
