from conftest import auth_headers, make_car

BOOKING = {
    "car_id": "C123",
    "pickup_date": "2025-07-01",
    "return_date": "2025-07-04",
    "pickup_location": "Main Branch",
    "total_price": 5400,
}


def test_create_booking(client, customer, car):
    response = client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer))

    assert response.status_code == 201
    booking = response.json()["booking"]
    assert booking["status"] == "pending"
    assert booking["payment_status"] == "pending"
    assert booking["cars"]["model"] == "Vios"


def test_overlapping_booking_is_rejected(client, customer, other_customer, car):
    client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer))
    overlapping = dict(BOOKING, pickup_date="2025-07-03", return_date="2025-07-06")

    response = client.post("/api/bookings", json=overlapping, headers=auth_headers(other_customer))

    assert response.status_code == 400
    assert response.json() == {"error": "Car is not available for the selected dates"}


def test_cancelled_booking_releases_dates(client, customer, other_customer, admin, car):
    booking_id = client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer)).json()["booking"]["id"]
    client.put(f"/api/bookings/{booking_id}", json={"status": "cancelled"}, headers=auth_headers(admin))

    response = client.post("/api/bookings", json=BOOKING, headers=auth_headers(other_customer))

    assert response.status_code == 201


def test_booking_return_before_pickup(client, customer, car):
    body = dict(BOOKING, return_date="2025-06-30")

    response = client.post("/api/bookings", json=body, headers=auth_headers(customer))

    assert response.status_code == 400


def test_booking_unavailable_car(client, db, customer):
    make_car(db, id="C123", available=False)

    response = client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer))

    assert response.status_code == 400
    assert response.json() == {"error": "Car is not available"}


def test_list_bookings_scoped_to_owner(client, db, customer, other_customer, admin, car):
    client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer))
    later = dict(BOOKING, pickup_date="2025-08-01", return_date="2025-08-02")
    client.post("/api/bookings", json=later, headers=auth_headers(other_customer))

    own = client.get("/api/bookings", headers=auth_headers(customer)).json()
    everything = client.get("/api/bookings", headers=auth_headers(admin)).json()

    assert own["total"] == 1
    assert everything["total"] == 2


def test_booking_status_update_requires_admin(client, customer, car):
    booking_id = client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer)).json()["booking"]["id"]

    response = client.put(f"/api/bookings/{booking_id}", json={"status": "confirmed"}, headers=auth_headers(customer))

    assert response.status_code == 403


def test_booking_invalid_status(client, customer, admin, car):
    booking_id = client.post("/api/bookings", json=BOOKING, headers=auth_headers(customer)).json()["booking"]["id"]

    response = client.put(f"/api/bookings/{booking_id}", json={"status": "lost"}, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid status"}
