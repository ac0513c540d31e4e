from app.models import Car
from conftest import auth_headers, make_car

NEW_CAR = {
    "name": "Honda City 2024",
    "brand": "Honda",
    "model": "City",
    "year": 2024,
    "category": "sedan",
    "pricePerDay": 2000,
    "features": ["Bluetooth"],
}


def test_list_cars_is_public_and_camel_cased(client, db):
    make_car(db, price_per_week=11000.0, review_count=4)

    response = client.get("/api/cars")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["totalPages"] == 1
    car = body["items"][0]
    assert car["pricePerDay"] == 1800.0
    assert car["pricePerWeek"] == 11000.0
    assert car["reviewCount"] == 4
    assert "price_per_day" not in car


def test_list_cars_paginates(client, db):
    for i in range(12):
        make_car(db, model=f"Model {i}")

    response = client.get("/api/cars?page=2&limit=5")

    body = response.json()
    assert len(body["items"]) == 5
    assert body["total"] == 12
    assert body["totalPages"] == 3


def test_get_car_not_found(client):
    response = client.get("/api/cars/unknown")

    assert response.status_code == 404
    assert response.json() == {"error": "Car not found"}


def test_admin_creates_car(client, db, admin):
    response = client.post("/api/cars", json=NEW_CAR, headers=auth_headers(admin))

    assert response.status_code == 201
    car = response.json()
    assert car["brand"] == "Honda"
    assert car["pricePerDay"] == 2000.0
    assert car["available"] is True
    assert car["availability"]["available"] is True
    assert car["images"] == []
    assert db.query(Car).count() == 1


def test_create_car_missing_field(client, admin):
    body = {k: v for k, v in NEW_CAR.items() if k != "category"}

    response = client.post("/api/cars", json=body, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required field: category"}


def test_customer_cannot_create_car(client, db, customer):
    response = client.post("/api/cars", json=NEW_CAR, headers=auth_headers(customer))

    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}
    assert db.query(Car).count() == 0


def test_create_unavailable_car_from_availability_object(client, admin):
    body = dict(NEW_CAR, availability={"available": False, "locations": [], "unavailableDates": []})

    response = client.post("/api/cars", json=body, headers=auth_headers(admin))

    assert response.json()["available"] is False


def test_update_car_requires_identifying_fields(client, db, admin, car):
    response = client.put(f"/api/cars/{car.id}", json={"pricePerDay": 2500}, headers=auth_headers(admin))

    assert response.status_code == 400
    assert response.json()["error"].startswith("Missing required field")


def test_update_car(client, db, admin, car):
    body = dict(NEW_CAR, available=False)

    response = client.put(f"/api/cars/{car.id}", json=body, headers=auth_headers(admin))

    assert response.status_code == 200
    updated = response.json()
    assert updated["brand"] == "Honda"
    assert updated["available"] is False
    assert updated["availability"]["available"] is False
    assert updated["features"] == ["Bluetooth"]


def test_delete_car(client, db, admin, car):
    response = client.delete(f"/api/cars/{car.id}", headers=auth_headers(admin))

    assert response.status_code == 200
    assert response.json() == {"message": "Car deleted successfully"}
    assert db.query(Car).count() == 0
