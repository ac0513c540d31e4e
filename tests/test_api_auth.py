from app.core.security import hash_password
from app.models import Profile
from conftest import auth_headers, make_profile


def test_signup_creates_client(client, db):
    response = client.post("/api/auth/signup", json={
        "email": "New.User@Example.com",
        "password": "hunter22",
        "full_name": "New User",
        "role": "admin",
    })

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["email"] == "new.user@example.com"
    assert user["role"] == "client"
    assert "password_hash" not in user

    stored = db.query(Profile).filter(Profile.email == "new.user@example.com").one()
    assert stored.password_hash and stored.password_hash != "hunter22"


def test_signup_requires_fields(client):
    response = client.post("/api/auth/signup", json={"email": "a@example.com", "password": "x"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email, password, and full name are required"}


def test_signup_duplicate_email(client, customer):
    response = client.post("/api/auth/signup", json={
        "email": customer.email,
        "password": "whatever1",
        "full_name": "Alice Again",
    })

    assert response.status_code == 409
    assert response.json() == {"error": "User already exists"}


def test_login_returns_token_usable_on_me(client, db):
    make_profile(db, "carol@example.com", password_hash=hash_password("correct-horse"))

    login = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "correct-horse"})

    assert login.status_code == 200
    token = login.json()["token"]
    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["user"]["email"] == "carol@example.com"


def test_login_wrong_password(client, db):
    make_profile(db, "carol@example.com", password_hash=hash_password("correct-horse"))

    response = client.post("/api/auth/login", json={"email": "carol@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_me_for_deleted_profile(client, db, customer):
    headers = auth_headers(customer)
    db.delete(customer)
    db.commit()

    response = client.get("/api/auth/me", headers=headers)

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
