from jose import jwt

from app.core.config import settings
from app.routes.auth import auth_routers
from app.models.user_db.user_db import User


def register(client, email="ada@example.com", password="Passwort2025!"):
    return client.post("/register", json={"email": email, "password": password})


def login(client, email="ada@example.com", password="Passwort2025!"):
    return client.post("/login", json={"email": email, "password": password})


def test_register_returns_user(client):
    response = register(client)

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["email"] == "ada@example.com"
    assert isinstance(user["id"], int)
    assert "password" not in user
    assert "password_hash" not in user


def test_register_does_not_store_plain_password(client, db_session):
    register(client)

    user = db_session.query(User).filter(User.email == "ada@example.com").one()
    assert user.password_hash != "Passwort2025!"
    assert user.password_hash.startswith("$2b$10$")


def test_register_duplicate_email_is_rejected(client, db_session):
    assert register(client).status_code == 201

    response = register(client, password="something-else")

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"
    assert db_session.query(User).count() == 1


def test_register_rejects_invalid_body(client):
    assert client.post("/register", json={"email": "not-an-email", "password": "x"}).status_code == 400
    assert client.post("/register", json={"email": "ada@example.com"}).status_code == 400
    assert client.post("/register", json={"email": "ada@example.com", "password": ""}).status_code == 400


def test_login_token_carries_identity_and_two_hour_expiry(client):
    user = register(client).json()["user"]

    response = login(client)

    assert response.status_code == 200
    payload = jwt.decode(
        response.json()["token"],
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
    )
    assert payload["id"] == user["id"]
    assert payload["email"] == "ada@example.com"
    assert payload["exp"] - payload["iat"] == 2 * 60 * 60


def test_login_unknown_email(client):
    response = login(client, email="nobody@example.com")

    assert response.status_code == 400
    assert response.json()["detail"] == "User not found"


def test_login_wrong_password(client):
    register(client)
    register(client, email="bob@example.com", password="Passwort2025!")

    response = login(client, password="wrong")

    assert response.status_code == 401
    assert "token" not in response.json()


def test_me_with_token(client):
    register(client)
    token = login(client).json()["token"]

    response = client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "ada@example.com"


def test_me_rejects_missing_or_forged_token(client):
    assert client.get("/me").status_code == 401

    forged = jwt.encode({"id": 1, "email": "ada@example.com"}, "other-secret", algorithm="HS256")
    response = client.get("/me", headers={"Authorization": f"Bearer {forged}"})
    assert response.status_code == 401


def test_login_with_mixed_case_address_as_registered(client):
    assert register(client, email="ada@Example.COM").status_code == 201

    response = login(client, email="ada@Example.COM")

    assert response.status_code == 200
    payload = jwt.decode(response.json()["token"], settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    assert payload["email"] == "ada@example.com"


def test_register_unique_constraint_maps_to_400(client, db_session, monkeypatch):
    assert register(client).status_code == 201
    # skip the up-front lookup so the insert hits the unique constraint
    monkeypatch.setattr(auth_routers, "get_user_by_email", lambda db, email: None)

    response = register(client)

    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"
    assert db_session.query(User).count() == 1


def test_openapi_declares_bearer_scheme(client):
    schemes = client.get("/openapi.json").json()["components"]["securitySchemes"]

    assert schemes == {"HTTPBearer": {"type": "http", "scheme": "bearer"}}


def test_me_rejects_non_bearer_authorization(client):
    register(client)

    response = client.get("/me", headers={"Authorization": "Basic YWRhOnB3"})

    assert response.status_code == 401
