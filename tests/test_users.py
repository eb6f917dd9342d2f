"""Tests for user management."""

from portfolio.services.auth import verify_password


def test_create_user_sends_welcome(client, auth_headers, email_jobs, db):
    response = client.post(
        "/api/users",
        json={"email": "new@example.com", "password": "password1", "name": "New"},
        headers=auth_headers,
    )
    assert response.status_code == 201
    user = response.json()
    assert user["email"] == "new@example.com"
    assert user["is_verified"] is False
    assert "password_hash" not in user

    assert email_jobs.of_type("send-welcome") == [{"to": "new@example.com", "name": "New"}]


def test_duplicate_email(client, auth_headers, admin_user):
    response = client.post(
        "/api/users",
        json={"email": admin_user.email, "password": "password1", "name": "Dup"},
        headers=auth_headers,
    )
    assert response.status_code == 409
    assert response.json()["message"] == "User with this email already exists"


def test_users_require_auth(client):
    assert client.get("/api/users").status_code == 401
    response = client.post(
        "/api/users", json={"email": "x@example.com", "password": "password1", "name": "X"}
    )
    assert response.status_code == 401


def test_me(client, auth_headers):
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == auth_headers.user_id


def test_update_password(client, auth_headers, admin_user, db):
    response = client.patch(
        f"/api/users/{admin_user.id}", json={"password": "newsecret1"}, headers=auth_headers
    )
    assert response.status_code == 200

    db.refresh(admin_user)
    assert verify_password("newsecret1", admin_user.password_hash)


def test_update_email_conflict(client, auth_headers):
    other = client.post(
        "/api/users",
        json={"email": "other@example.com", "password": "password1", "name": "Other"},
        headers=auth_headers,
    ).json()

    response = client.patch(
        f"/api/users/{other['id']}", json={"email": "a@example.com"}, headers=auth_headers
    )
    assert response.status_code == 409


def test_delete_user(client, auth_headers):
    other = client.post(
        "/api/users",
        json={"email": "other@example.com", "password": "password1", "name": "Other"},
        headers=auth_headers,
    ).json()

    response = client.delete(f"/api/users/{other['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/users/{other['id']}", headers=auth_headers).status_code == 404
