"""Tests for NPM package types and packages."""

import pytest


@pytest.fixture
def npm_type(client, auth_headers):
    return client.post("/api/npm/types", json={"title": "React"}, headers=auth_headers).json()


def test_create_package(client, auth_headers, npm_type):
    response = client.post(
        "/api/npm/packages",
        json={
            "title": "use-thing",
            "npm_type_id": npm_type["id"],
            "version": "1.2.0",
            "installable": "npm i use-thing",
            "github_url": "https://github.com/me/use-thing",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    package = response.json()
    assert package["npm_type"] == {"id": npm_type["id"], "title": "React"}
    assert package["tags"] == []

    packages = client.get("/api/npm/packages").json()
    assert [p["title"] for p in packages] == ["use-thing"]


def test_package_needs_version(client, auth_headers, npm_type):
    response = client.post(
        "/api/npm/packages",
        json={"title": "use-thing", "npm_type_id": npm_type["id"]},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_package_needs_existing_type(client, auth_headers):
    response = client.post(
        "/api/npm/packages",
        json={"title": "use-thing", "npm_type_id": 999, "version": "1.0.0"},
        headers=auth_headers,
    )
    assert response.status_code == 404
    assert response.json()["message"] == "NPM type with ID 999 not found"


def test_update_package(client, auth_headers, npm_type):
    package = client.post(
        "/api/npm/packages",
        json={"title": "use-thing", "npm_type_id": npm_type["id"], "version": "1.0.0"},
        headers=auth_headers,
    ).json()

    response = client.patch(
        f"/api/npm/packages/{package['id']}",
        json={"version": "2.0.0", "tags": ["hooks"]},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["version"] == "2.0.0"
    assert response.json()["tags"] == ["hooks"]


def test_type_in_use_cannot_be_deleted(client, auth_headers, npm_type):
    package = client.post(
        "/api/npm/packages",
        json={"title": "use-thing", "npm_type_id": npm_type["id"], "version": "1.0.0"},
        headers=auth_headers,
    ).json()

    response = client.delete(f"/api/npm/types/{npm_type['id']}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete NPM type with 1 associated packages"

    client.delete(f"/api/npm/packages/{package['id']}", headers=auth_headers)
    response = client.delete(f"/api/npm/types/{npm_type['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == (
        f"NPM type with ID {npm_type['id']} has been deleted successfully"
    )


def test_types_are_public(client, npm_type):
    response = client.get("/api/npm/types")
    assert response.status_code == 200
    assert response.json() == [npm_type]
