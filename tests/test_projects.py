"""Tests for project types and projects."""

import pytest


@pytest.fixture
def project_type(client, auth_headers):
    return client.post("/api/projects/types", json={"title": "Web"}, headers=auth_headers).json()


def create_project(client, auth_headers, type_id, title="Shop", **fields):
    return client.post(
        "/api/projects",
        json={"title": title, "type_id": type_id, **fields},
        headers=auth_headers,
    )


def test_create_project(client, auth_headers, project_type):
    response = create_project(
        client,
        auth_headers,
        project_type["id"],
        frontend_techs=["React"],
        problems={"items": ["slow checkout"]},
        total_member_worked=3,
    )
    assert response.status_code == 201
    project = response.json()
    assert project["type"] == {"id": project_type["id"], "title": "Web"}
    assert project["frontend_techs"] == ["React"]
    assert project["backend_techs"] == []
    assert project["problems"] == {"items": ["slow checkout"]}
    assert project["is_featured"] is False


def test_project_needs_existing_type(client, auth_headers):
    response = create_project(client, auth_headers, 999)
    assert response.status_code == 404
    assert response.json()["message"] == "Project type with ID 999 not found"


def test_featured_projects(client, auth_headers, project_type):
    """At most three featured projects, newest first."""
    for i in range(5):
        create_project(client, auth_headers, project_type["id"], title=f"P{i}", is_featured=True)
    create_project(client, auth_headers, project_type["id"], title="Plain")

    featured = client.get("/api/projects/featured").json()
    assert [p["title"] for p in featured] == ["P4", "P3", "P2"]


def test_list_projects_newest_first(client, auth_headers, project_type):
    create_project(client, auth_headers, project_type["id"], title="First")
    create_project(client, auth_headers, project_type["id"], title="Second")

    assert [p["title"] for p in client.get("/api/projects").json()] == ["Second", "First"]


def test_update_project(client, auth_headers, project_type):
    project = create_project(client, auth_headers, project_type["id"]).json()
    other = client.post("/api/projects/types", json={"title": "Mobile"}, headers=auth_headers).json()

    response = client.patch(
        f"/api/projects/{project['id']}",
        json={"type_id": other["id"], "role": "Lead"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["type"]["title"] == "Mobile"
    assert response.json()["role"] == "Lead"


def test_project_type_titles_unique(client, auth_headers, project_type):
    response = client.post("/api/projects/types", json={"title": "web"}, headers=auth_headers)
    assert response.status_code == 409


def test_type_in_use_cannot_be_deleted(client, auth_headers, project_type):
    create_project(client, auth_headers, project_type["id"])

    response = client.delete(f"/api/projects/types/{project_type['id']}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete project type with 1 associated projects"


def test_delete_unused_type(client, auth_headers, project_type):
    response = client.delete(f"/api/projects/types/{project_type['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/api/projects/types").json() == []


def test_project_routes_require_auth(client, project_type):
    response = client.post("/api/projects", json={"title": "X", "type_id": project_type["id"]})
    assert response.status_code == 401
