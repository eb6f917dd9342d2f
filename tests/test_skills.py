"""Tests for skills and technologies."""

PNG = b"\x89PNG\r\n\x1a\n" + b"0" * 32


def create_skill(client, auth_headers, name="Backend"):
    return client.post("/api/skills", json={"name": name}, headers=auth_headers).json()


def test_skill_with_technologies(client, auth_headers):
    skill = create_skill(client, auth_headers)
    for name, level in [("Python", 90), ("Go", 60)]:
        response = client.post(
            "/api/technologies",
            json={"name": name, "level": level, "skill_id": skill["id"]},
            headers=auth_headers,
        )
        assert response.status_code == 201

    skills = client.get("/api/skills").json()
    assert len(skills) == 1
    assert [t["name"] for t in skills[0]["technologies"]] == ["Python", "Go"]

    technologies = client.get("/api/technologies").json()
    assert technologies[0]["skill"] == {"id": skill["id"], "name": "Backend"}


def test_skill_names_are_unique_ignoring_case(client, auth_headers):
    create_skill(client, auth_headers, "Backend")

    response = client.post("/api/skills", json={"name": "backend"}, headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["message"] == 'Skill with name "backend" already exists'


def test_rename_skill(client, auth_headers):
    skill = create_skill(client, auth_headers, "Backend")
    create_skill(client, auth_headers, "Frontend")

    response = client.patch(
        f"/api/skills/{skill['id']}", json={"name": "BACKEND"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["name"] == "BACKEND"

    response = client.patch(
        f"/api/skills/{skill['id']}", json={"name": "Frontend"}, headers=auth_headers
    )
    assert response.status_code == 409


def test_technology_needs_existing_skill(client, auth_headers):
    response = client.post(
        "/api/technologies", json={"name": "Rust", "skill_id": 999}, headers=auth_headers
    )
    assert response.status_code == 404
    assert response.json()["message"] == "Skill with ID 999 not found"


def test_technology_level_range(client, auth_headers):
    skill = create_skill(client, auth_headers)
    response = client.post(
        "/api/technologies",
        json={"name": "Python", "level": 101, "skill_id": skill["id"]},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_deleting_skill_removes_technologies(client, auth_headers):
    skill = create_skill(client, auth_headers)
    technology = client.post(
        "/api/technologies",
        json={"name": "Python", "skill_id": skill["id"]},
        headers=auth_headers,
    ).json()

    response = client.delete(f"/api/skills/{skill['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/technologies/{technology['id']}").status_code == 404


def test_technology_icon(client, auth_headers, s3_client):
    skill = create_skill(client, auth_headers)
    technology = client.post(
        "/api/technologies",
        json={"name": "Python", "skill_id": skill["id"]},
        headers=auth_headers,
    ).json()

    response = client.put(
        f"/api/technologies/{technology['id']}/icon",
        files={"file": ("python.png", PNG, "image/png")},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert "/portfolio/technologies/" in response.json()["icon_url"]
    assert len(s3_client.objects) == 1
