"""Tests for the profile and career timeline endpoints."""

from datetime import date

from portfolio.models.career import Education, Experience

PNG = b"\x89PNG\r\n\x1a\n" + b"0" * 32


def test_profile_missing(client):
    response = client.get("/api/profile")
    assert response.status_code == 404
    assert response.json()["message"] == "Profile information not found"


def test_update_creates_profile(client, auth_headers):
    """The first update creates the profile."""
    response = client.patch(
        "/api/profile",
        json={"name": "Jane Doe", "subtitle": "Engineer", "location": "Berlin"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == (
        "Profile updated successfully. 3 field(s) updated: name, subtitle, location"
    )
    assert data["data"]["name"] == "Jane Doe"

    profile = client.get("/api/profile").json()
    assert profile["subtitle"] == "Engineer"
    assert profile["image_url"] is None


def test_update_only_touches_given_fields(client, auth_headers):
    client.patch("/api/profile", json={"name": "Jane", "bio": "Hi"}, headers=auth_headers)

    response = client.patch("/api/profile", json={"bio": "Hello"}, headers=auth_headers)
    assert response.json()["message"].endswith("1 field(s) updated: bio")

    profile = client.get("/api/profile").json()
    assert profile["name"] == "Jane"
    assert profile["bio"] == "Hello"


def test_empty_update(client, auth_headers):
    response = client.patch("/api/profile", json={}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "success": False,
        "message": "Nothing to update. No fields were provided.",
        "data": None,
    }


def test_update_requires_auth(client):
    response = client.patch("/api/profile", json={"name": "X"})
    assert response.status_code == 401


def test_profile_image_replaces_previous(client, auth_headers, s3_client):
    """Uploading a new image stores it and removes the old one."""
    first = client.put(
        "/api/profile/image", files={"file": ("me.png", PNG, "image/png")}, headers=auth_headers
    )
    assert first.status_code == 200
    first_url = first.json()["image_url"]
    assert first_url.startswith("https://test-bucket.s3.us-east-1.amazonaws.com/portfolio/profile/")

    second = client.put(
        "/api/profile/image", files={"file": ("me2.png", PNG, "image/png")}, headers=auth_headers
    )
    assert second.status_code == 200
    assert second.json()["image_url"] != first_url
    assert len(s3_client.deleted) == 1
    assert first_url.endswith(s3_client.deleted[0])


def test_profile_image_rejects_non_images(client, auth_headers):
    response = client.put(
        "/api/profile/image",
        files={"file": ("cv.pdf", b"%PDF-1.4", "application/pdf")},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_career_timeline(client, db):
    """Entries are merged and ordered by their most recent date."""
    db.add_all(
        [
            Education(title="BSc", institution="Uni", graduation_date=date(2018, 6, 1)),
            Education(title="Course", institution="Online"),
            Experience(
                title="Engineer",
                company="Acme",
                starting_date=date(2019, 1, 1),
                key_achievements=["Shipped"],
                technologies=["Python"],
            ),
            Experience(
                title="Intern",
                company="Initech",
                starting_date=date(2017, 1, 1),
                ending_date=date(2017, 12, 31),
            ),
        ]
    )
    db.commit()

    response = client.get("/api/profile/career-timeline")
    assert response.status_code == 200
    data = response.json()

    assert [entry["title"] for entry in data["timeline"]] == ["Engineer", "BSc", "Intern", "Course"]
    assert data["summary"] == {"total_education": 2, "total_experience": 2, "total_items": 4}

    engineer = data["timeline"][0]
    assert engineer["type"] == "experience"
    assert engineer["organization"] == "Acme"
    assert engineer["achievements"] == ["Shipped"]
    assert engineer["technologies"] == ["Python"]
    assert engineer["end_date"] is None

    bsc = data["timeline"][1]
    assert bsc["type"] == "education"
    assert bsc["start_date"] is None
    assert bsc["end_date"] == "2018-06-01"


def test_empty_timeline(client):
    response = client.get("/api/profile/career-timeline")
    assert response.json() == {
        "timeline": [],
        "summary": {"total_education": 0, "total_experience": 0, "total_items": 0},
    }
