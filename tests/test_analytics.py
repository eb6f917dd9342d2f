"""Tests for visitor and page-view analytics."""

import uuid

from portfolio.models.analytics import Visitor


def track(client, slug="home", title=None, **kwargs):
    return client.post("/api/analytics/track", json={"slug": slug, "title": title}, **kwargs)


def test_first_view_sets_visitor_cookie(client, db):
    response = track(client, "home", "Home", headers={"x-forwarded-for": "203.0.113.5, 10.0.0.1"})
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Page view tracked successfully",
        "is_new_visitor": True,
    }

    visitor_id = response.cookies.get("visitor_id")
    assert uuid.UUID(visitor_id)
    visitor = db.get(Visitor, visitor_id)
    assert visitor.ip_address == "203.0.113.5"


def test_returning_visitor(client, auth_headers):
    """The cookie identifies the visitor on later views."""
    track(client, "home")
    response = track(client, "blog/post-1")
    assert response.json()["is_new_visitor"] is False
    assert "visitor_id" not in response.cookies

    client.cookies.clear()
    track(client, "home")

    assert client.get("/api/analytics/visitors/total", headers=auth_headers).json() == {"count": 2}
    assert client.get("/api/analytics/visitors/returning", headers=auth_headers).json() == {
        "count": 1
    }
    assert client.get("/api/analytics/pageviews/total", headers=auth_headers).json() == {
        "count": 3
    }


def test_unknown_cookie_creates_visitor(client, db):
    """A well-formed id that is not on record is adopted for the new visitor."""
    visitor_id = str(uuid.uuid4())
    client.cookies.set("visitor_id", visitor_id)

    response = track(client)
    assert response.json()["is_new_visitor"] is True
    assert db.get(Visitor, visitor_id) is not None


def test_malformed_cookie_is_replaced(client):
    client.cookies.set("visitor_id", "not-a-uuid")

    response = track(client)
    assert response.json()["is_new_visitor"] is True
    assert response.cookies.get("visitor_id") != "not-a-uuid"


def test_page_stats(client, auth_headers):
    track(client, "home", "Home")
    track(client, "home")
    client.cookies.clear()
    track(client, "home", "Welcome")
    track(client, "blog/post-1", "Post")

    page = client.get("/api/analytics/pages/home", headers=auth_headers).json()
    assert page["title"] == "Welcome"
    assert page["total_views"] == 3
    assert page["unique_visitors"] == 2

    nested = client.get("/api/analytics/pages/blog/post-1", headers=auth_headers).json()
    assert nested["slug"] == "blog/post-1"
    assert nested["total_views"] == 1

    pages = client.get("/api/analytics/pages", headers=auth_headers).json()
    assert [p["slug"] for p in pages] == ["blog/post-1", "home"]


def test_unknown_page(client, auth_headers):
    response = client.get("/api/analytics/pages/missing", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["message"] == 'Page with slug "missing" not found'


def test_dashboard(client, auth_headers):
    track(client, "home")
    track(client, "about")
    client.cookies.clear()
    track(client, "home")

    response = client.get("/api/analytics/dashboard", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["total_visitors"] == 2
    assert data["returning_visitors"] == 1
    assert data["new_visitors"] == 1
    assert data["total_page_views"] == 3
    assert {p["slug"]: p["total_views"] for p in data["pages"]} == {"home": 2, "about": 1}


def test_reports_require_auth(client):
    assert client.get("/api/analytics/dashboard").status_code == 401
    assert client.get("/api/analytics/pages").status_code == 401
