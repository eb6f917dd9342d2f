"""Tests for FAQ categories and questions."""

import pytest


@pytest.fixture
def category(client, auth_headers):
    return client.post("/api/faqs/categories", json={"title": "Billing"}, headers=auth_headers).json()


def create_faq(client, auth_headers, category_id, question="How much?"):
    return client.post(
        "/api/faqs",
        json={"question": question, "answer": "It depends.", "category_id": category_id},
        headers=auth_headers,
    )


def test_create_faq(client, auth_headers, category):
    response = create_faq(client, auth_headers, category["id"])
    assert response.status_code == 201
    assert response.json()["category"] == {"id": category["id"], "title": "Billing"}


def test_faq_needs_existing_category(client, auth_headers):
    response = create_faq(client, auth_headers, 999)
    assert response.status_code == 404
    assert response.json()["message"] == "FAQ category with ID 999 not found"


def test_faqs_by_category(client, auth_headers, category):
    other = client.post("/api/faqs/categories", json={"title": "Process"}, headers=auth_headers).json()
    create_faq(client, auth_headers, category["id"], "How much?")
    create_faq(client, auth_headers, category["id"], "Invoices?")
    create_faq(client, auth_headers, other["id"], "How long?")

    response = client.get(f"/api/faqs/category/{category['id']}")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Billing"
    assert [f["question"] for f in data["faqs"]] == ["How much?", "Invoices?"]


def test_faqs_by_unknown_category(client):
    response = client.get("/api/faqs/category/999")
    assert response.status_code == 404


def test_list_faqs_in_creation_order(client, auth_headers, category):
    create_faq(client, auth_headers, category["id"], "First?")
    create_faq(client, auth_headers, category["id"], "Second?")

    assert [f["question"] for f in client.get("/api/faqs").json()] == ["First?", "Second?"]


def test_move_faq(client, auth_headers, category):
    other = client.post("/api/faqs/categories", json={"title": "Process"}, headers=auth_headers).json()
    faq = create_faq(client, auth_headers, category["id"]).json()

    response = client.patch(
        f"/api/faqs/{faq['id']}", json={"category_id": other["id"]}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["category"]["title"] == "Process"


def test_category_in_use_cannot_be_deleted(client, auth_headers, category):
    faq = create_faq(client, auth_headers, category["id"]).json()

    response = client.delete(f"/api/faqs/categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete FAQ category with 1 associated FAQs"

    assert client.delete(f"/api/faqs/{faq['id']}", headers=auth_headers).status_code == 200
    response = client.delete(f"/api/faqs/categories/{category['id']}", headers=auth_headers)
    assert response.status_code == 200
