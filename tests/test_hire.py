"""Tests for the hire request flow."""

from io import BytesIO

import pytest
from fastapi import UploadFile

from portfolio.api.dependencies import read_upload
from portfolio.config import get_settings
from portfolio.exceptions import BadRequest


def start_request(client, **fields):
    return client.post("/api/hire", json={"email": "client@example.com", **fields})


def test_create_starts_in_process_and_notifies_admin(client, email_jobs):
    """Starting a request only notifies the admin, with placeholders for missing details."""
    response = start_request(client)
    assert response.status_code == 201
    hire = response.json()
    assert hire["status"] == "inprocess"
    assert hire["core_features"] == []
    assert hire["files"] == []

    assert email_jobs.of_type("send-hire-request-confirmation") == []
    notifications = email_jobs.of_type("send-admin-hire-request-notification")
    assert len(notifications) == 1
    assert notifications[0]["client_name"] == "New client"
    assert notifications[0]["client_email"] == "client@example.com"
    assert notifications[0]["project_desc"] == "New project inquiry not submitted full query yet"


def test_create_ignores_client_status(client):
    response = start_request(client, status="archived", name="Ann")
    assert response.json()["status"] == "inprocess"


def test_first_update_submits_request(client, email_jobs):
    """The first update moves the request to unread and sends both emails."""
    hire = start_request(client, name="Ann").json()

    response = client.patch(
        f"/api/hire/{hire['id']}",
        json={"project_desc": "An online shop", "budget": "$5k", "core_features": "cart, checkout"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "unread"
    assert data["core_features"] == ["cart", "checkout"]

    confirmations = email_jobs.of_type("send-hire-request-confirmation")
    assert confirmations == [
        {
            "to": "client@example.com",
            "name": "Ann",
            "project_desc": "An online shop",
            "budget": "$5k",
            "timeline": None,
        }
    ]
    assert len(email_jobs.of_type("send-admin-hire-request-notification")) == 2


def test_later_updates_send_nothing(client, email_jobs):
    hire = start_request(client).json()
    client.patch(f"/api/hire/{hire['id']}", json={"project_desc": "Shop"})
    client.patch(f"/api/hire/{hire['id']}/status", json={"status": "read"})

    response = client.patch(f"/api/hire/{hire['id']}", json={"timeline": "3 months"})
    assert response.json()["status"] == "read"
    assert len(email_jobs.of_type("send-hire-request-confirmation")) == 1


def test_feature_lists_accept_json_strings(client):
    response = start_request(client, tech_suggestion='["Django", "React"]')
    assert response.json()["tech_suggestion"] == ["Django", "React"]


def test_status_update(client):
    hire = start_request(client).json()

    response = client.patch(f"/api/hire/{hire['id']}/status", json={"status": "archived"})
    assert response.status_code == 200
    assert response.json()["status"] == "archived"


def test_status_cannot_return_to_in_process(client):
    hire = start_request(client).json()

    response = client.patch(f"/api/hire/{hire['id']}/status", json={"status": "inprocess"})
    assert response.status_code == 400


def test_attach_and_delete_files(client, s3_client):
    """Documents are stored and removed from storage with the request."""
    hire = start_request(client).json()

    response = client.post(
        f"/api/hire/{hire['id']}/files",
        files=[
            ("files", ("brief.pdf", b"%PDF-1.4 brief", "application/pdf")),
            ("files", ("notes.txt", b"some notes", "text/plain")),
        ],
    )
    assert response.status_code == 200
    files = response.json()["files"]
    assert [f["filename"] for f in files] == ["brief.pdf", "notes.txt"]
    assert files[0]["size_bytes"] == len(b"%PDF-1.4 brief")
    assert "/portfolio/hire-requests/" in files[0]["url"]
    assert len(s3_client.objects) == 2

    response = client.delete(f"/api/hire/{hire['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == (
        f"Hire request with ID {hire['id']} has been deleted successfully"
    )
    assert len(s3_client.deleted) == 2
    assert s3_client.objects == {}
    assert client.get(f"/api/hire/{hire['id']}").status_code == 404


def test_empty_file_rejected(client):
    hire = start_request(client).json()

    response = client.post(
        f"/api/hire/{hire['id']}/files", files=[("files", ("empty.txt", b"", "text/plain"))]
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Uploaded file is empty"


def test_oversized_document_rejected_before_storage(client, s3_client, monkeypatch):
    """A document one byte over the limit never reaches storage."""
    monkeypatch.setattr(get_settings(), "max_document_bytes", 10)
    hire = start_request(client).json()

    response = client.post(
        f"/api/hire/{hire['id']}/files",
        files=[("files", ("big.txt", b"x" * 11, "text/plain"))],
    )
    assert response.status_code == 400
    assert response.json()["message"] == "File exceeds the maximum size of 10 bytes"
    assert s3_client.objects == {}


def test_read_upload_stops_past_limit():
    stream = BytesIO(b"0" * 100)
    with pytest.raises(BadRequest):
        read_upload(UploadFile(stream, filename="big.bin"), 10)
    assert stream.tell() == 11


def test_list_and_get(client):
    first = start_request(client, name="First").json()
    second = start_request(client, name="Second").json()

    listed = client.get("/api/hire").json()
    assert {h["id"] for h in listed} == {first["id"], second["id"]}
    assert client.get(f"/api/hire/{first['id']}").json()["name"] == "First"


def test_missing_request(client):
    response = client.patch("/api/hire/999", json={"name": "X"})
    assert response.status_code == 404
    assert response.json()["message"] == "Hire request with ID 999 not found"
