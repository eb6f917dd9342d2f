"""Tests for contact-form messages."""

MESSAGE = {
    "name": "Sam",
    "email": "sam@example.com",
    "title": "Project idea",
    "message": "Can we talk?",
}


def test_send_message_queues_both_emails(client, email_jobs):
    """Anyone can send a message; the sender and the admin are both emailed."""
    response = client.post("/api/messages", json=MESSAGE)
    assert response.status_code == 201
    assert response.json()["status"] == "unread"

    assert email_jobs.of_type("send-user-message-confirmation") == [
        {"to": "sam@example.com", "name": "Sam", "title": "Project idea"}
    ]
    assert email_jobs.of_type("send-admin-new-message-notification") == [
        {
            "name": "Sam",
            "email": "sam@example.com",
            "title": "Project idea",
            "message": "Can we talk?",
        }
    ]


def test_message_validation(client, email_jobs):
    response = client.post("/api/messages", json={**MESSAGE, "email": "nope"})
    assert response.status_code == 400
    assert email_jobs.all == []


def test_reading_messages_requires_auth(client):
    client.post("/api/messages", json=MESSAGE)

    assert client.get("/api/messages").status_code == 401


def test_admin_manages_messages(client, auth_headers):
    message = client.post("/api/messages", json=MESSAGE).json()

    listed = client.get("/api/messages", headers=auth_headers).json()
    assert [m["id"] for m in listed] == [message["id"]]

    response = client.patch(
        f"/api/messages/{message['id']}/status", json={"status": "read"}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["status"] == "read"

    response = client.patch(
        f"/api/messages/{message['id']}/status", json={"status": "deleted"}, headers=auth_headers
    )
    assert response.status_code == 400

    response = client.delete(f"/api/messages/{message['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get(f"/api/messages/{message['id']}", headers=auth_headers).status_code == 404
