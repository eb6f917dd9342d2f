"""Tests for the email queue worker."""

from unittest.mock import MagicMock, patch

import pytest
from celery.exceptions import Retry

from portfolio.config import get_settings
from portfolio.services.email_queue import EmailJobType, EmailQueue, JobOptions
from portfolio.services.mailer import MailDeliveryError
from portfolio.tasks.email import backoff_countdown, dispatch_email_job, send_email_job


@pytest.fixture
def mailer():
    mock = MagicMock()
    mock.send.return_value = True
    return mock


def test_job_labels():
    assert EmailJobType.OTP.label == "otp"
    assert EmailJobType.ADMIN_HIRE_REQUEST_NOTIFICATION.label == "admin-hire-request-notification"


def test_dispatch_otp(mailer):
    result = dispatch_email_job("send-otp", {"to": "a@example.com", "otp": "123456", "name": "A"}, mailer)

    assert result == {"success": True, "type": "otp", "recipient": "a@example.com"}
    email = mailer.send.call_args.args[0]
    assert email.to == "a@example.com"
    assert email.subject == "Your Login OTP Code"
    assert "123456" in email.html
    assert "123456" in email.text


def test_dispatch_admin_notification_goes_to_admin(mailer):
    """Admin jobs are addressed to the configured admin and report ``admin``."""
    result = dispatch_email_job(
        "send-admin-new-message-notification",
        {"name": "Jo", "email": "jo@example.com", "title": "Hi", "message": "Hello <there>"},
        mailer,
    )

    assert result["recipient"] == "admin"
    assert result["type"] == "admin-new-message-notification"
    email = mailer.send.call_args.args[0]
    assert email.to == get_settings().admin_email
    assert "Hello &lt;there&gt;" in email.html


def test_dispatch_hire_request_without_optional_fields(mailer):
    result = dispatch_email_job(
        "send-hire-request-confirmation",
        {"to": "c@example.com", "name": None, "project_desc": "A shop"},
        mailer,
    )

    assert result["success"] is True
    email = mailer.send.call_args.args[0]
    assert "Hello there" in email.text
    assert "Budget" not in email.text


def test_dispatch_unknown_type(mailer):
    """Unknown job types complete without sending anything."""
    result = dispatch_email_job("send-postcard", {"to": "a@example.com"}, mailer)

    assert result == {"success": False, "message": "Unknown job type"}
    mailer.send.assert_not_called()


def test_backoff_doubles():
    assert [backoff_countdown(n, 2.0) for n in range(3)] == [2.0, 4.0, 8.0]


def test_task_sends_email(mailer):
    with patch("portfolio.tasks.email.get_mailer", return_value=mailer):
        result = send_email_job("send-welcome", {"to": "n@example.com", "name": "New"})

    assert result == {"success": True, "type": "welcome", "recipient": "n@example.com"}


def test_task_retries_with_backoff(mailer):
    """A delivery failure schedules a retry after the initial backoff delay."""
    mailer.send.side_effect = MailDeliveryError("relay down")

    with (
        patch("portfolio.tasks.email.get_mailer", return_value=mailer),
        patch.object(send_email_job, "retry", side_effect=Retry()) as retry,
    ):
        with pytest.raises(Retry):
            send_email_job("send-welcome", {"to": "n@example.com", "name": "New"})

    assert retry.call_args.kwargs["countdown"] == 2.0
    assert retry.call_args.kwargs["max_retries"] == 2
    assert isinstance(retry.call_args.kwargs["exc"], MailDeliveryError)


def test_task_fails_after_last_attempt(mailer):
    mailer.send.side_effect = MailDeliveryError("relay down")

    with (
        patch("portfolio.tasks.email.get_mailer", return_value=mailer),
        patch.object(send_email_job, "retry") as retry,
    ):
        with pytest.raises(MailDeliveryError):
            send_email_job("send-welcome", {"to": "n@example.com", "name": "New"}, attempts=1)

    retry.assert_not_called()


def test_enqueue_passes_retry_policy(email_jobs):
    handle = EmailQueue().enqueue(
        EmailJobType.WELCOME,
        {"to": "n@example.com", "name": "New"},
        JobOptions(attempts=5, backoff_delay=1.5),
    )

    assert handle.id == "job-id"
    assert handle.job_type == "send-welcome"
    call = email_jobs.mock.call_args
    assert call.kwargs["args"] == ["send-welcome", {"to": "n@example.com", "name": "New"}]
    assert call.kwargs["kwargs"] == {"attempts": 5, "backoff_delay": 1.5}


def test_enqueue_uses_configured_defaults(email_jobs):
    EmailQueue().send_user_message_confirmation("u@example.com", "U", "Hello")

    call = email_jobs.mock.call_args
    assert call.kwargs["kwargs"] == {"attempts": 3, "backoff_delay": 2.0}
    assert email_jobs.of_type("send-user-message-confirmation") == [
        {"to": "u@example.com", "name": "U", "title": "Hello"}
    ]
