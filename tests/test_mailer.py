"""Tests for the SMTP transport."""

import smtplib
from unittest.mock import patch

import pytest

from portfolio.config import Settings
from portfolio.services.mailer import MailDeliveryError, Mailer, OutgoingEmail

EMAIL = OutgoingEmail(to="a@example.com", subject="Hi", html="<p>Hi</p>", text="Hi")


@pytest.fixture
def smtp():
    with patch("portfolio.services.mailer.smtplib.SMTP") as smtp_class:
        server = smtp_class.return_value
        server.noop.return_value = (250, b"OK")
        yield smtp_class


def configured() -> Settings:
    return Settings(smtp_user="user", smtp_password="pass", smtp_host="mail.test", smtp_port=587)


def test_log_only_without_credentials(smtp):
    """Without credentials messages are logged and reported as sent."""
    mailer = Mailer(Settings(smtp_user=None, smtp_password=None))

    assert mailer.enabled is False
    assert mailer.send(EMAIL) is True
    smtp.assert_not_called()


def test_send_over_starttls(smtp):
    mailer = Mailer(configured())

    assert mailer.send(EMAIL) is True

    smtp.assert_called_once_with("mail.test", 587, timeout=30.0)
    server = smtp.return_value
    server.starttls.assert_called_once()
    server.login.assert_called_once_with("user", "pass")
    message = server.send_message.call_args.args[0]
    assert message["To"] == "a@example.com"
    assert message["Subject"] == "Hi"


def test_connection_is_reused(smtp):
    mailer = Mailer(configured())

    mailer.send(EMAIL)
    mailer.send(EMAIL)

    smtp.assert_called_once()
    assert smtp.return_value.send_message.call_count == 2


def test_failure_raises_and_drops_connection(smtp):
    """A relay error surfaces as MailDeliveryError and forces a reconnect."""
    server = smtp.return_value
    server.send_message.side_effect = smtplib.SMTPException("rejected")
    mailer = Mailer(configured())

    with pytest.raises(MailDeliveryError):
        mailer.send(EMAIL)

    server.quit.assert_called_once()
    server.send_message.side_effect = None
    assert mailer.send(EMAIL) is True
    assert smtp.call_count == 2


def test_close(smtp):
    mailer = Mailer(configured())
    mailer.send(EMAIL)

    mailer.close()

    smtp.return_value.quit.assert_called_once()
