"""SMTP transport for outgoing email."""

import logging
import smtplib
import threading
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr

from portfolio.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MailDeliveryError(Exception):
    """The SMTP relay did not accept the message."""


@dataclass
class OutgoingEmail:
    to: str
    subject: str
    html: str
    text: str | None = None


class Mailer:
    """Sends email over one reused SMTP connection.

    Without SMTP credentials the mailer runs in log-only mode: every message
    is written to the log and reported as sent.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._connection: smtplib.SMTP | None = None
        self._lock = threading.Lock()

        if not self.enabled:
            logger.warning("SMTP credentials not configured. Emails will be logged only.")

    @property
    def enabled(self) -> bool:
        return self.settings.smtp_configured

    def send(self, email: OutgoingEmail) -> bool:
        """Send one message. Raises ``MailDeliveryError`` on transport failure."""
        if not self.enabled:
            logger.info(
                f"Email to be sent (no transport configured):\n"
                f"To: {email.to}\nSubject: {email.subject}\n{email.text or email.html}"
            )
            return True

        msg = self._build_message(email)
        with self._lock:
            try:
                self._get_connection().send_message(msg)
            except (smtplib.SMTPException, OSError) as e:
                self._drop_connection()
                logger.error(f"Failed to send email to {email.to}: {e}")
                raise MailDeliveryError(f"Failed to send email to {email.to}: {e}") from e

        logger.info(f"Email sent successfully to {email.to}: {email.subject[:50]}")
        return True

    def close(self) -> None:
        with self._lock:
            self._drop_connection()

    def _build_message(self, email: OutgoingEmail) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = email.subject
        msg["From"] = formataddr((self.settings.email_from_name, self.settings.email_from))
        msg["To"] = email.to
        if email.text:
            msg.attach(MIMEText(email.text, "plain"))
        msg.attach(MIMEText(email.html, "html"))
        return msg

    def _get_connection(self) -> smtplib.SMTP:
        if self._connection is not None:
            try:
                status, _ = self._connection.noop()
                if status == 250:
                    return self._connection
            except (smtplib.SMTPException, OSError):
                pass
            self._drop_connection()

        self._connection = self._connect()
        return self._connection

    def _connect(self) -> smtplib.SMTP:
        s = self.settings
        if s.smtp_secure:
            server = smtplib.SMTP_SSL(s.smtp_host, s.smtp_port, timeout=s.smtp_timeout_seconds)
        else:
            server = smtplib.SMTP(s.smtp_host, s.smtp_port, timeout=s.smtp_timeout_seconds)
        try:
            if not s.smtp_secure:
                server.starttls()
            server.login(s.smtp_user, s.smtp_password)
        except (smtplib.SMTPException, OSError):
            server.close()
            raise
        logger.info(f"SMTP connection opened to {s.smtp_host}:{s.smtp_port}")
        return server

    def _drop_connection(self) -> None:
        if self._connection is None:
            return
        try:
            self._connection.quit()
        except (smtplib.SMTPException, OSError):
            pass
        self._connection = None
