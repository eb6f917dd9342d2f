"""Producer side of the transactional email queue."""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from portfolio.config import Settings, get_settings
from portfolio.exceptions import InternalError

logger = logging.getLogger(__name__)


class EmailJobType(StrEnum):
    """Kinds of email job understood by the worker."""

    OTP = "send-otp"
    WELCOME = "send-welcome"
    USER_MESSAGE_CONFIRMATION = "send-user-message-confirmation"
    ADMIN_NEW_MESSAGE_NOTIFICATION = "send-admin-new-message-notification"
    HIRE_REQUEST_CONFIRMATION = "send-hire-request-confirmation"
    ADMIN_HIRE_REQUEST_NOTIFICATION = "send-admin-hire-request-notification"

    @property
    def label(self) -> str:
        """Short name reported in job results (``otp``, ``welcome``, ...)."""
        return self.value.removeprefix("send-")


@dataclass(frozen=True)
class JobOptions:
    """Retry policy for one job: ``attempts`` tries, exponential backoff from ``backoff_delay`` s."""

    attempts: int = 3
    backoff_delay: float = 2.0


@dataclass(frozen=True)
class JobHandle:
    id: str
    job_type: str


class EmailQueue:
    """Enqueues email jobs for the Celery worker.

    Built once at application start-up and handed to the services that send
    mail.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.default_options = JobOptions(
            attempts=self.settings.email_job_attempts,
            backoff_delay=self.settings.email_job_backoff_seconds,
        )

    def enqueue(
        self,
        job_type: EmailJobType,
        payload: dict[str, Any],
        options: JobOptions | None = None,
    ) -> JobHandle:
        """Place a job on the queue. Raises ``InternalError`` if the broker rejects it."""
        from portfolio.tasks.email import send_email_job

        options = options or self.default_options
        try:
            result = send_email_job.apply_async(
                args=[str(job_type), payload],
                kwargs={"attempts": options.attempts, "backoff_delay": options.backoff_delay},
            )
        except Exception as e:
            logger.error(f"Failed to queue {job_type} email: {e}", exc_info=True)
            raise InternalError(f"Failed to queue email: {e}") from e

        return JobHandle(id=result.id, job_type=str(job_type))

    def send_otp_email(self, to: str, otp: str, name: str) -> JobHandle:
        handle = self.enqueue(EmailJobType.OTP, {"to": to, "otp": otp, "name": name})
        logger.info(f"OTP email queued for {to}")
        return handle

    def send_welcome_email(self, to: str, name: str) -> JobHandle:
        handle = self.enqueue(EmailJobType.WELCOME, {"to": to, "name": name})
        logger.info(f"Welcome email queued for {to}")
        return handle

    def send_user_message_confirmation(self, to: str, name: str, title: str) -> JobHandle:
        handle = self.enqueue(
            EmailJobType.USER_MESSAGE_CONFIRMATION, {"to": to, "name": name, "title": title}
        )
        logger.info(f"User message confirmation email queued for {to}")
        return handle

    def send_admin_new_message_notification(
        self, name: str, email: str, title: str, message: str
    ) -> JobHandle:
        handle = self.enqueue(
            EmailJobType.ADMIN_NEW_MESSAGE_NOTIFICATION,
            {"name": name, "email": email, "title": title, "message": message},
        )
        logger.info(f"Admin notification email queued for new message from {email}")
        return handle

    def send_hire_request_confirmation(
        self,
        to: str,
        name: str | None,
        project_desc: str,
        budget: str | None = None,
        timeline: str | None = None,
    ) -> JobHandle:
        handle = self.enqueue(
            EmailJobType.HIRE_REQUEST_CONFIRMATION,
            {
                "to": to,
                "name": name,
                "project_desc": project_desc,
                "budget": budget,
                "timeline": timeline,
            },
        )
        logger.info(f"Hire request confirmation email queued for {to}")
        return handle

    def send_admin_hire_request_notification(
        self,
        client_name: str,
        client_email: str,
        project_desc: str,
        company_name: str | None = None,
        budget: str | None = None,
        timeline: str | None = None,
        core_features: list[str] | None = None,
        tech_suggestion: list[str] | None = None,
    ) -> JobHandle:
        handle = self.enqueue(
            EmailJobType.ADMIN_HIRE_REQUEST_NOTIFICATION,
            {
                "client_name": client_name,
                "client_email": client_email,
                "project_desc": project_desc,
                "company_name": company_name,
                "budget": budget,
                "timeline": timeline,
                "core_features": core_features or [],
                "tech_suggestion": tech_suggestion or [],
            },
        )
        logger.info(f"Admin hire request notification email queued from {client_email}")
        return handle
