"""Celery worker for the transactional email queue."""

import logging
from collections.abc import Callable
from typing import Any

from celery.signals import worker_process_init, worker_process_shutdown

from portfolio.celery_app import app as celery_app
from portfolio.config import Settings, get_settings
from portfolio.services import email_templates
from portfolio.services.email_queue import EmailJobType
from portfolio.services.mailer import Mailer, OutgoingEmail

logger = logging.getLogger(__name__)

_mailer: Mailer | None = None


@worker_process_init.connect
def open_mailer(**kwargs) -> None:
    """Create the worker's SMTP transport when the worker process starts."""
    global _mailer
    _mailer = Mailer()


@worker_process_shutdown.connect
def close_mailer(**kwargs) -> None:
    global _mailer
    if _mailer is not None:
        _mailer.close()
        _mailer = None


def get_mailer() -> Mailer:
    global _mailer
    if _mailer is None:
        _mailer = Mailer()
    return _mailer


def backoff_countdown(retries: int, backoff_delay: float) -> float:
    """Seconds to wait before the next attempt: delay, 2*delay, 4*delay, ..."""
    return backoff_delay * (2**retries)


# Each renderer returns the message plus the recipient reported in the job result
Renderer = Callable[[dict[str, Any], Settings], tuple[OutgoingEmail, str]]


def _render_otp(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    email = email_templates.otp_email(
        payload["to"], payload["otp"], payload["name"], settings.otp_expiration_minutes
    )
    return email, payload["to"]


def _render_welcome(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    return email_templates.welcome_email(payload["to"], payload["name"]), payload["to"]


def _render_user_message_confirmation(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    email = email_templates.user_message_confirmation_email(
        payload["to"], payload["name"], payload["title"]
    )
    return email, payload["to"]


def _render_admin_new_message(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    email = email_templates.admin_new_message_email(
        settings.admin_email,
        payload["name"],
        payload["email"],
        payload["title"],
        payload["message"],
    )
    return email, "admin"


def _render_hire_request_confirmation(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    email = email_templates.hire_request_confirmation_email(
        payload["to"],
        payload.get("name"),
        payload["project_desc"],
        payload.get("budget"),
        payload.get("timeline"),
    )
    return email, payload["to"]


def _render_admin_hire_request(payload: dict, settings: Settings) -> tuple[OutgoingEmail, str]:
    email = email_templates.admin_hire_request_email(
        settings.admin_email,
        payload["client_name"],
        payload["client_email"],
        payload["project_desc"],
        payload.get("company_name"),
        payload.get("budget"),
        payload.get("timeline"),
        payload.get("core_features"),
        payload.get("tech_suggestion"),
    )
    return email, "admin"


RENDERERS: dict[EmailJobType, Renderer] = {
    EmailJobType.OTP: _render_otp,
    EmailJobType.WELCOME: _render_welcome,
    EmailJobType.USER_MESSAGE_CONFIRMATION: _render_user_message_confirmation,
    EmailJobType.ADMIN_NEW_MESSAGE_NOTIFICATION: _render_admin_new_message,
    EmailJobType.HIRE_REQUEST_CONFIRMATION: _render_hire_request_confirmation,
    EmailJobType.ADMIN_HIRE_REQUEST_NOTIFICATION: _render_admin_hire_request,
}


def dispatch_email_job(
    job_type: str,
    payload: dict[str, Any],
    mailer: Mailer,
    settings: Settings | None = None,
) -> dict:
    """Render and send the email for one job.

    Returns ``{"success", "type", "recipient"}``. Transport errors propagate
    so the queue can retry the job.
    """
    settings = settings or get_settings()
    try:
        kind = EmailJobType(job_type)
    except ValueError:
        logger.warning(f"Unknown job type: {job_type}")
        return {"success": False, "message": "Unknown job type"}

    email, recipient = RENDERERS[kind](payload, settings)
    logger.info(f"Sending {kind.label} email to {recipient}")
    success = mailer.send(email)
    return {"success": success, "type": kind.label, "recipient": recipient}


@celery_app.task(bind=True, name="portfolio.tasks.email.send_email_job")
def send_email_job(
    self,
    job_type: str,
    payload: dict,
    attempts: int = 3,
    backoff_delay: float = 2.0,
) -> dict:
    """Send one queued email, retrying with exponential backoff.

    Args:
        job_type: One of the ``EmailJobType`` values
        payload: Template variables, including the recipient
        attempts: Total number of tries before the job is marked failed
        backoff_delay: Delay in seconds before the first retry

    Returns:
        dict with success flag, job type label and recipient
    """
    logger.info(f"Processing email job: {job_type} (ID: {self.request.id})")
    try:
        return dispatch_email_job(job_type, payload, get_mailer())
    except Exception as e:
        retries = self.request.retries
        if retries + 1 < attempts:
            countdown = backoff_countdown(retries, backoff_delay)
            logger.warning(
                f"Email job {self.request.id} failed (attempt {retries + 1}/{attempts}), "
                f"retrying in {countdown}s: {e}"
            )
            raise self.retry(exc=e, countdown=countdown, max_retries=attempts - 1)

        logger.error(
            f"Email job {self.request.id} failed after {attempts} attempts: {e}", exc_info=True
        )
        raise
