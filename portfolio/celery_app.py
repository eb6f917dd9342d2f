"""Celery application configuration."""

from celery import Celery

from portfolio.config import get_settings

settings = get_settings()

app = Celery(
    "portfolio",
    broker=settings.redis_url,
    backend=settings.redis_url,
    include=["portfolio.tasks.email"],
)

# Celery configuration
app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    task_routes={"portfolio.tasks.email.*": {"queue": "email"}},
    # Successful jobs leave nothing behind; failed ones are kept in the
    # result backend for inspection.
    task_ignore_result=True,
    task_store_errors_even_if_ignored=True,
    result_extended=True,
    task_acks_late=True,
    task_time_limit=120,
    task_soft_time_limit=90,
)
