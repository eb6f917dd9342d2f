"""Mixins for SQLAlchemy models."""

from sqlalchemy import Column, DateTime, String, func


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class ImageMixin:
    """Mixin for records that carry one uploaded image."""

    image_url = Column(String(1024), nullable=True)
