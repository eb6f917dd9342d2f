"""User model."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String

from portfolio.database import Base
from portfolio.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and administration."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    is_verified = Column(Boolean, nullable=False, default=False)

    # One-time login code; at most one active at a time
    otp = Column(String(10), nullable=True)
    otp_expiry = Column(DateTime(timezone=True), nullable=True)
