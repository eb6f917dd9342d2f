"""Profile information model."""

from sqlalchemy import Column, Integer, String, Text

from portfolio.database import Base
from portfolio.models.mixins import ImageMixin, TimestampMixin


class ProfileInformation(Base, TimestampMixin, ImageMixin):
    """Public profile of the portfolio owner. The newest row is the current one."""

    __tablename__ = "profile_information"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")
    subtitle = Column(String(255), nullable=True)
    location = Column(String(255), nullable=True)
    bio = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    resume_url = Column(String(1024), nullable=True)
    contact_email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    working_hour = Column(String(255), nullable=True)
    status = Column(String(100), nullable=True)  # e.g. "Available for hire"
