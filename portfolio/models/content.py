"""Models for the simple public content sections."""

from sqlalchemy import JSON, Column, Integer, String, Text

from portfolio.database import Base
from portfolio.models.mixins import ImageMixin, TimestampMixin


class Social(Base, TimestampMixin, ImageMixin):
    """Social media link."""

    __tablename__ = "socials"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    url = Column(String(1024), nullable=False)


class Service(Base, TimestampMixin, ImageMixin):
    """A service offered to clients."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    bullet_points = Column(JSON, nullable=False, default=list)
    core_tech_stacks = Column(JSON, nullable=False, default=list)


class Review(Base, TimestampMixin):
    """Client review / testimonial."""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    rate = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text, nullable=True)
    name = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    avatar_url = Column(String(1024), nullable=True)
