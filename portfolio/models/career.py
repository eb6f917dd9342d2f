"""Experience, education and award models."""

from sqlalchemy import JSON, Column, Date, Integer, String, Text

from portfolio.database import Base
from portfolio.models.mixins import ImageMixin, TimestampMixin


class Experience(Base, TimestampMixin, ImageMixin):
    """Work experience entry."""

    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    starting_date = Column(Date, nullable=False)
    ending_date = Column(Date, nullable=True)  # null while current
    description = Column(Text, nullable=True)
    key_achievements = Column(JSON, nullable=False, default=list)
    technologies = Column(JSON, nullable=False, default=list)


class Education(Base, TimestampMixin, ImageMixin):
    """Education entry."""

    __tablename__ = "educations"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    institution = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    graduation_date = Column(Date, nullable=True)
    description = Column(Text, nullable=True)


class Award(Base, TimestampMixin, ImageMixin):
    """Award or achievement."""

    __tablename__ = "awards"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    award_from = Column(String(255), nullable=True)
    award_date = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
