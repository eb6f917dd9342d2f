"""Skill and technology models."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.mixins import TimestampMixin


class Skill(Base, TimestampMixin):
    """A skill area grouping technologies (e.g. "Backend")."""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), unique=True, nullable=False)

    technologies = relationship(
        "Technology",
        back_populates="skill",
        cascade="all, delete-orphan",
        order_by="Technology.id",
    )


class Technology(Base, TimestampMixin):
    """A technology within a skill area, with a 0-100 proficiency level."""

    __tablename__ = "technologies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    level = Column(Integer, nullable=True)
    icon_url = Column(String(1024), nullable=True)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), nullable=False, index=True)

    skill = relationship("Skill", back_populates="technologies")
