"""Project models."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.mixins import ImageMixin, TimestampMixin


class ProjectType(Base, TimestampMixin):
    """Project type (e.g. "Web Application")."""

    __tablename__ = "project_types"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), unique=True, nullable=False)

    projects = relationship("Project", back_populates="type")


class Project(Base, TimestampMixin, ImageMixin):
    """Portfolio project case study."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(255), nullable=True)
    type_id = Column(Integer, ForeignKey("project_types.id"), nullable=False, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    live_url = Column(String(1024), nullable=True)
    github_url = Column(String(1024), nullable=True)

    frontend_techs = Column(JSON, nullable=False, default=list)
    backend_techs = Column(JSON, nullable=False, default=list)
    devops_techs = Column(JSON, nullable=False, default=list)
    design_techs = Column(JSON, nullable=False, default=list)
    others_techs = Column(JSON, nullable=False, default=list)
    key_accomplishments = Column(JSON, nullable=False, default=list)

    project_overview = Column(Text, nullable=True)
    # Free-form structured sections
    problems = Column(JSON, nullable=True)
    solutions = Column(JSON, nullable=True)
    solution_architecture = Column(JSON, nullable=True)
    challenges = Column(JSON, nullable=True)

    timeline = Column(String(255), nullable=True)
    role = Column(String(255), nullable=True)
    total_member_worked = Column(Integer, nullable=True)
    outcome = Column(Text, nullable=True)

    type = relationship("ProjectType", back_populates="projects")
