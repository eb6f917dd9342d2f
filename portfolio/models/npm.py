"""NPM package models."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.mixins import TimestampMixin


class NpmType(Base, TimestampMixin):
    """Grouping for published packages."""

    __tablename__ = "npm_types"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    packages = relationship("NpmPackage", back_populates="npm_type")


class NpmPackage(Base, TimestampMixin):
    """A published NPM package."""

    __tablename__ = "npm_packages"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    npm_type_id = Column(Integer, ForeignKey("npm_types.id"), nullable=False, index=True)
    version = Column(String(50), nullable=False)
    live_url = Column(String(1024), nullable=True)
    github_url = Column(String(1024), nullable=True)
    installable = Column(String(255), nullable=True)  # e.g. "npm i my-package"
    description = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)

    npm_type = relationship("NpmType", back_populates="packages")
