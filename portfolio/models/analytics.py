"""Visitor and page-view tracking models."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from portfolio.database import Base


class Visitor(Base):
    """Anonymous browser identified by the ``visitor_id`` cookie."""

    __tablename__ = "visitors"

    id = Column(String(36), primary_key=True)  # uuid4
    user_agent = Column(String(1024), nullable=True)
    ip_address = Column(String(64), nullable=True)
    first_visit_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    last_visit_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    page_views = relationship("PageView", back_populates="visitor", cascade="all, delete-orphan")


class Page(Base):
    """A tracked page, keyed by its route slug."""

    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(512), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    page_views = relationship("PageView", back_populates="page", cascade="all, delete-orphan")


class PageView(Base):
    """One view of a page by a visitor."""

    __tablename__ = "page_views"

    id = Column(Integer, primary_key=True, index=True)
    visitor_id = Column(String(36), ForeignKey("visitors.id", ondelete="CASCADE"), nullable=False, index=True)
    page_id = Column(Integer, ForeignKey("pages.id", ondelete="CASCADE"), nullable=False, index=True)
    viewed_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    visitor = relationship("Visitor", back_populates="page_views")
    page = relationship("Page", back_populates="page_views")
