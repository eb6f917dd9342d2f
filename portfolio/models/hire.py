"""Hire request models."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.enums import HireRequestStatus
from portfolio.models.mixins import TimestampMixin


class HireRequest(Base, TimestampMixin):
    """Project inquiry submitted through the multi-step hire form."""

    __tablename__ = "hire_requests"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    name = Column(String(255), nullable=True)
    company_name = Column(String(255), nullable=True)
    linkedin_url = Column(String(1024), nullable=True)
    notes = Column(Text, nullable=True)
    project_desc = Column(Text, nullable=True)
    service_id = Column(Integer, ForeignKey("services.id", ondelete="SET NULL"), nullable=True)
    estimate_budget = Column(String(255), nullable=True)
    expected_timeline = Column(String(255), nullable=True)
    budget = Column(String(255), nullable=True)
    timeline = Column(String(255), nullable=True)
    additional_info = Column(Text, nullable=True)
    core_features = Column(JSON, nullable=False, default=list)
    tech_suggestion = Column(JSON, nullable=False, default=list)
    status = Column(String(20), nullable=False, default=HireRequestStatus.INPROCESS.value)

    files = relationship(
        "FileDocument",
        back_populates="hire_request",
        cascade="all, delete-orphan",
        order_by="FileDocument.id",
    )


class FileDocument(Base, TimestampMixin):
    """A document uploaded to object storage and attached to a hire request."""

    __tablename__ = "file_documents"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(1024), nullable=False)
    key = Column(String(1024), nullable=False)  # object key in the bucket
    filename = Column(String(255), nullable=True)
    content_type = Column(String(255), nullable=True)
    size_bytes = Column(Integer, nullable=True)
    hire_request_id = Column(
        Integer, ForeignKey("hire_requests.id", ondelete="CASCADE"), nullable=True, index=True
    )

    hire_request = relationship("HireRequest", back_populates="files")
