"""Hire request schemas."""

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from portfolio.models.enums import HireRequestStatus
from portfolio.schemas.content import URL_PATTERN


def _coerce_string_list(value):
    """Accept a list, a JSON array string, or a comma separated string."""
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return [item.strip() for item in value.split(",") if item.strip()]
        return parsed
    return value


class HireRequestBase(BaseModel):
    name: str | None = Field(None, max_length=255)
    company_name: str | None = Field(None, max_length=255)
    linkedin_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    notes: str | None = None
    project_desc: str | None = None
    service_id: int | None = None
    estimate_budget: str | None = Field(None, max_length=255)
    expected_timeline: str | None = Field(None, max_length=255)
    budget: str | None = Field(None, max_length=255)
    timeline: str | None = Field(None, max_length=255)
    additional_info: str | None = None
    core_features: list[str] | None = None
    tech_suggestion: list[str] | None = None

    @field_validator("core_features", "tech_suggestion", mode="before")
    @classmethod
    def split_lists(cls, value):
        return _coerce_string_list(value)


class HireRequestCreate(HireRequestBase):
    email: EmailStr = Field(..., max_length=255)


class HireRequestUpdate(HireRequestBase):
    email: EmailStr | None = Field(None, max_length=255)


class HireStatusUpdate(BaseModel):
    # "inprocess" is only ever set on creation
    status: HireRequestStatus

    @field_validator("status")
    @classmethod
    def not_inprocess(cls, value: HireRequestStatus) -> HireRequestStatus:
        if value == HireRequestStatus.INPROCESS:
            raise ValueError("status must be one of: unread, read, archived")
        return value


class FileDocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    url: str
    filename: str | None
    content_type: str | None
    size_bytes: int | None
    created_at: datetime


class HireRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None
    company_name: str | None
    linkedin_url: str | None
    notes: str | None
    project_desc: str | None
    service_id: int | None
    estimate_budget: str | None
    expected_timeline: str | None
    budget: str | None
    timeline: str | None
    additional_info: str | None
    core_features: list[str]
    tech_suggestion: list[str]
    status: str
    files: list[FileDocumentResponse]
    created_at: datetime
    updated_at: datetime
