"""Profile schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ProfileUpdate(BaseModel):
    """Partial profile update. Only provided fields are written."""

    name: str | None = Field(None, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    description: str | None = None
    resume_url: str | None = Field(None, max_length=1024)
    contact_email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    working_hour: str | None = Field(None, max_length=255)
    status: str | None = Field(None, max_length=100)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    subtitle: str | None
    image_url: str | None
    location: str | None
    bio: str | None
    description: str | None
    resume_url: str | None
    contact_email: str | None
    phone: str | None
    working_hour: str | None
    status: str | None
    created_at: datetime
    updated_at: datetime


class ProfileUpdateResponse(BaseModel):
    success: bool
    message: str
    data: ProfileResponse | None = None


class TimelineEntry(BaseModel):
    """Education or experience entry normalised for the career timeline."""

    id: int
    type: Literal["education", "experience"]
    title: str
    organization: str
    location: str | None
    start_date: date | None
    end_date: date | None
    description: str | None
    image_url: str | None
    achievements: list[str]
    technologies: list[str]


class TimelineSummary(BaseModel):
    total_education: int
    total_experience: int
    total_items: int


class CareerTimelineResponse(BaseModel):
    timeline: list[TimelineEntry]
    summary: TimelineSummary
