"""Experience, education and award schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class ExperienceCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    starting_date: date
    ending_date: date | None = None
    description: str | None = None
    key_achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)


class ExperienceUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    company: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    starting_date: date | None = None
    ending_date: date | None = None
    description: str | None = None
    key_achievements: list[str] | None = None
    technologies: list[str] | None = None


class ExperienceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    company: str
    location: str | None
    starting_date: date
    ending_date: date | None
    description: str | None
    image_url: str | None
    key_achievements: list[str]
    technologies: list[str]
    created_at: datetime
    updated_at: datetime


class EducationCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    institution: str = Field(..., min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    graduation_date: date | None = None
    description: str | None = None


class EducationUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    institution: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, max_length=255)
    graduation_date: date | None = None
    description: str | None = None


class EducationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    institution: str
    location: str | None
    graduation_date: date | None
    description: str | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime


class AwardCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    award_from: str | None = Field(None, max_length=255)
    award_date: date | None = None
    description: str | None = None


class AwardUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    award_from: str | None = Field(None, max_length=255)
    award_date: date | None = None
    description: str | None = None


class AwardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    subtitle: str | None
    award_from: str | None
    award_date: date | None
    description: str | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime
