"""Social, service and review schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

URL_PATTERN = r"^https?://\S+$"


class SocialCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., max_length=1024, pattern=URL_PATTERN)


class SocialUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)


class SocialResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    image_url: str | None
    created_at: datetime
    updated_at: datetime


class ServiceCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    description: str | None = None
    bullet_points: list[str] = Field(default_factory=list)
    core_tech_stacks: list[str] = Field(default_factory=list)


class ServiceUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)
    description: str | None = None
    bullet_points: list[str] | None = None
    core_tech_stacks: list[str] | None = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    subtitle: str | None
    description: str | None
    image_url: str | None
    bullet_points: list[str]
    core_tech_stacks: list[str]
    created_at: datetime
    updated_at: datetime


class ReviewCreate(BaseModel):
    rate: int = Field(..., ge=1, le=5)
    comment: str | None = None
    name: str = Field(..., min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)


class ReviewUpdate(BaseModel):
    rate: int | None = Field(None, ge=1, le=5)
    comment: str | None = None
    name: str | None = Field(None, min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=255)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rate: int
    comment: str | None
    name: str
    subtitle: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime
