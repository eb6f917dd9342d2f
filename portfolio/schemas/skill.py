"""Skill and technology schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SkillCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class SkillUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)


class TechnologyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    level: int | None = Field(None, ge=0, le=100)
    skill_id: int


class TechnologyUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    level: int | None = Field(None, ge=0, le=100)
    skill_id: int | None = None


class TechnologyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    level: int | None
    icon_url: str | None
    skill_id: int
    created_at: datetime
    updated_at: datetime


class SkillRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class TechnologyWithSkillResponse(TechnologyResponse):
    skill: SkillRef


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    technologies: list[TechnologyResponse]
    created_at: datetime
    updated_at: datetime
