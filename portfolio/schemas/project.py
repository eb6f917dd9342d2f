"""Project schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from portfolio.schemas.content import URL_PATTERN


class ProjectTypeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class ProjectTypeUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)


class ProjectTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class ProjectBase(BaseModel):
    subtitle: str | None = Field(None, max_length=255)
    is_featured: bool | None = None
    live_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    github_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    frontend_techs: list[str] | None = None
    backend_techs: list[str] | None = None
    devops_techs: list[str] | None = None
    design_techs: list[str] | None = None
    others_techs: list[str] | None = None
    key_accomplishments: list[str] | None = None
    project_overview: str | None = None
    problems: dict[str, Any] | None = None
    solutions: dict[str, Any] | None = None
    solution_architecture: dict[str, Any] | None = None
    challenges: dict[str, Any] | None = None
    timeline: str | None = Field(None, max_length=255)
    role: str | None = Field(None, max_length=255)
    total_member_worked: int | None = Field(None, ge=1)
    outcome: str | None = None


class ProjectCreate(ProjectBase):
    title: str = Field(..., min_length=1, max_length=255)
    type_id: int


class ProjectUpdate(ProjectBase):
    title: str | None = Field(None, min_length=1, max_length=255)
    type_id: int | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    subtitle: str | None
    type_id: int
    type: ProjectTypeResponse
    image_url: str | None
    is_featured: bool
    live_url: str | None
    github_url: str | None
    frontend_techs: list[str]
    backend_techs: list[str]
    devops_techs: list[str]
    design_techs: list[str]
    others_techs: list[str]
    key_accomplishments: list[str]
    project_overview: str | None
    problems: dict[str, Any] | None
    solutions: dict[str, Any] | None
    solution_architecture: dict[str, Any] | None
    challenges: dict[str, Any] | None
    timeline: str | None
    role: str | None
    total_member_worked: int | None
    outcome: str | None
    created_at: datetime
    updated_at: datetime
