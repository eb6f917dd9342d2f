"""NPM package schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio.schemas.content import URL_PATTERN


class NpmTypeCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class NpmTypeUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)


class NpmTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class NpmPackageCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    npm_type_id: int
    version: str = Field(..., min_length=1, max_length=50)
    live_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    github_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    installable: str | None = Field(None, max_length=255)
    description: str | None = None
    tags: list[str] = Field(default_factory=list)


class NpmPackageUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    npm_type_id: int | None = None
    version: str | None = Field(None, min_length=1, max_length=50)
    live_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    github_url: str | None = Field(None, max_length=1024, pattern=URL_PATTERN)
    installable: str | None = Field(None, max_length=255)
    description: str | None = None
    tags: list[str] | None = None


class NpmPackageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    npm_type_id: int
    npm_type: NpmTypeResponse
    version: str
    live_url: str | None
    github_url: str | None
    installable: str | None
    description: str | None
    tags: list[str]
    created_at: datetime
    updated_at: datetime
