"""Blog schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlogCategoryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class BlogCategoryUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)


class BlogCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class BlogCategoryWithCountResponse(BlogCategoryResponse):
    blog_count: int


class BlogCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category_id: int
    blocks: dict[str, Any]
    tags: list[str] = Field(default_factory=list)
    is_featured: bool = False


class BlogUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category_id: int | None = None
    blocks: dict[str, Any] | None = None
    tags: list[str] | None = None
    is_featured: bool | None = None


class BlogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    image_url: str | None
    category_id: int
    category: BlogCategoryResponse
    blocks: dict[str, Any]
    tags: list[str]
    is_featured: bool
    created_at: datetime
    updated_at: datetime


class PageMeta(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_more: bool


class PaginatedBlogResponse(BaseModel):
    data: list[BlogResponse]
    meta: PageMeta
