"""Blog and blog category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, UploadFile, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_storage, read_image
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.blog import (
    BlogCategoryCreate,
    BlogCategoryResponse,
    BlogCategoryUpdate,
    BlogCategoryWithCountResponse,
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    PaginatedBlogResponse,
)
from portfolio.services.blogs import BlogCategoryService, BlogService
from portfolio.services.storage import StorageService

router = APIRouter(prefix="/blogs", tags=["blogs"])


def get_category_service(db: Annotated[Session, Depends(get_db)]) -> BlogCategoryService:
    return BlogCategoryService(db)


def get_blog_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[StorageService, Depends(get_storage)],
) -> BlogService:
    return BlogService(db, storage)


# Categories


@router.get("/categories", response_model=list[BlogCategoryWithCountResponse])
def list_blog_categories(
    category_service: Annotated[BlogCategoryService, Depends(get_category_service)],
):
    """Categories with the number of posts in each."""
    return category_service.list_with_counts()


@router.post(
    "/categories", response_model=BlogCategoryResponse, status_code=status.HTTP_201_CREATED
)
def create_blog_category(
    data: BlogCategoryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[BlogCategoryService, Depends(get_category_service)],
):
    return category_service.create(data)


@router.get("/categories/{category_id}", response_model=BlogCategoryResponse)
def get_blog_category(
    category_id: int,
    category_service: Annotated[BlogCategoryService, Depends(get_category_service)],
):
    return category_service.get(category_id)


@router.patch("/categories/{category_id}", response_model=BlogCategoryResponse)
def update_blog_category(
    category_id: int,
    data: BlogCategoryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[BlogCategoryService, Depends(get_category_service)],
):
    return category_service.update(category_id, data)


@router.delete("/categories/{category_id}", response_model=MessageResponse)
def delete_blog_category(
    category_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[BlogCategoryService, Depends(get_category_service)],
):
    """Delete an empty category."""
    return category_service.delete(category_id)


# Posts


@router.get("/paginated", response_model=PaginatedBlogResponse)
def list_blogs_paginated(
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=100)] = 9,
):
    """One page of posts, newest first."""
    return blog_service.paginated(page, limit)


@router.get("/featured", response_model=BlogResponse | None)
def get_featured_blog(blog_service: Annotated[BlogService, Depends(get_blog_service)]):
    """The latest featured post, or null."""
    return blog_service.featured()


@router.get("", response_model=list[BlogResponse])
def list_blogs(blog_service: Annotated[BlogService, Depends(get_blog_service)]):
    return blog_service.list_all()


@router.get("/{blog_id}", response_model=BlogResponse)
def get_blog(
    blog_id: int,
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
):
    return blog_service.get(blog_id)


@router.post("", response_model=BlogResponse, status_code=status.HTTP_201_CREATED)
def create_blog(
    data: BlogCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
):
    return blog_service.create(data)


@router.patch("/{blog_id}", response_model=BlogResponse)
def update_blog(
    blog_id: int,
    data: BlogUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
):
    return blog_service.update(blog_id, data)


@router.delete("/{blog_id}", response_model=MessageResponse)
def delete_blog(
    blog_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
):
    return blog_service.delete(blog_id)


@router.put("/{blog_id}/image", response_model=BlogResponse)
def upload_blog_image(
    blog_id: int,
    file: UploadFile,
    current_user: Annotated[User, Depends(get_current_user)],
    blog_service: Annotated[BlogService, Depends(get_blog_service)],
):
    return blog_service.update_image(blog_id, read_image(file))
