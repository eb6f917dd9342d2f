"""FAQ and FAQ category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.faq import (
    FaqCategoryCreate,
    FaqCategoryResponse,
    FaqCategoryUpdate,
    FaqCategoryWithFaqsResponse,
    FaqCreate,
    FaqResponse,
    FaqUpdate,
)
from portfolio.services.faqs import FaqCategoryService, FaqService

router = APIRouter(prefix="/faqs", tags=["faqs"])


def get_category_service(db: Annotated[Session, Depends(get_db)]) -> FaqCategoryService:
    return FaqCategoryService(db)


def get_faq_service(db: Annotated[Session, Depends(get_db)]) -> FaqService:
    return FaqService(db)


@router.get("/categories", response_model=list[FaqCategoryResponse])
def list_faq_categories(
    category_service: Annotated[FaqCategoryService, Depends(get_category_service)],
):
    return category_service.list_all()


@router.get("/categories/{category_id}", response_model=FaqCategoryResponse)
def get_faq_category(
    category_id: int,
    category_service: Annotated[FaqCategoryService, Depends(get_category_service)],
):
    return category_service.get(category_id)


@router.post("/categories", response_model=FaqCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_faq_category(
    data: FaqCategoryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[FaqCategoryService, Depends(get_category_service)],
):
    return category_service.create(data)


@router.patch("/categories/{category_id}", response_model=FaqCategoryResponse)
def update_faq_category(
    category_id: int,
    data: FaqCategoryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[FaqCategoryService, Depends(get_category_service)],
):
    return category_service.update(category_id, data)


@router.delete("/categories/{category_id}", response_model=MessageResponse)
def delete_faq_category(
    category_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    category_service: Annotated[FaqCategoryService, Depends(get_category_service)],
):
    """Delete a category that has no FAQs."""
    return category_service.delete(category_id)


@router.get("/category/{category_id}", response_model=FaqCategoryWithFaqsResponse)
def get_faqs_by_category(
    category_id: int,
    faq_service: Annotated[FaqService, Depends(get_faq_service)],
):
    """A category together with its FAQs."""
    return faq_service.by_category(category_id)


@router.get("", response_model=list[FaqResponse])
def list_faqs(faq_service: Annotated[FaqService, Depends(get_faq_service)]):
    return faq_service.list_all()


@router.get("/{faq_id}", response_model=FaqResponse)
def get_faq(faq_id: int, faq_service: Annotated[FaqService, Depends(get_faq_service)]):
    return faq_service.get(faq_id)


@router.post("", response_model=FaqResponse, status_code=status.HTTP_201_CREATED)
def create_faq(
    data: FaqCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    faq_service: Annotated[FaqService, Depends(get_faq_service)],
):
    return faq_service.create(data)


@router.patch("/{faq_id}", response_model=FaqResponse)
def update_faq(
    faq_id: int,
    data: FaqUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    faq_service: Annotated[FaqService, Depends(get_faq_service)],
):
    return faq_service.update(faq_id, data)


@router.delete("/{faq_id}", response_model=MessageResponse)
def delete_faq(
    faq_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    faq_service: Annotated[FaqService, Depends(get_faq_service)],
):
    return faq_service.delete(faq_id)
