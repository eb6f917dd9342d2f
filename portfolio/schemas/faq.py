"""FAQ schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FaqCategoryCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)


class FaqCategoryUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)


class FaqCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class FaqCreate(BaseModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category_id: int


class FaqUpdate(BaseModel):
    question: str | None = Field(None, min_length=1)
    answer: str | None = Field(None, min_length=1)
    category_id: int | None = None


class FaqResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    question: str
    answer: str
    category_id: int
    category: FaqCategoryResponse
    created_at: datetime
    updated_at: datetime


class FaqCategoryWithFaqsResponse(FaqCategoryResponse):
    faqs: list[FaqResponse]
