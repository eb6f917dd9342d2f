"""Analytics schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class TrackPageView(BaseModel):
    slug: str = Field(..., min_length=1, max_length=512)
    title: str | None = Field(None, max_length=255)


class TrackPageViewResponse(BaseModel):
    success: bool = True
    message: str = "Page view tracked successfully"
    is_new_visitor: bool


class PageAnalytics(BaseModel):
    id: int
    slug: str
    title: str | None
    total_views: int
    unique_visitors: int
    created_at: datetime


class DashboardSummary(BaseModel):
    total_visitors: int
    new_visitors: int
    returning_visitors: int
    total_page_views: int
    pages: list[PageAnalytics]


class CountResponse(BaseModel):
    count: int
