"""Analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user
from portfolio.config import get_settings
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.analytics import (
    CountResponse,
    DashboardSummary,
    PageAnalytics,
    TrackPageView,
    TrackPageViewResponse,
)
from portfolio.services.analytics import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])

VISITOR_COOKIE = "visitor_id"
VISITOR_COOKIE_MAX_AGE = 365 * 24 * 60 * 60


def get_analytics_service(db: Annotated[Session, Depends(get_db)]) -> AnalyticsService:
    return AnalyticsService(db)


@router.post("/track", response_model=TrackPageViewResponse)
def track_page_view(
    data: TrackPageView,
    request: Request,
    response: Response,
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """Record a page view. New visitors get a ``visitor_id`` cookie."""
    forwarded = request.headers.get("x-forwarded-for")
    ip_address = forwarded.split(",")[0].strip() if forwarded else None
    if not ip_address and request.client:
        ip_address = request.client.host

    visitor_id, is_new = analytics_service.track_page_view(
        slug=data.slug,
        title=data.title,
        visitor_id=request.cookies.get(VISITOR_COOKIE),
        user_agent=request.headers.get("user-agent"),
        ip_address=ip_address,
    )

    if is_new:
        response.set_cookie(
            VISITOR_COOKIE,
            visitor_id,
            max_age=VISITOR_COOKIE_MAX_AGE,
            httponly=True,
            secure=get_settings().is_production,
            samesite="lax",
        )
    return TrackPageViewResponse(is_new_visitor=is_new)


@router.get("/dashboard", response_model=DashboardSummary)
def get_dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """Visitor counts, page views and per-page statistics."""
    return analytics_service.dashboard()


@router.get("/visitors/total", response_model=CountResponse)
def get_total_visitors(
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    return {"count": analytics_service.total_visitors()}


@router.get("/visitors/returning", response_model=CountResponse)
def get_returning_visitors(
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """Visitors with more than one page view."""
    return {"count": analytics_service.returning_visitors()}


@router.get("/pageviews/total", response_model=CountResponse)
def get_total_page_views(
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    return {"count": analytics_service.total_page_views()}


@router.get("/pages", response_model=list[PageAnalytics])
def get_pages(
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    return analytics_service.pages()


@router.get("/pages/{slug:path}", response_model=PageAnalytics)
def get_page(
    slug: str,
    current_user: Annotated[User, Depends(get_current_user)],
    analytics_service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    return analytics_service.page(slug)
