"""Visitor and page-view analytics."""

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy import distinct, func
from sqlalchemy.orm import Session

from portfolio.exceptions import NotFound
from portfolio.models.analytics import Page, PageView, Visitor
from portfolio.services.base import db_action

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Records page views per anonymous visitor and reports on them."""

    def __init__(self, db: Session):
        self.db = db

    def track_page_view(
        self,
        slug: str,
        title: str | None,
        visitor_id: str | None,
        user_agent: str | None,
        ip_address: str | None,
    ) -> tuple[str, bool]:
        """Record one view of ``slug``.

        Returns ``(visitor_id, is_new_visitor)``. A missing or unknown visitor
        id creates a visitor record.
        """
        if visitor_id and not _is_uuid(visitor_id):
            visitor_id = None

        is_new = False
        with db_action(self.db, "track page view"):
            visitor = self.db.get(Visitor, visitor_id) if visitor_id else None
            if visitor is None:
                visitor = Visitor(
                    id=visitor_id or str(uuid.uuid4()),
                    user_agent=user_agent,
                    ip_address=ip_address,
                )
                self.db.add(visitor)
                is_new = True
            else:
                visitor.last_visit_at = datetime.now(UTC)

            page = self.db.query(Page).filter(Page.slug == slug).first()
            if page is None:
                page = Page(slug=slug, title=title)
                self.db.add(page)
            elif title:
                page.title = title

            self.db.flush()
            self.db.add(PageView(visitor_id=visitor.id, page_id=page.id))
            self.db.commit()

        return visitor.id, is_new

    def total_visitors(self) -> int:
        with db_action(self.db, "get total visitors"):
            return self.db.query(Visitor).count()

    def total_page_views(self) -> int:
        with db_action(self.db, "get total page views"):
            return self.db.query(PageView).count()

    def returning_visitors(self) -> int:
        """Visitors with more than one page view."""
        with db_action(self.db, "get returning visitors"):
            returning = (
                self.db.query(PageView.visitor_id)
                .group_by(PageView.visitor_id)
                .having(func.count(PageView.id) > 1)
                .subquery()
            )
            return self.db.query(func.count()).select_from(returning).scalar() or 0

    def pages(self) -> list[dict]:
        """Views and unique visitors for every tracked page, newest page first."""
        with db_action(self.db, "get all pages analytics"):
            rows = (
                self._page_stats_query()
                .order_by(Page.created_at.desc(), Page.id.desc())
                .all()
            )
        return [self._page_stats(*row) for row in rows]

    def page(self, slug: str) -> dict:
        with db_action(self.db, "get page analytics"):
            row = self._page_stats_query().filter(Page.slug == slug).first()
        if row is None:
            raise NotFound(f'Page with slug "{slug}" not found')
        return self._page_stats(*row)

    def dashboard(self) -> dict:
        total = self.total_visitors()
        returning = self.returning_visitors()
        return {
            "total_visitors": total,
            "new_visitors": total - returning,
            "returning_visitors": returning,
            "total_page_views": self.total_page_views(),
            "pages": self.pages(),
        }

    def _page_stats_query(self):
        return (
            self.db.query(
                Page,
                func.count(PageView.id),
                func.count(distinct(PageView.visitor_id)),
            )
            .outerjoin(PageView, PageView.page_id == Page.id)
            .group_by(Page.id)
        )

    @staticmethod
    def _page_stats(page: Page, total_views: int, unique_visitors: int) -> dict:
        return {
            "id": page.id,
            "slug": page.slug,
            "title": page.title,
            "total_views": total_views,
            "unique_visitors": unique_visitors,
            "created_at": page.created_at,
        }


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True
