"""Blog categories and posts."""

import math

from sqlalchemy import func

from portfolio.exceptions import BadRequest
from portfolio.models.blog import Blog, BlogCategory
from portfolio.services.base import CrudService, db_action


class BlogCategoryService(CrudService[BlogCategory]):
    model = BlogCategory
    label = "Blog category"
    order_by = (BlogCategory.id.asc(),)
    image_field = None

    def list_with_counts(self) -> list[dict]:
        """Categories with the number of posts in each."""
        with db_action(self.db, "fetch blog categories"):
            rows = (
                self.db.query(BlogCategory, func.count(Blog.id))
                .outerjoin(Blog, Blog.category_id == BlogCategory.id)
                .group_by(BlogCategory.id)
                .order_by(BlogCategory.id.asc())
                .all()
            )
        return [{"id": c.id, "title": c.title, "blog_count": count} for c, count in rows]

    def check_deletable(self, record):
        with db_action(self.db, "count blogs"):
            in_use = self.db.query(Blog).filter(Blog.category_id == record.id).count()
        if in_use:
            raise BadRequest(f"Cannot delete category with {in_use} associated blogs")


class BlogService(CrudService[Blog]):
    model = Blog
    label = "Blog"
    order_by = (Blog.created_at.desc(), Blog.id.desc())
    image_folder = "portfolio/blogs"

    def prepare(self, values, record=None):
        if values.get("category_id") is not None:
            self.require(BlogCategory, values["category_id"], "Blog category")
        return values

    def paginated(self, page: int = 1, limit: int = 9) -> dict:
        """One page of posts, newest first, with paging metadata."""
        with db_action(self.db, "fetch blogs"):
            total = self.db.query(Blog).count()
            data = (
                self.db.query(Blog)
                .order_by(*self.order_by)
                .offset((page - 1) * limit)
                .limit(limit)
                .all()
            )
        total_pages = math.ceil(total / limit) if total else 0
        return {
            "data": data,
            "meta": {
                "total": total,
                "page": page,
                "limit": limit,
                "total_pages": total_pages,
                "has_more": page < total_pages,
            },
        }

    def featured(self) -> Blog | None:
        """The most recent featured post, if any."""
        with db_action(self.db, "fetch featured blog"):
            return (
                self.db.query(Blog)
                .filter(Blog.is_featured.is_(True))
                .order_by(*self.order_by)
                .first()
            )
