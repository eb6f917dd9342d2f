"""Blog models."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.mixins import ImageMixin, TimestampMixin


class BlogCategory(Base, TimestampMixin):
    """Blog category."""

    __tablename__ = "blog_categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    blogs = relationship("Blog", back_populates="category")


class Blog(Base, TimestampMixin, ImageMixin):
    """Blog post. ``blocks`` holds the editor document (Editor.js JSON)."""

    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("blog_categories.id"), nullable=False, index=True)
    blocks = Column(JSON, nullable=False)
    tags = Column(JSON, nullable=False, default=list)
    is_featured = Column(Boolean, nullable=False, default=False)

    category = relationship("BlogCategory", back_populates="blogs")
