"""FAQ models."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from portfolio.database import Base
from portfolio.models.mixins import TimestampMixin


class FaqCategory(Base, TimestampMixin):
    """FAQ category."""

    __tablename__ = "faq_categories"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)

    faqs = relationship("Faq", back_populates="category", order_by="Faq.id")


class Faq(Base, TimestampMixin):
    """Question and answer pair."""

    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category_id = Column(Integer, ForeignKey("faq_categories.id"), nullable=False, index=True)

    category = relationship("FaqCategory", back_populates="faqs")
