"""Contact-form message model."""

from sqlalchemy import Column, Integer, String, Text

from portfolio.database import Base
from portfolio.models.enums import MessageStatus
from portfolio.models.mixins import TimestampMixin


class UserMessage(Base, TimestampMixin):
    """Message left by a site visitor."""

    __tablename__ = "user_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=MessageStatus.UNREAD.value)
