"""Contact-form message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from portfolio.models.enums import MessageStatus


class UserMessageCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)


class UserMessageUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)
    title: str | None = Field(None, min_length=1, max_length=255)
    message: str | None = Field(None, min_length=1)


class MessageStatusUpdate(BaseModel):
    status: MessageStatus


class UserMessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    title: str
    message: str
    status: str
    created_at: datetime
    updated_at: datetime
