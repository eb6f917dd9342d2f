"""Contact-form message API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_email_queue
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.message import (
    MessageStatusUpdate,
    UserMessageCreate,
    UserMessageResponse,
    UserMessageUpdate,
)
from portfolio.services.email_queue import EmailQueue
from portfolio.services.messages import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


def get_message_service(
    db: Annotated[Session, Depends(get_db)],
    email_queue: Annotated[EmailQueue, Depends(get_email_queue)],
) -> MessageService:
    return MessageService(db, email_queue)


@router.post("", response_model=UserMessageResponse, status_code=status.HTTP_201_CREATED)
def create_message(
    data: UserMessageCreate,
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    """Leave a message (public). The sender and the admin are both emailed."""
    return message_service.create(data)


@router.get("", response_model=list[UserMessageResponse])
def list_messages(
    current_user: Annotated[User, Depends(get_current_user)],
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    return message_service.list_all()


@router.get("/{message_id}", response_model=UserMessageResponse)
def get_message(
    message_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    return message_service.get(message_id)


@router.patch("/{message_id}", response_model=UserMessageResponse)
def update_message(
    message_id: int,
    data: UserMessageUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    return message_service.update(message_id, data)


@router.patch("/{message_id}/status", response_model=UserMessageResponse)
def update_message_status(
    message_id: int,
    data: MessageStatusUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    return message_service.update_status(message_id, data.status)


@router.delete("/{message_id}", response_model=MessageResponse)
def delete_message(
    message_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    message_service: Annotated[MessageService, Depends(get_message_service)],
):
    return message_service.delete(message_id)
