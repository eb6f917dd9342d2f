"""User management API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_email_queue
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse, UserCreate, UserResponse, UserUpdate
from portfolio.services.email_queue import EmailQueue
from portfolio.services.users import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
    email_queue: Annotated[EmailQueue, Depends(get_email_queue)],
) -> UserService:
    return UserService(db, email_queue)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Create a user and send them a welcome email."""
    return user_service.create(user_data)


@router.get("", response_model=list[UserResponse])
def list_users(
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    return user_service.list_all()


@router.get("/me", response_model=UserResponse)
def get_me(current_user: Annotated[User, Depends(get_current_user)]):
    """Get current user information."""
    return current_user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    return user_service.get(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update a user. A new password is re-hashed."""
    return user_service.update(user_id, user_data)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    return user_service.delete(user_id)
