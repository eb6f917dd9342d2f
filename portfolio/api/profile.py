"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_storage, read_image
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.profile import (
    CareerTimelineResponse,
    ProfileResponse,
    ProfileUpdate,
    ProfileUpdateResponse,
)
from portfolio.services.profile import ProfileService
from portfolio.services.storage import StorageService

router = APIRouter(prefix="/profile", tags=["profile"])


def get_profile_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[StorageService, Depends(get_storage)],
) -> ProfileService:
    return ProfileService(db, storage)


@router.get("", response_model=ProfileResponse)
def get_profile(profile_service: Annotated[ProfileService, Depends(get_profile_service)]):
    """Get the public profile."""
    return profile_service.get_profile()


@router.patch("", response_model=ProfileUpdateResponse)
def update_profile(
    data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Update the provided profile fields, creating the profile if needed."""
    return profile_service.update_profile(data)


@router.put("/image", response_model=ProfileResponse)
def upload_profile_image(
    file: UploadFile,
    current_user: Annotated[User, Depends(get_current_user)],
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    return profile_service.update_image(read_image(file))


@router.get("/career-timeline", response_model=CareerTimelineResponse)
def get_career_timeline(
    profile_service: Annotated[ProfileService, Depends(get_profile_service)],
):
    """Education and experience as one timeline, most recent first."""
    return profile_service.career_timeline()
