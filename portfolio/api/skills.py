"""Skill and technology API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_storage, read_image
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.skill import (
    SkillCreate,
    SkillResponse,
    SkillUpdate,
    TechnologyCreate,
    TechnologyResponse,
    TechnologyUpdate,
    TechnologyWithSkillResponse,
)
from portfolio.services.skills import SkillService, TechnologyService
from portfolio.services.storage import StorageService

skill_router = APIRouter(prefix="/skills", tags=["skills"])
technology_router = APIRouter(prefix="/technologies", tags=["skills"])


def get_skill_service(db: Annotated[Session, Depends(get_db)]) -> SkillService:
    return SkillService(db)


def get_technology_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[StorageService, Depends(get_storage)],
) -> TechnologyService:
    return TechnologyService(db, storage)


@skill_router.get("", response_model=list[SkillResponse])
def list_skills(skill_service: Annotated[SkillService, Depends(get_skill_service)]):
    """All skill areas with their technologies."""
    return skill_service.list_all()


@skill_router.get("/{skill_id}", response_model=SkillResponse)
def get_skill(
    skill_id: int,
    skill_service: Annotated[SkillService, Depends(get_skill_service)],
):
    return skill_service.get(skill_id)


@skill_router.post("", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
def create_skill(
    data: SkillCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    skill_service: Annotated[SkillService, Depends(get_skill_service)],
):
    return skill_service.create(data)


@skill_router.patch("/{skill_id}", response_model=SkillResponse)
def update_skill(
    skill_id: int,
    data: SkillUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    skill_service: Annotated[SkillService, Depends(get_skill_service)],
):
    return skill_service.update(skill_id, data)


@skill_router.delete("/{skill_id}", response_model=MessageResponse)
def delete_skill(
    skill_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    skill_service: Annotated[SkillService, Depends(get_skill_service)],
):
    """Delete a skill area and its technologies."""
    return skill_service.delete(skill_id)


@technology_router.get("", response_model=list[TechnologyWithSkillResponse])
def list_technologies(
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.list_all()


@technology_router.get("/{technology_id}", response_model=TechnologyWithSkillResponse)
def get_technology(
    technology_id: int,
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.get(technology_id)


@technology_router.post("", response_model=TechnologyResponse, status_code=status.HTTP_201_CREATED)
def create_technology(
    data: TechnologyCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.create(data)


@technology_router.patch("/{technology_id}", response_model=TechnologyResponse)
def update_technology(
    technology_id: int,
    data: TechnologyUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.update(technology_id, data)


@technology_router.delete("/{technology_id}", response_model=MessageResponse)
def delete_technology(
    technology_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.delete(technology_id)


@technology_router.put("/{technology_id}/icon", response_model=TechnologyResponse)
def upload_technology_icon(
    technology_id: int,
    file: UploadFile,
    current_user: Annotated[User, Depends(get_current_user)],
    technology_service: Annotated[TechnologyService, Depends(get_technology_service)],
):
    return technology_service.update_image(technology_id, read_image(file))
