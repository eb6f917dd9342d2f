"""Project and project type API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_storage, read_image
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.project import (
    ProjectCreate,
    ProjectResponse,
    ProjectTypeCreate,
    ProjectTypeResponse,
    ProjectTypeUpdate,
    ProjectUpdate,
)
from portfolio.services.projects import ProjectService, ProjectTypeService
from portfolio.services.storage import StorageService

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_type_service(db: Annotated[Session, Depends(get_db)]) -> ProjectTypeService:
    return ProjectTypeService(db)


def get_project_service(
    db: Annotated[Session, Depends(get_db)],
    storage: Annotated[StorageService, Depends(get_storage)],
) -> ProjectService:
    return ProjectService(db, storage)


# Project types (declared before /{project_id} so the literal paths win)


@router.get("/types", response_model=list[ProjectTypeResponse])
def list_project_types(
    type_service: Annotated[ProjectTypeService, Depends(get_project_type_service)],
):
    return type_service.list_all()


@router.post("/types", response_model=ProjectTypeResponse, status_code=status.HTTP_201_CREATED)
def create_project_type(
    data: ProjectTypeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[ProjectTypeService, Depends(get_project_type_service)],
):
    return type_service.create(data)


@router.get("/types/{type_id}", response_model=ProjectTypeResponse)
def get_project_type(
    type_id: int,
    type_service: Annotated[ProjectTypeService, Depends(get_project_type_service)],
):
    return type_service.get(type_id)


@router.patch("/types/{type_id}", response_model=ProjectTypeResponse)
def update_project_type(
    type_id: int,
    data: ProjectTypeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[ProjectTypeService, Depends(get_project_type_service)],
):
    return type_service.update(type_id, data)


@router.delete("/types/{type_id}", response_model=MessageResponse)
def delete_project_type(
    type_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[ProjectTypeService, Depends(get_project_type_service)],
):
    """Delete a project type. Types still used by projects cannot be deleted."""
    return type_service.delete(type_id)


# Projects


@router.get("/featured", response_model=list[ProjectResponse])
def list_featured_projects(
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    """Up to three of the newest featured projects."""
    return project_service.featured()


@router.get("", response_model=list[ProjectResponse])
def list_projects(project_service: Annotated[ProjectService, Depends(get_project_service)]):
    return project_service.list_all()


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: int,
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    return project_service.get(project_id)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    return project_service.create(data)


@router.patch("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    data: ProjectUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    return project_service.update(project_id, data)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    return project_service.delete(project_id)


@router.put("/{project_id}/image", response_model=ProjectResponse)
def upload_project_image(
    project_id: int,
    file: UploadFile,
    current_user: Annotated[User, Depends(get_current_user)],
    project_service: Annotated[ProjectService, Depends(get_project_service)],
):
    return project_service.update_image(project_id, read_image(file))
