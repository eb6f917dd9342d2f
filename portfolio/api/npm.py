"""NPM type and package API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.npm import (
    NpmPackageCreate,
    NpmPackageResponse,
    NpmPackageUpdate,
    NpmTypeCreate,
    NpmTypeResponse,
    NpmTypeUpdate,
)
from portfolio.services.npm import NpmPackageService, NpmTypeService

router = APIRouter(prefix="/npm", tags=["npm"])


def get_type_service(db: Annotated[Session, Depends(get_db)]) -> NpmTypeService:
    return NpmTypeService(db)


def get_package_service(db: Annotated[Session, Depends(get_db)]) -> NpmPackageService:
    return NpmPackageService(db)


@router.get("/types", response_model=list[NpmTypeResponse])
def list_npm_types(type_service: Annotated[NpmTypeService, Depends(get_type_service)]):
    return type_service.list_all()


@router.get("/types/{type_id}", response_model=NpmTypeResponse)
def get_npm_type(
    type_id: int,
    type_service: Annotated[NpmTypeService, Depends(get_type_service)],
):
    return type_service.get(type_id)


@router.post("/types", response_model=NpmTypeResponse, status_code=status.HTTP_201_CREATED)
def create_npm_type(
    data: NpmTypeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[NpmTypeService, Depends(get_type_service)],
):
    return type_service.create(data)


@router.patch("/types/{type_id}", response_model=NpmTypeResponse)
def update_npm_type(
    type_id: int,
    data: NpmTypeUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[NpmTypeService, Depends(get_type_service)],
):
    return type_service.update(type_id, data)


@router.delete("/types/{type_id}", response_model=MessageResponse)
def delete_npm_type(
    type_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    type_service: Annotated[NpmTypeService, Depends(get_type_service)],
):
    """Delete a type that has no packages."""
    return type_service.delete(type_id)


@router.get("/packages", response_model=list[NpmPackageResponse])
def list_npm_packages(
    package_service: Annotated[NpmPackageService, Depends(get_package_service)],
):
    return package_service.list_all()


@router.get("/packages/{package_id}", response_model=NpmPackageResponse)
def get_npm_package(
    package_id: int,
    package_service: Annotated[NpmPackageService, Depends(get_package_service)],
):
    return package_service.get(package_id)


@router.post("/packages", response_model=NpmPackageResponse, status_code=status.HTTP_201_CREATED)
def create_npm_package(
    data: NpmPackageCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    package_service: Annotated[NpmPackageService, Depends(get_package_service)],
):
    return package_service.create(data)


@router.patch("/packages/{package_id}", response_model=NpmPackageResponse)
def update_npm_package(
    package_id: int,
    data: NpmPackageUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    package_service: Annotated[NpmPackageService, Depends(get_package_service)],
):
    return package_service.update(package_id, data)


@router.delete("/packages/{package_id}", response_model=MessageResponse)
def delete_npm_package(
    package_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    package_service: Annotated[NpmPackageService, Depends(get_package_service)],
):
    return package_service.delete(package_id)
