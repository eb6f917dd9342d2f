"""Hire request API endpoints. The hire form is public."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_email_queue, get_storage, read_document
from portfolio.database import get_db
from portfolio.schemas.auth import MessageResponse
from portfolio.schemas.hire import (
    HireRequestCreate,
    HireRequestResponse,
    HireRequestUpdate,
    HireStatusUpdate,
)
from portfolio.services.email_queue import EmailQueue
from portfolio.services.hire import HireRequestService
from portfolio.services.storage import StorageService

router = APIRouter(prefix="/hire", tags=["hire"])


def get_hire_service(
    db: Annotated[Session, Depends(get_db)],
    email_queue: Annotated[EmailQueue, Depends(get_email_queue)],
    storage: Annotated[StorageService, Depends(get_storage)],
) -> HireRequestService:
    return HireRequestService(db, email_queue, storage)


@router.post("", response_model=HireRequestResponse, status_code=status.HTTP_201_CREATED)
def create_hire_request(
    data: HireRequestCreate,
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    """Start a hire request. The admin is notified straight away."""
    return hire_service.create(data)


@router.get("", response_model=list[HireRequestResponse])
def list_hire_requests(hire_service: Annotated[HireRequestService, Depends(get_hire_service)]):
    return hire_service.list_all()


@router.get("/{hire_id}", response_model=HireRequestResponse)
def get_hire_request(
    hire_id: int,
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    return hire_service.get(hire_id)


@router.patch("/{hire_id}", response_model=HireRequestResponse)
def update_hire_request(
    hire_id: int,
    data: HireRequestUpdate,
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    """Update a hire request; the first update submits it and sends the confirmations."""
    return hire_service.update(hire_id, data)


@router.post("/{hire_id}/files", response_model=HireRequestResponse)
def upload_hire_request_files(
    hire_id: int,
    files: Annotated[list[UploadFile], File()],
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    """Attach one or more documents to a hire request."""
    return hire_service.attach_files(hire_id, [read_document(f) for f in files])


@router.patch("/{hire_id}/status", response_model=HireRequestResponse)
def update_hire_request_status(
    hire_id: int,
    data: HireStatusUpdate,
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    return hire_service.update_status(hire_id, data.status)


@router.delete("/{hire_id}", response_model=MessageResponse)
def delete_hire_request(
    hire_id: int,
    hire_service: Annotated[HireRequestService, Depends(get_hire_service)],
):
    """Delete a hire request and its stored documents."""
    return hire_service.delete(hire_id)
