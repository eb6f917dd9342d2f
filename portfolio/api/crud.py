"""Router factory for the plain list/get/create/update/delete sections."""

from typing import Annotated

from fastapi import APIRouter, Depends, UploadFile, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from portfolio.api.dependencies import get_current_user, get_storage, read_image
from portfolio.database import get_db
from portfolio.models.user import User
from portfolio.schemas.auth import MessageResponse
from portfolio.services.base import CrudService
from portfolio.services.storage import StorageService


def build_crud_router(
    *,
    prefix: str,
    tag: str,
    service_class: type[CrudService],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    response_schema: type[BaseModel],
    image_path: str | None = "image",
) -> APIRouter:
    """Reads are public; writes need a session. ``image_path`` adds ``PUT /{id}/<path>``."""
    router = APIRouter(prefix=prefix, tags=[tag])

    def get_service(
        db: Annotated[Session, Depends(get_db)],
        storage: Annotated[StorageService, Depends(get_storage)],
    ) -> CrudService:
        return service_class(db, storage)

    Service = Annotated[CrudService, Depends(get_service)]

    @router.get("", response_model=list[response_schema])
    def list_records(service: Service):
        return service.list_all()

    @router.get("/{record_id}", response_model=response_schema)
    def get_record(record_id: int, service: Service):
        return service.get(record_id)

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    def create_record(
        data: create_schema,
        current_user: Annotated[User, Depends(get_current_user)],
        service: Service,
    ):
        return service.create(data)

    @router.patch("/{record_id}", response_model=response_schema)
    def update_record(
        record_id: int,
        data: update_schema,
        current_user: Annotated[User, Depends(get_current_user)],
        service: Service,
    ):
        return service.update(record_id, data)

    @router.delete("/{record_id}", response_model=MessageResponse)
    def delete_record(
        record_id: int,
        current_user: Annotated[User, Depends(get_current_user)],
        service: Service,
    ):
        return service.delete(record_id)

    if image_path:

        @router.put(f"/{{record_id}}/{image_path}", response_model=response_schema)
        def upload_image(
            record_id: int,
            file: UploadFile,
            current_user: Annotated[User, Depends(get_current_user)],
            service: Service,
        ):
            return service.update_image(record_id, read_image(file))

    return router
