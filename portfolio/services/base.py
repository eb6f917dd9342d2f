"""Shared plumbing for the content services."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.exceptions import InternalError, NotFound
from portfolio.services.storage import StorageService

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@dataclass
class Upload:
    """An uploaded file read into memory."""

    data: bytes
    filename: str | None
    content_type: str | None


@contextmanager
def db_action(db: Session, action: str) -> Iterator[None]:
    """Roll back and wrap database failures as ``InternalError("Failed to <action>: ...")``.

    Application errors raised inside the block pass through unchanged.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise InternalError(f"Failed to {action}: {e}") from e


class CrudService(Generic[ModelT]):
    """List/get/create/update/delete for one model, plus an optional image field.

    Subclasses set ``model`` and ``label`` and may override ``order_by``,
    ``image_field`` and ``image_folder``.
    """

    model: ClassVar[type]
    label: ClassVar[str]
    order_by: ClassVar[tuple] = ()
    image_field: ClassVar[str | None] = "image_url"
    image_folder: ClassVar[str] = "portfolio"

    def __init__(self, db: Session, storage: StorageService | None = None):
        self.db = db
        self.storage = storage

    def list_all(self) -> list[ModelT]:
        order = self.order_by or (self.model.id.desc(),)
        with db_action(self.db, f"fetch {self.label.lower()} records"):
            return self.db.query(self.model).order_by(*order).all()

    def get(self, record_id: int) -> ModelT:
        with db_action(self.db, f"fetch {self.label.lower()} record"):
            record = self.db.query(self.model).filter(self.model.id == record_id).first()
        if record is None:
            raise NotFound(f"{self.label} with ID {record_id} not found")
        return record

    def create(self, data: BaseModel) -> ModelT:
        values = self.prepare(self._writable(data))
        record = self.model(**values)
        with db_action(self.db, f"create {self.label.lower()} record"):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.info(f"Created {self.label} {record.id}")
        return record

    def update(self, record_id: int, data: BaseModel) -> ModelT:
        record = self.get(record_id)
        values = self.prepare(self._writable(data), record)
        for field, value in values.items():
            setattr(record, field, value)
        with db_action(self.db, f"update {self.label.lower()} record"):
            self.db.commit()
            self.db.refresh(record)
        return record

    def delete(self, record_id: int) -> dict:
        record = self.get(record_id)
        self.check_deletable(record)
        image_url = getattr(record, self.image_field) if self.image_field else None
        with db_action(self.db, f"delete {self.label.lower()} record"):
            self.db.delete(record)
            self.db.commit()
        if image_url and self.storage is not None:
            self.storage.replace_quietly(image_url)
        logger.info(f"Deleted {self.label} {record_id}")
        return {"message": f"{self.label} with ID {record_id} has been deleted successfully"}

    def update_image(self, record_id: int, upload: Upload) -> ModelT:
        """Store a new image for the record and remove the one it replaces."""
        if self.image_field is None or self.storage is None:
            raise InternalError(f"{self.label} does not accept images")
        record = self.get(record_id)
        stored = self.storage.upload_image(
            upload.data, upload.filename, upload.content_type, self.image_folder
        )
        previous = getattr(record, self.image_field)
        setattr(record, self.image_field, stored.url)
        with db_action(self.db, f"update {self.label.lower()} image"):
            self.db.commit()
            self.db.refresh(record)
        self.storage.replace_quietly(previous)
        return record

    def prepare(self, values: dict[str, Any], record: ModelT | None = None) -> dict[str, Any]:
        """Hook to validate references or normalise values before writing."""
        return values

    def check_deletable(self, record: ModelT) -> None:
        """Hook to refuse deletion of records still in use."""

    def require(self, model: type, record_id: int, label: str) -> Any:
        """Fetch a referenced record or raise ``NotFound``."""
        with db_action(self.db, f"fetch {label.lower()}"):
            found = self.db.query(model).filter(model.id == record_id).first()
        if found is None:
            raise NotFound(f"{label} with ID {record_id} not found")
        return found

    def _writable(self, data: BaseModel) -> dict[str, Any]:
        # Explicit nulls are ignored for NOT NULL columns
        columns = self.model.__table__.columns
        return {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in columns or columns[field].nullable
        }
