"""Hire requests submitted through the multi-step project form."""

import logging

from sqlalchemy.orm import Session

from portfolio.models.enums import HireRequestStatus
from portfolio.models.hire import FileDocument, HireRequest
from portfolio.schemas.hire import HireRequestCreate, HireRequestUpdate
from portfolio.services.base import CrudService, Upload, db_action
from portfolio.services.email_queue import EmailQueue
from portfolio.services.storage import StorageService

logger = logging.getLogger(__name__)

HIRE_FILES_FOLDER = "portfolio/hire-requests"


class HireRequestService(CrudService[HireRequest]):
    """Hire requests move ``inprocess`` -> ``unread`` on the client's first update.

    Creation only notifies the admin; the client confirmation goes out once
    the form is completed.
    """

    model = HireRequest
    label = "Hire request"
    order_by = (HireRequest.created_at.desc(), HireRequest.id.desc())
    image_field = None

    def __init__(self, db: Session, email_queue: EmailQueue, storage: StorageService | None = None):
        super().__init__(db, storage)
        self.email_queue = email_queue

    def prepare(self, values, record=None):
        if record is None:
            values["status"] = HireRequestStatus.INPROCESS.value
        return values

    def create(self, data: HireRequestCreate) -> HireRequest:
        hire = super().create(data)
        self.email_queue.send_admin_hire_request_notification(
            client_name=hire.name or "New client",
            client_email=hire.email,
            project_desc=hire.project_desc or "New project inquiry not submitted full query yet",
            company_name=hire.company_name or "New client",
            budget=hire.budget,
            timeline=hire.timeline,
            core_features=hire.core_features,
            tech_suggestion=hire.tech_suggestion,
        )
        return hire

    def update(self, hire_id: int, data: HireRequestUpdate) -> HireRequest:
        """Apply the client's changes; the first update completes the request."""
        was_in_process = self.get(hire_id).status == HireRequestStatus.INPROCESS.value
        hire = super().update(hire_id, data)

        if was_in_process:
            hire.status = HireRequestStatus.UNREAD.value
            with db_action(self.db, "update hire request"):
                self.db.commit()
                self.db.refresh(hire)
            logger.info(f"Hire request {hire_id} submitted by {hire.email}")

            self.email_queue.send_hire_request_confirmation(
                to=hire.email,
                name=hire.name,
                project_desc=hire.project_desc or "Project inquiry",
                budget=hire.budget,
                timeline=hire.timeline,
            )
            self.email_queue.send_admin_hire_request_notification(
                client_name=hire.name or "New client",
                client_email=hire.email,
                project_desc=hire.project_desc or "Project inquiry",
                company_name=hire.company_name,
                budget=hire.budget,
                timeline=hire.timeline,
                core_features=hire.core_features,
                tech_suggestion=hire.tech_suggestion,
            )
        return hire

    def update_status(self, hire_id: int, status: HireRequestStatus) -> HireRequest:
        hire = self.get(hire_id)
        hire.status = status.value
        with db_action(self.db, "update hire request status"):
            self.db.commit()
            self.db.refresh(hire)
        logger.info(f"Hire request {hire_id} marked {status.value}")
        return hire

    def attach_files(self, hire_id: int, uploads: list[Upload]) -> HireRequest:
        """Upload documents to storage and attach them to the request."""
        hire = self.get(hire_id)
        for upload in uploads:
            stored = self.storage.upload_document(
                upload.data, upload.filename, upload.content_type, HIRE_FILES_FOLDER
            )
            hire.files.append(
                FileDocument(
                    url=stored.url,
                    key=stored.key,
                    filename=stored.filename,
                    content_type=stored.content_type,
                    size_bytes=stored.size_bytes,
                )
            )
        with db_action(self.db, "attach hire request files"):
            self.db.commit()
            self.db.refresh(hire)
        logger.info(f"Attached {len(uploads)} file(s) to hire request {hire_id}")
        return hire

    def delete(self, hire_id: int) -> dict:
        """Delete the stored documents, then the request and its file records."""
        hire = self.get(hire_id)
        for document in hire.files:
            self.storage.delete_file(document.key)
        return super().delete(hire_id)
