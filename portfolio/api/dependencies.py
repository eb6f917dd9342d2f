"""FastAPI dependencies for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, Request, UploadFile
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from portfolio.config import get_settings
from portfolio.database import get_db
from portfolio.exceptions import BadRequest, Unauthenticated
from portfolio.models.user import User
from portfolio.services.auth import AuthService, decode_access_token
from portfolio.services.base import Upload
from portfolio.services.email_queue import EmailQueue
from portfolio.services.storage import StorageService

ACCESS_TOKEN_COOKIE = "access_token"  # noqa: S105

security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token or session cookie."""
    token = credentials.credentials if credentials else request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token:
        raise Unauthenticated("Authentication token is missing")

    payload = decode_access_token(token)
    if payload is None or payload.get("sub") is None:
        raise Unauthenticated("Invalid authentication credentials")

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise Unauthenticated("Invalid authentication credentials") from None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise Unauthenticated("User not found")

    return user


def get_email_queue(request: Request) -> EmailQueue:
    """The queue built at start-up."""
    return request.app.state.email_queue


def get_storage(request: Request) -> StorageService:
    """The storage client built at start-up."""
    return request.app.state.storage


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    email_queue: Annotated[EmailQueue, Depends(get_email_queue)],
) -> AuthService:
    return AuthService(db, email_queue)


def read_upload(file: UploadFile, max_bytes: int, label: str = "File") -> Upload:
    """Read a multipart upload into memory, refusing it once it passes ``max_bytes``."""
    too_large = BadRequest(f"{label} exceeds the maximum size of {max_bytes} bytes")
    if file.size is not None and file.size > max_bytes:
        raise too_large

    # Never read more than one byte past the limit
    data = file.file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise too_large
    return Upload(data=data, filename=file.filename, content_type=file.content_type)


def read_image(file: UploadFile) -> Upload:
    return read_upload(file, get_settings().max_image_bytes, "Image")


def read_document(file: UploadFile) -> Upload:
    return read_upload(file, get_settings().max_document_bytes)
