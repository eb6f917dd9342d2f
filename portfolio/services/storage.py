"""Object storage for uploaded images and documents (S3 with an optional CDN)."""

import logging
import mimetypes
import uuid
from dataclasses import dataclass
from io import BytesIO

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from portfolio.config import Settings, get_settings
from portfolio.exceptions import BadRequest, InternalError

logger = logging.getLogger(__name__)

IMAGE_CONTENT_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}


@dataclass
class StoredFile:
    """Result of an upload."""

    url: str
    key: str
    filename: str | None
    content_type: str | None
    size_bytes: int


class StorageService:
    """Uploads files to the configured bucket and builds their public URLs."""

    def __init__(self, settings: Settings | None = None, client=None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                aws_access_key_id=self.settings.storage_access_key,
                aws_secret_access_key=self.settings.storage_secret_key,
                region_name=self.settings.storage_region,
                endpoint_url=self.settings.storage_endpoint_url,
            )
        return self._client

    @property
    def bucket(self) -> str:
        if not self.settings.storage_bucket:
            raise InternalError("File storage is not configured")
        return self.settings.storage_bucket

    def upload_image(
        self, data: bytes, filename: str | None, content_type: str | None, folder: str
    ) -> StoredFile:
        """Validate and upload an image. Raises ``BadRequest`` for bad type or size."""
        content_type = content_type or _guess_type(filename)
        if content_type not in IMAGE_CONTENT_TYPES:
            raise BadRequest("Only image files are allowed (jpeg, png, gif, webp)")
        if len(data) > self.settings.max_image_bytes:
            raise BadRequest(
                f"Image exceeds the maximum size of {self.settings.max_image_bytes} bytes"
            )
        return self._put(data, filename, content_type, folder)

    def upload_document(
        self, data: bytes, filename: str | None, content_type: str | None, folder: str
    ) -> StoredFile:
        """Upload an arbitrary document. Raises ``BadRequest`` when too large or empty."""
        if not data:
            raise BadRequest("Uploaded file is empty")
        if len(data) > self.settings.max_document_bytes:
            raise BadRequest(
                f"File exceeds the maximum size of {self.settings.max_document_bytes} bytes"
            )
        content_type = content_type or _guess_type(filename) or "application/octet-stream"
        return self._put(data, filename, content_type, folder)

    def delete_file(self, url_or_key: str) -> bool:
        """Delete a stored object by its public URL or key.

        Returns False when the URL does not belong to this storage. S3 errors
        raise ``InternalError``.
        """
        key = self.key_from_url(url_or_key)
        if not key:
            logger.warning(f"URL does not match the storage bucket or CDN: {url_or_key[:80]}")
            return False
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to delete {key} from storage: {e}", exc_info=True)
            raise InternalError(f"Failed to delete file: {e}") from e
        logger.info(f"Deleted {key} from storage")
        return True

    def replace_quietly(self, old_url: str | None) -> None:
        """Best-effort removal of a superseded upload; failures are only logged."""
        if not old_url:
            return
        try:
            self.delete_file(old_url)
        except InternalError as e:
            logger.warning(f"Could not delete previous file {old_url[:80]}: {e}")

    def public_url(self, key: str) -> str:
        s = self.settings
        if s.cdn_domain:
            return f"https://{s.cdn_domain.rstrip('/')}/{key}"
        if s.storage_endpoint_url:
            return f"{s.storage_endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{s.storage_region}.amazonaws.com/{key}"

    def key_from_url(self, url_or_key: str) -> str | None:
        if not url_or_key:
            return None
        if "://" not in url_or_key:
            return url_or_key.lstrip("/")

        s = self.settings
        prefixes = []
        if s.cdn_domain:
            prefixes.append(f"https://{s.cdn_domain.rstrip('/')}/")
        if s.storage_endpoint_url and s.storage_bucket:
            prefixes.append(f"{s.storage_endpoint_url.rstrip('/')}/{s.storage_bucket}/")
        if s.storage_bucket:
            prefixes.append(f"https://{s.storage_bucket}.s3.{s.storage_region}.amazonaws.com/")
            prefixes.append(f"https://{s.storage_bucket}.s3.amazonaws.com/")
        for prefix in prefixes:
            if url_or_key.startswith(prefix):
                return url_or_key[len(prefix):]
        return None

    def _put(self, data: bytes, filename: str | None, content_type: str, folder: str) -> StoredFile:
        key = f"{folder.strip('/')}/{uuid.uuid4().hex}{_extension(filename, content_type)}"
        try:
            self.client.upload_fileobj(
                BytesIO(data),
                self.bucket,
                key,
                ExtraArgs={"ContentType": content_type},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload {filename} to storage: {e}", exc_info=True)
            raise InternalError(f"Failed to upload file: {e}") from e

        logger.info(f"Uploaded {filename or key} ({len(data)} bytes) to {key}")
        return StoredFile(
            url=self.public_url(key),
            key=key,
            filename=filename,
            content_type=content_type,
            size_bytes=len(data),
        )


def _guess_type(filename: str | None) -> str | None:
    if not filename:
        return None
    return mimetypes.guess_type(filename)[0]


def _extension(filename: str | None, content_type: str) -> str:
    if filename and "." in filename:
        return "." + filename.rsplit(".", 1)[1].lower()
    return mimetypes.guess_extension(content_type) or ""
