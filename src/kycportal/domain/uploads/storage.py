"""Object storage for uploaded KYC files."""

from __future__ import annotations

import re
import time
from typing import TYPE_CHECKING, Any

import structlog
from s3fs import S3FileSystem

from kycportal.config import get_settings

if TYPE_CHECKING:
    from fsspec import AbstractFileSystem

logger = structlog.get_logger()

_TIMESTAMP_PREFIX = re.compile(r"^\d+_")


def build_storage_key(company_id: Any, document_id: Any, file_name: str, timestamp_ms: int | None = None) -> str:
    """Key of an uploaded file inside the bucket: ``{company}/{document}/{timestamp}_{name}``."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{company_id}/{document_id}/{timestamp_ms}_{file_name}"


def stored_file_name(file_path: str) -> str:
    """Last path segment without the upload timestamp."""
    return _TIMESTAMP_PREFIX.sub("", file_path.split("/")[-1])


def display_name(file_path: str) -> str:
    """File name without folders, upload timestamp or extension."""
    return stored_file_name(file_path).split(".")[0]


def get_filesystem() -> S3FileSystem:
    settings = get_settings()
    return S3FileSystem(
        endpoint_url=settings.storage.ENDPOINT_URL,
        key=settings.storage.ROOT_USER,
        secret=settings.storage.ROOT_PASSWORD,
        use_ssl=settings.storage.USE_SSL,
    )


class DocumentStorage:
    """Reads and writes KYC files below one bucket."""

    def __init__(self, fs: AbstractFileSystem | None = None, bucket: str | None = None) -> None:
        settings = get_settings()
        self.fs = fs if fs is not None else get_filesystem()
        self.bucket = bucket or settings.storage.BUCKET
        self.url_expiry = settings.storage.SIGNED_URL_EXPIRY

    def _path(self, key: str) -> str:
        return f"{self.bucket}/{key}"

    def save(self, key: str, content: bytes) -> str:
        with self.fs.open(self._path(key), "wb") as f:
            f.write(content)  # type: ignore
        logger.info("Stored upload", key=key, size=len(content))
        return key

    def read(self, key: str) -> bytes:
        with self.fs.open(self._path(key), "rb") as f:
            return f.read()  # type: ignore

    def signed_url(self, key: str, expires: int | None = None) -> str:
        return self.fs.url(path=self._path(key), expires=expires or self.url_expiry)

    def remove(self, key: str) -> None:
        self.fs.rm(self._path(key))
        logger.info("Removed upload", key=key)


def provide_document_storage() -> DocumentStorage:
    return DocumentStorage()
