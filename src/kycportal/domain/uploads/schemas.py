from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from typing import Any
from uuid import UUID  # noqa: TCH003

from litestar.datastructures import UploadFile  # noqa: TCH002

from kycportal.db.models.upload_version import UploadVersion
from kycportal.lib.schema import BaseStruct, CamelizedBaseStruct

__all__ = ("ExtractedDetailsUpdate", "SignedUrl", "Upload", "UploadBody", "UploadVersionUpdate")


class Upload(CamelizedBaseStruct):
    id: UUID
    company_id: UUID
    document_id: UUID
    file_path: str
    created_at: datetime
    version: UploadVersion = UploadVersion.RECENT
    issue_date: str | None = None
    expiry_date: str | None = None
    extracted_details: dict[str, Any] | None = None


class UploadBody(BaseStruct):
    file: list[UploadFile]
    issue_date: str | None = None
    expiry_date: str | None = None


class SignedUrl(CamelizedBaseStruct):
    id: UUID
    url: str
    file_name: str
    expires_in: int


class ExtractedDetailsUpdate(CamelizedBaseStruct):
    extracted_details: dict[str, Any]


class UploadVersionUpdate(CamelizedBaseStruct):
    version: UploadVersion
