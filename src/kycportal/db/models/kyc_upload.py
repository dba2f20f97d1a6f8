from __future__ import annotations

from typing import Any
from uuid import UUID

from advanced_alchemy.base import UUIDAuditBase
from sqlalchemy import JSON, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from .upload_version import UploadVersion


class KYCUpload(UUIDAuditBase):
    __tablename__ = "kyc_upload"
    company_id: Mapped[UUID] = mapped_column(ForeignKey("company.id", ondelete="cascade"), index=True, nullable=False)
    document_id: Mapped[UUID] = mapped_column(
        ForeignKey("kyc_document.id", ondelete="cascade"), index=True, nullable=False
    )
    file_path: Mapped[str] = mapped_column(String(length=255), nullable=False)
    version: Mapped[UploadVersion] = mapped_column(default=UploadVersion.RECENT, nullable=False)
    # dates are kept as received and resolved when read
    issue_date: Mapped[str | None] = mapped_column(String(length=50), nullable=True, default=None)
    expiry_date: Mapped[str | None] = mapped_column(String(length=50), nullable=True, default=None)
    # plain JSON keeps key order, which decides the first matching date key
    extracted_details: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True, default=None)
