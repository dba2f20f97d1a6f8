from __future__ import annotations

from advanced_alchemy.base import UUIDAuditBase
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .document_type import DocumentType


class KYCDocument(UUIDAuditBase):
    """Catalog entry for a document every company must keep on file."""

    __tablename__ = "kyc_document"
    name: Mapped[str] = mapped_column(String(length=255), index=True, nullable=False)
    document_type: Mapped[DocumentType] = mapped_column(default=DocumentType.RENEWAL, nullable=False)
    department: Mapped[str | None] = mapped_column(String(length=100), index=True, nullable=True, default=None)
    category: Mapped[str | None] = mapped_column(String(length=100), index=True, nullable=True, default=None)
    subcategory: Mapped[str | None] = mapped_column(String(length=100), index=True, nullable=True, default=None)
