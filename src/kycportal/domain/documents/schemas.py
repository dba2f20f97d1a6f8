from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

import msgspec

from kycportal.db.models.document_type import DocumentType
from kycportal.lib.schema import CamelizedBaseStruct

__all__ = ("DocumentTypeUpdate", "KYCDocument", "KYCDocumentCreate", "KYCDocumentUpdate")


class KYCDocument(CamelizedBaseStruct):
    id: UUID
    name: str
    document_type: DocumentType
    created_at: datetime
    updated_at: datetime
    department: str | None = None
    category: str | None = None
    subcategory: str | None = None


class KYCDocumentCreate(CamelizedBaseStruct):
    name: str
    document_type: DocumentType = DocumentType.RENEWAL
    department: str | None = None
    category: str | None = None
    subcategory: str | None = None


class KYCDocumentUpdate(CamelizedBaseStruct, omit_defaults=True):
    name: str | msgspec.UnsetType = msgspec.UNSET
    document_type: DocumentType | msgspec.UnsetType = msgspec.UNSET
    department: str | None | msgspec.UnsetType = msgspec.UNSET
    category: str | None | msgspec.UnsetType = msgspec.UNSET
    subcategory: str | None | msgspec.UnsetType = msgspec.UNSET


class DocumentTypeUpdate(CamelizedBaseStruct):
    document_type: DocumentType
