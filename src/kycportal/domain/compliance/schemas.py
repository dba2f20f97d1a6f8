from __future__ import annotations

from datetime import date  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

from kycportal.db.models.document_type import DocumentType
from kycportal.lib.schema import CamelizedBaseStruct

from .status import DocumentStatus

__all__ = (
    "CompanyRow",
    "ComplianceOverview",
    "DocumentCell",
    "DocumentColumn",
    "DocumentStats",
)


class DocumentStats(CamelizedBaseStruct):
    """Presence counts for one document across all companies."""

    total: int
    complete: int
    pending: int


class DocumentCell(CamelizedBaseStruct):
    """Compliance state of one company/document pair."""

    document_id: UUID
    status: DocumentStatus
    expiry_status: DocumentStatus
    upload_id: UUID | None = None
    upload_count: int = 0
    issue_date: date | None = None
    expiry_date: date | None = None
    days_left: int | None = None


class DocumentColumn(CamelizedBaseStruct):
    id: UUID
    name: str
    document_type: DocumentType
    stats: DocumentStats
    department: str | None = None
    category: str | None = None
    subcategory: str | None = None


class CompanyRow(CamelizedBaseStruct):
    company_id: UUID
    company_name: str
    missing_count: int
    cells: list[DocumentCell]
    registration_number: str | None = None


class ComplianceOverview(CamelizedBaseStruct):
    as_of: date
    documents: list[DocumentColumn]
    companies: list[CompanyRow]
