"""Dashboard level folds over companies, document definitions and uploads."""

from __future__ import annotations

from collections import defaultdict
from enum import Enum
from typing import TYPE_CHECKING, Any

from .dates import resolve_date
from .fields import resolve_expiry_date, resolve_issue_date
from .schemas import CompanyRow, ComplianceOverview, DocumentCell, DocumentColumn, DocumentStats
from .status import classify, days_left, expiry_status, is_one_off

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

PairKey = tuple[str, str]


class SortField(str, Enum):
    COMPANY = "company"
    NUMBER = "#"
    ISSUE_DATE = "issueDate"
    EXPIRY_DATE = "expiryDate"
    DAYS_LEFT = "daysLeft"
    STATUS = "status"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _pair(document_id: Any, company_id: Any) -> PairKey:
    return str(document_id), str(company_id)


def index_uploads(uploads: Iterable[Any]) -> dict[PairKey, list[Any]]:
    """Group uploads by ``(document_id, company_id)``, keeping input order inside each group."""
    index: dict[PairKey, list[Any]] = defaultdict(list)
    for upload in uploads:
        index[_pair(upload.document_id, upload.company_id)].append(upload)
    return index


def find_upload(uploads: Iterable[Any], document_id: Any, company_id: Any) -> Any | None:
    key = _pair(document_id, company_id)
    return next((u for u in uploads if _pair(u.document_id, u.company_id) == key), None)


def aggregate(
    documents: Sequence[Any],
    companies: Sequence[Any],
    uploads: Iterable[Any],
) -> dict[Any, DocumentStats]:
    """Uploaded vs not uploaded counts per document.

    A company counts as complete for a document as soon as one upload exists
    for the pair, whatever its expiry state.
    """
    uploaded = index_uploads(uploads)
    total = len(companies)
    stats: dict[Any, DocumentStats] = {}
    for document in documents:
        complete = sum(1 for company in companies if _pair(document.id, company.id) in uploaded)
        stats[document.id] = DocumentStats(total=total, complete=complete, pending=total - complete)
    return stats


def missing_documents(company_id: Any, documents: Sequence[Any], uploads: Iterable[Any]) -> list[Any]:
    uploaded = index_uploads(uploads)
    return [document for document in documents if _pair(document.id, company_id) not in uploaded]


def missing_count(company_id: Any, documents: Sequence[Any], uploads: Iterable[Any]) -> int:
    return len(missing_documents(company_id, documents, uploads))


def sort_companies(
    companies: Iterable[Any],
    field: SortField | str | None = None,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Any]:
    """Order dashboard rows by company name or number; other fields keep input order."""
    reverse = SortDirection(direction) is SortDirection.DESC
    rows = list(companies)
    if field == SortField.COMPANY:
        return sorted(rows, key=lambda c: (c.name or "").casefold(), reverse=reverse)
    if field == SortField.NUMBER:
        return sorted(rows, key=_company_number, reverse=reverse)
    return rows


def _company_number(company: Any) -> tuple[bool, str, str]:
    number = getattr(company, "registration_number", None)
    return number is None, number or "", str(company.id)


def document_cell(document: Any, uploads: Sequence[Any], as_of: date) -> DocumentCell:
    """Issue date, expiry date, days left and status shown for one pair."""
    upload = uploads[0] if uploads else None
    document_type = document.document_type
    issue_date = resolve_issue_date(upload)
    expiry_date = None if is_one_off(document_type) else resolve_expiry_date(upload)
    return DocumentCell(
        document_id=document.id,
        status=classify(upload, document_type, as_of),
        expiry_status=expiry_status(upload, document_type, as_of),
        upload_id=getattr(upload, "id", None),
        upload_count=len(uploads),
        issue_date=issue_date,
        expiry_date=expiry_date,
        days_left=days_left(expiry_date, as_of) if expiry_date else None,
    )


def build_overview(
    documents: Sequence[Any],
    companies: Sequence[Any],
    uploads: Sequence[Any],
    as_of: date,
    sort_field: SortField | str | None = None,
    sort_direction: SortDirection | str = SortDirection.ASC,
) -> ComplianceOverview:
    """Assemble the company by document compliance matrix."""
    as_of = resolve_date(as_of) or as_of
    uploaded = index_uploads(uploads)
    stats = aggregate(documents, companies, uploads)
    columns = [
        DocumentColumn(
            id=document.id,
            name=document.name,
            document_type=document.document_type,
            stats=stats[document.id],
            department=getattr(document, "department", None),
            category=getattr(document, "category", None),
            subcategory=getattr(document, "subcategory", None),
        )
        for document in documents
    ]
    rows = []
    for company in sort_companies(companies, sort_field, sort_direction):
        cells = [
            document_cell(document, uploaded.get(_pair(document.id, company.id), []), as_of)
            for document in documents
        ]
        rows.append(
            CompanyRow(
                company_id=company.id,
                company_name=company.name,
                missing_count=sum(1 for cell in cells if cell.upload_count == 0),
                cells=cells,
                registration_number=getattr(company, "registration_number", None),
            )
        )
    return ComplianceOverview(as_of=as_of, documents=columns, companies=rows)
