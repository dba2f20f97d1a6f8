"""KYC compliance status derivation."""

from kycportal.domain.compliance.aggregate import (
    SortDirection,
    SortField,
    aggregate,
    build_overview,
    find_upload,
    missing_count,
    missing_documents,
    sort_companies,
)
from kycportal.domain.compliance.dates import format_date, resolve_date
from kycportal.domain.compliance.fields import (
    EXPIRY_ROLE,
    ISSUE_ROLE,
    DateRole,
    find_date_field,
    resolve_expiry_date,
    resolve_issue_date,
)
from kycportal.domain.compliance.status import DocumentStatus, classify, days_left, expiry_status

__all__ = [
    "EXPIRY_ROLE",
    "ISSUE_ROLE",
    "DateRole",
    "DocumentStatus",
    "SortDirection",
    "SortField",
    "aggregate",
    "build_overview",
    "classify",
    "days_left",
    "expiry_status",
    "find_date_field",
    "find_upload",
    "format_date",
    "missing_count",
    "missing_documents",
    "resolve_date",
    "resolve_expiry_date",
    "resolve_issue_date",
    "sort_companies",
]
