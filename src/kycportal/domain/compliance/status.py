"""Expiry classification of uploaded KYC documents."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

from kycportal.db.models.document_type import DocumentType

from .fields import resolve_expiry_date

EXPIRING_SOON_DAYS = 30


class DocumentStatus(str, Enum):
    PENDING = "Pending"
    VALID = "Valid"
    EXPIRING_SOON = "Expiring Soon"
    EXPIRED = "Expired"
    NOT_APPLICABLE = "N/A"
    UNKNOWN = "?"


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def is_one_off(document_type: Any) -> bool:
    if isinstance(document_type, DocumentType):
        return document_type is DocumentType.ONE_OFF
    return document_type == DocumentType.ONE_OFF.value


def days_left(expiry_date: date, as_of: date) -> int:
    """Whole calendar days from ``as_of`` until ``expiry_date``, negative once past."""
    return (_as_date(expiry_date) - _as_date(as_of)).days


def status_for_days_left(remaining: int) -> DocumentStatus:
    if remaining < 0:
        return DocumentStatus.EXPIRED
    if remaining <= EXPIRING_SOON_DAYS:
        return DocumentStatus.EXPIRING_SOON
    return DocumentStatus.VALID


def classify(upload: Any, document_type: Any, as_of: date) -> DocumentStatus:
    """Compliance status of ``upload`` for a document of ``document_type``.

    One-off documents are ``Valid`` once uploaded. Renewal documents are
    graded on the days left before the resolved expiry date, and are
    ``Unknown`` when no expiry date can be resolved.
    """
    if upload is None:
        return DocumentStatus.PENDING
    if is_one_off(document_type):
        return DocumentStatus.VALID
    expiry_date = resolve_expiry_date(upload)
    if expiry_date is None:
        return DocumentStatus.UNKNOWN
    return status_for_days_left(days_left(expiry_date, as_of))


def expiry_status(upload: Any, document_type: Any, as_of: date) -> DocumentStatus:
    if is_one_off(document_type):
        return DocumentStatus.NOT_APPLICABLE
    return classify(upload, document_type, as_of)
