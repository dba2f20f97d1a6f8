from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from kycportal.db.models import DocumentType
from kycportal.domain.compliance.status import DocumentStatus, classify, days_left, expiry_status

from ..factories import make_upload

AS_OF = date(2024, 6, 1)


def test_missing_upload_is_pending() -> None:
    assert classify(None, DocumentType.RENEWAL, AS_OF) is DocumentStatus.PENDING
    assert classify(None, DocumentType.ONE_OFF, AS_OF) is DocumentStatus.PENDING


@pytest.mark.parametrize("document_type", [DocumentType.ONE_OFF, "one-off"])
def test_one_off_upload_is_always_valid(document_type: DocumentType | str) -> None:
    upload = make_upload(expiry_date="2000-01-01", extracted_details={"Expiry": "01/01/2001"})
    assert classify(upload, document_type, AS_OF) is DocumentStatus.VALID


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (-1, DocumentStatus.EXPIRED),
        (0, DocumentStatus.EXPIRING_SOON),
        (30, DocumentStatus.EXPIRING_SOON),
        (31, DocumentStatus.VALID),
        (-400, DocumentStatus.EXPIRED),
    ],
)
def test_expiry_thresholds(offset: int, expected: DocumentStatus) -> None:
    upload = make_upload(expiry_date=(AS_OF + timedelta(days=offset)).isoformat())
    assert classify(upload, DocumentType.RENEWAL, AS_OF) is expected


def test_extracted_expiry_drives_status() -> None:
    upload = make_upload(expiry_date="2024-01-01", extracted_details={"W.I.T": "2024-06-15"})
    assert days_left(date(2024, 6, 15), AS_OF) == 14
    assert classify(upload, DocumentType.RENEWAL, AS_OF) is DocumentStatus.EXPIRING_SOON


def test_day_first_column_date() -> None:
    upload = make_upload(expiry_date="31/12/2030")
    assert classify(upload, DocumentType.RENEWAL, date(2024, 1, 1)) is DocumentStatus.VALID


def test_unresolvable_expiry_is_unknown() -> None:
    upload = make_upload(expiry_date="sometime", extracted_details={"Holder": "Acme"})
    assert classify(upload, DocumentType.RENEWAL, AS_OF) is DocumentStatus.UNKNOWN


def test_time_of_day_is_ignored() -> None:
    upload = make_upload(expiry_date="2024-06-01")
    assert classify(upload, DocumentType.RENEWAL, datetime(2024, 6, 1, 23, 59)) is DocumentStatus.EXPIRING_SOON


def test_expiry_status_for_one_off_is_not_applicable() -> None:
    upload = make_upload(expiry_date="2000-01-01")
    assert expiry_status(upload, DocumentType.ONE_OFF, AS_OF) is DocumentStatus.NOT_APPLICABLE
    assert expiry_status(upload, DocumentType.RENEWAL, AS_OF) is DocumentStatus.EXPIRED


def test_written_out_extracted_expiry() -> None:
    upload = make_upload(extracted_details={"Expiry Date": "15 June 2024"})
    assert classify(upload, DocumentType.RENEWAL, AS_OF) is DocumentStatus.EXPIRING_SOON
