from __future__ import annotations

from datetime import date

import pytest

from kycportal.db.models import Company, KYCDocument
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
from kycportal.domain.compliance.status import DocumentStatus, classify

from ..factories import make_company, make_upload

AS_OF = date(2024, 6, 1)


def test_aggregate_counts_presence(
    companies: list[Company],
    renewal_document: KYCDocument,
    one_off_document: KYCDocument,
) -> None:
    first, second, _ = companies
    uploads = [
        make_upload(first, renewal_document, expiry_date="2020-01-01"),
        make_upload(first, renewal_document),
        make_upload(second, renewal_document),
    ]
    stats = aggregate([renewal_document, one_off_document], companies, uploads)

    assert stats[renewal_document.id].total == 3
    assert stats[renewal_document.id].complete == 2
    assert stats[renewal_document.id].pending == 1
    assert stats[one_off_document.id].complete == 0
    assert stats[one_off_document.id].pending == 3


def test_aggregate_ignores_uploads_of_unknown_companies(
    companies: list[Company],
    renewal_document: KYCDocument,
) -> None:
    stranger = make_company("Not Listed")
    uploads = [make_upload(stranger, renewal_document), make_upload(companies[0], renewal_document)]
    stats = aggregate([renewal_document], companies, uploads)[renewal_document.id]

    assert stats.complete == 1
    assert stats.complete + stats.pending == stats.total == len(companies)


def test_aggregate_without_companies(renewal_document: KYCDocument) -> None:
    stats = aggregate([renewal_document], [], [make_upload(document=renewal_document)])[renewal_document.id]
    assert (stats.total, stats.complete, stats.pending) == (0, 0, 0)


def test_missing_documents_keep_catalog_order(
    companies: list[Company],
    renewal_document: KYCDocument,
    one_off_document: KYCDocument,
) -> None:
    documents = [renewal_document, one_off_document]
    uploads = [make_upload(companies[0], one_off_document)]

    assert missing_documents(companies[0].id, documents, uploads) == [renewal_document]
    assert missing_documents(companies[1].id, documents, uploads) == documents
    assert missing_count(companies[1].id, documents, uploads) == 2


def test_company_without_upload_is_pending_and_missing(
    companies: list[Company],
    renewal_document: KYCDocument,
) -> None:
    company = companies[2]
    uploads = [make_upload(companies[0], renewal_document)]
    upload = find_upload(uploads, renewal_document.id, company.id)

    assert upload is None
    assert classify(upload, renewal_document.document_type, AS_OF) is DocumentStatus.PENDING
    assert renewal_document in missing_documents(company.id, [renewal_document], uploads)


def test_find_upload_matches_string_ids(companies: list[Company], renewal_document: KYCDocument) -> None:
    upload = make_upload(companies[0], renewal_document)
    assert find_upload([upload], str(renewal_document.id), str(companies[0].id)) is upload


@pytest.mark.parametrize(
    ("field", "direction", "expected"),
    [
        (SortField.COMPANY, SortDirection.ASC, ["alpha Traders", "Beta Holdings", "Gamma Logistics"]),
        (SortField.COMPANY, SortDirection.DESC, ["Gamma Logistics", "Beta Holdings", "alpha Traders"]),
        ("#", "asc", ["Gamma Logistics", "Beta Holdings", "alpha Traders"]),
        (SortField.DAYS_LEFT, SortDirection.DESC, ["Beta Holdings", "alpha Traders", "Gamma Logistics"]),
        (None, SortDirection.ASC, ["Beta Holdings", "alpha Traders", "Gamma Logistics"]),
    ],
)
def test_sort_companies(
    companies: list[Company],
    field: SortField | str | None,
    direction: SortDirection | str,
    expected: list[str],
) -> None:
    assert [company.name for company in sort_companies(companies, field, direction)] == expected


def test_build_overview(
    companies: list[Company],
    renewal_document: KYCDocument,
    one_off_document: KYCDocument,
) -> None:
    first, second, third = companies
    uploads = [
        make_upload(first, renewal_document, issue_date="01/06/2023", extracted_details={"W.I.T": "2024-06-15"}),
        make_upload(first, one_off_document),
        make_upload(second, renewal_document, expiry_date="2024-05-31"),
        make_upload(third, renewal_document),
    ]
    overview = build_overview(
        [renewal_document, one_off_document],
        companies,
        uploads,
        AS_OF,
        sort_field=SortField.COMPANY,
    )

    assert overview.as_of == AS_OF
    assert [column.stats.complete for column in overview.documents] == [3, 1]
    assert [row.company_name for row in overview.companies] == ["alpha Traders", "Beta Holdings", "Gamma Logistics"]

    rows = {row.company_id: row for row in overview.companies}
    renewal_cell, one_off_cell = rows[first.id].cells
    assert renewal_cell.status is DocumentStatus.EXPIRING_SOON
    assert renewal_cell.issue_date == date(2023, 6, 1)
    assert renewal_cell.expiry_date == date(2024, 6, 15)
    assert renewal_cell.days_left == 14
    assert one_off_cell.status is DocumentStatus.VALID
    assert one_off_cell.expiry_status is DocumentStatus.NOT_APPLICABLE
    assert one_off_cell.days_left is None
    assert rows[first.id].missing_count == 0

    assert rows[second.id].cells[0].status is DocumentStatus.EXPIRED
    assert rows[second.id].cells[0].days_left == -1
    assert rows[second.id].cells[1].status is DocumentStatus.PENDING
    assert rows[second.id].missing_count == 1

    assert rows[third.id].cells[0].status is DocumentStatus.UNKNOWN
    assert rows[third.id].cells[0].expiry_date is None
