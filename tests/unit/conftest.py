from __future__ import annotations

import pytest

from kycportal.db.models import Company, DocumentType, KYCDocument

from .factories import make_company, make_document


@pytest.fixture()
def companies() -> list[Company]:
    return [
        make_company("Beta Holdings", registration_number="C-002"),
        make_company("alpha Traders", registration_number="C-003"),
        make_company("Gamma Logistics", registration_number="C-001"),
    ]


@pytest.fixture()
def renewal_document() -> KYCDocument:
    return make_document("Trade Licence", DocumentType.RENEWAL, department="Legal", category="company")


@pytest.fixture()
def one_off_document() -> KYCDocument:
    return make_document("Certificate of Incorporation", DocumentType.ONE_OFF, department="Legal", category="company")
