from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND
from litestar.testing import create_test_client

from kycportal.db.models import DocumentType
from kycportal.domain.companies.controller import CompanyController
from kycportal.domain.documents.controller import KYCDocumentController
from kycportal.lib.dependencies import create_collection_dependencies

from ..factories import make_document, make_upload
from .fakes import FakeCompanyService, FakeDocumentService, FakeUploadService

if TYPE_CHECKING:
    from kycportal.db.models import Company, KYCDocument


def test_missing_documents(
    companies: list[Company],
    renewal_document: KYCDocument,
    one_off_document: KYCDocument,
) -> None:
    first, second, _ = companies
    tax_document = make_document("Tax Compliance", department="Finance", category="tax")
    documents = [renewal_document, one_off_document, tax_document]
    uploads = [make_upload(first, renewal_document), make_upload(second, one_off_document)]

    class CompaniesUnderTest(CompanyController):
        dependencies = {
            "company_service": Provide(lambda: FakeCompanyService(companies), sync_to_thread=False),
            "document_service": Provide(lambda: FakeDocumentService(documents), sync_to_thread=False),
            "upload_service": Provide(lambda: FakeUploadService(uploads), sync_to_thread=False),
        }

    with create_test_client(
        route_handlers=[CompaniesUnderTest],
        dependencies=create_collection_dependencies(),
    ) as client:
        missing = client.get(f"/api/companies/{first.id}/missing-documents")
        legal_only = client.get(f"/api/companies/{first.id}/missing-documents", params={"department": "Legal"})
        unknown = client.get(f"/api/companies/{uuid4()}/missing-documents")

    assert missing.status_code == HTTP_200_OK
    assert [document["name"] for document in missing.json()] == ["Certificate of Incorporation", "Tax Compliance"]
    assert [document["name"] for document in legal_only.json()] == ["Certificate of Incorporation"]
    assert unknown.status_code == HTTP_404_NOT_FOUND


def test_reclassify_document(renewal_document: KYCDocument) -> None:
    class DocumentsUnderTest(KYCDocumentController):
        dependencies = {
            "document_service": Provide(lambda: FakeDocumentService([renewal_document]), sync_to_thread=False),
        }

    with create_test_client(route_handlers=[DocumentsUnderTest]) as client:
        response = client.patch(f"/api/documents/{renewal_document.id}/type", json={"documentType": "one-off"})
        invalid = client.patch(f"/api/documents/{renewal_document.id}/type", json={"documentType": "yearly"})
        unknown = client.patch(f"/api/documents/{uuid4()}/type", json={"documentType": "renewal"})

    assert response.status_code == HTTP_200_OK
    assert response.json()["documentType"] == "one-off"
    assert renewal_document.document_type is DocumentType.ONE_OFF
    assert invalid.status_code == HTTP_400_BAD_REQUEST
    assert unknown.status_code == HTTP_404_NOT_FOUND
