from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import httpx
import pytest
from litestar.di import Provide
from litestar.status_codes import HTTP_200_OK, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND, HTTP_502_BAD_GATEWAY
from litestar.testing import create_test_client

from kycportal.domain.dispatch.controller import DispatchController
from kycportal.domain.dispatch.services import DocumentDispatcher

from ..factories import make_company, make_upload
from .fakes import FakeCompanyService, FakeUploadService

if TYPE_CHECKING:
    from kycportal.db.models import Company, KYCDocument


@pytest.fixture()
def acme() -> Company:
    return make_company("Acme Ltd", contact_phone="0712 345 678")


def build_controller(
    company: Company,
    document: KYCDocument,
    handler: httpx.MockTransport,
) -> tuple[type[DispatchController], list]:
    uploads = [
        make_upload(company, document, file_path=f"{company.id}/{document.id}/1700000000000_licence.pdf"),
        make_upload(company, document, file_path=f"{company.id}/{document.id}/1700000000001_renewal.pdf"),
    ]

    class DispatchUnderTest(DispatchController):
        dependencies = {
            "company_service": Provide(lambda: FakeCompanyService([company]), sync_to_thread=False),
            "upload_service": Provide(lambda: FakeUploadService(uploads), sync_to_thread=False),
            "dispatcher": Provide(lambda: DocumentDispatcher(transport=handler), sync_to_thread=False),
        }

    return DispatchUnderTest, uploads


def test_whatsapp_uses_company_phone(acme: Company, renewal_document: KYCDocument) -> None:
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"ok": True})

    controller, uploads = build_controller(acme, renewal_document, httpx.MockTransport(handler))
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(f"/api/companies/{acme.id}/dispatch", json={"method": "whatsapp"})

    assert response.status_code == HTTP_200_OK
    assert response.json() == {
        "method": "whatsapp",
        "recipient": "+10712345678",
        "documents": [upload.file_path for upload in uploads],
    }
    assert len(sent) == 1


def test_email_with_selected_uploads(acme: Company, renewal_document: KYCDocument) -> None:
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json={"ok": True})

    controller, uploads = build_controller(acme, renewal_document, httpx.MockTransport(handler))
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(
            f"/api/companies/{acme.id}/dispatch",
            json={"method": "email", "email": "ops@example.com", "uploadIds": [str(uploads[1].id)]},
        )

    assert response.status_code == HTTP_200_OK
    assert response.json()["documents"] == [uploads[1].file_path]
    assert str(sent[0].url) == "http://messaging.test/send-email"


def test_email_without_recipient_is_rejected(acme: Company, renewal_document: KYCDocument) -> None:
    controller, _ = build_controller(acme, renewal_document, httpx.MockTransport(lambda r: httpx.Response(200)))
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(f"/api/companies/{acme.id}/dispatch", json={"method": "email"})
    assert response.status_code == HTTP_400_BAD_REQUEST


def test_no_selected_documents(acme: Company, renewal_document: KYCDocument) -> None:
    controller, _ = build_controller(acme, renewal_document, httpx.MockTransport(lambda r: httpx.Response(200)))
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(
            f"/api/companies/{acme.id}/dispatch",
            json={"method": "whatsapp", "uploadIds": [str(uuid4())]},
        )
    assert response.status_code == HTTP_400_BAD_REQUEST


def test_unknown_company(acme: Company, renewal_document: KYCDocument) -> None:
    controller, _ = build_controller(acme, renewal_document, httpx.MockTransport(lambda r: httpx.Response(200)))
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(f"/api/companies/{uuid4()}/dispatch", json={"method": "whatsapp"})
    assert response.status_code == HTTP_404_NOT_FOUND


def test_endpoint_failure_is_bad_gateway(acme: Company, renewal_document: KYCDocument) -> None:
    transport = httpx.MockTransport(lambda r: httpx.Response(503, json={"message": "WhatsApp unavailable"}))
    controller, _ = build_controller(acme, renewal_document, transport)
    with create_test_client(route_handlers=[controller]) as client:
        response = client.post(f"/api/companies/{acme.id}/dispatch", json={"method": "whatsapp"})
    assert response.status_code == HTTP_502_BAD_GATEWAY
    assert response.json()["detail"] == "WhatsApp unavailable"
