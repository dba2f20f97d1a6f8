from __future__ import annotations

from uuid import UUID  # noqa: TCH003

import structlog
from litestar import Controller, post
from litestar.di import Provide
from litestar.exceptions import HTTPException, NotFoundException

from kycportal.domain.companies.dependencies import provide_company_service
from kycportal.domain.companies.services import CompanyService
from kycportal.domain.uploads.dependencies import provide_upload_service
from kycportal.domain.uploads.services import KYCUploadService

from . import urls
from .schemas import DispatchRequest, DispatchResult, SendingMethod
from .services import DispatchError, DocumentDispatcher, provide_dispatcher

logger = structlog.get_logger()


class DispatchController(Controller):
    tags = ["Dispatch"]
    dependencies = {
        "company_service": Provide(provide_company_service),
        "upload_service": Provide(provide_upload_service),
        "dispatcher": Provide(provide_dispatcher, sync_to_thread=False),
    }
    signature_namespace = {
        "CompanyService": CompanyService,
        "KYCUploadService": KYCUploadService,
        "DocumentDispatcher": DocumentDispatcher,
        "DispatchRequest": DispatchRequest,
    }

    @post(
        operation_id="DispatchDocuments",
        name="dispatch:send",
        description="Send a company's uploaded documents by email or WhatsApp.",
        path=urls.DISPATCH_DOCUMENTS,
        status_code=200,
    )
    async def dispatch_documents(
        self,
        company_service: CompanyService,
        upload_service: KYCUploadService,
        dispatcher: DocumentDispatcher,
        company_id: UUID,
        data: DispatchRequest,
    ) -> DispatchResult:
        company = await company_service.get_one_or_none(id=company_id)
        if not company:
            raise NotFoundException(detail=f"Company {company_id} is not found")

        uploads = await upload_service.list_uploads(company_id=company_id)
        if data.upload_ids is not None:
            selected = {str(upload_id) for upload_id in data.upload_ids}
            uploads = [upload for upload in uploads if str(upload.id) in selected]
        if not uploads:
            raise HTTPException(detail="No documents found", status_code=400)
        file_paths = [upload.file_path for upload in uploads]

        try:
            if data.method is SendingMethod.EMAIL:
                recipient = data.email or company.contact_email
                if not recipient:
                    raise HTTPException(detail="Please enter an email address", status_code=400)
                await dispatcher.send_email(recipient, company.name, file_paths)
            else:
                phone = data.phone or company.contact_phone
                if not phone:
                    raise HTTPException(detail="Please enter a phone number", status_code=400)
                recipient = await dispatcher.send_whatsapp(phone, company.name, file_paths)
        except DispatchError as err:
            raise HTTPException(detail=str(err), status_code=502) from err

        return DispatchResult(method=data.method, recipient=recipient, documents=file_paths)
