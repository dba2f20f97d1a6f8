from __future__ import annotations

import mimetypes
from typing import Annotated
from uuid import UUID  # noqa: TCH003

import structlog
from litestar import Controller, Response, delete, get, patch, post
from litestar.di import Provide
from litestar.enums import RequestEncodingType
from litestar.exceptions import HTTPException, NotFoundException
from litestar.params import Body, Parameter

from kycportal.db.models import KYCUpload
from kycportal.domain.companies.dependencies import provide_company_service
from kycportal.domain.companies.services import CompanyService
from kycportal.domain.documents.dependencies import provide_document_service
from kycportal.domain.documents.services import KYCDocumentService

from . import urls
from .dependencies import provide_upload_service
from .schemas import ExtractedDetailsUpdate, SignedUrl, Upload, UploadBody, UploadVersionUpdate
from .services import KYCUploadService
from .storage import DocumentStorage, build_storage_key, provide_document_storage, stored_file_name

logger = structlog.get_logger()


class UploadController(Controller):
    tags = ["Uploads"]
    dependencies = {
        "upload_service": Provide(provide_upload_service),
        "company_service": Provide(provide_company_service),
        "document_service": Provide(provide_document_service),
        "storage": Provide(provide_document_storage, sync_to_thread=False),
    }
    signature_namespace = {
        "KYCUploadService": KYCUploadService,
        "CompanyService": CompanyService,
        "KYCDocumentService": KYCDocumentService,
        "DocumentStorage": DocumentStorage,
        "UploadBody": UploadBody,
        "ExtractedDetailsUpdate": ExtractedDetailsUpdate,
        "UploadVersionUpdate": UploadVersionUpdate,
    }

    async def _get_upload(self, upload_service: KYCUploadService, upload_id: UUID) -> KYCUpload:
        upload = await upload_service.get_one_or_none(id=upload_id)
        if not upload:
            raise NotFoundException(detail=f"Upload {upload_id} is not found")
        return upload

    @get(
        operation_id="ListUploads",
        name="uploads:list",
        description="List uploads, optionally for one company or document.",
        path=urls.UPLOAD_LIST,
    )
    async def list_uploads(
        self,
        upload_service: KYCUploadService,
        company_id: UUID | None = None,
        document_id: UUID | None = None,
    ) -> list[Upload]:
        uploads = await upload_service.list_uploads(company_id=company_id, document_id=document_id)
        return [upload_service.to_schema(upload, schema_type=Upload) for upload in uploads]

    @post(
        operation_id="CreateUploads",
        name="uploads:create",
        description="Upload one or more files for a company document.",
        path=urls.UPLOAD_CREATE,
    )
    async def create_uploads(
        self,
        upload_service: KYCUploadService,
        company_service: CompanyService,
        document_service: KYCDocumentService,
        storage: DocumentStorage,
        company_id: UUID,
        document_id: UUID,
        data: Annotated[UploadBody, Body(media_type=RequestEncodingType.MULTI_PART)],
    ) -> list[Upload]:
        if not await company_service.get_one_or_none(id=company_id):
            raise NotFoundException(detail=f"Company {company_id} is not found")
        if not await document_service.get_one_or_none(id=document_id):
            raise NotFoundException(detail=f"Document {document_id} is not found")

        uploads: list[Upload] = []
        for file in data.file:
            content = await file.read()
            key = build_storage_key(company_id, document_id, file.filename)
            try:
                storage.save(key, content)
            except Exception as e:
                logger.exception("Storage upload failed", key=key)
                raise HTTPException(detail=f"Failed to store {file.filename}: {e!s}", status_code=502) from e
            upload = await upload_service.create(
                KYCUpload(
                    company_id=company_id,
                    document_id=document_id,
                    file_path=key,
                    issue_date=data.issue_date or None,
                    expiry_date=data.expiry_date or None,
                ),
            )
            uploads.append(upload_service.to_schema(upload, schema_type=Upload))
        return uploads

    @get(operation_id="GetUpload", name="uploads:get", path=urls.UPLOAD_DETAIL)
    async def get_upload(
        self,
        upload_service: KYCUploadService,
        upload_id: Annotated[UUID, Parameter(title="Upload ID", description="The upload to retrieve.")],
    ) -> Upload:
        upload = await self._get_upload(upload_service, upload_id)
        return upload_service.to_schema(upload, schema_type=Upload)

    @get(
        operation_id="GetUploadSignedUrl",
        name="uploads:signed-url",
        description="Short lived URL for viewing the stored file.",
        path=urls.UPLOAD_SIGNED_URL,
    )
    async def get_signed_url(
        self,
        upload_service: KYCUploadService,
        storage: DocumentStorage,
        upload_id: UUID,
    ) -> SignedUrl:
        upload = await self._get_upload(upload_service, upload_id)
        try:
            url = storage.signed_url(upload.file_path)
        except Exception as e:
            logger.exception("Could not sign upload URL", upload_id=str(upload_id))
            raise HTTPException(detail="Failed to create signed URL", status_code=502) from e
        return SignedUrl(
            id=upload.id,
            url=url,
            file_name=upload.file_path.split("/")[-1] or "document",
            expires_in=storage.url_expiry,
        )

    @get(operation_id="GetUploadContent", name="uploads:content", path=urls.UPLOAD_CONTENT)
    async def get_upload_content(
        self,
        upload_service: KYCUploadService,
        storage: DocumentStorage,
        upload_id: UUID,
    ) -> Response[bytes]:
        upload = await self._get_upload(upload_service, upload_id)
        try:
            content = storage.read(upload.file_path)
        except Exception as e:
            raise HTTPException(detail=f"Failed to read document: {e!s}", status_code=500) from e
        mime_type, _ = mimetypes.guess_type(upload.file_path)
        return Response(
            content=content,
            media_type=mime_type or "application/octet-stream",
            headers={"Content-Disposition": f'attachment; filename="{stored_file_name(upload.file_path)}"'},
        )

    @patch(
        operation_id="UpdateExtractedDetails",
        name="uploads:extracted-details",
        description="Replace the extracted details of an upload.",
        path=urls.UPLOAD_EXTRACTED_DETAILS,
    )
    async def update_extracted_details(
        self,
        upload_service: KYCUploadService,
        upload_id: UUID,
        data: ExtractedDetailsUpdate,
    ) -> Upload:
        await self._get_upload(upload_service, upload_id)
        upload = await upload_service.set_extracted_details(upload_id, data.extracted_details)
        return upload_service.to_schema(upload, schema_type=Upload)

    @patch(
        operation_id="UpdateUploadVersion",
        name="uploads:version",
        description="Mark an upload as the recent or a past copy of its document.",
        path=urls.UPLOAD_VERSION,
    )
    async def update_upload_version(
        self,
        upload_service: KYCUploadService,
        upload_id: UUID,
        data: UploadVersionUpdate,
    ) -> Upload:
        await self._get_upload(upload_service, upload_id)
        upload = await upload_service.set_version(upload_id, data.version)
        logger.info("Upload version changed", upload_id=str(upload_id), version=data.version.value)
        return upload_service.to_schema(upload, schema_type=Upload)

    @delete(operation_id="DeleteUpload", name="uploads:delete", path=urls.UPLOAD_DELETE)
    async def delete_upload(
        self,
        upload_service: KYCUploadService,
        storage: DocumentStorage,
        upload_id: UUID,
    ) -> None:
        """Remove the stored file, then its record."""
        upload = await self._get_upload(upload_service, upload_id)
        try:
            storage.remove(upload.file_path)
        except Exception as e:
            logger.exception("Error deleting document", upload_id=str(upload_id))
            raise HTTPException(detail="Failed to delete stored document", status_code=502) from e
        await upload_service.delete(upload.id)
