from __future__ import annotations

from typing import Annotated
from uuid import UUID  # noqa: TCH003

import structlog
from litestar import Controller, delete, get, patch, post
from litestar.di import Provide
from litestar.exceptions import NotFoundException
from litestar.params import Parameter

from kycportal.domain.documents.dependencies import provide_document_service
from kycportal.domain.documents.schemas import DocumentTypeUpdate, KYCDocument, KYCDocumentCreate, KYCDocumentUpdate
from kycportal.domain.documents.services import KYCDocumentService

from . import urls

logger = structlog.get_logger()


class KYCDocumentController(Controller):
    tags = ["Documents"]
    dependencies = {"document_service": Provide(provide_document_service)}
    signature_namespace = {
        "KYCDocumentService": KYCDocumentService,
        "KYCDocumentCreate": KYCDocumentCreate,
        "KYCDocumentUpdate": KYCDocumentUpdate,
        "DocumentTypeUpdate": DocumentTypeUpdate,
    }

    @get(
        operation_id="ListDocuments",
        name="documents:list",
        summary="List Documents",
        description="Retrieve the document definitions, optionally narrowed by catalog fields.",
        path=urls.DOCUMENT_LIST,
    )
    async def list_documents(
        self,
        document_service: KYCDocumentService,
        category: str | None = None,
        department: str | None = None,
        subcategory: str | None = None,
    ) -> list[KYCDocument]:
        """List document definitions."""
        documents = await document_service.list_catalog(
            category=category,
            department=department,
            subcategory=subcategory,
        )
        return [document_service.to_schema(document, schema_type=KYCDocument) for document in documents]

    @get(operation_id="GetDocument", name="documents:get", path=urls.DOCUMENT_DETAIL)
    async def get_document(
        self,
        document_service: KYCDocumentService,
        document_id: Annotated[UUID, Parameter(title="Document ID", description="The document to retrieve.")],
    ) -> KYCDocument:
        """Get a document definition."""
        document = await document_service.get_one_or_none(id=document_id)
        if not document:
            raise NotFoundException(detail=f"Document {document_id} is not found")
        return document_service.to_schema(document, schema_type=KYCDocument)

    @post(operation_id="CreateDocument", name="documents:create", path=urls.DOCUMENT_CREATE)
    async def create_document(self, document_service: KYCDocumentService, data: KYCDocumentCreate) -> KYCDocument:
        """Create a document definition."""
        document = await document_service.create(data.to_dict())
        logger.info("Document definition created", document_id=str(document.id), name=document.name)
        return document_service.to_schema(document, schema_type=KYCDocument)

    @patch(operation_id="UpdateDocument", name="documents:update", path=urls.DOCUMENT_UPDATE)
    async def update_document(
        self,
        document_service: KYCDocumentService,
        data: KYCDocumentUpdate,
        document_id: Annotated[UUID, Parameter(title="Document ID", description="The document to update.")],
    ) -> KYCDocument:
        document = await document_service.get_one_or_none(id=document_id)
        if not document:
            raise NotFoundException(detail=f"Document {document_id} is not found")
        document = await document_service.update(item_id=document_id, data=data.to_dict())
        return document_service.to_schema(document, schema_type=KYCDocument)

    @patch(
        operation_id="ReclassifyDocument",
        name="documents:reclassify",
        summary="Change the document type",
        path=urls.DOCUMENT_TYPE_UPDATE,
    )
    async def reclassify_document(
        self,
        document_service: KYCDocumentService,
        data: DocumentTypeUpdate,
        document_id: Annotated[UUID, Parameter(title="Document ID", description="The document to reclassify.")],
    ) -> KYCDocument:
        """Switch a document between one-off and renewal."""
        document = await document_service.get_one_or_none(id=document_id)
        if not document:
            raise NotFoundException(detail=f"Document {document_id} is not found")
        document = await document_service.reclassify(document_id, data.document_type)
        logger.info("Document reclassified", document_id=str(document_id), document_type=data.document_type.value)
        return document_service.to_schema(document, schema_type=KYCDocument)

    @delete(operation_id="DeleteDocument", name="documents:delete", path=urls.DOCUMENT_DELETE)
    async def delete_document(
        self,
        document_service: KYCDocumentService,
        document_id: Annotated[UUID, Parameter(title="Document ID", description="The document to delete.")],
    ) -> None:
        document = await document_service.get_one_or_none(id=document_id)
        if not document:
            raise NotFoundException(detail=f"Document {document_id} is not found")
        await document_service.delete(document_id)
