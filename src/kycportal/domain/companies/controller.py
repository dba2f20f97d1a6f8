from __future__ import annotations

from typing import Annotated
from uuid import UUID  # noqa: TCH003

import structlog
from advanced_alchemy.filters import LimitOffset  # noqa: TCH002
from advanced_alchemy.service import OffsetPagination  # noqa: TCH002
from litestar import Controller, delete, get, patch, post
from litestar.di import Provide
from litestar.exceptions import NotFoundException
from litestar.params import Parameter

from kycportal.domain.companies.dependencies import provide_company_service
from kycportal.domain.companies.schemas import Company, CompanyCreate, CompanyUpdate
from kycportal.domain.companies.services import CompanyService
from kycportal.domain.compliance.aggregate import missing_documents
from kycportal.domain.documents.dependencies import provide_document_service
from kycportal.domain.documents.schemas import KYCDocument
from kycportal.domain.documents.services import KYCDocumentService
from kycportal.domain.uploads.dependencies import provide_upload_service
from kycportal.domain.uploads.services import KYCUploadService

from . import urls

logger = structlog.get_logger()


class CompanyController(Controller):
    tags = ["Companies"]
    dependencies = {
        "company_service": Provide(provide_company_service),
        "document_service": Provide(provide_document_service),
        "upload_service": Provide(provide_upload_service),
    }
    signature_namespace = {
        "CompanyService": CompanyService,
        "KYCDocumentService": KYCDocumentService,
        "KYCUploadService": KYCUploadService,
        "CompanyCreate": CompanyCreate,
        "CompanyUpdate": CompanyUpdate,
    }

    @get(
        operation_id="ListCompanies",
        name="companies:list",
        summary="List Companies",
        path=urls.COMPANY_LIST,
    )
    async def list_companies(
        self,
        company_service: CompanyService,
        limit_offset: LimitOffset,
    ) -> OffsetPagination[Company]:
        """List companies by name."""
        filters = [limit_offset]
        companies, total = await company_service.list_and_count(*filters, order_by=[("name", False)])
        return company_service.to_schema(companies, total=total, filters=filters, schema_type=Company)

    @get(operation_id="GetCompany", name="companies:get", path=urls.COMPANY_DETAIL)
    async def get_company(
        self,
        company_service: CompanyService,
        company_id: Annotated[UUID, Parameter(title="Company ID", description="The company to retrieve.")],
    ) -> Company:
        company = await company_service.get_one_or_none(id=company_id)
        if not company:
            raise NotFoundException(detail=f"Company {company_id} is not found")
        return company_service.to_schema(company, schema_type=Company)

    @post(operation_id="CreateCompany", name="companies:create", path=urls.COMPANY_CREATE)
    async def create_company(self, company_service: CompanyService, data: CompanyCreate) -> Company:
        company = await company_service.create(data.to_dict())
        logger.info("Company created", company_id=str(company.id))
        return company_service.to_schema(company, schema_type=Company)

    @patch(operation_id="UpdateCompany", name="companies:update", path=urls.COMPANY_UPDATE)
    async def update_company(
        self,
        company_service: CompanyService,
        data: CompanyUpdate,
        company_id: Annotated[UUID, Parameter(title="Company ID", description="The company to update.")],
    ) -> Company:
        if not await company_service.get_one_or_none(id=company_id):
            raise NotFoundException(detail=f"Company {company_id} is not found")
        company = await company_service.update(item_id=company_id, data=data.to_dict())
        return company_service.to_schema(company, schema_type=Company)

    @delete(operation_id="DeleteCompany", name="companies:delete", path=urls.COMPANY_DELETE)
    async def delete_company(
        self,
        company_service: CompanyService,
        company_id: Annotated[UUID, Parameter(title="Company ID", description="The company to delete.")],
    ) -> None:
        if not await company_service.get_one_or_none(id=company_id):
            raise NotFoundException(detail=f"Company {company_id} is not found")
        await company_service.delete(company_id)

    @get(
        operation_id="ListMissingDocuments",
        name="companies:missing-documents",
        description="Document definitions the company has not uploaded yet.",
        path=urls.COMPANY_MISSING_DOCUMENTS,
    )
    async def list_missing_documents(
        self,
        company_service: CompanyService,
        document_service: KYCDocumentService,
        upload_service: KYCUploadService,
        company_id: UUID,
        category: str | None = None,
        department: str | None = None,
        subcategory: str | None = None,
    ) -> list[KYCDocument]:
        if not await company_service.get_one_or_none(id=company_id):
            raise NotFoundException(detail=f"Company {company_id} is not found")
        documents = await document_service.list_catalog(
            category=category,
            department=department,
            subcategory=subcategory,
        )
        uploads = await upload_service.list_uploads(company_id=company_id)
        missing = missing_documents(company_id, documents, uploads)
        return [document_service.to_schema(document, schema_type=KYCDocument) for document in missing]
