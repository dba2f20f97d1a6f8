"""Compliance dashboard endpoints."""

from __future__ import annotations

from datetime import date

import structlog
from litestar import Controller, get
from litestar.di import Provide
from litestar.exceptions import ValidationException

from kycportal.domain.companies.dependencies import provide_company_service
from kycportal.domain.companies.services import CompanyService
from kycportal.domain.documents.dependencies import provide_document_service
from kycportal.domain.documents.services import KYCDocumentService
from kycportal.domain.uploads.dependencies import provide_upload_service
from kycportal.domain.uploads.services import KYCUploadService

from . import urls
from .aggregate import SortDirection, SortField, aggregate, build_overview
from .dates import resolve_date
from .schemas import ComplianceOverview, DocumentStats

logger = structlog.get_logger()


def _as_of(value: str | None) -> date:
    if not value:
        return date.today()
    resolved = resolve_date(value)
    if resolved is None:
        raise ValidationException(detail=f"Invalid as_of date: {value}")
    return resolved


class ComplianceController(Controller):
    tags = ["Compliance"]
    dependencies = {
        "company_service": Provide(provide_company_service),
        "document_service": Provide(provide_document_service),
        "upload_service": Provide(provide_upload_service),
    }
    signature_namespace = {
        "CompanyService": CompanyService,
        "KYCDocumentService": KYCDocumentService,
        "KYCUploadService": KYCUploadService,
    }

    @get(
        operation_id="ComplianceOverview",
        name="compliance:overview",
        summary="Company by document compliance matrix",
        path=urls.COMPLIANCE_OVERVIEW,
    )
    async def get_overview(
        self,
        company_service: CompanyService,
        document_service: KYCDocumentService,
        upload_service: KYCUploadService,
        category: str | None = None,
        department: str | None = None,
        subcategory: str | None = None,
        sort_field: SortField | None = None,
        sort_direction: SortDirection = SortDirection.ASC,
        as_of: str | None = None,
    ) -> ComplianceOverview:
        """Status, dates and days left of every document for every company."""
        as_of_date = _as_of(as_of)
        documents = await document_service.list_catalog(
            category=category,
            department=department,
            subcategory=subcategory,
        )
        companies = await company_service.list_all()
        uploads = await upload_service.list_uploads()
        logger.debug(
            "Building compliance overview",
            documents=len(documents),
            companies=len(companies),
            uploads=len(uploads),
        )
        return build_overview(documents, companies, uploads, as_of_date, sort_field, sort_direction)

    @get(
        operation_id="ComplianceStats",
        name="compliance:stats",
        summary="Uploaded vs pending counts per document",
        path=urls.COMPLIANCE_STATS,
    )
    async def get_stats(
        self,
        company_service: CompanyService,
        document_service: KYCDocumentService,
        upload_service: KYCUploadService,
        category: str | None = None,
        department: str | None = None,
        subcategory: str | None = None,
    ) -> dict[str, DocumentStats]:
        documents = await document_service.list_catalog(
            category=category,
            department=department,
            subcategory=subcategory,
        )
        companies = await company_service.list_all()
        uploads = await upload_service.list_uploads()
        stats = aggregate(documents, companies, uploads)
        return {str(document_id): document_stats for document_id, document_stats in stats.items()}
