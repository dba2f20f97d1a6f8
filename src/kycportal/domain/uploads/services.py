from __future__ import annotations

from typing import Any

from advanced_alchemy.filters import CollectionFilter
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService

from kycportal.db.models import KYCUpload, UploadVersion

from .repositories import KYCUploadRepository


class KYCUploadService(SQLAlchemyAsyncRepositoryService[KYCUpload]):
    """Handles database operations for uploads."""

    repository_type = KYCUploadRepository

    async def list_uploads(self, company_id: Any | None = None, document_id: Any | None = None) -> list[KYCUpload]:
        filters = []
        if company_id is not None:
            filters.append(CollectionFilter("company_id", values=[company_id]))
        if document_id is not None:
            filters.append(CollectionFilter("document_id", values=[document_id]))
        return list(await self.list(*filters, order_by=[("created_at", False)]))

    async def set_extracted_details(self, upload_id: Any, extracted_details: dict[str, Any]) -> KYCUpload:
        return await self.update(item_id=upload_id, data={"extracted_details": extracted_details})

    async def set_version(self, upload_id: Any, version: UploadVersion) -> KYCUpload:
        """Mark an upload as the recent copy of its document or as a past one."""
        return await self.update(item_id=upload_id, data={"version": version})
