from __future__ import annotations

from typing import TYPE_CHECKING, Any

from advanced_alchemy.filters import CollectionFilter
from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService

from kycportal.db.models import KYCDocument

from .repositories import KYCDocumentRepository

if TYPE_CHECKING:
    from kycportal.db.models import DocumentType

CATALOG_FILTER_FIELDS = ("category", "department", "subcategory")


def catalog_filters(**values: str | None) -> list[CollectionFilter[Any]]:
    """Equality filters for the catalog fields that were supplied."""
    return [
        CollectionFilter(field_name, values=[values[field_name]])
        for field_name in CATALOG_FILTER_FIELDS
        if values.get(field_name)
    ]


class KYCDocumentService(SQLAlchemyAsyncRepositoryService[KYCDocument]):
    """Handles database operations for document definitions."""

    repository_type = KYCDocumentRepository

    async def list_catalog(
        self,
        category: str | None = None,
        department: str | None = None,
        subcategory: str | None = None,
    ) -> list[KYCDocument]:
        filters = catalog_filters(category=category, department=department, subcategory=subcategory)
        return list(await self.list(*filters, order_by=[("name", False)]))

    async def reclassify(self, document_id: Any, document_type: DocumentType) -> KYCDocument:
        """Switch a definition between one-off and renewal."""
        return await self.update(item_id=document_id, data={"document_type": document_type})
