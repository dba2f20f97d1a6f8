from __future__ import annotations

from advanced_alchemy.service import SQLAlchemyAsyncRepositoryService

from kycportal.db.models import Company

from .repositories import CompanyRepository


class CompanyService(SQLAlchemyAsyncRepositoryService[Company]):
    """Handles database operations for companies."""

    repository_type = CompanyRepository

    async def list_all(self) -> list[Company]:
        return list(await self.list(order_by=[("name", False)]))
