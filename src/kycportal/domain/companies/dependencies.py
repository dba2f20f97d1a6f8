"""Company Controllers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kycportal.domain.companies.services import CompanyService

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncSession


async def provide_company_service(db_session: AsyncSession) -> AsyncGenerator[CompanyService, None]:
    """Construct repository and service objects for the request."""
    async with CompanyService.new(
        session=db_session,
        error_messages={"duplicate_key": "This company already exists.", "integrity": "Company operation failed."},
    ) as service:
        yield service
