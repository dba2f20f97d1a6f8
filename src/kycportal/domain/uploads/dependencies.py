from __future__ import annotations

from typing import TYPE_CHECKING

from .services import KYCUploadService

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncSession


async def provide_upload_service(db_session: AsyncSession) -> AsyncGenerator[KYCUploadService, None]:
    async with KYCUploadService.new(
        session=db_session,
        error_messages={"integrity": "Upload references an unknown company or document."},
    ) as service:
        yield service
