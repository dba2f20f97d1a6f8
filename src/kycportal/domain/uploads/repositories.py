from __future__ import annotations

from advanced_alchemy.repository import SQLAlchemyAsyncRepository

from kycportal.db.models import KYCUpload


class KYCUploadRepository(SQLAlchemyAsyncRepository[KYCUpload]):
    """KYC Upload SQLAlchemy Repository."""

    model_type = KYCUpload
