from __future__ import annotations

from advanced_alchemy.repository import SQLAlchemyAsyncRepository

from kycportal.db.models import KYCDocument


class KYCDocumentRepository(SQLAlchemyAsyncRepository[KYCDocument]):
    """KYC Document SQLAlchemy Repository."""

    model_type = KYCDocument
