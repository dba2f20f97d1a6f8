from __future__ import annotations

from advanced_alchemy.repository import SQLAlchemyAsyncRepository

from kycportal.db.models import Company


class CompanyRepository(SQLAlchemyAsyncRepository[Company]):
    """Company SQLAlchemy Repository."""

    model_type = Company
