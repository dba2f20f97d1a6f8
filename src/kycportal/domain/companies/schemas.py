from __future__ import annotations

from datetime import datetime  # noqa: TCH003
from uuid import UUID  # noqa: TCH003

import msgspec

from kycportal.lib.schema import CamelizedBaseStruct

__all__ = ("Company", "CompanyCreate", "CompanyUpdate")


class Company(CamelizedBaseStruct):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    registration_number: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None


class CompanyCreate(CamelizedBaseStruct):
    name: str
    registration_number: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None


class CompanyUpdate(CamelizedBaseStruct, omit_defaults=True):
    name: str | msgspec.UnsetType = msgspec.UNSET
    registration_number: str | None | msgspec.UnsetType = msgspec.UNSET
    contact_email: str | None | msgspec.UnsetType = msgspec.UNSET
    contact_phone: str | None | msgspec.UnsetType = msgspec.UNSET
