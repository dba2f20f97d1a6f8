from __future__ import annotations

from enum import Enum
from uuid import UUID  # noqa: TCH003

from kycportal.lib.schema import CamelizedBaseStruct

__all__ = ("DispatchRequest", "DispatchResult", "SendingMethod")


class SendingMethod(str, Enum):
    EMAIL = "email"
    WHATSAPP = "whatsapp"


class DispatchRequest(CamelizedBaseStruct):
    method: SendingMethod
    upload_ids: list[UUID] | None = None
    email: str | None = None
    phone: str | None = None


class DispatchResult(CamelizedBaseStruct):
    method: SendingMethod
    recipient: str
    documents: list[str]
