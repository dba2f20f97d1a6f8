from __future__ import annotations

from enum import Enum


class DocumentType(str, Enum):
    """Lifecycle of a required KYC document."""

    ONE_OFF = "one-off"
    RENEWAL = "renewal"
