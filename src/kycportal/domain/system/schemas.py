from dataclasses import dataclass
from typing import Literal

from kycportal.__about__ import __version__ as current_version
from kycportal.config.base import get_settings

__all__ = ("SystemHealth",)

settings = get_settings()


@dataclass
class SystemHealth:
    database_status: Literal["online", "offline"]
    app: str = settings.app.NAME
    version: str = current_version
