from __future__ import annotations

from enum import Enum


class UploadVersion(str, Enum):
    """Whether an upload is the current copy of a document or a superseded one."""

    RECENT = "recent"
    PAST = "past"
