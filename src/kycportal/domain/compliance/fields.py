"""Role based lookup of dates inside free-form extracted details."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .dates import resolve_date

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class DateRole:
    """Key synonyms that identify one kind of date in extracted details."""

    name: str
    contains: tuple[str, ...]
    exact: frozenset[str]

    def matches(self, key: str) -> bool:
        lower_key = key.lower()
        return any(token in lower_key for token in self.contains) or lower_key in self.exact


ISSUE_ROLE = DateRole(
    name="issue",
    contains=("issue", "start"),
    exact=frozenset({"w.i.f", "wif", "date_of_issue", "issue_date", "registration_date"}),
)
EXPIRY_ROLE = DateRole(
    name="expiry",
    contains=("expiry", "expiration", "end"),
    exact=frozenset({"w.i.t", "wit", "valid_until", "valid_to", "expiry_date"}),
)
DATE_ROLES: tuple[DateRole, ...] = (ISSUE_ROLE, EXPIRY_ROLE)


def find_date_field(extracted_details: Any, role: DateRole) -> date | None:
    """Return the first date in ``extracted_details`` stored under a key of ``role``.

    Entries are visited in insertion order and the first key that matches
    and holds a parseable value wins.
    """
    if not isinstance(extracted_details, Mapping):
        return None
    for key, value in extracted_details.items():
        if not isinstance(key, str) or not role.matches(key):
            continue
        parsed = resolve_date(value)
        if parsed:
            return parsed
    return None


def _resolve_role(upload: Any, role: DateRole, column: str) -> date | None:
    if upload is None:
        return None
    extracted = find_date_field(getattr(upload, "extracted_details", None), role)
    return extracted or resolve_date(getattr(upload, column, None))


def resolve_issue_date(upload: Any) -> date | None:
    return _resolve_role(upload, ISSUE_ROLE, "issue_date")


def resolve_expiry_date(upload: Any) -> date | None:
    return _resolve_role(upload, EXPIRY_ROLE, "expiry_date")
