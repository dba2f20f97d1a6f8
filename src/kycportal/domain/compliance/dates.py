"""Lenient date parsing for values received from the record store or extraction."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

import structlog
from dateutil import parser as dateutil_parser

logger = structlog.get_logger()

DISPLAY_FORMAT = "%d/%m/%Y"

_SEPARATORS = re.compile(r"[/-]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_YEAR_FIRST = re.compile(r"\s*\d{4}\s*$")

# two defaults that differ in every field, so a component missing from the text shows up
_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _leading_int(part: str) -> int | None:
    match = _LEADING_INT.match(part)
    return int(match.group(1)) if match else None


def _parse_iso(value: str) -> date | None:
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def _parse_numeric(value: str) -> date | None:
    """``dd/mm/yyyy`` or ``dd-mm-yyyy``, and ``yyyy/mm/dd`` when the first part is a year."""
    parts = _SEPARATORS.split(value)
    if len(parts) < 3:
        return None
    first, second, third = (_leading_int(p) for p in parts[:3])
    if not (first and second and third):
        return None
    if _YEAR_FIRST.match(parts[0]):
        year, month, day = first, second, third
    else:
        day, month, year = first, second, third
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def _parse_text(value: str) -> date | None:
    """Written out dates such as ``15 June 2024`` or ``Jun 15, 2024``."""
    try:
        parsed = {dateutil_parser.parse(value, dayfirst=True, default=default).date() for default in _DEFAULTS}
    except (dateutil_parser.ParserError, ValueError, OverflowError):
        return None
    # a partial date such as "June 2024" takes the missing parts from the default
    return parsed.pop() if len(parsed) == 1 else None


def resolve_date(value: Any) -> date | None:
    """Normalise ``value`` to a calendar date.

    Accepts ``date``/``datetime`` instances, ISO-8601 strings, ``dd/mm/yyyy``
    or ``dd-mm-yyyy`` strings and complete written out dates. Anything else,
    including impossible calendar dates and partial dates, resolves to ``None``.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return _parse_iso(value) or _parse_numeric(value) or _parse_text(value)
    except Exception:  # noqa: BLE001
        logger.warning("Date parsing error", value=value, exc_info=True)
        return None


def format_date(value: Any) -> str | None:
    """Render ``value`` as ``dd/mm/yyyy`` when it resolves."""
    resolved = resolve_date(value)
    return resolved.strftime(DISPLAY_FORMAT) if resolved else None
