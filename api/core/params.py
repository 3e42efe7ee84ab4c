"""
Parsing helpers for raw path/query values.

Routers pass path parameters through as strings; services call these before
touching the database.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from .errors import InvalidInputError

# PostgreSQL `integer` column range.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_id(raw: str) -> int:
    value = (raw or "").strip()
    if not _INTEGER_RE.match(value):
        raise InvalidInputError()
    parsed = int(value)
    if parsed < INT4_MIN or parsed > INT4_MAX:
        raise InvalidInputError()
    return parsed


def format_timestamp(value: datetime | None) -> str | None:
    """
    Render a timestamp as ISO-8601 UTC with milliseconds, e.g. 2020-07-09T20:11:00.000Z.

    Naive datetimes (plain `timestamp` columns) are taken to be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
