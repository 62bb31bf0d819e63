"""Calendar-date arithmetic — pure, timezone-free.

Dates are plain ``datetime.date`` values; the textual wire form is
``YYYY-MM-DD``. Arithmetic goes through ordinal day numbers so DST and
time-of-day never leak in.
"""

from __future__ import annotations

import re
from datetime import date, datetime

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class InvalidDateError(ValueError):
    """Raised when a date token is not a real YYYY-MM-DD calendar date."""


def parse_iso_date(token: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` token into a date.

    ``date`` instances are returned unchanged (a ``datetime`` is cut down to
    its date part). Raises InvalidDateError on anything else.
    """
    if isinstance(token, datetime):
        return token.date()
    if isinstance(token, date):
        return token
    if not isinstance(token, str):
        raise InvalidDateError(f"Expected a YYYY-MM-DD string, got {token!r}")

    match = _ISO_DATE_RE.match(token.strip())
    if not match:
        raise InvalidDateError(f"Not a YYYY-MM-DD date: {token!r}")

    year, month, day = map(int, match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Not a real calendar date: {token!r}") from exc


def to_iso(d: date) -> str:
    return d.isoformat()


def add_days(d: str | date, n: int) -> date:
    """Return ``d`` shifted by ``n`` whole days (negative ``n`` goes back)."""
    return date.fromordinal(parse_iso_date(d).toordinal() + n)


def diff_days(a: str | date, b: str | date) -> int:
    """Return ``b - a`` in whole calendar days."""
    return parse_iso_date(b).toordinal() - parse_iso_date(a).toordinal()


def format_display_date(d: str | date, fmt: str = "%d/%m/%Y") -> str:
    """Render a date for humans, e.g. ``17/02/2026``."""
    return parse_iso_date(d).strftime(fmt)
