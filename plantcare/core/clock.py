"""Calendar clock — resolves "now" into civil date/time of a named zone.

The reading is taken once per rendering pass and handed to everything
downstream, so every plant in one view sees the same "today".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from plantcare.core.dates import to_iso

logger = logging.getLogger(__name__)


class ClockError(RuntimeError):
    """Raised when the civil timezone cannot be resolved. Not recoverable."""


@dataclass(frozen=True)
class ClockReading:
    """Wall-clock date and time in the configured civil timezone."""

    today: date
    time_of_day: str           # HH:MM, 24h

    @property
    def today_iso(self) -> str:
        return to_iso(self.today)


def now_in_timezone(
    tz_name: str | None = None,
    now: datetime | None = None,
) -> ClockReading:
    """Return today's date and HH:MM in ``tz_name``.

    Args:
        tz_name: IANA zone name; defaults to settings.TIMEZONE.
        now: Instant to resolve (naive values are taken as UTC);
             defaults to the current instant.

    Raises:
        ClockError: if the zone is unknown or the tz database is missing.
    """
    if tz_name is None:
        from plantcare.config import settings
        tz_name = settings.TIMEZONE

    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.error("Cannot resolve timezone '%s': %s", tz_name, exc)
        raise ClockError(f"Cannot resolve timezone {tz_name!r}") from exc

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(tz)
    return ClockReading(
        today=date(local.year, local.month, local.day),
        time_of_day=f"{local.hour:02d}:{local.minute:02d}",
    )
