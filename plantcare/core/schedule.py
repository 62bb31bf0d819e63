"""
PlantCare — Schedule Evaluator.

Turns a care frequency plus the date of the last qualifying event into a
status, a next-due date and a human-readable line. Pure business logic:
"today" always comes in as an argument.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from plantcare.core.dates import add_days, diff_days, format_display_date, parse_iso_date

logger = logging.getLogger(__name__)


class CareStatus(str, Enum):
    """Closed set of schedule states, one per plant."""

    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    ON_TRACK = "on_track"
    AWAITING_FIRST_EVENT = "awaiting_first_event"
    NO_SCHEDULE = "no_schedule"


# Most actionable first
STATUS_PRIORITY: dict[CareStatus, int] = {
    CareStatus.OVERDUE: 0,
    CareStatus.DUE_TODAY: 1,
    CareStatus.ON_TRACK: 2,
    CareStatus.AWAITING_FIRST_EVENT: 3,
    CareStatus.NO_SCHEDULE: 4,
}


def normalize_frequency_days(value: object, legacy: object = None) -> int | None:
    """Pick the plant's interval in days, or None if it has no usable one.

    ``value`` is the current frequency column, ``legacy`` the older
    watering-interval column; the first integer present wins. Zero,
    negatives and non-integers mean "no schedule".
    """
    for candidate in (value, legacy):
        if isinstance(candidate, int) and not isinstance(candidate, bool):
            if candidate <= 0:
                logger.debug("Non-positive frequency %d treated as no schedule", candidate)
                return None
            return candidate
    return None


@dataclass(frozen=True)
class CareSchedule:
    """Inputs for one plant, rebuilt from stored records on every evaluation."""

    frequency_days: int | None
    last_event_date: date | None = None

    @classmethod
    def from_tokens(
        cls,
        frequency_days: object,
        last_event_date: str | date | None,
        legacy_frequency: object = None,
    ) -> CareSchedule:
        """Build a schedule from raw column values.

        ``None`` means never recorded. Raises InvalidDateError if
        ``last_event_date`` is anything else that is not a real date,
        including an empty string.
        """
        last = parse_iso_date(last_event_date) if last_event_date is not None else None
        return cls(
            frequency_days=normalize_frequency_days(frequency_days, legacy_frequency),
            last_event_date=last,
        )


@dataclass(frozen=True)
class Evaluation:
    """Outcome of evaluating one schedule against one day."""

    status: CareStatus
    display_text: str
    next_due_date: date | None = None
    delta_days: int | None = None   # next_due_date - today; negative = overdue


_MAX_ORDINAL = date.max.toordinal()


def _days(n: int) -> str:
    return f"{n} day" if n == 1 else f"{n} days"


def evaluate(
    schedule: CareSchedule,
    today: date,
    date_format: str = "%d/%m/%Y",
) -> Evaluation:
    """Classify a schedule relative to ``today``.

    Branches are checked in order: missing frequency, missing first event,
    then the sign of (next due date - today).
    """
    freq = schedule.frequency_days
    if freq is None or freq <= 0:
        return Evaluation(
            status=CareStatus.NO_SCHEDULE,
            display_text="Frequency: not set",
        )

    if schedule.last_event_date is None:
        return Evaluation(
            status=CareStatus.AWAITING_FIRST_EVENT,
            display_text=f"Every {_days(freq)} • Next: not scheduled yet",
        )

    next_ordinal = schedule.last_event_date.toordinal() + freq
    if next_ordinal > _MAX_ORDINAL:
        # Due after the last representable date: no date, still on track
        delta = next_ordinal - today.toordinal()
        return Evaluation(
            status=CareStatus.ON_TRACK,
            display_text=f"Next: beyond {date.max.year} • {_days(delta)} left",
            delta_days=delta,
        )

    next_due = add_days(schedule.last_event_date, freq)
    delta = diff_days(today, next_due)
    prefix = f"Next: {format_display_date(next_due, date_format)}"

    if delta < 0:
        status = CareStatus.OVERDUE
        text = f"{prefix} • Overdue by {_days(abs(delta))}"
    elif delta == 0:
        status = CareStatus.DUE_TODAY
        text = f"{prefix} • Today"
    else:
        status = CareStatus.ON_TRACK
        text = f"{prefix} • {_days(delta)} left"

    return Evaluation(
        status=status,
        display_text=text,
        next_due_date=next_due,
        delta_days=delta,
    )
