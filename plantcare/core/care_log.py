"""
PlantCare — Care Log.

Builds care-event payloads: "water now" for one plant, batch watering or
sunlight for a selection, and manual back-dated watering typed in by the
user as dd/mm/yyyy + HH:MM.

Plant edits (name, watering frequency, place) are recorded as a
config_change event carrying the values before and after.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date
from typing import TYPE_CHECKING

from plantcare.core.dates import to_iso
from plantcare.data.models import (
    EVENT_CONFIG_CHANGE,
    EVENT_SUN,
    EVENT_TYPES,
    EVENT_WATER,
    NewCareEvent,
    Plant,
)

if TYPE_CHECKING:
    from plantcare.core.clock import ClockReading
    from plantcare.ports.care_store import CareStorePort

logger = logging.getLogger(__name__)

_DISPLAY_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")
_HHMM_RE = re.compile(r"^(\d{2}):(\d{2})$")

# Event types a user can log in bulk from the dashboard
BATCH_EVENT_TYPES = (EVENT_WATER, EVENT_SUN)


class ManualEntryError(ValueError):
    """Raised when a value typed into a form is invalid."""


# ---------------------------------------------------------------------------
# Manual entry validation
# ---------------------------------------------------------------------------


def parse_display_date(text: str) -> date | None:
    """Parse ``dd/mm/yyyy`` into a date, or None if it isn't a real day.

    Years outside 1900-3000 are rejected as typos.
    """
    m = _DISPLAY_DATE_RE.match(text.strip())
    if not m:
        return None
    day, month, year = (int(g) for g in m.groups())
    if not 1900 <= year <= 3000:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def is_valid_hhmm(text: str) -> bool:
    """True for a 24h ``HH:MM`` string such as "13:05"."""
    m = _HHMM_RE.match(text.strip())
    if not m:
        return False
    hour, minute = int(m.group(1)), int(m.group(2))
    return 0 <= hour <= 23 and 0 <= minute <= 59


def parse_frequency_input(text: str) -> int | None:
    """Parse a typed watering interval in days.

    Blank means "no schedule" (None). Fractions are floored, so "7.9" is 7.

    Raises:
        ManualEntryError: not a number, not finite, or below one day.
    """
    stripped = text.strip()
    if not stripped:
        return None
    try:
        value = float(stripped)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or math.floor(value) < 1:
        raise ManualEntryError(
            "Invalid frequency. Use a number of days greater than 0 (e.g. 3, 7, 14)."
        )
    return math.floor(value)


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------


def build_event(
    household_id: str,
    plant_id: str,
    event_type: str,
    reading: ClockReading,
    created_by: str | None = None,
    meta: dict | None = None,
) -> NewCareEvent:
    """Build an event stamped with the reading's civil date and time."""
    if event_type not in EVENT_TYPES:
        raise ValueError(f"Unknown event type: {event_type!r}")
    return NewCareEvent(
        household_id=household_id,
        plant_id=plant_id,
        event_type=event_type,
        event_date=reading.today_iso,
        event_time=reading.time_of_day,
        created_by=created_by,
        meta=dict(meta or {}),
    )


def build_manual_watering(
    household_id: str,
    plant_id: str,
    date_text: str,
    time_text: str,
    created_by: str | None = None,
) -> NewCareEvent:
    """Validate a typed-in watering and build its payload.

    Raises:
        ManualEntryError: with a message fit to show the user.
    """
    event_date = parse_display_date(date_text)
    if event_date is None:
        raise ManualEntryError("Invalid date. Use dd/mm/yyyy (e.g. 13/02/2026).")
    if not is_valid_hhmm(time_text):
        raise ManualEntryError("Invalid time. Use 24h HH:MM (e.g. 13:05).")

    return NewCareEvent(
        household_id=household_id,
        plant_id=plant_id,
        event_type=EVENT_WATER,
        event_date=to_iso(event_date),
        event_time=time_text.strip(),
        created_by=created_by,
        meta={"manual": True},
    )


def build_config_change(
    household_id: str,
    plant: Plant,
    new_name: str,
    new_frequency: int | None,
    new_place_id: str | None,
    reading: ClockReading,
    created_by: str | None = None,
) -> NewCareEvent:
    """Build the config_change event recording a plant edit.

    ``meta`` holds the name, frequency and place before and after the edit.

    Raises:
        ManualEntryError: if the new name is blank.
    """
    name = new_name.strip()
    if not name:
        raise ManualEntryError("Plant name cannot be empty.")
    place_id = new_place_id.strip() if new_place_id else None

    meta = {
        "from": {
            "name": plant.name,
            "frequency_days": plant.frequency_days,
            "place_id": plant.place_id,
        },
        "to": {
            "name": name,
            "frequency_days": new_frequency,
            "place_id": place_id or None,
        },
    }
    return build_event(
        household_id, plant.id, EVENT_CONFIG_CHANGE, reading,
        created_by=created_by, meta=meta,
    )


# ---------------------------------------------------------------------------
# Store-backed logging
# ---------------------------------------------------------------------------


async def log_care(
    store: CareStorePort,
    household_id: str,
    plant_ids: list[str],
    event_type: str,
    reading: ClockReading | None = None,
    created_by: str | None = None,
) -> list[NewCareEvent]:
    """Record one ``event_type`` event for each selected plant.

    All events share one clock reading and are written in a single call.

    Raises:
        ValueError: empty selection or a type that can't be batch-logged.
        CareStoreError: if the store rejects the insert (logged, re-raised).
    """
    from plantcare.core.clock import now_in_timezone
    from plantcare.ports.care_store import CareStoreError

    if event_type not in BATCH_EVENT_TYPES:
        raise ValueError(f"Cannot batch-log event type {event_type!r}")
    if not plant_ids:
        raise ValueError("Select at least one plant.")

    if reading is None:
        reading = now_in_timezone()

    payload = [
        build_event(household_id, pid, event_type, reading, created_by=created_by)
        for pid in plant_ids
    ]

    try:
        await store.add_events(payload)
    except CareStoreError as exc:
        logger.error(
            "Failed to log %s for %d plants in %s: %s",
            event_type, len(plant_ids), household_id, exc,
        )
        raise

    logger.info(
        "Logged %s for %d plants in %s on %s at %s",
        event_type, len(payload), household_id,
        reading.today_iso, reading.time_of_day,
    )
    return payload


async def save_plant_config(
    store: CareStorePort,
    plant: Plant,
    new_name: str,
    frequency_text: str,
    new_place_id: str | None = None,
    reading: ClockReading | None = None,
    created_by: str | None = None,
) -> tuple[Plant, NewCareEvent]:
    """Apply a plant edit and record it as a config_change event.

    Input is validated before anything is written.

    Raises:
        ManualEntryError: blank name or invalid frequency.
        CareStoreError: if the store rejects the update (logged, re-raised).
    """
    from plantcare.core.clock import now_in_timezone
    from plantcare.ports.care_store import CareStoreError

    frequency = parse_frequency_input(frequency_text)
    if reading is None:
        reading = now_in_timezone()
    event = build_config_change(
        plant.household_id, plant, new_name, frequency, new_place_id,
        reading, created_by=created_by,
    )
    changes = dict(event.meta["to"])

    try:
        updated = await store.update_plant(plant.household_id, plant.id, changes)
        await store.add_events([event])
    except CareStoreError as exc:
        logger.error("Failed to save config for plant %s: %s", plant.id, exc)
        raise

    logger.info(
        "Plant %s reconfigured: frequency %s -> %s",
        plant.id, plant.frequency_days, frequency,
    )
    return updated, event
