"""
PlantCare — Data Models.

Plain records as the storage layer hands them over. Dates stay in their
wire form (ISO strings) here; the core parses them when it needs to.
"""

from __future__ import annotations

from dataclasses import dataclass, field

EVENT_WATER = "water"
EVENT_SUN = "sun"
EVENT_CONFIG_CHANGE = "config_change"

EVENT_TYPES = (EVENT_WATER, EVENT_SUN, EVENT_CONFIG_CHANGE)


@dataclass
class Plant:
    """A plant belonging to a household."""

    id: str
    household_id: str
    name: str                                  # e.g. "Monstera"
    frequency_days: int | None = None          # watering interval in days
    watering_interval_days: int | None = None  # legacy interval column
    place: str | None = None                   # legacy free-text location
    place_id: str | None = None
    created_at: str = ""


@dataclass
class Place:
    """A named spot in the house, e.g. "Living room"."""

    id: str
    household_id: str
    name: str


@dataclass
class CareEvent:
    """A stored watering, sunlight or configuration event."""

    id: str
    household_id: str
    plant_id: str
    event_type: str                   # one of EVENT_TYPES
    event_date: str                   # ISO date YYYY-MM-DD
    event_time: str | None = None     # HH:MM or HH:MM:SS
    created_at: str = ""              # ISO timestamp, tiebreak within a day
    created_by: str | None = None
    meta: dict = field(default_factory=dict)


@dataclass
class NewCareEvent:
    """Insert payload for a care event; the store assigns id and created_at."""

    household_id: str
    plant_id: str
    event_type: str
    event_date: str
    event_time: str | None = None
    created_by: str | None = None
    meta: dict = field(default_factory=dict)
