"""Last-event lookup over a household's care events.

For each plant and event type the qualifying event is the one with the
latest event date, ties broken by the latest creation timestamp.
"""

from __future__ import annotations

from plantcare.data.models import CareEvent


def _recency(event: CareEvent) -> tuple[str, str]:
    # ISO strings sort chronologically
    return (event.event_date, event.created_at or "")


def latest_events_by_plant(
    events: list[CareEvent],
) -> dict[str, dict[str, CareEvent]]:
    """Map plant_id -> event_type -> most recent event of that type."""
    latest: dict[str, dict[str, CareEvent]] = {}
    for ev in events:
        by_type = latest.setdefault(ev.plant_id, {})
        current = by_type.get(ev.event_type)
        if current is None or _recency(ev) > _recency(current):
            by_type[ev.event_type] = ev
    return latest


def hhmm_from_event_time(value: str | None) -> str | None:
    """Trim a stored time ("13:05:00") to HH:MM."""
    if not value:
        return None
    return str(value)[:5]
