"""
PlantCare — Household Dashboard.

Evaluates every plant of a household against a single "today", filters by
a search query, ranks the result for display and counts plants per status.

The async loader is storage-agnostic: it depends on the CareStorePort
protocol, not on a specific backend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from plantcare.core.care_events import hhmm_from_event_time, latest_events_by_plant
from plantcare.core.dates import parse_iso_date
from plantcare.core.ranking import rank
from plantcare.core.schedule import CareSchedule, CareStatus, Evaluation, evaluate
from plantcare.core.status_display import StatusStyle, style_for
from plantcare.data.models import EVENT_SUN, EVENT_WATER, CareEvent, Place, Plant

if TYPE_CHECKING:
    from plantcare.core.clock import ClockReading
    from plantcare.ports.care_store import CareStorePort

logger = logging.getLogger(__name__)


@dataclass
class PlantCard:
    """Everything a list row needs for one plant."""

    plant: Plant
    place_label: str | None
    frequency_days: int | None
    last_water_date: date | None
    last_water_time: str | None      # HH:MM
    last_sun_date: date | None
    evaluation: Evaluation
    style: StatusStyle


@dataclass
class StatusSummary:
    """Plant count per status across the displayed cards."""

    overdue: int = 0
    due_today: int = 0
    on_track: int = 0
    awaiting_first_event: int = 0
    no_schedule: int = 0
    total: int = 0


# ---------------------------------------------------------------------------
# Card assembly
# ---------------------------------------------------------------------------


def _place_label(plant: Plant, place_names: dict[str, str]) -> str | None:
    """Relational place first, legacy free-text place second."""
    if plant.place_id and plant.place_id in place_names:
        return place_names[plant.place_id]
    return plant.place or None


def _matches(query: str, plant: Plant, place_label: str | None) -> bool:
    if not query:
        return True
    return query in plant.name.lower() or query in (place_label or "").lower()


def build_cards(
    plants: list[Plant],
    places: list[Place],
    events: list[CareEvent],
    today: date,
    query: str = "",
    date_format: str = "%d/%m/%Y",
) -> list[PlantCard]:
    """Evaluate, filter and rank the household's plants.

    Args:
        plants: All plants of the household.
        places: Named places, used to label plants by place_id.
        events: Care events; only the latest water/sun event per plant counts.
        today: The single civil date every plant is evaluated against.
        query: Case-insensitive substring matched on name or place label.

    Raises:
        InvalidDateError: if a stored event date is malformed.
    """
    place_names = {p.id: p.name for p in places}
    latest = latest_events_by_plant(events)
    q = query.strip().lower()

    cards: dict[str, PlantCard] = {}
    for plant in plants:
        place_label = _place_label(plant, place_names)
        if not _matches(q, plant, place_label):
            continue

        by_type = latest.get(plant.id, {})
        water = by_type.get(EVENT_WATER)
        sun = by_type.get(EVENT_SUN)

        schedule = CareSchedule.from_tokens(
            plant.frequency_days,
            water.event_date if water else None,
            legacy_frequency=plant.watering_interval_days,
        )
        evaluation = evaluate(schedule, today, date_format)
        logger.debug(
            "Plant %s (%s): %s", plant.id, plant.name, evaluation.status.value,
        )

        cards[plant.id] = PlantCard(
            plant=plant,
            place_label=place_label,
            frequency_days=schedule.frequency_days,
            last_water_date=schedule.last_event_date,
            last_water_time=hhmm_from_event_time(water.event_time) if water else None,
            last_sun_date=parse_iso_date(sun.event_date) if sun else None,
            evaluation=evaluation,
            style=style_for(evaluation.status),
        )

    order = rank(
        ((pid, card.evaluation) for pid, card in cards.items()),
        {pid: card.plant.name for pid, card in cards.items()},
    )
    return [cards[pid] for pid in order]


def summarize(cards: list[PlantCard]) -> StatusSummary:
    """Count cards per status."""
    summary = StatusSummary(total=len(cards))
    for card in cards:
        status = card.evaluation.status
        if status is CareStatus.OVERDUE:
            summary.overdue += 1
        elif status is CareStatus.DUE_TODAY:
            summary.due_today += 1
        elif status is CareStatus.ON_TRACK:
            summary.on_track += 1
        elif status is CareStatus.AWAITING_FIRST_EVENT:
            summary.awaiting_first_event += 1
        else:
            summary.no_schedule += 1
    return summary


# ---------------------------------------------------------------------------
# Store-backed loader
# ---------------------------------------------------------------------------


async def load_dashboard(
    store: CareStorePort,
    household_id: str,
    query: str = "",
    reading: ClockReading | None = None,
) -> tuple[list[PlantCard], StatusSummary]:
    """Fetch a household's records and build its ranked dashboard.

    The clock is sampled once here unless a reading is passed in.

    Raises:
        CareStoreError: if the store fails (logged, then re-raised).
    """
    from plantcare.config import settings
    from plantcare.core.clock import now_in_timezone
    from plantcare.ports.care_store import CareStoreError

    if reading is None:
        reading = now_in_timezone()

    try:
        plants = await store.list_plants(household_id)
        places = await store.list_places(household_id)
        events = await store.list_events(household_id, settings.EVENT_HISTORY_LIMIT)
    except CareStoreError as exc:
        logger.error("Dashboard: failed to load household %s: %s", household_id, exc)
        raise

    cards = build_cards(
        plants, places, events, reading.today,
        query=query, date_format=settings.DATE_DISPLAY_FORMAT,
    )
    summary = summarize(cards)
    logger.info(
        "Dashboard for %s on %s: %d plants, %d overdue, %d due today",
        household_id, reading.today_iso, summary.total,
        summary.overdue, summary.due_today,
    )
    return cards, summary
