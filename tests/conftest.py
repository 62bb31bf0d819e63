"""Shared test fixtures and configuration.

Pins the environment BEFORE any plantcare imports so settings are
deterministic, and provides record factories plus a mocked store.
"""

import os

os.environ["TIMEZONE"] = "America/Sao_Paulo"
os.environ["DATE_DISPLAY_FORMAT"] = "%d/%m/%Y"
os.environ["EVENT_HISTORY_LIMIT"] = "2000"
os.environ.setdefault("LOG_LEVEL", "INFO")

from unittest.mock import AsyncMock

import pytest

from plantcare.data.models import CareEvent, Place, Plant


def make_plant(
    id: str = "p1",
    name: str = "Monstera",
    frequency_days: int | None = 7,
    **kwargs,
) -> Plant:
    return Plant(
        id=id, household_id="h1", name=name,
        frequency_days=frequency_days, **kwargs,
    )


def make_event(
    plant_id: str = "p1",
    event_date: str = "2026-02-10",
    event_type: str = "water",
    created_at: str = "2026-02-10T12:00:00+00:00",
    id: str | None = None,
    event_time: str | None = "09:30:00",
) -> CareEvent:
    return CareEvent(
        id=id or f"e-{plant_id}-{event_type}-{event_date}-{created_at}",
        household_id="h1",
        plant_id=plant_id,
        event_type=event_type,
        event_date=event_date,
        event_time=event_time,
        created_at=created_at,
    )


@pytest.fixture
def store():
    """A CareStorePort double with an empty household."""
    mock = AsyncMock()
    mock.list_plants = AsyncMock(return_value=[])
    mock.list_places = AsyncMock(return_value=[])
    mock.list_events = AsyncMock(return_value=[])
    mock.add_events = AsyncMock(return_value=None)
    mock.update_plant = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def places():
    return [Place(id="pl1", household_id="h1", name="Living room")]
