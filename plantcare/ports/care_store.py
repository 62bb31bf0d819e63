"""Care store port — abstract interface for plant and event records.

Core services depend on this protocol, never on a specific backend.
"""

from __future__ import annotations

from typing import Protocol

from plantcare.data.models import CareEvent, NewCareEvent, Place, Plant


class CareStoreError(Exception):
    """Raised when any storage backend operation fails."""


class CareStorePort(Protocol):
    """Abstract storage interface used by core services."""

    async def list_plants(self, household_id: str) -> list[Plant]: ...

    async def list_places(self, household_id: str) -> list[Place]: ...

    async def list_events(
        self, household_id: str, limit: int
    ) -> list[CareEvent]: ...

    async def add_events(self, events: list[NewCareEvent]) -> None: ...

    async def update_plant(
        self, household_id: str, plant_id: str, changes: dict
    ) -> Plant: ...
