"""Label, icon and colour for each care status.

Kept apart from the evaluator so the schedule logic never carries
presentation strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from plantcare.core.schedule import CareStatus


@dataclass(frozen=True)
class StatusStyle:
    label: str
    icon: str
    color: str


STATUS_STYLES: dict[CareStatus, StatusStyle] = {
    CareStatus.OVERDUE: StatusStyle("Overdue", "🔴", "red"),
    CareStatus.DUE_TODAY: StatusStyle("Due today", "🟡", "amber"),
    CareStatus.ON_TRACK: StatusStyle("On track", "🟢", "emerald"),
    CareStatus.AWAITING_FIRST_EVENT: StatusStyle("First watering", "🔵", "blue"),
    CareStatus.NO_SCHEDULE: StatusStyle("No frequency", "⚪", "zinc"),
}


def style_for(status: CareStatus) -> StatusStyle:
    return STATUS_STYLES[status]
