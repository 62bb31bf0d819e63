"""Tests for plantcare.core.schedule — status classification."""

from datetime import date

import pytest

from plantcare.core.dates import InvalidDateError
from plantcare.core.schedule import (
    STATUS_PRIORITY,
    CareSchedule,
    CareStatus,
    Evaluation,
    evaluate,
    normalize_frequency_days,
)

LAST = date(2026, 2, 10)


class TestNormalizeFrequencyDays:
    def test_positive_value(self):
        assert normalize_frequency_days(7) == 7

    def test_legacy_column_used_when_current_missing(self):
        assert normalize_frequency_days(None, 4) == 4

    def test_current_column_wins(self):
        assert normalize_frequency_days(3, 10) == 3

    @pytest.mark.parametrize("value", [None, 0, -2, "7", 7.5, True])
    def test_unusable_values_mean_no_schedule(self, value):
        assert normalize_frequency_days(value) is None

    def test_non_positive_current_does_not_fall_back(self):
        assert normalize_frequency_days(0, 5) is None


class TestCareSchedule:
    def test_from_tokens_parses_date(self):
        s = CareSchedule.from_tokens(7, "2026-02-10")
        assert s == CareSchedule(frequency_days=7, last_event_date=LAST)

    def test_from_tokens_without_event(self):
        assert CareSchedule.from_tokens(5, None).last_event_date is None

    def test_from_tokens_normalizes_frequency(self):
        assert CareSchedule.from_tokens(-1, "2026-02-10").frequency_days is None

    def test_from_tokens_uses_legacy_frequency(self):
        assert CareSchedule.from_tokens(None, None, legacy_frequency=3).frequency_days == 3

    def test_from_tokens_rejects_malformed_date(self):
        with pytest.raises(InvalidDateError):
            CareSchedule.from_tokens(7, "2026-02-31")

    def test_from_tokens_rejects_empty_date(self):
        with pytest.raises(InvalidDateError):
            CareSchedule.from_tokens(7, "")


class TestEvaluateBoundaries:
    """Frequency 7, last watered 2026-02-10, so next due 2026-02-17."""

    def test_day_before_is_on_track(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 16))
        assert result.status is CareStatus.ON_TRACK
        assert result.delta_days == 1
        assert result.next_due_date == date(2026, 2, 17)
        assert result.display_text == "Next: 17/02/2026 • 1 day left"

    def test_due_date_is_due_today(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 17))
        assert result.status is CareStatus.DUE_TODAY
        assert result.delta_days == 0
        assert result.next_due_date == date(2026, 2, 17)
        assert result.display_text == "Next: 17/02/2026 • Today"

    def test_day_after_is_overdue(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 18))
        assert result.status is CareStatus.OVERDUE
        assert result.delta_days == -1
        assert "Overdue by 1 day" in result.display_text
        assert "1 days" not in result.display_text

    def test_overdue_plural(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 22))
        assert result.delta_days == -5
        assert result.display_text == "Next: 17/02/2026 • Overdue by 5 days"

    def test_on_track_plural(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 12))
        assert result.display_text == "Next: 17/02/2026 • 5 days left"

    def test_custom_date_format(self):
        result = evaluate(CareSchedule(7, LAST), date(2026, 2, 17), date_format="%Y-%m-%d")
        assert result.display_text == "Next: 2026-02-17 • Today"

    def test_next_due_crosses_leap_day(self):
        result = evaluate(CareSchedule(2, date(2024, 2, 28)), date(2024, 2, 28))
        assert result.next_due_date == date(2024, 3, 1)
        assert result.delta_days == 2


class TestEvaluatePrecedence:
    def test_missing_frequency_beats_known_event(self):
        result = evaluate(CareSchedule(None, LAST), date(2026, 2, 17))
        assert result == Evaluation(
            status=CareStatus.NO_SCHEDULE, display_text="Frequency: not set",
        )

    def test_missing_frequency_without_event(self):
        result = evaluate(CareSchedule(None, None), date(2026, 2, 17))
        assert result.status is CareStatus.NO_SCHEDULE

    def test_non_positive_frequency_built_directly(self):
        result = evaluate(CareSchedule(0, LAST), date(2026, 2, 17))
        assert result.status is CareStatus.NO_SCHEDULE
        assert result.next_due_date is None
        assert result.delta_days is None

    def test_awaiting_first_event(self):
        result = evaluate(CareSchedule(5, None), date(2026, 2, 17))
        assert result.status is CareStatus.AWAITING_FIRST_EVENT
        assert result.next_due_date is None
        assert result.delta_days is None
        assert result.display_text == "Every 5 days • Next: not scheduled yet"

    def test_awaiting_first_event_daily(self):
        result = evaluate(CareSchedule(1, None), date(2026, 2, 17))
        assert result.display_text == "Every 1 day • Next: not scheduled yet"


class TestEvaluateTotality:
    def test_due_date_past_calendar_end(self):
        result = evaluate(CareSchedule(10_000_000, LAST), date(2026, 2, 17))
        assert result.status is CareStatus.ON_TRACK
        assert result.next_due_date is None
        assert result.delta_days == LAST.toordinal() + 10_000_000 - date(2026, 2, 17).toordinal()
        assert result.display_text.startswith("Next: beyond 9999 • ")

    def test_due_date_exactly_on_calendar_end(self):
        freq = date.max.toordinal() - LAST.toordinal()
        result = evaluate(CareSchedule(freq, LAST), date(2026, 2, 17))
        assert result.next_due_date == date.max
        assert result.status is CareStatus.ON_TRACK

    @pytest.mark.parametrize("freq", [None, -3, 0, 1, 7, 365])
    @pytest.mark.parametrize("last", [None, date(2025, 12, 31), date(2026, 2, 17)])
    def test_always_one_status_and_consistent_fields(self, freq, last):
        result = evaluate(CareSchedule(freq, last), date(2026, 2, 17))
        assert result.status in CareStatus
        has_dates = result.status in (
            CareStatus.OVERDUE, CareStatus.DUE_TODAY, CareStatus.ON_TRACK,
        )
        assert (result.next_due_date is not None) is has_dates
        assert (result.delta_days is not None) is has_dates
        if result.status is CareStatus.OVERDUE:
            assert result.delta_days < 0
        elif result.status is CareStatus.DUE_TODAY:
            assert result.delta_days == 0
        elif result.status is CareStatus.ON_TRACK:
            assert result.delta_days > 0


def test_status_priority_order():
    ordered = sorted(CareStatus, key=STATUS_PRIORITY.__getitem__)
    assert ordered == [
        CareStatus.OVERDUE,
        CareStatus.DUE_TODAY,
        CareStatus.ON_TRACK,
        CareStatus.AWAITING_FIRST_EVENT,
        CareStatus.NO_SCHEDULE,
    ]
