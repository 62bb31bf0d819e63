"""
PlantCare — Command line status check.

Evaluates a single watering schedule, e.g.:

    python main.py --frequency 7 --last 2026-02-10
"""

from __future__ import annotations

import argparse
import logging

from plantcare.core.dates import InvalidDateError, parse_iso_date
from plantcare.core.schedule import CareSchedule, evaluate
from plantcare.core.status_display import style_for

logger = logging.getLogger(__name__)


def _iso_date(value: str):
    try:
        return parse_iso_date(value)
    except InvalidDateError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plantcare",
        description="Show the watering status of one plant.",
    )
    parser.add_argument("--frequency", type=int, default=None,
                        help="watering interval in days")
    parser.add_argument("--last", type=_iso_date, default=None,
                        help="date of the last watering (YYYY-MM-DD)")
    parser.add_argument("--today", type=_iso_date, default=None,
                        help="evaluate as of this date instead of the clock")
    parser.add_argument("--timezone", default=None,
                        help="civil timezone for 'today' (default: TIMEZONE setting)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, evaluate and print one status line."""
    from plantcare.config import settings
    from plantcare.core.clock import now_in_timezone

    args = build_parser().parse_args(argv)

    today = args.today
    if today is None:
        today = now_in_timezone(args.timezone).today

    schedule = CareSchedule.from_tokens(args.frequency, args.last)
    result = evaluate(schedule, today, settings.DATE_DISPLAY_FORMAT)
    style = style_for(result.status)

    logger.debug("Evaluated %s as of %s", schedule, today.isoformat())
    print(f"{style.icon} {style.label}: {result.display_text}")
    return 0
