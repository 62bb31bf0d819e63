"""
PlantCare — Collection Ranker.

Orders evaluated plants for list display: most actionable status first,
then most urgent within a status, then alphabetically. Every tie is
resolved, so the same input always yields the same order.
"""

from __future__ import annotations

import logging
import unicodedata
from collections.abc import Hashable, Iterable, Mapping
from typing import TypeVar

from plantcare.core.schedule import STATUS_PRIORITY, Evaluation

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def collation_key(name: str) -> str:
    """Accent- and case-insensitive form of a name, e.g. "Érica" -> "erica"."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def sort_key(name: str, evaluation: Evaluation, key: object = "") -> tuple:
    """Ascending sort key: (priority, delta, collated name, name, key)."""
    # Statuses without a delta share 0, which is constant inside their group
    delta = evaluation.delta_days if evaluation.delta_days is not None else 0
    return (
        STATUS_PRIORITY[evaluation.status],
        delta,
        collation_key(name),
        name,
        str(key),
    )


def rank(
    results: Iterable[tuple[K, Evaluation]],
    names: Mapping[K, str],
) -> list[K]:
    """Return the entity keys of ``results`` in display order.

    Args:
        results: (key, evaluation) pairs, in any order.
        names: display name per key; a missing name falls back to str(key).
    """
    entries = list(results)
    ordered = sorted(
        entries,
        key=lambda item: sort_key(names.get(item[0], str(item[0])), item[1], item[0]),
    )
    logger.debug("Ranked %d entries", len(ordered))
    return [k for k, _ in ordered]
