"""Occurrence counting and frequency ranking over draw histories.

Counts are kept in ``collections.Counter`` objects, which remember the order
in which keys were first seen. Rankings sort them with a stable descending
sort, so keys with equal counts keep their first-encountered order.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Hashable, Iterable, Mapping

from lottogen.data.records import DrawRecord

NO_BALL = 0

ATTRIBUTE_ALIASES = {
    "machine": "machine",
    "ball_set": "ball_set",
    "ball-set": "ball_set",
    "ballset": "ball_set",
}


def count_occurrences(draws: Iterable[DrawRecord], attribute: str) -> Counter[str]:
    """Count how often each value of a draw attribute occurs."""
    field = ATTRIBUTE_ALIASES.get(attribute.strip().lower())
    if field is None:
        raise ValueError(f"Unsupported attribute '{attribute}'. Use 'machine' or 'ball_set'.")

    counts: Counter[str] = Counter()
    for draw in draws:
        counts[getattr(draw, field)] += 1
    return counts


def count_ball_values(draws: Iterable[DrawRecord], exclude: Collection[int] = ()) -> Counter[int]:
    """Count every ball value across the six main balls and the bonus ball.

    Values in ``exclude`` are skipped entirely rather than counted and dropped.
    """
    excluded = set(exclude)
    counts: Counter[int] = Counter()
    for draw in draws:
        for value in draw.balls:
            if value not in excluded:
                counts[value] += 1
    return counts


def rank_by_frequency(counts: Mapping[Hashable, int]) -> list:
    """Return keys by descending count; ties keep first-encountered order."""
    return sorted(counts, key=counts.__getitem__, reverse=True)


def machine_names(draws: Iterable[DrawRecord]) -> list[str]:
    """Return machine names, most frequent first."""
    return rank_by_frequency(count_occurrences(draws, "machine"))


def ball_sets(draws: Iterable[DrawRecord]) -> list[str]:
    """Return ball set identifiers, most frequent first."""
    return rank_by_frequency(count_occurrences(draws, "ball_set"))


def find_most_frequent_ball(draws: Iterable[DrawRecord], exclude: Collection[int] = ()) -> int | None:
    """Return the most frequent ball value, or None when nothing was counted."""
    ranked = rank_by_frequency(count_ball_values(draws, exclude=exclude))
    if not ranked:
        return None
    return ranked[0]


def most_frequent_ball(draws: Iterable[DrawRecord], exclude: Collection[int] = ()) -> int:
    """Return the most frequent ball value, or ``NO_BALL`` (0) when there is none."""
    ball = find_most_frequent_ball(draws, exclude=exclude)
    return NO_BALL if ball is None else ball
