"""Shared six-ball line building."""

from __future__ import annotations

from collections.abc import Sequence

from lottogen.data.records import DrawRecord, GeneratedLine
from lottogen.engine.filters import filter_by_ball
from lottogen.engine.frequency import most_frequent_ball

LINE_SIZE = 6


def pick_six_frequent_balls(draws: Sequence[DrawRecord], couple_by_cooccurrence: bool) -> GeneratedLine:
    """Pick six frequent balls and return them sorted ascending.

    With ``couple_by_cooccurrence`` each pick narrows the pool to draws that
    contain the previous pick, so later balls are the ones most often seen
    together with the earlier ones. Without it every pick is the next most
    frequent ball over the whole pool.

    Once narrowing leaves no draws, the remaining picks are the 0 sentinel,
    so a line can hold several zeros.
    """
    pool = list(draws)
    results = [most_frequent_ball(pool)]
    for _ in range(1, LINE_SIZE):
        if couple_by_cooccurrence:
            pool = filter_by_ball(pool, results[-1])
        results.append(most_frequent_ball(pool, exclude=results))
    return tuple(sorted(results))
