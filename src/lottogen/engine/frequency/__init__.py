"""Frequency counters."""

from .counter import (
    NO_BALL,
    ball_sets,
    count_ball_values,
    count_occurrences,
    find_most_frequent_ball,
    machine_names,
    most_frequent_ball,
    rank_by_frequency,
)

__all__ = [
    "NO_BALL",
    "ball_sets",
    "count_ball_values",
    "count_occurrences",
    "find_most_frequent_ball",
    "machine_names",
    "most_frequent_ball",
    "rank_by_frequency",
]
