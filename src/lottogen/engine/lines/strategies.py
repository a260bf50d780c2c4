"""Line generation strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from lottogen.data.records import DrawRecord, GeneratedLine
from lottogen.engine.filters import filter_by_ball_set, filter_by_machine
from lottogen.engine.frequency import ball_sets, machine_names

from .builder import pick_six_frequent_balls


class LineStrategy(ABC):
    """Base class for strategies turning a draw history into lines."""

    name: str

    @abstractmethod
    def generate(self, draws: Sequence[DrawRecord]) -> list[GeneratedLine]:
        """Generate lines from the given draws."""


class MostFrequentTogetherStrategy(LineStrategy):
    """One line of balls that most often occur in the same draws."""

    name = "method1"

    def generate(self, draws: Sequence[DrawRecord]) -> list[GeneratedLine]:
        return [pick_six_frequent_balls(draws, couple_by_cooccurrence=True)]


class MostFrequentStrategy(LineStrategy):
    """One line of the most frequent balls across the whole history."""

    name = "method2"

    def generate(self, draws: Sequence[DrawRecord]) -> list[GeneratedLine]:
        return [pick_six_frequent_balls(draws, couple_by_cooccurrence=False)]


class FullIterationStrategy(LineStrategy):
    """One line per (machine, ball set) pair, most used machines and sets first."""

    name = "method3"

    def generate(self, draws: Sequence[DrawRecord]) -> list[GeneratedLine]:
        lines: list[GeneratedLine] = []
        for machine in machine_names(draws):
            machine_draws = filter_by_machine(draws, machine)
            for ball_set in ball_sets(machine_draws):
                subset = filter_by_ball_set(machine_draws, ball_set)
                lines.append(pick_six_frequent_balls(subset, couple_by_cooccurrence=True))
        return lines


def default_strategies() -> list[LineStrategy]:
    """Return the built-in strategies in generation order."""
    return [MostFrequentTogetherStrategy(), MostFrequentStrategy(), FullIterationStrategy()]
