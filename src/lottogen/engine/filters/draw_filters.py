"""Filters narrowing a draw history by ball, machine, or ball set."""

from __future__ import annotations

from collections.abc import Iterable

from lottogen.data.records import DrawRecord

from .base import BaseDrawFilter


class BallFilter(BaseDrawFilter):
    """Keep draws where the ball value appears in any of the seven ball fields."""

    name = "ball"

    def __init__(self, ball: int) -> None:
        self.ball = int(ball)

    def matches(self, draw: DrawRecord) -> bool:
        return draw.contains(self.ball)


class MachineFilter(BaseDrawFilter):
    """Keep draws produced by the given machine (exact match)."""

    name = "machine"

    def __init__(self, machine: str) -> None:
        self.machine = machine

    def matches(self, draw: DrawRecord) -> bool:
        return draw.machine == self.machine


class BallSetFilter(BaseDrawFilter):
    """Keep draws that used the given ball set (exact match)."""

    name = "ball_set"

    def __init__(self, ball_set: str) -> None:
        self.ball_set = ball_set

    def matches(self, draw: DrawRecord) -> bool:
        return draw.ball_set == self.ball_set


def filter_by_ball(draws: Iterable[DrawRecord], ball: int) -> list[DrawRecord]:
    """Return draws containing ``ball`` as a main or bonus ball."""
    return BallFilter(ball).apply(draws)


def filter_by_machine(draws: Iterable[DrawRecord], machine: str) -> list[DrawRecord]:
    """Return draws produced by ``machine``."""
    return MachineFilter(machine).apply(draws)


def filter_by_ball_set(draws: Iterable[DrawRecord], ball_set: str) -> list[DrawRecord]:
    """Return draws that used ``ball_set``."""
    return BallSetFilter(ball_set).apply(draws)
