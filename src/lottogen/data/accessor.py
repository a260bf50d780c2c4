"""Draw history accessor interface and in-memory implementation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .records import DrawRecord


@runtime_checkable
class DrawHistoryAccessor(Protocol):
    """Supplies the ordered draw history consumed by the line generator."""

    def read_draw_history(self) -> list[DrawRecord]:
        """Return all draws, raising DataUnavailableError on failure."""


class InMemoryDrawHistoryAccessor:
    """Accessor over a fixed, already-parsed draw sequence."""

    def __init__(self, draws: Iterable[DrawRecord]) -> None:
        self._draws = tuple(draws)

    def read_draw_history(self) -> list[DrawRecord]:
        return list(self._draws)
