"""Base types for draw filters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from lottogen.data.records import DrawRecord


class BaseDrawFilter(ABC):
    """Base class for all draw history filters."""

    name: str

    @abstractmethod
    def matches(self, draw: DrawRecord) -> bool:
        """Return True when the draw should be kept."""

    def apply(self, draws: Iterable[DrawRecord]) -> list[DrawRecord]:
        """Return matching draws, preserving their relative order."""
        return [draw for draw in draws if self.matches(draw)]
