"""Draw filter pipeline."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from lottogen.data.records import DrawRecord

from .base import BaseDrawFilter


class DrawFilterPipeline:
    """Keep only draws accepted by every filter, in their original order."""

    def __init__(self, filters: Sequence[BaseDrawFilter] | None = None) -> None:
        self.filters = list(filters or [])

    def add_filter(self, filter_obj: BaseDrawFilter) -> None:
        """Add a filter to the pipeline."""
        self.filters.append(filter_obj)

    def matches(self, draw: DrawRecord) -> bool:
        """Return True if the draw passes all filters."""
        return all(filter_obj.matches(draw) for filter_obj in self.filters)

    def apply(self, draws: Iterable[DrawRecord]) -> list[DrawRecord]:
        """Return draws that pass all filters."""
        return [draw for draw in draws if self.matches(draw)]

    @property
    def filter_names(self) -> tuple[str, ...]:
        """Return the names of the configured filters in order."""
        return tuple(filter_obj.name for filter_obj in self.filters)
