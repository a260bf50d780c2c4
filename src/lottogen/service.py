"""Line generation service orchestrating accessor and strategies."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lottogen.config.schema import GeneratorConfig
from lottogen.data.accessor import DrawHistoryAccessor, InMemoryDrawHistoryAccessor
from lottogen.data.loader import CsvDrawHistoryAccessor
from lottogen.data.records import DrawRecord, GenerationResult
from lottogen.engine.lines import LineStrategy, default_strategies

logger = logging.getLogger(__name__)


class LineGenerationService:
    """Read the draw history once and run every strategy over it."""

    def __init__(
        self,
        accessor: DrawHistoryAccessor,
        strategies: Sequence[LineStrategy] | None = None,
    ) -> None:
        self.accessor = accessor
        self.strategies = list(strategies) if strategies is not None else default_strategies()

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> LineGenerationService:
        """Build a service reading the CSV history named in the config."""
        logging.getLogger("lottogen").setLevel(config.log_level)
        accessor = CsvDrawHistoryAccessor(
            config.history_csv,
            encoding=config.encoding,
            number_min=config.number_min,
            number_max=config.number_max,
            recent_n=config.recent_n,
        )
        return cls(accessor)

    def generate(self) -> GenerationResult:
        """Generate lines keyed by strategy name.

        Errors raised by the accessor propagate unchanged.
        """
        draws = self.accessor.read_draw_history()
        return self.generate_from(draws)

    def generate_from(self, draws: Sequence[DrawRecord]) -> GenerationResult:
        """Run all strategies, in order, over an explicit draw history."""
        result: GenerationResult = {}
        for strategy in self.strategies:
            lines = strategy.generate(draws)
            logger.debug("Strategy %s generated %d line(s) from %d draws", strategy.name, len(lines), len(draws))
            result[strategy.name] = lines
        return result


def generate(draws: Sequence[DrawRecord]) -> GenerationResult:
    """Generate lines for an in-memory draw history with the built-in strategies."""
    return LineGenerationService(InMemoryDrawHistoryAccessor(draws)).generate()
