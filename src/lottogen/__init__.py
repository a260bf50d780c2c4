"""Deterministic frequency-based lotto line generator."""

import logging

from .config import ConfigLoadError, GeneratorConfig, configure_logging, load_config
from .data import (
    CsvDrawHistoryAccessor,
    DrawHistory,
    DrawHistoryAccessor,
    DrawRecord,
    GeneratedLine,
    GenerationResult,
    InMemoryDrawHistoryAccessor,
)
from .engine.filters import filter_by_ball, filter_by_ball_set, filter_by_machine
from .engine.frequency import (
    NO_BALL,
    count_ball_values,
    count_occurrences,
    most_frequent_ball,
    rank_by_frequency,
)
from .engine.lines import (
    FullIterationStrategy,
    LineStrategy,
    MostFrequentStrategy,
    MostFrequentTogetherStrategy,
    pick_six_frequent_balls,
)
from .errors import DataUnavailableError, DataValidationError, LottoGenError
from .service import LineGenerationService, generate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigLoadError",
    "CsvDrawHistoryAccessor",
    "DataUnavailableError",
    "DataValidationError",
    "DrawHistory",
    "DrawHistoryAccessor",
    "DrawRecord",
    "FullIterationStrategy",
    "GeneratedLine",
    "GenerationResult",
    "GeneratorConfig",
    "InMemoryDrawHistoryAccessor",
    "LineGenerationService",
    "LineStrategy",
    "LottoGenError",
    "MostFrequentStrategy",
    "MostFrequentTogetherStrategy",
    "NO_BALL",
    "configure_logging",
    "count_ball_values",
    "count_occurrences",
    "filter_by_ball",
    "filter_by_ball_set",
    "filter_by_machine",
    "generate",
    "load_config",
    "most_frequent_ball",
    "pick_six_frequent_balls",
    "rank_by_frequency",
]
