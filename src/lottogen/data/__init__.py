"""Draw records and draw history accessors."""

from .accessor import DrawHistoryAccessor, InMemoryDrawHistoryAccessor
from .loader import CsvDrawHistoryAccessor
from .records import DrawHistory, DrawRecord, GeneratedLine, GenerationResult

__all__ = [
    "CsvDrawHistoryAccessor",
    "DrawHistory",
    "DrawHistoryAccessor",
    "DrawRecord",
    "GeneratedLine",
    "GenerationResult",
    "InMemoryDrawHistoryAccessor",
]
