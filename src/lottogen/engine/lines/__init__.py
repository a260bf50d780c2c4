"""Line builders and strategies."""

from .builder import LINE_SIZE, pick_six_frequent_balls
from .strategies import (
    FullIterationStrategy,
    LineStrategy,
    MostFrequentStrategy,
    MostFrequentTogetherStrategy,
    default_strategies,
)

__all__ = [
    "FullIterationStrategy",
    "LINE_SIZE",
    "LineStrategy",
    "MostFrequentStrategy",
    "MostFrequentTogetherStrategy",
    "default_strategies",
    "pick_six_frequent_balls",
]
