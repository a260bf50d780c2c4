"""Draw history filters."""

from .base import BaseDrawFilter
from .draw_filters import (
    BallFilter,
    BallSetFilter,
    MachineFilter,
    filter_by_ball,
    filter_by_ball_set,
    filter_by_machine,
)
from .pipeline import DrawFilterPipeline

__all__ = [
    "BallFilter",
    "BallSetFilter",
    "BaseDrawFilter",
    "DrawFilterPipeline",
    "MachineFilter",
    "filter_by_ball",
    "filter_by_ball_set",
    "filter_by_machine",
]
