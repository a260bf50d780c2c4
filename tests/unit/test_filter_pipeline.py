from __future__ import annotations

from lottogen.data.records import DrawRecord
from lottogen.engine.filters import BallFilter, BallSetFilter, DrawFilterPipeline, MachineFilter


def _draw(main_balls, bonus_ball, machine, ball_set):
    return DrawRecord.from_balls(main_balls, bonus_ball, machine, ball_set)


def test_pipeline_keeps_draws_passing_every_filter():
    history = [
        _draw((1, 2, 3, 4, 5, 6), 7, "Merlin", "1"),
        _draw((1, 9, 10, 11, 12, 13), 14, "Merlin", "2"),
        _draw((1, 15, 16, 17, 18, 19), 20, "Arthur", "1"),
        _draw((21, 22, 23, 24, 25, 26), 27, "Merlin", "1"),
    ]
    pipeline = DrawFilterPipeline([MachineFilter("Merlin"), BallSetFilter("1")])
    pipeline.add_filter(BallFilter(1))

    assert pipeline.apply(history) == [history[0]]
    assert pipeline.filter_names == ("machine", "ball_set", "ball")


def test_empty_pipeline_keeps_everything():
    history = [
        _draw((1, 2, 3, 4, 5, 6), 7, "Merlin", "1"),
        _draw((8, 9, 10, 11, 12, 13), 14, "Arthur", "2"),
    ]

    assert DrawFilterPipeline().apply(history) == history
