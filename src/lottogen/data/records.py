"""Draw record types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

MAIN_BALL_FIELDS = ("ball1", "ball2", "ball3", "ball4", "ball5", "ball6")
BALL_FIELDS = (*MAIN_BALL_FIELDS, "bonus_ball")


@dataclass(frozen=True)
class DrawRecord:
    """One historical lotto draw."""

    ball1: int
    ball2: int
    ball3: int
    ball4: int
    ball5: int
    ball6: int
    bonus_ball: int
    machine: str
    ball_set: str
    draw_number: int | None = None
    draw_date: str | None = None

    @property
    def main_balls(self) -> tuple[int, ...]:
        """Return the six main ball values in field order."""
        return tuple(getattr(self, field) for field in MAIN_BALL_FIELDS)

    @property
    def balls(self) -> tuple[int, ...]:
        """Return the six main balls followed by the bonus ball."""
        return (*self.main_balls, self.bonus_ball)

    def contains(self, ball: int) -> bool:
        """Return True if ``ball`` appears in any of the seven ball fields."""
        return ball in self.balls

    @classmethod
    def from_balls(
        cls,
        main_balls: Sequence[int],
        bonus_ball: int,
        machine: str,
        ball_set: str,
        *,
        draw_number: int | None = None,
        draw_date: str | None = None,
    ) -> DrawRecord:
        """Build a record from a sequence of six main balls."""
        if len(main_balls) != len(MAIN_BALL_FIELDS):
            raise ValueError(f"Draw must contain {len(MAIN_BALL_FIELDS)} main balls.")
        values = [int(value) for value in main_balls]
        return cls(
            *values,
            bonus_ball=int(bonus_ball),
            machine=str(machine),
            ball_set=str(ball_set),
            draw_number=draw_number,
            draw_date=draw_date,
        )

    def as_dict(self) -> dict[str, int | str | None]:
        """Convert record to dictionary."""
        return {
            "ball1": self.ball1,
            "ball2": self.ball2,
            "ball3": self.ball3,
            "ball4": self.ball4,
            "ball5": self.ball5,
            "ball6": self.ball6,
            "bonus_ball": self.bonus_ball,
            "machine": self.machine,
            "ball_set": self.ball_set,
            "draw_number": self.draw_number,
            "draw_date": self.draw_date,
        }


DrawHistory = Sequence[DrawRecord]
GeneratedLine = tuple[int, ...]
GenerationResult = dict[str, list[GeneratedLine]]
