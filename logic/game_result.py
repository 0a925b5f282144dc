"""
Classification of a board into ongoing, draw, or a win for one side.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .mark import Mark


class Outcome(Enum):
    """Where a game stands."""
    ONGOING = "ongoing"
    DRAW = "draw"
    WIN = "win"


@dataclass(frozen=True)
class GameResult:
    """
    Result of evaluating a board.

    Use the constructors ongoing(), draw() and win(mark) rather than
    building one by hand; they keep the winner consistent with the outcome.
    """
    outcome: Outcome
    winner: Optional[Mark] = None

    def __post_init__(self):
        if self.outcome == Outcome.WIN:
            if self.winner not in (Mark.X, Mark.O):
                raise ValueError(f"A win needs X or O, got {self.winner}")
        elif self.winner is not None:
            raise ValueError(f"{self.outcome.value} result cannot have a winner")

    @classmethod
    def ongoing(cls) -> "GameResult":
        return cls(Outcome.ONGOING)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(Outcome.DRAW)

    @classmethod
    def win(cls, mark: Mark) -> "GameResult":
        return cls(Outcome.WIN, mark)

    @property
    def is_over(self) -> bool:
        """True for a win or a draw."""
        return self.outcome != Outcome.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.outcome == Outcome.DRAW

    @property
    def is_win(self) -> bool:
        return self.outcome == Outcome.WIN

    def __str__(self) -> str:
        if self.is_win:
            return f"{self.winner.value} wins"
        return self.outcome.value
