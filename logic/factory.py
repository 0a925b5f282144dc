"""
Player kinds and construction.
The set of kinds is fixed: human, random computer, minimax computer.
"""

from enum import Enum

from .ai_player import MinimaxPlayer
from .mark import Mark
from .player import HumanPlayer, Player, RandomPlayer


class PlayerKind(Enum):
    """Who (or what) plays a side."""
    HUMAN = "h"      # Types positions
    RANDOM = "r"     # Random moves
    MINIMAX = "a"    # Full minimax

    @classmethod
    def from_choice(cls, text: str) -> "PlayerKind":
        """
        Parse a kind typed by a person or given on the command line.

        Accepts the letter (h, r, a) or a name (human, random, minimax, ai),
        in any case.

        Raises:
            ValueError: For anything else.
        """
        choice = text.strip().lower()
        for kind in cls:
            if choice == kind.value or choice == kind.name.lower():
                return kind
        if choice == "ai":
            return cls.MINIMAX
        raise ValueError(f"Unknown player type '{text}'. Use h, r or a.")

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PlayerKind.HUMAN: "human",
    PlayerKind.RANDOM: "random computer",
    PlayerKind.MINIMAX: "smart AI",
}


def create_player(kind: PlayerKind, name: str, mark: Mark, **kwargs) -> Player:
    """
    Build a player of the given kind.

    Args:
        kind: Which kind of player.
        name: Display name.
        mark: X or O.
        **kwargs: Passed through to the player class
            (input_func/output for humans, rng for random players).

    Returns:
        The new player.
    """
    if kind == PlayerKind.HUMAN:
        return HumanPlayer(name, mark, **kwargs)
    if kind == PlayerKind.RANDOM:
        return RandomPlayer(name, mark, **kwargs)
    return MinimaxPlayer(name, mark)
