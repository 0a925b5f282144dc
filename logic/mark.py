"""
Cell marks for the TicTacToe board.
"""

from enum import Enum


# Characters accepted as an empty cell when reading a board string
EMPTY_CHARS = ("-", ".", " ")


class Mark(Enum):
    """The content of a single cell."""
    X = "X"
    O = "O"
    EMPTY = " "

    def opposite(self) -> "Mark":
        """
        Get the opposing side's mark.

        Raises:
            ValueError: If called on EMPTY, which has no opponent.
        """
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite mark")

    @classmethod
    def from_char(cls, ch: str) -> "Mark":
        """Parse a single board character (X, O, or -/./space for empty)."""
        if ch in EMPTY_CHARS:
            return cls.EMPTY
        upper = ch.upper()
        if upper == "X":
            return cls.X
        if upper == "O":
            return cls.O
        raise ValueError(f"Not a board character: {ch!r}")

    def __str__(self) -> str:
        return self.value
