"""
Win checker for TicTacToe.
Checks if a side has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple

from .mark import Mark
from .game_result import GameResult


# All possible winning lines as cell indices (row-major).
# Order matters: when more than one line is complete, the first one wins.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)

    Works on any sequence of 9 marks, so it can be used on a Board
    or on a plain list.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, cells: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 cells of the board.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def _check_line(self, cells: Sequence[Mark], line: Tuple[int, int, int]) -> bool:
        """True if all three cells of the line hold the same non-empty mark."""
        a, b, c = line
        return cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]

    def get_winning_line(self, cells: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            cells: The 9 cells of the board.

        Returns:
            The first complete line in canonical order, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(cells, line):
                return line
        return None

    def evaluate(self, cells: Sequence[Mark]) -> GameResult:
        """
        Classify the board.

        Args:
            cells: The 9 cells of the board.

        Returns:
            Win(mark) if a line is complete, Draw if the board is full,
            Ongoing otherwise.
        """
        winner = self.check_winner(cells)

        if winner is not None:
            return GameResult.win(winner)
        if all(cell != Mark.EMPTY for cell in cells):
            return GameResult.draw()
        return GameResult.ongoing()
