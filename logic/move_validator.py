"""
Move validator for TicTacToe.
Explains why a move is or isn't allowed, and parses typed positions.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .mark import Mark


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The index must be a cell on the board (0-8)
    2. Can only place on empty cells

    Board.place() applies the same rules and just says yes or no;
    this class says why.
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell index (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if index is in valid range
        if not Board.is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        if board[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Position {index + 1} is already taken by {board[index].value}."
            )

        return ValidationResult(is_valid=True)

    def parse_position(self, text: str) -> Tuple[Optional[int], ValidationResult]:
        """
        Parse a position typed by a person.

        People number the cells 1-9; the board uses 0-8.

        Args:
            text: Raw input line.

        Returns:
            (index, result). index is the 0-based cell, or None when the
            text is not a number from 1 to 9.
        """
        try:
            position = int(text.strip())
        except ValueError:
            position = None

        if position is None or not 1 <= position <= GameConfig.CELL_COUNT:
            return None, ValidationResult(
                is_valid=False,
                error_message=f"Invalid input. Please enter a number from 1 to {GameConfig.CELL_COUNT}."
            )

        return position - 1, ValidationResult(is_valid=True)
