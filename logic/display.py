"""
Console display for TicTacToe.
Draws the board as text; never changes game state.
"""

from typing import Callable, List, Optional

from .board import Board
from .game_result import GameResult
from .mark import Mark

ROW_SEPARATOR = "---+---+---"


def format_board(board: Board) -> str:
    """
    Render the board as three text rows.

         X | O |
        ---+---+---
           | X |
        ---+---+---
           |   | O
    """
    lines: List[str] = []
    for r, row in enumerate(board.rows()):
        lines.append(" " + " | ".join(cell.value for cell in row))
        if r < len(board.rows()) - 1:
            lines.append(ROW_SEPARATOR)
    return "\n".join(lines)


def format_indices() -> str:
    """Render the position numbers (1-9) people type to pick a cell."""
    lines: List[str] = []
    for r in range(3):
        lines.append(" " + " | ".join(str(r * 3 + c + 1) for c in range(3)))
        if r < 2:
            lines.append(ROW_SEPARATOR)
    return "\n".join(lines)


class ConsoleRenderer:
    """
    Writes the game to the console.

    Args:
        output: Function taking one line of text (print by default).
            Tests pass list.append to capture what would be shown.
    """

    def __init__(self, output: Callable[[str], None] = print):
        self.output = output

    def show_intro(self, x_name: str, o_name: str):
        self.output(f"\nStarting Tic-Tac-Toe between {x_name} (X) and {o_name} (O)")

    def show_indices(self):
        self.output("Board (positions 1..9):")
        self.output(format_indices())

    def show_board(self, board: Board):
        self.output("")
        self.output(format_board(board))
        self.output("")

    def show_move(self, name: str, mark: Mark, index: int, board: Board):
        self.output(f"{name} ({mark.value}) placed at {index + 1}:")
        self.show_board(board)

    def show_message(self, text: str):
        self.output(text)

    def show_result(self, result: GameResult, winner_name: Optional[str] = None):
        if result.is_win:
            self.output(f"Game over: {result.winner.value} wins!")
            self.output(f"Winner: {winner_name} ({result.winner.value})")
        elif result.is_draw:
            self.output("Game over: Draw!")
