"""
Board state for TicTacToe.
Nine cells in row-major order, move legality, and the game result.
"""

from typing import Iterable, List, Optional, Tuple

from .config import GameConfig
from .mark import Mark
from .game_result import GameResult
from .win_checker import WinChecker


_win_checker = WinChecker()


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are indexed 0-8, row-major (index = row * 3 + col):

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8

    Normal play only goes through place(), which never overwrites a cell.
    Item access (board[i], board[i] = mark) is for the search, which
    tries a move and puts the cell back to EMPTY afterwards.
    """

    def __init__(self, cells: Optional[Iterable[Mark]] = None):
        """
        Create a board.

        Args:
            cells: Optional 9 marks to start from. Empty board if omitted.
        """
        if cells is None:
            self._cells = [Mark.EMPTY] * GameConfig.CELL_COUNT
        else:
            self._cells = list(cells)
            if len(self._cells) != GameConfig.CELL_COUNT:
                raise ValueError(
                    f"A board has {GameConfig.CELL_COUNT} cells, got {len(self._cells)}"
                )
            for cell in self._cells:
                if not isinstance(cell, Mark):
                    raise TypeError(f"Cells must be Mark values, got {cell!r}")

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Build a board from a 9 character string such as "XX-O-O---".

        Empty cells may be written as '-', '.' or a space.
        """
        if len(text) != GameConfig.CELL_COUNT:
            raise ValueError(f"Board string must have {GameConfig.CELL_COUNT} characters: {text!r}")
        return cls(Mark.from_char(ch) for ch in text)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._cells)

    def available_moves(self) -> List[int]:
        """Indices of the empty cells, in ascending order."""
        return [i for i, cell in enumerate(self._cells) if cell == Mark.EMPTY]

    def place(self, mark: Mark, index: int) -> bool:
        """
        Place a mark on an empty cell.

        Turn order and which mark is placed are the caller's business.

        Args:
            mark: X or O.
            index: Cell index (0-8).

        Returns:
            True if the mark was placed, False (board untouched) if the
            index is out of range or the cell is taken.
        """
        if not self.is_valid_index(index):
            return False
        if self._cells[index] != Mark.EMPTY:
            return False

        self._cells[index] = mark
        return True

    @staticmethod
    def is_valid_index(index) -> bool:
        """True if index is an int in 0-8."""
        return (
            isinstance(index, int)
            and not isinstance(index, bool)
            and 0 <= index < GameConfig.CELL_COUNT
        )

    def is_full(self) -> bool:
        return all(cell != Mark.EMPTY for cell in self._cells)

    def occupied_count(self) -> int:
        return sum(1 for cell in self._cells if cell != Mark.EMPTY)

    def winner(self) -> Optional[Mark]:
        """The mark on the first complete line (rows, columns, diagonals), or None."""
        return _win_checker.check_winner(self._cells)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return _win_checker.get_winning_line(self._cells)

    def game_result(self) -> GameResult:
        """Win if a line is complete, else Draw if full, else Ongoing."""
        return _win_checker.evaluate(self._cells)

    def rows(self) -> List[Tuple[Mark, Mark, Mark]]:
        """The board as three rows, top to bottom."""
        size = GameConfig.BOARD_SIZE
        return [tuple(self._cells[r * size:(r + 1) * size]) for r in range(size)]

    def __getitem__(self, index: int) -> Mark:
        return self._cells[index]

    def __setitem__(self, index: int, mark: Mark):
        self._cells[index] = mark

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        return "".join("-" if cell == Mark.EMPTY else cell.value for cell in self._cells)

    def __repr__(self) -> str:
        return f"Board({str(self)!r})"
