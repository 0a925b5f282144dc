"""
Players for TicTacToe.
A player is bound to one mark and picks a cell when asked.
"""

import abc
import logging
import random
from typing import Callable, Optional

from .board import Board
from .errors import InputClosedError, StrategyError
from .mark import Mark
from .move_validator import MoveValidator

logger = logging.getLogger(__name__)


class Player(abc.ABC):
    """
    Base class for the move-choosing strategies.

    Players never keep board state of their own; they look at the board
    they are given and return a cell index (0-8).
    """

    def __init__(self, name: str, mark: Mark):
        if mark not in (Mark.X, Mark.O):
            raise ValueError(f"A player plays X or O, not {mark}")
        self.name = name
        self.mark = mark

    @abc.abstractmethod
    def next_move(self, board: Board) -> int:
        """
        Choose a move.

        Args:
            board: The current board. Must come back unchanged.

        Returns:
            Cell index (0-8).

        Raises:
            StrategyError: If no move can be produced.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.mark.value})"


class HumanPlayer(Player):
    """
    A person typing positions 1-9.

    Keeps asking until it gets a number for an empty cell.
    """

    def __init__(
        self,
        name: str,
        mark: Mark,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print
    ):
        """
        Args:
            name: Display name.
            mark: X or O.
            input_func: Reads one line given a prompt; raises EOFError at end of input.
            output: Where to write "try again" messages.
        """
        super().__init__(name, mark)
        self.input_func = input_func
        self.output = output
        self.validator = MoveValidator()

    def next_move(self, board: Board) -> int:
        prompt = f"{self.name} ({self.mark.value}) - enter position 1..9: "

        while True:
            try:
                line = self.input_func(prompt)
            except EOFError as e:
                raise InputClosedError(f"Input closed while waiting for {self.name}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise InputClosedError(f"Input failed while waiting for {self.name}: {e}") from e

            index, result = self.validator.parse_position(line)
            if index is None:
                self.output(result.error_message)
                continue

            result = self.validator.validate_move(board, index)
            if not result.is_valid:
                self.output(result.error_message)
                continue

            return index


class RandomPlayer(Player):
    """Picks any empty cell, uniformly at random."""

    def __init__(self, name: str, mark: Mark, rng: Optional[random.Random] = None):
        super().__init__(name, mark)
        self.rng = rng if rng is not None else random.Random()

    def next_move(self, board: Board) -> int:
        moves = board.available_moves()
        if not moves:
            raise StrategyError(f"{self.name} has no move on a full board")

        move = self.rng.choice(moves)
        logger.debug("%s picked %d at random from %s", self.name, move, moves)
        return move
