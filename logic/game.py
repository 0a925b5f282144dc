"""
Game loop for TicTacToe.
Alternates turns between two players until someone wins or the board fills.
"""

import logging
from typing import Dict, List, Optional
from dataclasses import dataclass

from .board import Board
from .config import GameConfig
from .display import ConsoleRenderer
from .errors import StrategyError
from .game_result import GameResult
from .mark import Mark
from .move_validator import MoveValidator
from .player import Player

logger = logging.getLogger(__name__)


@dataclass
class Move:
    """
    A move in the game.
    """
    player_name: str        # Who made the move
    mark: Mark              # X or O
    index: int              # Cell (0-8)
    move_number: int        # Which move this is (0-8)


class Game:
    """
    One game between two players.

    Game flow:
    1. Ask the current player for a move
    2. Place it on the board (a rejected move skips the turn)
    3. Check for a winner or a draw
    4. Switch players and repeat

    A player that raises StrategyError, or that has too many moves in a
    row rejected, aborts the game without a result.
    """

    def __init__(
        self,
        player_x: Player,
        player_o: Player,
        renderer: Optional[ConsoleRenderer] = None,
        max_rejected_moves: int = GameConfig.MAX_REJECTED_MOVES
    ):
        """
        Set up a game.

        Args:
            player_x: Plays X and moves first.
            player_o: Plays O.
            renderer: Where to show the game (console by default).
            max_rejected_moves: Consecutive rejected moves from one player
                before the game is aborted.
        """
        if player_x.mark != Mark.X:
            raise ValueError(f"{player_x.name} must play X, not {player_x.mark.value}")
        if player_o.mark != Mark.O:
            raise ValueError(f"{player_o.name} must play O, not {player_o.mark.value}")
        if max_rejected_moves < 1:
            raise ValueError("max_rejected_moves must be at least 1")

        self.player_x = player_x
        self.player_o = player_o
        self.renderer = renderer if renderer is not None else ConsoleRenderer()
        self.max_rejected_moves = max_rejected_moves

        self.board = Board()
        self.current: Player = player_x
        self.moves: List[Move] = []
        self.result: Optional[GameResult] = None
        self.aborted = False

        self._validator = MoveValidator()
        self._rejections: Dict[Mark, int] = {Mark.X: 0, Mark.O: 0}

    def play(self) -> Optional[GameResult]:
        """
        Play the game to the end.

        Returns:
            The final result (a win or a draw), or None if the game was aborted.
        """
        self.renderer.show_intro(self.player_x.name, self.player_o.name)
        self.renderer.show_indices()
        self.renderer.show_board(self.board)

        while True:
            player = self.current

            try:
                move = player.next_move(self.board)
            except StrategyError as e:
                logger.error("Error getting move from %s: %s", player.name, e)
                self.renderer.show_message(f"Error getting move from {player.name}: {e}")
                return self._abort()

            if not self._apply(player, move):
                if self._rejections[player.mark] >= self.max_rejected_moves:
                    logger.error(
                        "%s made %d invalid moves in a row. Aborting game.",
                        player.name, self._rejections[player.mark]
                    )
                    self.renderer.show_message(
                        f"Too many invalid moves by {player.name}. Game aborted."
                    )
                    return self._abort()
            else:
                result = self.board.game_result()
                if result.is_over:
                    self.result = result
                    self.renderer.show_result(result, self.winner_name(result))
                    return result

            self.current = self.player_o if player is self.player_x else self.player_x

    def _apply(self, player: Player, move: int) -> bool:
        """Place a player's move. False (and the turn is skipped) if rejected."""
        check = self._validator.validate_move(self.board, move)

        if not check.is_valid or not self.board.place(player.mark, move):
            self._rejections[player.mark] += 1
            logger.warning(
                "Invalid move by %s: %s Skipping turn.", player.name, check.error_message
            )
            self.renderer.show_message(f"Invalid move by {player.name}. Skipping turn.")
            return False

        self._rejections[player.mark] = 0
        self.moves.append(Move(
            player_name=player.name,
            mark=player.mark,
            index=move,
            move_number=len(self.moves)
        ))
        self.renderer.show_move(player.name, player.mark, move, self.board)
        return True

    def _abort(self) -> None:
        self.aborted = True
        return None

    def winner_name(self, result: GameResult) -> Optional[str]:
        """Name of the player who won, or None for a draw or ongoing game."""
        if not result.is_win:
            return None
        return self.player_x.name if result.winner == Mark.X else self.player_o.name
