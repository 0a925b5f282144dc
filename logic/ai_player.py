"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Dict

from .board import Board
from .config import GameConfig
from .errors import StrategyError
from .mark import Mark
from .player import Player

logger = logging.getLogger(__name__)


class MinimaxPlayer(Player):
    """
    A player that searches the whole game tree with Minimax.

    It will win if possible, block the opponent if needed, and never lose
    (at worst, draw). Scores are +10 for a win, -10 for a loss and 0 for a
    draw however many moves away they are, so among several winning moves
    it takes the lowest-numbered cell rather than the quickest win.

    The search plays tentative moves on the board it is given and puts
    every cell back before returning.
    """

    def __init__(self, name: str, mark: Mark):
        """
        Initialize the AI player.

        Args:
            name: Display name.
            mark: Which mark the AI plays.
        """
        super().__init__(name, mark)
        self.opponent = mark.opposite()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def next_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board, with at least one empty cell.

        Returns:
            Index of the best move. Ties go to the lowest index.
        """
        self.positions_evaluated = 0

        valid_moves = board.available_moves()

        if not valid_moves:
            raise StrategyError(f"{self.name} has no move on a full board")

        # Special case: empty board, take the center without searching
        if len(valid_moves) == GameConfig.CELL_COUNT:
            return GameConfig.CENTER_CELL

        best_score = float('-inf')
        best_move = valid_moves[0]

        for move, score in self._score_moves(board):
            # Strictly greater: the first (lowest) move keeps a tie
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "%s evaluated %d positions. Best move: %d (score: %d)",
            self.name, self.positions_evaluated, best_move, best_score
        )

        return best_move

    def score_moves(self, board: Board) -> Dict[int, int]:
        """
        Score every available move from this player's point of view.

        Args:
            board: Current board.

        Returns:
            {index: score} for each empty cell.
        """
        self.positions_evaluated = 0
        return dict(self._score_moves(board))

    def _score_moves(self, board: Board):
        """Yield (move, score) for each empty cell in ascending order."""
        for move in board.available_moves():
            board[move] = self.mark
            try:
                score = self._minimax(board, is_maximizing=False)
            finally:
                board[move] = Mark.EMPTY
            yield move, score

    def _minimax(self, board: Board, is_maximizing: bool) -> int:
        """
        Minimax algorithm, exhaustive.

        Args:
            board: Current board to evaluate.
            is_maximizing: True if it's this player's turn in the search.

        Returns:
            The score of the position.
        """
        self.positions_evaluated += 1

        # Check terminal states
        result = board.game_result()

        if result.is_win:
            if result.winner == self.mark:
                return GameConfig.WIN_SCORE
            return -GameConfig.WIN_SCORE
        if result.is_draw:
            return GameConfig.DRAW_SCORE

        mark = self.mark if is_maximizing else self.opponent
        scores = []

        for move in board.available_moves():
            board[move] = mark
            try:
                scores.append(self._minimax(board, not is_maximizing))
            finally:
                board[move] = Mark.EMPTY

        return max(scores) if is_maximizing else min(scores)


# Quick test
if __name__ == "__main__":
    print("Testing MinimaxPlayer...")

    # Test 1: AI should block a winning move
    board = Board.from_string("----O-XX-")
    ai = MinimaxPlayer("AI", Mark.O)

    print(f"\nBoard: {board}. AI is O. X is about to win with 8!")

    move = ai.next_move(board)
    print(f"AI's move: {move}")

    assert move == 8, f"Expected 8, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_string("X---X-OO-")
    ai = MinimaxPlayer("AI", Mark.X)

    print(f"\nBoard: {board}. AI is X. Can win with 8!")

    move = ai.next_move(board)
    print(f"AI's move: {move}")

    assert move == 8, f"Expected 8, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nMinimaxPlayer test done!")
