"""
Logic module for TicTacToe.
Handles the board, rules, players, and the minimax opponent.
"""

__version__ = "1.0.0"

from .mark import Mark
from .game_result import GameResult, Outcome
from .board import Board
from .win_checker import WinChecker, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .errors import StrategyError, InputClosedError
from .player import Player, HumanPlayer, RandomPlayer
from .ai_player import MinimaxPlayer
from .factory import PlayerKind, create_player
from .game import Game, Move
from .config import GameConfig
