"""
Tests for the players: minimax, random and human.
"""

import random

import pytest

from logic.ai_player import MinimaxPlayer
from logic.board import Board
from logic.errors import InputClosedError, StrategyError
from logic.factory import PlayerKind, create_player
from logic.mark import Mark
from logic.player import HumanPlayer, RandomPlayer


def scripted_input(lines):
    """An input function that returns the given lines, then hits end of input."""
    answers = iter(lines)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    read.prompts = prompts
    return read


# ==================== MINIMAX ====================

def test_minimax_takes_center_on_empty_board():
    ai = MinimaxPlayer("AI", Mark.X)
    assert ai.next_move(Board()) == 4
    assert ai.positions_evaluated == 0


def test_minimax_completes_top_row():
    ai = MinimaxPlayer("AI", Mark.X)
    assert ai.next_move(Board.from_string("XX-------")) == 2


def test_minimax_as_o_picks_lowest_of_equal_wins():
    # O wins at once with 4, but 2 also forces a win; ties keep the lowest index
    ai = MinimaxPlayer("AI", Mark.O)
    board = Board.from_string("XX-O-O---")
    assert ai.next_move(board) == 2
    assert ai.score_moves(board)[2] == ai.score_moves(board)[4] == 10


def test_minimax_blocks_immediate_loss():
    ai = MinimaxPlayer("AI", Mark.O)
    assert ai.next_move(Board.from_string("----O-XX-")) == 8


def test_minimax_takes_immediate_win():
    ai = MinimaxPlayer("AI", Mark.X)
    assert ai.next_move(Board.from_string("X---X-OO-")) == 8


def test_minimax_single_move_left():
    ai = MinimaxPlayer("AI", Mark.X)
    assert ai.next_move(Board.from_string("XOXOXOOX-")) == 8


def test_minimax_scores_without_depth_discount():
    ai = MinimaxPlayer("AI", Mark.X)
    scores = ai.score_moves(Board.from_string("X---X-OO-"))
    assert scores[8] == 10
    assert set(scores.values()) <= {10, 0, -10}
    assert all(score == -10 for move, score in scores.items() if move != 8)


@pytest.mark.parametrize("text, mark", [
    ("X--------", Mark.O),
    ("X---O---X", Mark.X),
    ("XX-O-O---", Mark.O),
    ("XOX-O----", Mark.X),
])
def test_minimax_leaves_board_unchanged(text, mark):
    board = Board.from_string(text)
    ai = MinimaxPlayer("AI", mark)
    ai.next_move(board)
    assert str(board) == text
    ai.score_moves(board)
    assert str(board) == text


def test_minimax_restores_board_when_search_fails(monkeypatch):
    board = Board.from_string("X---O----")
    ai = MinimaxPlayer("AI", Mark.X)

    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(ai, "_minimax", explode)
    with pytest.raises(RuntimeError):
        ai.next_move(board)
    assert str(board) == "X---O----"


def test_minimax_no_moves_raises_strategy_error():
    ai = MinimaxPlayer("AI", Mark.X)
    with pytest.raises(StrategyError):
        ai.next_move(Board.from_string("XOXOXOOXO"))


def test_minimax_counts_positions():
    ai = MinimaxPlayer("AI", Mark.O)
    ai.next_move(Board.from_string("X--------"))
    assert ai.positions_evaluated > 0


# ==================== RANDOM ====================

def test_random_player_picks_available_moves():
    board = Board.from_string("XO-XO-OX-")
    player = RandomPlayer("Rand", Mark.X, rng=random.Random(1))
    for _ in range(50):
        assert player.next_move(board) in (2, 5, 8)


def test_random_player_single_move():
    player = RandomPlayer("Rand", Mark.O)
    assert player.next_move(Board.from_string("XOXOXOOX-")) == 8


def test_random_player_is_seeded():
    board = Board()
    a = RandomPlayer("A", Mark.X, rng=random.Random(7))
    b = RandomPlayer("B", Mark.X, rng=random.Random(7))
    assert [a.next_move(board) for _ in range(10)] == [b.next_move(board) for _ in range(10)]


def test_random_player_full_board_raises():
    with pytest.raises(StrategyError):
        RandomPlayer("Rand", Mark.X).next_move(Board.from_string("XOXOXOOXO"))


# ==================== HUMAN ====================

def test_human_player_reprompts_until_valid():
    messages = []
    read = scripted_input(["abc", "0", "1", "5"])
    player = HumanPlayer("Ann", Mark.O, input_func=read, output=messages.append)

    move = player.next_move(Board.from_string("X--------"))

    assert move == 4
    assert len(read.prompts) == 4
    assert read.prompts[0] == "Ann (O) - enter position 1..9: "
    assert messages[0] == "Invalid input. Please enter a number from 1 to 9."
    assert messages[1] == "Invalid input. Please enter a number from 1 to 9."
    assert "already taken" in messages[2]


def test_human_player_end_of_input():
    player = HumanPlayer("Ann", Mark.X, input_func=scripted_input([]), output=lambda s: None)
    with pytest.raises(InputClosedError):
        player.next_move(Board())


@pytest.mark.parametrize("error", [
    OSError("stdin is broken"),
    UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"),
])
def test_human_player_input_failure(error):
    def broken_input(prompt):
        raise error

    player = HumanPlayer("Ann", Mark.X, input_func=broken_input, output=lambda s: None)
    with pytest.raises(InputClosedError) as excinfo:
        player.next_move(Board())
    assert excinfo.value.__cause__ is error


def test_player_needs_real_mark():
    with pytest.raises(ValueError):
        RandomPlayer("Nobody", Mark.EMPTY)


# ==================== FACTORY ====================

@pytest.mark.parametrize("text, kind", [
    ("h", PlayerKind.HUMAN),
    ("Human", PlayerKind.HUMAN),
    (" r ", PlayerKind.RANDOM),
    ("random", PlayerKind.RANDOM),
    ("a", PlayerKind.MINIMAX),
    ("AI", PlayerKind.MINIMAX),
    ("minimax", PlayerKind.MINIMAX),
])
def test_player_kind_from_choice(text, kind):
    assert PlayerKind.from_choice(text) == kind


def test_player_kind_unknown():
    with pytest.raises(ValueError):
        PlayerKind.from_choice("q")


def test_create_player():
    assert isinstance(create_player(PlayerKind.MINIMAX, "AI", Mark.X), MinimaxPlayer)
    assert isinstance(create_player(PlayerKind.RANDOM, "R", Mark.O, rng=random.Random(0)), RandomPlayer)
    human = create_player(PlayerKind.HUMAN, "H", Mark.X, input_func=scripted_input(["1"]))
    assert isinstance(human, HumanPlayer)
    assert human.name == "H" and human.mark == Mark.X
