"""
Tests for the board, results, win checking and move validation.
"""

import pytest

from logic.board import Board
from logic.game_result import GameResult, Outcome
from logic.mark import Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WINNING_LINES, WinChecker


def reachable_boards():
    """Every board reachable by alternating legal moves from empty (X first)."""
    seen = set()
    stack = [(Board(), Mark.X)]
    while stack:
        board, mark = stack.pop()
        key = str(board)
        if key in seen:
            continue
        seen.add(key)
        yield board
        if board.game_result().is_over:
            continue
        for move in board.available_moves():
            child = board.copy()
            assert child.place(mark, move)
            stack.append((child, mark.opposite()))


# ==================== MARK / RESULT ====================

def test_mark_opposite():
    assert Mark.X.opposite() == Mark.O
    assert Mark.O.opposite() == Mark.X
    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


def test_mark_from_char():
    assert Mark.from_char("x") == Mark.X
    assert Mark.from_char("O") == Mark.O
    for ch in "-. ":
        assert Mark.from_char(ch) == Mark.EMPTY
    with pytest.raises(ValueError):
        Mark.from_char("Z")


def test_game_result_variants():
    assert GameResult.ongoing().outcome == Outcome.ONGOING
    assert not GameResult.ongoing().is_over
    assert GameResult.draw().is_draw and GameResult.draw().is_over
    win = GameResult.win(Mark.O)
    assert win.is_win and win.winner == Mark.O
    assert str(win) == "O wins"
    with pytest.raises(ValueError):
        GameResult.win(Mark.EMPTY)
    with pytest.raises(ValueError):
        GameResult(Outcome.DRAW, Mark.X)


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert len(board) == 9
    assert board.available_moves() == list(range(9))
    assert not board.is_full()
    assert board.winner() is None
    assert board.game_result() == GameResult.ongoing()
    assert str(board) == "---------"


def test_board_rejects_wrong_size():
    with pytest.raises(ValueError):
        Board([Mark.EMPTY] * 8)
    with pytest.raises(ValueError):
        Board.from_string("XX")


def test_from_string_round_trip():
    board = Board.from_string("XX-O-O---")
    assert str(board) == "XX-O-O---"
    assert board[0] == Mark.X
    assert board[3] == Mark.O
    assert board.available_moves() == [2, 4, 6, 7, 8]


def test_place_and_clear_round_trip():
    board = Board()
    assert board.place(Mark.X, 4)
    assert board[4] == Mark.X
    board[4] = Mark.EMPTY
    assert board[4] == Mark.EMPTY
    assert board == Board()


@pytest.mark.parametrize("index", [-1, 9, 100, None, "4", 4.0, True])
def test_place_out_of_range_does_not_mutate(index):
    board = Board.from_string("X---O----")
    before = board.copy()
    assert not board.place(Mark.X, index)
    assert board == before


def test_place_on_occupied_cell_does_not_mutate():
    board = Board.from_string("X---O----")
    before = board.copy()
    assert not board.place(Mark.O, 0)
    assert not board.place(Mark.X, 4)
    assert board == before


def test_copy_is_independent():
    board = Board.from_string("X--------")
    copy = board.copy()
    copy.place(Mark.O, 1)
    assert board[1] == Mark.EMPTY


def test_row_win_on_partial_board():
    board = Board.from_string("XXX------")
    assert board.winner() == Mark.X
    assert board.game_result() == GameResult.win(Mark.X)
    assert not board.is_full()
    assert board.winning_line() == (0, 1, 2)


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    cells = [Mark.EMPTY] * 9
    for index in line:
        cells[index] = Mark.O
    board = Board(cells)
    assert board.winner() == Mark.O
    assert board.winning_line() == line


def test_full_board_without_line_is_draw():
    board = Board.from_string("XOXOXOOXO")
    assert board.is_full()
    assert board.winner() is None
    assert board.game_result() == GameResult.draw()


def test_full_board_with_line_is_win_not_draw():
    board = Board.from_string("XXXOOXXOO")
    assert board.is_full()
    assert board.game_result() == GameResult.win(Mark.X)


def test_first_line_in_canonical_order_decides():
    # Not reachable in play, but both rows are complete: the top one counts
    assert Board.from_string("XXX---OOO").winner() == Mark.X
    assert Board.from_string("OOO---XXX").winner() == Mark.O
    board = Board.from_string("X--XOOXO-")
    assert board.winning_line() == (0, 3, 6)


def test_rows():
    board = Board.from_string("XO-------")
    assert board.rows()[0] == (Mark.X, Mark.O, Mark.EMPTY)
    assert len(board.rows()) == 3


def test_reachable_boards_properties():
    count = 0
    for board in reachable_boards():
        count += 1
        assert len(board.available_moves()) + board.occupied_count() == 9
        result = board.game_result()
        assert [result.is_win, result.is_draw, not result.is_over].count(True) == 1
    # 5478 distinct legal positions in tic-tac-toe
    assert count == 5478


# ==================== WIN CHECKER ====================

def test_win_checker_on_plain_list():
    checker = WinChecker()
    cells = [Mark.from_char(ch) for ch in "O--O--O--"]
    assert checker.check_winner(cells) == Mark.O
    assert checker.evaluate(cells) == GameResult.win(Mark.O)


def test_win_checker_draw():
    checker = WinChecker()
    cells = [Mark.from_char(ch) for ch in "XOXXOOOXX"]
    assert checker.check_winner(cells) is None
    assert checker.evaluate(cells) == GameResult.draw()


# ==================== MOVE VALIDATOR ====================

def test_validate_move():
    validator = MoveValidator()
    board = Board.from_string("X--------")

    assert validator.validate_move(board, 4).is_valid

    taken = validator.validate_move(board, 0)
    assert not taken.is_valid
    assert "already taken" in taken.error_message

    out_of_range = validator.validate_move(board, 9)
    assert not out_of_range.is_valid
    assert "Invalid position" in out_of_range.error_message


@pytest.mark.parametrize("text, expected", [
    ("1", 0),
    (" 9 ", 8),
    ("5\n", 4),
])
def test_parse_position_valid(text, expected):
    index, result = MoveValidator().parse_position(text)
    assert index == expected
    assert result.is_valid


@pytest.mark.parametrize("text", ["0", "10", "abc", "", "-3", "4.5"])
def test_parse_position_invalid(text):
    index, result = MoveValidator().parse_position(text)
    assert index is None
    assert not result.is_valid
    assert "number from 1 to 9" in result.error_message
