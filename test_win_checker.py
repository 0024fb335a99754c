"""
Tests for the board, win checker and move validator.
"""

import pytest

from ttt_logic.board import Board, Player
from ttt_logic.match_state import ComputerToMove, Match, Terminal
from ttt_logic.move_validator import IllegalMoveReason, MoveValidator
from ttt_logic.win_checker import WINNING_LINES, Outcome, WinChecker


@pytest.fixture
def checker():
    return WinChecker()


def test_board_from_symbols_and_back():
    board = Board.from_symbols("XX_OO____")
    assert board[0] == Player.HUMAN
    assert board[3] == Player.COMPUTER
    assert board[2] is None
    assert board.symbols() == ["X", "X", " ", "O", "O", " ", " ", " ", " "]
    assert board.empty_cells() == [2, 5, 6, 7, 8]
    assert board.count(Player.HUMAN) == 2
    assert board.count(Player.COMPUTER) == 2


def test_board_place_returns_new_board():
    board = Board.empty()
    after = board.place(4, Player.HUMAN)
    assert board.empty_cells() == list(range(9))
    assert after[4] == Player.HUMAN
    assert after != board


def test_board_place_rejects_bad_cells():
    board = Board.empty().place(4, Player.HUMAN)
    with pytest.raises(ValueError):
        board.place(4, Player.COMPUTER)
    with pytest.raises(ValueError):
        board.place(9, Player.COMPUTER)


def test_board_needs_nine_cells():
    with pytest.raises(ValueError):
        Board((None,) * 8)
    with pytest.raises(ValueError):
        Board.from_symbols("XQ_______")


def test_board_render_shows_free_cell_numbers():
    rendered = Board.from_symbols("X___O____").render()
    assert rendered.splitlines()[0] == " X | 1 | 2"
    assert rendered.splitlines()[2] == " 3 | O | 5"


def test_there_are_eight_lines():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(checker, line):
    cells = [None] * 9
    for index in line:
        cells[index] = Player.COMPUTER
    board = Board(tuple(cells))
    assert checker.check_winner(board) == Player.COMPUTER
    assert checker.get_winning_line(board) == line
    assert checker.check_outcome(board) == Outcome.COMPUTER_WIN


def test_mixed_line_does_not_win(checker):
    board = Board.from_symbols("XXO_O____")
    assert checker.check_winner(board) is None
    assert checker.get_winning_line(board) is None
    assert checker.check_outcome(board) is None


def test_full_board_without_line_is_draw(checker):
    board = Board.from_symbols("XOXXOOOXX")
    assert checker.check_winner(board) is None
    assert checker.check_draw(board)
    assert checker.check_outcome(board) == Outcome.DRAW


def test_win_on_last_cell_is_not_draw(checker):
    board = Board.from_symbols("XOXOXOOXX")
    assert checker.check_winner(board) == Player.HUMAN
    assert not checker.check_draw(board)
    assert checker.check_outcome(board) == Outcome.HUMAN_WIN


def test_outcome_results_are_from_human_view():
    assert Outcome.HUMAN_WIN.result == "win"
    assert Outcome.COMPUTER_WIN.result == "loss"
    assert Outcome.DRAW.result == "draw"
    assert Outcome.DRAW.winner is None
    assert Outcome.for_winner(Player.HUMAN) == Outcome.HUMAN_WIN


def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(Match(), 4)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("position", [-1, 9, 42])
def test_validator_rejects_out_of_range(position):
    result = MoveValidator().validate_move(Match(), position)
    assert not result.is_valid
    assert result.illegal_move.reason == IllegalMoveReason.OUT_OF_RANGE


def test_validator_rejects_occupied_cell():
    match = Match(board=Board.from_symbols("____X____"), state=ComputerToMove())
    result = MoveValidator().validate_move(match, 4, Player.COMPUTER)
    assert result.illegal_move.reason == IllegalMoveReason.OCCUPIED
    assert "occupied" in result.error_message


def test_validator_rejects_wrong_turn():
    match = Match(board=Board.from_symbols("____X____"), state=ComputerToMove())
    result = MoveValidator().validate_move(match, 0, Player.HUMAN)
    assert result.illegal_move.reason == IllegalMoveReason.NOT_YOUR_TURN


def test_validator_rejects_finished_game():
    match = Match(board=Board.from_symbols("XXXOO____"), state=Terminal(Outcome.HUMAN_WIN))
    result = MoveValidator().validate_move(match, 8)
    assert result.illegal_move.reason == IllegalMoveReason.GAME_OVER
    assert MoveValidator().get_valid_moves(match) == []
