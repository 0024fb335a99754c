"""
Tests for the match controller and outcome recording.
"""

import logging

import pytest

from ttt_logic.board import Board, Player
from ttt_logic.decision_engine import DecisionEngine
from ttt_logic.match_controller import MatchController
from ttt_logic.move_validator import IllegalMoveReason
from ttt_logic.outcomes import InMemoryOutcomeRecorder
from ttt_logic.win_checker import Outcome


class ScriptedEngine:
    """Plays fixed cells so tests can reach human wins and late draws."""

    def __init__(self, moves):
        self.moves = list(moves)

    def get_best_move(self, board):
        return self.moves.pop(0)


class FailingRecorder:
    def __init__(self):
        self.calls = 0

    def record_outcome(self, outcome, final_board):
        self.calls += 1
        raise RuntimeError("database unavailable")


@pytest.fixture
def recorder():
    return InMemoryOutcomeRecorder()


@pytest.fixture
def controller(recorder):
    return MatchController(recorder=recorder)


def play(controller, moves):
    view = controller.view
    for move in moves:
        view = controller.apply_human_move(move)
        assert view.accepted, view.illegal_move
    return view


def test_new_match_is_empty_and_human_to_move(controller):
    view = controller.view
    assert view.board == Board.empty()
    assert view.to_move == Player.HUMAN
    assert view.outcome is None
    assert not view.is_terminal


def test_center_opening_gets_corner_reply(controller):
    view = controller.apply_human_move(4)
    assert view.last_computer_move == 0
    assert view.board == Board.from_symbols("O___X____")
    assert view.to_move == Player.HUMAN
    assert view.outcome is None


def test_occupied_cell_is_rejected_without_change(controller, recorder):
    before = controller.apply_human_move(4)

    for cell in (4, 0):
        view = controller.apply_human_move(cell)
        assert view.illegal_move.reason == IllegalMoveReason.OCCUPIED
        assert view.board == before.board
        assert view.board.cells == before.board.cells
        assert view.to_move == Player.HUMAN
        assert view.last_computer_move is None

    assert controller.match.board == before.board
    assert recorder.get_stats().games_played == 0


@pytest.mark.parametrize("position", [-1, 9])
def test_out_of_range_is_rejected(controller, position):
    view = controller.apply_human_move(position)
    assert view.illegal_move.reason == IllegalMoveReason.OUT_OF_RANGE
    assert view.board == Board.empty()


def test_computer_wins_and_is_recorded_once(controller, recorder):
    # Corner opening, then ignore the computer's diagonal
    view = play(controller, [0, 1, 8])

    assert view.board == Board.from_symbols("XXO_O_O_X")
    assert view.outcome == Outcome.COMPUTER_WIN
    assert view.to_move is None
    assert view.winning_line == (2, 4, 6)
    assert view.last_computer_move == 6

    stats = recorder.get_stats()
    assert (stats.wins, stats.losses, stats.draws) == (0, 1, 0)
    record = recorder.get_history()[0]
    assert record.result == "loss"
    assert record.winner == "O"
    assert record.board == ["X", "X", "O", " ", "O", " ", "O", " ", "X"]

    # Finished matches accept nothing and record nothing more
    again = controller.apply_human_move(3)
    assert again.illegal_move.reason == IllegalMoveReason.GAME_OVER
    assert again.board == view.board
    assert again.outcome == Outcome.COMPUTER_WIN
    assert recorder.get_stats().games_played == 1


def test_human_win_skips_computer_reply(recorder):
    controller = MatchController(engine=ScriptedEngine([3, 4]), recorder=recorder)
    view = play(controller, [0, 1, 2])

    assert view.outcome == Outcome.HUMAN_WIN
    assert view.last_computer_move is None
    assert view.winning_line == (0, 1, 2)
    assert recorder.get_stats().wins == 1
    assert recorder.get_history()[0].winner == "X"


def test_draw_on_human_last_move(recorder):
    controller = MatchController(engine=ScriptedEngine([4, 1, 6, 5]), recorder=recorder)
    view = play(controller, [0, 2, 7, 3, 8])

    assert view.board == Board.from_symbols("XOXXOOOXX")
    assert view.outcome == Outcome.DRAW
    assert view.winning_line is None
    assert recorder.get_stats().draws == 1


def test_optimal_self_play_is_a_draw(controller, recorder):
    human = DecisionEngine(Player.HUMAN)
    view = controller.view
    while not view.is_terminal:
        view = controller.apply_human_move(human.get_best_move(view.board))
        assert view.accepted

    assert view.outcome == Outcome.DRAW
    assert view.board.is_full()
    assert recorder.get_stats().draws == 1


def test_reset_starts_new_match(controller, recorder):
    finished = play(controller, [0, 1, 8])
    view = controller.reset()

    assert view.match_id != finished.match_id
    assert view.board == Board.empty()
    assert view.to_move == Player.HUMAN
    assert view.outcome is None
    assert recorder.get_stats().games_played == 1


def test_reset_of_unfinished_match_records_nothing(controller, recorder):
    controller.apply_human_move(4)
    view = controller.reset()

    assert view.board == Board.empty()
    assert recorder.get_stats().games_played == 0
    assert recorder.get_history() == []


def test_recorder_failure_keeps_finished_match(caplog):
    recorder = FailingRecorder()
    controller = MatchController(recorder=recorder)

    with caplog.at_level(logging.ERROR):
        view = play(controller, [0, 1, 8])

    assert view.outcome == Outcome.COMPUTER_WIN
    assert recorder.calls == 1
    assert "Failed to record outcome" in caplog.text

    controller.apply_human_move(3)
    assert recorder.calls == 1


def test_view_to_dict(controller):
    data = play(controller, [0, 1, 8]).to_dict()
    assert data["board"] == ["X", "X", "O", " ", "O", " ", "O", " ", "X"]
    assert data["outcome"] == "computer-win"
    assert data["result"] == "loss"
    assert data["winner"] == "O"
    assert data["winningLine"] == [2, 4, 6]
    assert data["toMove"] is None

    rejected = controller.apply_human_move(3).to_dict()
    assert rejected["illegalMove"]["reason"] == "game_over"


def test_history_is_newest_first_and_limited(recorder):
    finished = [
        (Outcome.HUMAN_WIN, "XXXOO____"),
        (Outcome.DRAW, "XOXXOOOXX"),
        (Outcome.COMPUTER_WIN, "OOOXX_X__"),
    ]
    for outcome, symbols in finished:
        recorder.record_outcome(outcome, Board.from_symbols(symbols))

    assert [r.result for r in recorder.get_history()] == ["loss", "draw", "win"]
    assert [r.result for r in recorder.get_history(limit=2)] == ["loss", "draw"]
    assert recorder.get_history(limit=0) == []

    stats = recorder.get_stats()
    assert (stats.wins, stats.losses, stats.draws) == (1, 1, 1)
    assert recorder.get_history()[0].to_dict()["gameData"]["winner"] == "O"
