"""
Match controller for the TicTacToe match core.

This ties together:
- Move validation (turn order, occupied cells, finished games)
- The decision engine (the computer's reply)
- Win/draw detection after every move
- Reporting the outcome to a recorder, once per match
"""

import logging
from typing import Dict, Optional, Tuple
from dataclasses import dataclass

from .board import Board, Player
from .config import GameConfig
from .decision_engine import DecisionEngine
from .match_state import Match, Terminal, state_for_turn
from .move_validator import IllegalMove, MoveValidator
from .outcomes import OutcomeRecorder
from .win_checker import Outcome, WinChecker

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchView:
    """
    What the caller gets back after every operation.

    Holds the board snapshot, whose turn it is (None once finished), the
    outcome (None while playing) and, for a rejected call, the IllegalMove.
    """
    match_id: str
    board: Board
    to_move: Optional[Player]
    outcome: Optional[Outcome] = None
    illegal_move: Optional[IllegalMove] = None
    last_computer_move: Optional[int] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome is not None

    @property
    def accepted(self) -> bool:
        return self.illegal_move is None

    def to_dict(self) -> Dict:
        """JSON-ready form of the view."""
        winner = self.outcome.winner if self.outcome else None
        return {
            "matchId": self.match_id,
            "board": self.board.symbols(),
            "toMove": self.to_move.value if self.to_move else None,
            "outcome": self.outcome.value if self.outcome else None,
            "result": self.outcome.result if self.outcome else None,
            "winner": winner.mark if winner else None,
            "winningLine": list(self.winning_line) if self.winning_line else None,
            "lastComputerMove": self.last_computer_move,
            "illegalMove": (
                {
                    "position": self.illegal_move.position,
                    "reason": self.illegal_move.reason.value,
                    "message": self.illegal_move.message,
                }
                if self.illegal_move else None
            ),
        }


class MatchController:
    """
    Runs one match at a time between the human and the computer.

    Game flow:
    1. Human marks a cell
    2. Check for a win or draw
    3. Computer picks its reply with the decision engine
    4. Check for a win or draw
    5. Repeat until someone wins or it's a draw, then reset()

    Everything happens inside apply_human_move(); callers never see the
    ComputerToMove state.
    """

    def __init__(
        self,
        engine: Optional[DecisionEngine] = None,
        recorder: Optional[OutcomeRecorder] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            engine: Decision engine for the computer (default: a new one).
            recorder: Receives the outcome of every finished match.
            config: Game settings (default: GameConfig()).
        """
        self.config = config or GameConfig()
        self.engine = engine or DecisionEngine(Player.COMPUTER, self.config)
        self.recorder = recorder
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.match = Match()

    @property
    def view(self) -> MatchView:
        """Snapshot of the current match."""
        return self._view()

    def apply_human_move(self, position: int) -> MatchView:
        """
        Mark a cell for the human and, if the game goes on, answer it.

        Args:
            position: Cell index (0-8).

        Returns:
            The new MatchView, or the unchanged one carrying an IllegalMove.
        """
        result = self.validator.validate_move(self.match, position, Player.HUMAN)
        if not result.is_valid:
            LOGGER.info("Rejected move %r: %s", position, result.error_message)
            return self._view(illegal_move=result.illegal_move)

        self._place(position, Player.HUMAN)
        if self.match.is_terminal:
            return self._view()

        # Computer's turn - resolved before returning
        move = self.engine.get_best_move(self.match.board)
        self._place(move, Player.COMPUTER)
        return self._view(last_computer_move=move)

    def reset(self) -> MatchView:
        """Start a fresh match. An unfinished match is dropped unrecorded."""
        if not self.match.is_terminal and self.match.board.count(Player.HUMAN):
            LOGGER.info("Match %s abandoned", self.match.match_id)
        self.match = Match()
        LOGGER.info("New match %s", self.match.match_id)
        return self._view()

    def _place(self, position: int, player: Player):
        """Mark the cell, then move to the next state."""
        self.match.board = self.match.board.place(position, player)
        LOGGER.info("%s marked cell %d", player.value, position)

        outcome = self.win_checker.check_outcome(self.match.board)
        if outcome is None:
            self.match.state = state_for_turn(player.opposite())
            return

        self.match.state = Terminal(outcome)
        LOGGER.info("Match %s over: %s", self.match.match_id, outcome.value)
        self._report(outcome)

    def _report(self, outcome: Outcome):
        """Hand the outcome to the recorder exactly once per match."""
        if self.match.recorded:
            return
        self.match.recorded = True

        if self.recorder is None:
            return
        try:
            self.recorder.record_outcome(outcome, self.match.board)
        except Exception:
            # The finished game stands even if it could not be saved
            LOGGER.exception("Failed to record outcome of match %s", self.match.match_id)

    def _view(
        self,
        illegal_move: Optional[IllegalMove] = None,
        last_computer_move: Optional[int] = None
    ) -> MatchView:
        board = self.match.board
        return MatchView(
            match_id=self.match.match_id,
            board=board,
            to_move=self.match.to_move,
            outcome=self.match.outcome,
            illegal_move=illegal_move,
            last_computer_move=last_computer_move,
            winning_line=self.win_checker.get_winning_line(board),
        )
