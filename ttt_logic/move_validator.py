"""
Move validator for the TicTacToe match core.
Validates that a human move follows the rules.
"""

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass

from .board import Player
from .config import GameConfig
from .match_state import Match


class IllegalMoveReason(Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    NOT_YOUR_TURN = "not_your_turn"
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"


@dataclass(frozen=True)
class IllegalMove:
    """A rejected move. The match is left exactly as it was."""
    position: int
    reason: IllegalMoveReason
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    illegal_move: Optional[IllegalMove] = None

    @property
    def is_valid(self) -> bool:
        return self.illegal_move is None

    @property
    def error_message(self) -> Optional[str]:
        return self.illegal_move.message if self.illegal_move else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. It must be the mover's turn
    3. Position must be a cell index 0-8
    4. Can only place on empty cells
    """

    def validate_move(
        self,
        match: Match,
        position: int,
        player: Player = Player.HUMAN
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            match: Current match.
            position: Cell index to mark (0-8).
            player: Who is moving.

        Returns:
            ValidationResult, carrying an IllegalMove when rejected.
        """
        if match.is_terminal:
            return self._reject(position, IllegalMoveReason.GAME_OVER, "Game is already over!")

        if match.to_move != player:
            return self._reject(
                position,
                IllegalMoveReason.NOT_YOUR_TURN,
                f"It's not {player.value}'s turn!"
            )

        if isinstance(position, bool) or not isinstance(position, int) \
                or not 0 <= position < GameConfig.CELL_COUNT:
            return self._reject(
                position,
                IllegalMoveReason.OUT_OF_RANGE,
                f"Invalid position {position!r}. Must be 0-8."
            )

        occupant = match.board[position]
        if occupant is not None:
            return self._reject(
                position,
                IllegalMoveReason.OCCUPIED,
                f"Cell {position} is already occupied by {occupant.mark}"
            )

        return ValidationResult()

    def get_valid_moves(self, match: Match) -> List[int]:
        """All cells the current player may mark (none once the game is over)."""
        if match.is_terminal:
            return []
        return match.board.empty_cells()

    @staticmethod
    def _reject(position, reason: IllegalMoveReason, message: str) -> ValidationResult:
        return ValidationResult(IllegalMove(position=position, reason=reason, message=message))
