"""
Match state for the TicTacToe match core.
Tracks the board, whose turn it is, and how the match ended.
"""

import uuid
from typing import Optional, Union
from dataclasses import dataclass, field

from .board import Board, Player
from .win_checker import Outcome


@dataclass(frozen=True)
class HumanToMove:
    """Waiting for the human's move."""

    @property
    def to_move(self) -> Optional[Player]:
        return Player.HUMAN


@dataclass(frozen=True)
class ComputerToMove:
    """The engine is choosing a move (never seen by callers)."""

    @property
    def to_move(self) -> Optional[Player]:
        return Player.COMPUTER


@dataclass(frozen=True)
class Terminal:
    """The match is over."""
    outcome: Outcome

    @property
    def to_move(self) -> Optional[Player]:
        return None


MatchState = Union[HumanToMove, ComputerToMove, Terminal]


def state_for_turn(player: Player) -> MatchState:
    """The non-terminal state in which the given player moves next."""
    return HumanToMove() if player == Player.HUMAN else ComputerToMove()


@dataclass
class Match:
    """
    One game from an empty board to a terminal outcome.

    Tracks:
    - The board
    - The current state (HumanToMove, ComputerToMove or Terminal)
    - Whether the outcome has been handed to the recorder
    """

    board: Board = field(default_factory=Board.empty)
    state: MatchState = field(default_factory=HumanToMove)
    match_id: str = field(default_factory=lambda: uuid.uuid4().hex)

    # Set once the outcome has been reported
    recorded: bool = False

    @property
    def is_terminal(self) -> bool:
        return isinstance(self.state, Terminal)

    @property
    def outcome(self) -> Optional[Outcome]:
        if isinstance(self.state, Terminal):
            return self.state.outcome
        return None

    @property
    def to_move(self) -> Optional[Player]:
        return self.state.to_move
