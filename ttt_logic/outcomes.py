"""
Outcome recording for finished matches.
Defines the recorder interface the controller reports to, and an
in-memory recorder that keeps win/loss/draw totals and recent games.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol
from dataclasses import dataclass, field

from .board import Board
from .config import GameConfig
from .win_checker import Outcome

LOGGER = logging.getLogger(__name__)


class OutcomeRecorder(Protocol):
    """Anything that can store the result of a finished match."""

    def record_outcome(self, outcome: Outcome, final_board: Board) -> None:
        ...


@dataclass
class GameStats:
    """Totals from the human's point of view."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.draws

    def add(self, outcome: Outcome):
        if outcome == Outcome.HUMAN_WIN:
            self.wins += 1
        elif outcome == Outcome.COMPUTER_WIN:
            self.losses += 1
        else:
            self.draws += 1


@dataclass(frozen=True)
class GameRecord:
    """One finished match."""
    result: str                  # "win", "loss" or "draw" (human's view)
    board: List[str]             # Final marks, e.g. ["X", "O", " ", ...]
    winner: Optional[str]        # Winning mark, or None for a draw
    record_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    played_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict:
        return {
            "id": self.record_id,
            "result": self.result,
            "gameData": {"board": list(self.board), "winner": self.winner},
            "playedAt": self.played_at.isoformat(),
        }


class InMemoryOutcomeRecorder:
    """
    Keeps stats and history for one player in memory.

    Stands in for the persistence layer when the core runs on its own
    (console and desktop front ends, tests).
    """

    def __init__(self):
        self._stats = GameStats()
        self._history: List[GameRecord] = []

    def record_outcome(self, outcome: Outcome, final_board: Board) -> None:
        winner = outcome.winner
        record = GameRecord(
            result=outcome.result,
            board=final_board.symbols(),
            winner=winner.mark if winner is not None else None,
        )
        self._stats.add(outcome)
        self._history.append(record)
        LOGGER.info(
            "Recorded %s (W/L/D now %d/%d/%d)",
            record.result, self._stats.wins, self._stats.losses, self._stats.draws
        )

    def get_stats(self) -> GameStats:
        """Current totals (a copy)."""
        return GameStats(self._stats.wins, self._stats.losses, self._stats.draws)

    def get_history(self, limit: int = GameConfig.DEFAULT_HISTORY_LIMIT) -> List[GameRecord]:
        """
        Most recent games first.

        Args:
            limit: Maximum number of records to return.
        """
        if limit <= 0:
            return []
        return list(reversed(self._history[-limit:]))
