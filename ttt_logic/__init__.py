"""
Logic module for the TicTacToe match core.
Handles the board, rules, match flow and the optimal computer opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board, Player
from .errors import TicTacToeError, EngineInvariantViolation
from .win_checker import WinChecker, Outcome, WINNING_LINES
from .match_state import Match, HumanToMove, ComputerToMove, Terminal
from .move_validator import MoveValidator, IllegalMove, IllegalMoveReason
from .decision_engine import DecisionEngine
from .outcomes import OutcomeRecorder, InMemoryOutcomeRecorder, GameStats, GameRecord
from .match_controller import MatchController, MatchView
