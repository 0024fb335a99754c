"""
Win checker for the TicTacToe match core.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple

from .board import Board, Cell, Player


# All possible winning lines (as cell index triples)
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(Enum):
    """How a finished match ended."""
    HUMAN_WIN = "human-win"
    COMPUTER_WIN = "computer-win"
    DRAW = "draw"

    @classmethod
    def for_winner(cls, winner: Player) -> "Outcome":
        return cls.HUMAN_WIN if winner == Player.HUMAN else cls.COMPUTER_WIN

    @property
    def result(self) -> str:
        """The result from the human's point of view: win, loss or draw."""
        return _RESULTS[self]

    @property
    def winner(self) -> Optional[Player]:
        if self == Outcome.HUMAN_WIN:
            return Player.HUMAN
        if self == Outcome.COMPUTER_WIN:
            return Player.COMPUTER
        return None


_RESULTS = {
    Outcome.HUMAN_WIN: "win",
    Outcome.COMPUTER_WIN: "loss",
    Outcome.DRAW: "draw",
}


def line_winner(cells: Sequence[Cell]) -> Optional[Player]:
    """
    Find the owner of a completed line, if any.

    Works on any 9-cell sequence, so the decision engine can call it on its
    scratch list without building Board objects.
    """
    for a, b, c in WINNING_LINES:
        owner = cells[a]
        if owner is not None and owner == cells[b] == cells[c]:
            return owner
    return None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to inspect.

        Returns:
            The winning Player, or None if no winner yet.
        """
        return line_winner(board.cells)

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def check_outcome(self, board: Board) -> Optional[Outcome]:
        """
        Classify the board.

        Exactly one of: None (game goes on), HUMAN_WIN, COMPUTER_WIN, DRAW.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.for_winner(winner)
        if board.is_full():
            return Outcome.DRAW
        return None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line in WINNING_LINES order, or None.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            owner = board[a]
            if owner is not None and owner == board[b] == board[c]:
                return line
        return None
