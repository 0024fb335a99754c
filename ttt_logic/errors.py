"""
Exceptions raised by the TicTacToe match core.
"""


class TicTacToeError(Exception):
    """Base class for all match core errors."""


class EngineInvariantViolation(TicTacToeError):
    """
    The decision engine was asked to move on a finished or full board.

    This means the controller skipped its own termination check. It is a
    programming error and is never caught inside the package.
    """
