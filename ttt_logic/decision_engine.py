"""
Decision engine for the TicTacToe match core.
Uses the Minimax algorithm to choose the best move.
"""

import logging
import math
from typing import List, Optional, Tuple

from .board import Board, Cell, Player
from .config import GameConfig
from .errors import EngineInvariantViolation
from .win_checker import line_winner

LOGGER = logging.getLogger(__name__)


class DecisionEngine:
    """
    An engine that plays TicTacToe using the Minimax algorithm.

    The engine always plays optimally: it wins if possible, blocks the
    opponent if needed, and never loses (at worst, draw). Scores are
    depth-adjusted, so it wins as fast as it can and loses as late as it can.

    Among equally good cells the lowest index is chosen, so the same board
    always gets the same answer.
    """

    def __init__(self, player: Player = Player.COMPUTER, config: Optional[GameConfig] = None):
        """
        Initialize the engine.

        Args:
            player: Which player the engine moves for (default: COMPUTER)
            config: Game settings (default: GameConfig())
        """
        self.player = player
        self.config = config or GameConfig()

        # How many positions the last search visited (for debugging)
        self.nodes_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Board with the engine's player to move. It is not modified.

        Returns:
            The chosen cell index (0-8).

        Raises:
            EngineInvariantViolation: the board is already won or full.
        """
        self._check_playable(board)
        self.nodes_evaluated = 0

        # Work on a scratch copy; every trial placement is undone
        cells: List[Cell] = list(board.cells)

        best_score = -math.inf
        best_move = -1

        for index in board.empty_cells():
            cells[index] = self.player
            # A later cell must score strictly higher to replace the best
            score = self._minimax(cells, 0, False, best_score, math.inf)
            cells[index] = None

            if score > best_score:
                best_score = score
                best_move = index

        LOGGER.debug(
            "Engine evaluated %d positions. Best move: %d (score: %s)",
            self.nodes_evaluated, best_move, best_score
        )
        return best_move

    def evaluate_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Score every legal move exactly.

        Args:
            board: Board with the engine's player to move. It is not modified.

        Returns:
            (cell, score) pairs in increasing cell order.
        """
        self._check_playable(board)
        self.nodes_evaluated = 0

        cells: List[Cell] = list(board.cells)
        scores = []
        for index in board.empty_cells():
            cells[index] = self.player
            score = self._minimax(cells, 0, False, -math.inf, math.inf)
            cells[index] = None
            scores.append((index, int(score)))
        return scores

    def _check_playable(self, board: Board):
        winner = line_winner(board.cells)
        if winner is not None:
            raise EngineInvariantViolation(
                f"Engine asked to move on a finished board (winner: {winner.value}): {board}"
            )
        if board.is_full():
            raise EngineInvariantViolation(f"Engine asked to move on a full board: {board}")

    def _minimax(
        self,
        cells: List[Cell],
        depth: int,
        is_maximizing: bool,
        alpha: float = -math.inf,
        beta: float = math.inf
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            cells: Scratch board, restored before returning.
            depth: Plies played since the candidate move.
            is_maximizing: True if it's the engine player's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position.
        """
        self.nodes_evaluated += 1

        # Check terminal states
        winner = line_winner(cells)
        if winner == self.player:
            return self.config.WIN_SCORE - depth  # Win (prefer faster wins)
        elif winner is not None:
            return depth - self.config.WIN_SCORE  # Loss (prefer slower losses)

        empty = [index for index, cell in enumerate(cells) if cell is None]
        if not empty:
            return 0  # Draw

        if is_maximizing:
            max_score = -math.inf
            for index in empty:
                cells[index] = self.player
                score = self._minimax(cells, depth + 1, False, alpha, beta)
                cells[index] = None
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            opponent = self.player.opposite()
            min_score = math.inf
            for index in empty:
                cells[index] = opponent
                score = self._minimax(cells, depth + 1, True, alpha, beta)
                cells[index] = None
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score
