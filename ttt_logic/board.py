"""
Board and player types for the TicTacToe match core.
The board is an immutable row of 9 cells (index 0-8, row-major).
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> str:
        """The symbol drawn for this player."""
        return GameConfig.HUMAN_MARK if self == Player.HUMAN else GameConfig.COMPUTER_MARK


Cell = Optional[Player]

# Characters accepted as an empty cell by Board.from_symbols
EMPTY_SYMBOLS = (" ", "_", ".", "-")


@dataclass(frozen=True)
class Board:
    """
    A 3x3 TicTacToe board.

    Cells hold None (empty) or the Player who marked them. The board is
    never changed in place: place() returns a new Board.
    """

    cells: Tuple[Cell, ...] = field(
        default_factory=lambda: (None,) * GameConfig.CELL_COUNT
    )

    def __post_init__(self):
        if len(self.cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board has {GameConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "cells", tuple(self.cells))

    @classmethod
    def empty(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> "Board":
        """
        Build a board from display marks.

        Args:
            symbols: 9 marks, e.g. "XX OO    " or ["X", "X", "_", ...].
                Empty cells may be written as " ", "_", "." or "-".

        Returns:
            The parsed Board.
        """
        cells: List[Cell] = []
        for symbol in symbols:
            if symbol == GameConfig.HUMAN_MARK:
                cells.append(Player.HUMAN)
            elif symbol == GameConfig.COMPUTER_MARK:
                cells.append(Player.COMPUTER)
            elif symbol in EMPTY_SYMBOLS or symbol is None:
                cells.append(None)
            else:
                raise ValueError(f"Unknown board symbol: {symbol!r}")
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def place(self, index: int, player: Player) -> "Board":
        """
        Return a new board with the player's mark at the given cell.

        Args:
            index: Cell index (0-8).
            player: Who is marking the cell.

        Returns:
            The new Board. This board is left untouched.
        """
        if not 0 <= index < GameConfig.CELL_COUNT:
            raise ValueError(f"Invalid position {index}. Must be 0-8.")
        if self.cells[index] is not None:
            raise ValueError(f"Cell {index} is already occupied")

        cells = list(self.cells)
        cells[index] = player
        return Board(tuple(cells))

    def empty_cells(self) -> List[int]:
        """All empty cell indices, in increasing order."""
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, player: Player) -> int:
        """How many cells the player has marked."""
        return sum(1 for cell in self.cells if cell == player)

    def symbols(self) -> List[str]:
        """Display marks for every cell (empty cells are a space)."""
        return [
            GameConfig.EMPTY_MARK if cell is None else cell.mark
            for cell in self.cells
        ]

    def render(self) -> str:
        """Render the board as an ASCII grid with cell numbers for empties."""
        size = GameConfig.BOARD_SIZE
        lines = []
        for row in range(size):
            row_cells = []
            for col in range(size):
                index = row * size + col
                cell = self.cells[index]
                row_cells.append(str(index) if cell is None else cell.mark)
            lines.append(" " + " | ".join(row_cells))
            if row < size - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

    def __str__(self) -> str:
        return "".join(self.symbols())
