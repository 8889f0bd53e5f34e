"""
Board state for TicTacToe.
Holds the 3x3 grid of cells and the basic queries on it.
"""

from enum import Enum
from typing import List, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .config import GameConfig


class Cell(Enum):
    """The value of a single board cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the opposite player."""
        if self == Cell.EMPTY:
            raise ValueError("EMPTY has no opposite player")
        return Cell.O if self == Cell.X else Cell.X

    @property
    def is_player(self) -> bool:
        return self != Cell.EMPTY


# Characters accepted by Board.from_rows for an empty cell
EMPTY_CHARS = (" ", ".", "_", "-", "")


def _empty_grid() -> List[List[Cell]]:
    size = GameConfig.BOARD_SIZE
    return [[Cell.EMPTY for _ in range(size)] for _ in range(size)]


def _to_cell(value: Union[Cell, str, None]) -> Cell:
    if isinstance(value, Cell):
        return value
    if value is None or value in EMPTY_CHARS:
        return Cell.EMPTY
    if isinstance(value, str) and value.upper() in ("X", "O"):
        return Cell(value.upper())
    raise ValueError(f"Unknown cell value: {value!r}")


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored row-major. The board is mutated in place by whoever
    owns the current turn; the search places and removes pieces on it
    while exploring, always leaving it as it found it.
    """

    grid: List[List[Cell]] = field(default_factory=_empty_grid)

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence]]) -> "Board":
        """
        Build a board from three rows.

        Each row is either a string like "XO " / "XO." or a sequence of
        Cells / strings / None.

        Args:
            rows: The rows, top to bottom.

        Returns:
            A new Board.
        """
        size = GameConfig.BOARD_SIZE
        if len(rows) != size:
            raise ValueError(f"Expected {size} rows, got {len(rows)}")

        grid = []
        for row in rows:
            cells = [_to_cell(value) for value in row]
            if len(cells) != size:
                raise ValueError(f"Expected {size} cells in row {row!r}, got {len(cells)}")
            grid.append(cells)
        return cls(grid=grid)

    def _check_bounds(self, row: int, col: int):
        size = GameConfig.BOARD_SIZE
        if not (0 <= row < size and 0 <= col < size):
            raise IndexError(f"Invalid position ({row}, {col}). Must be 0-{size - 1}.")

    def get(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self.grid[row][col]

    def place(self, row: int, col: int, cell: Cell):
        """
        Put a player's symbol on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            cell: Cell.X or Cell.O.
        """
        self._check_bounds(row, col)
        if not cell.is_player:
            raise ValueError("Use clear() to empty a cell")
        if self.grid[row][col] != Cell.EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied by {self.grid[row][col].value}")
        self.grid[row][col] = cell

    def clear(self, row: int, col: int):
        """Reset a cell to EMPTY (undo of place)."""
        self._check_bounds(row, col)
        self.grid[row][col] = Cell.EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples in row-major order.
        """
        empty = []
        for row, cells in enumerate(self.grid):
            for col, cell in enumerate(cells):
                if cell == Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def count(self, cell: Cell) -> int:
        return sum(1 for cells in self.grid for value in cells if value == cell)

    def is_consistent(self) -> bool:
        """True if the counts could come from alternating play, FIRST_PLAYER first."""
        first = Cell(GameConfig.FIRST_PLAYER)
        return self.count(first) - self.count(first.opposite()) in (0, 1)

    def next_mover(self) -> Cell:
        """Whose turn it is, assuming FIRST_PLAYER moved first and players alternated."""
        first = Cell(GameConfig.FIRST_PLAYER)
        if self.count(first) > self.count(first.opposite()):
            return first.opposite()
        return first

    def copy(self) -> "Board":
        """Create a copy of the board."""
        return Board(grid=[list(cells) for cells in self.grid])

    def __str__(self) -> str:
        return "\n".join("".join(cell.value for cell in cells) for cells in self.grid)
