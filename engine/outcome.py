"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board, Cell


Line = List[Tuple[int, int]]

# All possible winning lines (as list of (row, col) tuples).
# Scan order matters when more than one line is complete:
# row i then column i for each i, then the two diagonals.
WINNING_LINES: List[Line] = [
    [(0, 0), (0, 1), (0, 2)],  # Row 0
    [(0, 0), (1, 0), (2, 0)],  # Column 0
    [(1, 0), (1, 1), (1, 2)],  # Row 1
    [(0, 1), (1, 1), (2, 1)],  # Column 1
    [(2, 0), (2, 1), (2, 2)],  # Row 2
    [(0, 2), (1, 2), (2, 2)],  # Column 2
    [(0, 0), (1, 1), (2, 2)],  # Main diagonal
    [(0, 2), (1, 1), (2, 0)],  # Anti diagonal
]


class OutcomeStatus(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameOutcome:
    """
    Result of looking at a board.

    winner is only set when status is WIN.
    """
    status: OutcomeStatus
    winner: Optional[Cell] = None

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def win(cls, winner: Cell) -> "GameOutcome":
        return cls(OutcomeStatus.WIN, winner)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


def _line_owner(board: Board, line: Line) -> Optional[Cell]:
    """
    Check if a single line has a winner.

    Returns:
        The symbol filling all 3 cells, None otherwise.
    """
    grid = board.grid
    (r0, c0), (r1, c1), (r2, c2) = line
    first = grid[r0][c0]
    if first != Cell.EMPTY and first == grid[r1][c1] == grid[r2][c2]:
        return first
    return None


def check_winner(board: Board) -> Optional[Cell]:
    """
    Check if there's a winner.

    Args:
        board: The board to check.

    Returns:
        The winning symbol, or None if no winner yet.
    """
    for line in WINNING_LINES:
        winner = _line_owner(board, line)
        if winner is not None:
            return winner
    return None


def winning_line(board: Board) -> Optional[Line]:
    """
    Get the winning line if there is one.

    Returns:
        The winning line as list of (row, col), or None.
    """
    for line in WINNING_LINES:
        if _line_owner(board, line) is not None:
            return line
    return None


def is_full(board: Board) -> bool:
    """True if no empty cell is left."""
    return all(cell != Cell.EMPTY for cells in board.grid for cell in cells)


def evaluate_outcome(board: Board) -> GameOutcome:
    """
    Work out whether the game is won, drawn or still running.

    A full board that also has a winner counts as a win.
    """
    winner = check_winner(board)
    if winner is not None:
        return GameOutcome.win(winner)
    if is_full(board):
        return GameOutcome.draw()
    return GameOutcome.in_progress()
