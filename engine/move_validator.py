"""
Move validator for TicTacToe.
Validates moves typed in by a human before they touch the board.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .board import Board, Cell
from .config import GameConfig
from .outcome import check_winner


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    move: Optional[Tuple[int, int]] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must be on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place piece (0-2).
            col: Column to place piece (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if check_winner(board) is not None:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if row/col are in valid range
        last = GameConfig.BOARD_SIZE - 1
        if not (0 <= row <= last and 0 <= col <= last):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{last}."
            )

        # Check if cell is empty
        occupant = board.grid[row][col]
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True, move=(row, col))

    def parse_move(self, board: Board, text: str) -> ValidationResult:
        """
        Parse and validate a move typed as "row col".

        Commas are accepted as separators too ("1,2").

        Args:
            board: Current board.
            text: Raw text from the user.

        Returns:
            ValidationResult; move holds (row, col) when valid.
        """
        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            return ValidationResult(
                is_valid=False,
                error_message="Enter exactly two numbers: row and column."
            )

        try:
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a number: {text.strip()!r}"
            )

        return self.validate_move(board, row, col)

    def get_valid_moves(self, board: Board) -> List[Tuple[int, int]]:
        """
        Get all valid moves on the board.

        Returns:
            List of (row, col) valid move positions, empty if the game is won.
        """
        if check_winner(board) is not None:
            return []
        return board.empty_cells()
