"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Optional, Tuple

from .board import Board, Cell
from .config import GameConfig
from .search import SearchStats, compute_best_move


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Cell = Cell.O, debug: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            player: Which symbol the AI controls (default: O)
            debug: Print search statistics. Defaults to GameConfig.DEBUG_MODE.
        """
        if not player.is_player:
            raise ValueError("AIPlayer needs Cell.X or Cell.O")

        self.player = player
        self.debug = GameConfig.DEBUG_MODE if debug is None else debug

        # Keep track of how many positions the last search looked at
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Get the best move for the current position.

        The board is not changed.

        Args:
            board: Current board.

        Returns:
            (row, col) of best move, or None if no moves available.
        """
        self.moves_evaluated = 0

        # Check if it's our turn
        if board.next_mover() != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        stats = SearchStats()
        move = compute_best_move(board, self.player, stats)
        self.moves_evaluated = stats.positions_evaluated

        if self.debug:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {move}")

        return move

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_best_move(board)

        if move is None:
            return "No moves available!"

        row, col = move
        return f"Place {self.player.value} at position ({row}, {col})"
