"""
Engine module for TicTacToe.
Handles the board, win detection, and the minimax opponent.
"""

from .config import GameConfig
from .board import Board, Cell
from .outcome import GameOutcome, OutcomeStatus, check_winner, evaluate_outcome, is_full, winning_line
from .search import SearchStats, compute_best_move, evaluate_position, find_best_move, minimax
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer

__version__ = "1.0.0"
