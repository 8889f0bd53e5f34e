"""
Minimax search for TicTacToe.

Scores are always from X's point of view: X is the maximizing player and
O the minimizing one. The search explores the whole game tree below the
given board (no pruning, no depth limit). It works on the board in place:
every piece it puts down is taken back before the call returns.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, Cell
from .config import GameConfig
from .outcome import check_winner, is_full


@dataclass
class SearchStats:
    """
    Counts how much work a search did (for debugging).

    Every position looked at is counted, including the ones tried while
    checking for a win on the spot.
    """
    positions_evaluated: int = 0


def evaluate_position(board: Board) -> int:
    """
    Static score of a board.

    Returns:
        WIN_SCORE if X has won, LOSS_SCORE if O has won, DRAW_SCORE otherwise.
    """
    winner = check_winner(board)
    if winner == Cell.X:
        return GameConfig.WIN_SCORE
    if winner == Cell.O:
        return GameConfig.LOSS_SCORE
    return GameConfig.DRAW_SCORE


def minimax(board: Board, is_maximizing: bool, stats: Optional[SearchStats] = None) -> int:
    """
    Minimax value of a board.

    Args:
        board: Board to evaluate. Left unchanged on return.
        is_maximizing: True if X is to move, False if O is to move.
        stats: Optional counter of visited positions.

    Returns:
        The score of the position with best play from both sides.
    """
    if stats is not None:
        stats.positions_evaluated += 1

    # A decided game stops here even if cells are still empty
    score = evaluate_position(board)
    if score != GameConfig.DRAW_SCORE:
        return score
    if is_full(board):
        return GameConfig.DRAW_SCORE

    mover = Cell.X if is_maximizing else Cell.O
    grid = board.grid
    best = None

    for row, col in board.empty_cells():
        grid[row][col] = mover
        try:
            value = minimax(board, not is_maximizing, stats)
        finally:
            grid[row][col] = Cell.EMPTY

        if best is None:
            best = value
        elif is_maximizing:
            best = max(best, value)
        else:
            best = min(best, value)

    return best


def _immediate_win(
    board: Board,
    mover: Cell,
    stats: Optional[SearchStats] = None
) -> Optional[Tuple[int, int]]:
    """First empty cell (row-major) that wins the game for mover on the spot."""
    grid = board.grid
    for row, col in board.empty_cells():
        if stats is not None:
            stats.positions_evaluated += 1
        grid[row][col] = mover
        try:
            won = check_winner(board) == mover
        finally:
            grid[row][col] = Cell.EMPTY
        if won:
            return (row, col)
    return None


def compute_best_move(
    board: Board,
    mover: Cell,
    stats: Optional[SearchStats] = None
) -> Optional[Tuple[int, int]]:
    """
    Find the best move for the mover without changing the board.

    A move that wins on the spot is taken first. Otherwise every empty
    cell is tried in row-major order and scored with the opponent to
    reply, and the first cell with the best score wins ties.

    Args:
        board: Current board.
        mover: Cell.X or Cell.O.
        stats: Optional counter of visited positions.

    Returns:
        (row, col) of the best move, or None if there is no legal move
        (board full or game already decided).
    """
    if not mover.is_player:
        raise ValueError("mover must be Cell.X or Cell.O")

    if check_winner(board) is not None:
        return None

    # Scores don't depend on depth, so a forced win later on ties with a
    # win right now. Take the immediate one.
    winning_move = _immediate_win(board, mover, stats)
    if winning_move is not None:
        return winning_move

    grid = board.grid
    best_score = None
    best_move = None

    for row, col in board.empty_cells():
        grid[row][col] = mover
        try:
            score = minimax(board, mover == Cell.O, stats)
        finally:
            grid[row][col] = Cell.EMPTY

        if (
            best_score is None
            or (mover == Cell.X and score > best_score)
            or (mover == Cell.O and score < best_score)
        ):
            best_score = score
            best_move = (row, col)

    return best_move


def find_best_move(
    board: Board,
    mover: Cell,
    stats: Optional[SearchStats] = None
) -> Optional[Tuple[int, int]]:
    """
    Play the best move for the mover on the board.

    Exactly one empty cell gets the mover's symbol. Does nothing when
    there is no legal move.

    Returns:
        The (row, col) that was played, or None.
    """
    move = compute_best_move(board, mover, stats)
    if move is not None:
        board.place(move[0], move[1], mover)
    return move
