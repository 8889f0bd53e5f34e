"""
Board rendering for the terminal.
"""

from engine.board import Board, Cell

from .config import ConsoleConfig


def render_board(board: Board) -> str:
    """
    Draw the board as text.

    Example:

        X | O | X
        --+---+--
        O | X | O
        --+---+--
        O | X | X
    """
    lines = [""]
    for index, cells in enumerate(board.grid):
        symbols = [
            ConsoleConfig.EMPTY_CELL if cell == Cell.EMPTY else cell.value
            for cell in cells
        ]
        lines.append(ConsoleConfig.CELL_SEPARATOR.join(symbols))
        if index < len(board.grid) - 1:
            lines.append(ConsoleConfig.ROW_SEPARATOR)
    lines.append("")
    return "\n".join(lines)


def print_board(board: Board):
    """Print the board to console."""
    print(render_board(board))
