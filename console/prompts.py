"""
Terminal prompts for TicTacToe.
Reads the game mode, human moves and the replay answer.

Every function takes an input_fn (defaults to the builtin input) so the
game can be driven by a script in tests.
"""

from enum import Enum
from typing import Callable, Optional, Tuple

from engine.board import Board, Cell
from engine.move_validator import MoveValidator

from .config import ConsoleConfig


InputFn = Callable[[str], str]


class GameMode(Enum):
    """Who controls X and O."""
    COMPUTER_VS_COMPUTER = 0
    HUMAN_VS_COMPUTER = 1
    HUMAN_VS_HUMAN = 2

    @property
    def label(self) -> str:
        return ConsoleConfig.MODE_LABELS[self.value]


def ask_mode(input_fn: Optional[InputFn] = None) -> GameMode:
    """
    Ask which game mode to play until a valid one is picked.

    Raises:
        EOFError: If input runs out.
    """
    input_fn = input_fn or input

    while True:
        print("\nSelect mode:")
        for mode in GameMode:
            print(f"{mode.value} - {mode.label}")

        answer = input_fn("Choice: ").strip()
        try:
            return GameMode(int(answer))
        except ValueError:
            print("Invalid choice. Try again.")


def ask_human_move(
    board: Board,
    player: Cell,
    input_fn: Optional[InputFn] = None,
    validator: Optional[MoveValidator] = None
) -> Tuple[int, int]:
    """
    Ask a human for a move until a legal one is entered.

    Args:
        board: Current board (not changed).
        player: Symbol of the human to move.
        input_fn: Function used to read a line.
        validator: Move validator to use.

    Returns:
        (row, col) of an empty cell.

    Raises:
        EOFError: If input runs out.
    """
    input_fn = input_fn or input
    validator = validator or MoveValidator()

    while True:
        text = input_fn(f"Player {player.value}, enter row and column (0-2): ")
        result = validator.parse_move(board, text)
        if result.is_valid:
            return result.move
        print(f"Invalid move. Try again. ({result.error_message})")


def ask_play_again(input_fn: Optional[InputFn] = None) -> bool:
    """
    Ask whether to play another round.

    Returns:
        True for y/Y, False for n/N or when input runs out.
    """
    input_fn = input_fn or input
    prompt = "\nPlay again? (y/n): "
    while True:
        try:
            answer = input_fn(prompt).strip()
        except EOFError:
            return False

        if answer in ("y", "Y"):
            return True
        if answer in ("n", "N"):
            return False
        prompt = "Invalid input. Enter 'y' or 'n': "
