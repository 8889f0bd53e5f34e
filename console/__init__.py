"""
Console module for TicTacToe.
Draws the board and reads choices from the terminal.
"""

from .config import ConsoleConfig
from .renderer import render_board, print_board
from .prompts import GameMode, ask_mode, ask_human_move, ask_play_again
