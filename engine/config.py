"""
Game configuration for TicTacToe.
Scores used by the search and general game settings.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the engine output.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # X always moves first
    FIRST_PLAYER = "X"

    # ==================== SEARCH SETTINGS ====================
    # Scores are from X's point of view (X maximizes, O minimizes)
    WIN_SCORE = 10     # X has three in a row
    LOSS_SCORE = -10   # O has three in a row
    DRAW_SCORE = 0     # Draw or game still running

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
