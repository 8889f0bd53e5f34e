"""
Console configuration for TicTacToe.
How the board and menus look in the terminal.
"""


class ConsoleConfig:
    """
    Configuration class for the terminal front-end.
    """

    # ==================== BOARD DRAWING ====================
    CELL_SEPARATOR = " | "
    ROW_SEPARATOR = "--+---+--"
    EMPTY_CELL = " "

    # ==================== MENUS ====================
    TITLE = "TIC-TAC-TOE"
    GOODBYE = "GAME OVER."

    MODE_LABELS = {
        0: "Computer vs Computer",
        1: "Human vs Computer",
        2: "Human vs Human",
    }
