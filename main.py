"""
Main script for TicTacToe.

This script ties together:
- Engine (board, win detection, minimax AI)
- Console (board drawing, mode menu, human moves, replay prompt)

Run this script to play TicTacToe in the terminal!
"""

from typing import Dict, Optional

# Engine imports
from engine.board import Board, Cell
from engine.config import GameConfig
from engine.outcome import GameOutcome, evaluate_outcome
from engine.ai_player import AIPlayer
from engine.move_validator import MoveValidator

# Console imports
from console.config import ConsoleConfig
from console.renderer import print_board
from console.prompts import GameMode, InputFn, ask_mode, ask_human_move, ask_play_again


class GameSession:
    """
    Main controller for a TicTacToe session.

    Game flow:
    1. Pick a mode (or use the one given on the command line)
    2. X moves first; the computer or a human plays each turn
    3. After every move check for a win or a draw
    4. Ask to play again
    """

    def __init__(
        self,
        mode: Optional[GameMode] = None,
        computer_first: bool = False,
        input_fn: Optional[InputFn] = None,
        debug: Optional[bool] = None
    ):
        """
        Initialize the session.

        Args:
            mode: Game mode. Asked for every round if None.
            computer_first: In Human vs Computer, let the computer play X.
            input_fn: Function used to read a line of input.
            debug: Print search statistics for computer moves.
                Defaults to GameConfig.DEBUG_MODE.
        """
        self.fixed_mode = mode
        self.computer_first = computer_first
        self.input_fn = input_fn
        self.debug = GameConfig.DEBUG_MODE if debug is None else debug
        self.validator = MoveValidator()

        self.mode: Optional[GameMode] = mode
        self.ai_players: Dict[Cell, AIPlayer] = {}

    def _setup_players(self, mode: GameMode):
        """Create one AIPlayer for every symbol the computer controls."""
        self.mode = mode

        if mode == GameMode.COMPUTER_VS_COMPUTER:
            computer_symbols = [Cell.X, Cell.O]
        elif mode == GameMode.HUMAN_VS_COMPUTER:
            computer_symbols = [Cell.X] if self.computer_first else [Cell.O]
        else:
            computer_symbols = []

        self.ai_players = {
            symbol: AIPlayer(symbol, debug=self.debug)
            for symbol in computer_symbols
        }

    def is_computer(self, player: Cell) -> bool:
        return player in self.ai_players

    def play_round(self, mode: Optional[GameMode] = None) -> GameOutcome:
        """
        Play one game from an empty board.

        Args:
            mode: Mode for this round. Defaults to the session's mode.

        Returns:
            The final outcome (win or draw).
        """
        mode = mode or self.mode
        if mode is None:
            raise ValueError("No game mode selected")
        self._setup_players(mode)

        board = Board()
        player = Cell(GameConfig.FIRST_PLAYER)

        while True:
            print_board(board)

            if self.is_computer(player):
                print(f"Computer {player.value}'s turn...")
                move = self.ai_players[player].get_best_move(board)
                if move is None:
                    raise RuntimeError(f"Computer {player.value} could not find a move")
            else:
                move = ask_human_move(board, player, self.input_fn, self.validator)

            board.place(move[0], move[1], player)

            outcome = evaluate_outcome(board)
            if outcome.is_over:
                print_board(board)
                if outcome.winner is not None:
                    print(f"Player {outcome.winner.value} wins!")
                else:
                    print("It's a draw!")
                return outcome

            player = player.opposite()

    def run(self, once: bool = False):
        """
        Run rounds until the player stops.

        Args:
            once: Play a single round without asking to replay.
        """
        print(ConsoleConfig.TITLE)

        try:
            while True:
                mode = self.fixed_mode or ask_mode(self.input_fn)
                self.play_round(mode)

                if once or not ask_play_again(self.input_fn):
                    break
        except EOFError:
            print("\nNo more input.")

        print(ConsoleConfig.GOODBYE)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with a minimax opponent")
    parser.add_argument(
        "--mode",
        type=int,
        choices=[mode.value for mode in GameMode],
        help="0 = Computer vs Computer, 1 = Human vs Computer, 2 = Human vs Human "
             "(asked interactively if omitted)"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="In Human vs Computer, let the computer play X (moves first)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print how many positions the AI evaluated"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Play a single round and exit"
    )

    args = parser.parse_args(argv)

    session = GameSession(
        mode=GameMode(args.mode) if args.mode is not None else None,
        computer_first=args.computer_first,
        debug=True if args.debug else None
    )

    try:
        session.run(once=args.once)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
