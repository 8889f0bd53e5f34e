"""
Tests for the console front-end and the game session.
Input is scripted; output is captured with capsys.
"""

import pytest

from engine.board import Board, Cell
from engine.config import GameConfig
from engine.outcome import GameOutcome
from console.renderer import render_board
from console.prompts import GameMode, ask_mode, ask_human_move, ask_play_again
from main import GameSession, main


class Script:
    """Stands in for input(): returns canned answers, then raises EOFError."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


# ==================== RENDERER ====================

def test_render_board():
    board = Board.from_rows(["XO ", " X ", "  O"])
    assert render_board(board) == (
        "\n"
        "X | O |  \n"
        "--+---+--\n"
        "  | X |  \n"
        "--+---+--\n"
        "  |   | O\n"
    )


# ==================== PROMPTS ====================

def test_ask_mode_retries_until_valid(capsys):
    script = Script("9", "abc", "1")
    assert ask_mode(script) == GameMode.HUMAN_VS_COMPUTER

    out = capsys.readouterr().out
    assert out.count("Invalid choice. Try again.") == 2
    assert "0 - Computer vs Computer" in out
    assert "2 - Human vs Human" in out


def test_ask_human_move_skips_bad_entries(capsys):
    board = Board.from_rows(["X  ", "   ", "   "])
    script = Script("0 0", "3 3", "hello", "1 1")

    assert ask_human_move(board, Cell.O, script) == (1, 1)
    assert script.prompts[0] == "Player O, enter row and column (0-2): "
    assert capsys.readouterr().out.count("Invalid move. Try again.") == 3
    # Board is left alone
    assert board.get(1, 1) == Cell.EMPTY


def test_ask_human_move_raises_on_eof():
    with pytest.raises(EOFError):
        ask_human_move(Board(), Cell.X, Script())


@pytest.mark.parametrize("answers, expected", [
    (("y",), True),
    (("Y",), True),
    (("n",), False),
    (("N",), False),
    (("maybe", "y"), True),
    ((), False),
])
def test_ask_play_again(answers, expected):
    script = Script(*answers)
    assert ask_play_again(script) is expected


def test_ask_play_again_reprompts():
    script = Script("maybe", "n")
    ask_play_again(script)
    assert script.prompts[1] == "Invalid input. Enter 'y' or 'n': "


# ==================== GAME SESSION ====================

def test_human_vs_human_win(capsys):
    script = Script("0 0", "1 0", "0 1", "1 1", "0 2")
    session = GameSession(mode=GameMode.HUMAN_VS_HUMAN, input_fn=script)

    outcome = session.play_round()

    assert outcome == GameOutcome.win(Cell.X)
    assert "Player X wins!" in capsys.readouterr().out


def test_human_vs_human_draw(capsys):
    script = Script("0 0", "0 1", "0 2", "1 1", "1 0", "1 2", "2 1", "2 0", "2 2")
    session = GameSession(mode=GameMode.HUMAN_VS_HUMAN, input_fn=script)

    assert session.play_round() == GameOutcome.draw()
    assert "It's a draw!" in capsys.readouterr().out


def test_human_vs_computer(capsys):
    # Computer (O) answers the corner with the center, blocks row 0,
    # then wins on the anti diagonal. "0 2" is taken by then.
    script = Script("0 0", "0 1", "0 2", "1 0")
    session = GameSession(mode=GameMode.HUMAN_VS_COMPUTER, input_fn=script)

    outcome = session.play_round()

    out = capsys.readouterr().out
    assert outcome == GameOutcome.win(Cell.O)
    assert "Computer O's turn..." in out
    assert "Invalid move. Try again." in out
    assert "Player O wins!" in out


def test_computer_first_controls_x():
    session = GameSession(mode=GameMode.HUMAN_VS_COMPUTER, computer_first=True)
    session._setup_players(GameMode.HUMAN_VS_COMPUTER)
    assert session.is_computer(Cell.X)
    assert not session.is_computer(Cell.O)

    session._setup_players(GameMode.HUMAN_VS_HUMAN)
    assert not session.ai_players


def test_computer_vs_computer_draws(capsys):
    session = GameSession(mode=GameMode.COMPUTER_VS_COMPUTER)

    assert session.play_round() == GameOutcome.draw()

    out = capsys.readouterr().out
    assert out.count("Computer X's turn...") == 5
    assert out.count("Computer O's turn...") == 4
    assert "It's a draw!" in out


def test_debug_default_follows_config(monkeypatch):
    monkeypatch.setattr(GameConfig, "DEBUG_MODE", True)
    assert GameSession().debug is True
    assert GameSession(debug=False).debug is False

    monkeypatch.setattr(GameConfig, "DEBUG_MODE", False)
    assert GameSession().debug is False


def test_play_round_needs_a_mode():
    with pytest.raises(ValueError):
        GameSession().play_round()


def test_run_with_menu_and_replay(capsys):
    script = Script(
        "7", "2",                                  # bad mode, then Human vs Human
        "0 0", "1 0", "0 1", "1 1", "0 2",         # X wins
        "maybe", "y",                              # play again
        "2",
        "1 1", "0 0", "0 2", "2 2", "2 0",         # X wins anti diagonal
        "n",
    )
    GameSession(input_fn=script).run()

    out = capsys.readouterr().out
    assert out.startswith("TIC-TAC-TOE")
    assert "Invalid choice. Try again." in out
    assert out.count("Player X wins!") == 2
    assert out.rstrip().endswith("GAME OVER.")


def test_run_stops_on_eof(capsys):
    GameSession(input_fn=Script()).run()

    out = capsys.readouterr().out
    assert "No more input." in out
    assert "GAME OVER." in out


# ==================== COMMAND LINE ====================

def test_main_single_round(monkeypatch, capsys):
    script = Script("0 0", "1 0", "0 1", "1 1", "0 2")
    monkeypatch.setattr("builtins.input", script)

    main(["--mode", "2", "--once"])

    out = capsys.readouterr().out
    assert "TIC-TAC-TOE" in out
    assert "Player X wins!" in out
    assert not any("Play again" in prompt for prompt in script.prompts)
    assert "GAME OVER." in out


def test_main_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        main(["--mode", "5"])
