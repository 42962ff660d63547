"""
Tests for the console front end.
Feeds scripted input to ConsoleGame and checks how the game ends.

Usage:
    pytest test_main.py
    python test_main.py
"""

import sys

from logic.config import GameMode
from logic.game_state import Mark, GameStatus
from logic.game_session import GameSession
from main import ConsoleGame, parse_move, INPUT_INDEX, INPUT_ROWCOL


def _scripted(lines):
    """input() replacement that replays lines, then behaves like end of file."""
    remaining = list(lines)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input


def test_parse_index():
    assert parse_move("5") == 5
    assert parse_move("  9 \n") == 9
    # Range is the validator's job
    assert parse_move("12") == 12


def test_parse_rowcol():
    assert parse_move("1 2", INPUT_ROWCOL) == (1, 2)
    assert parse_move("0,2", INPUT_ROWCOL) == (0, 2)
    assert parse_move(" 2 , 0 ", INPUT_ROWCOL) == (2, 0)


def test_parse_rejects_garbage():
    for text, mode in (("", INPUT_INDEX), ("x", INPUT_INDEX), ("1 2", INPUT_INDEX),
                       ("1", INPUT_ROWCOL), ("a b", INPUT_ROWCOL), ("1 2 3", INPUT_ROWCOL)):
        try:
            parse_move(text, mode)
        except ValueError:
            continue
        raise AssertionError(f"{text!r} ({mode}) should not parse")


def test_two_player_game_by_index():
    session = GameSession(mode=GameMode.VS_PLAYER)
    game = ConsoleGame(session, INPUT_INDEX, _scripted(["1", "4", "2", "5", "3"]))

    outcome = game.run()

    assert outcome.status == GameStatus.WIN
    assert outcome.winner == Mark.X


def test_two_player_game_by_row_col():
    session = GameSession(mode=GameMode.VS_PLAYER)
    moves = ["0 0", "1 0", "0 1", "1 1", "2 2", "1 2"]
    game = ConsoleGame(session, INPUT_ROWCOL, _scripted(moves))

    outcome = game.run()

    assert outcome.winner == Mark.O
    assert session.state.to_string() == "XX.OOO..X"


def test_bad_input_is_asked_again(capsys):
    session = GameSession(mode=GameMode.VS_PLAYER)
    fake_input = _scripted(["hello", "0", "1", "1", "4", "2", "5", "3"])
    game = ConsoleGame(session, INPUT_INDEX, fake_input)

    outcome = game.run()
    output = capsys.readouterr().out

    assert outcome.winner == Mark.X
    assert len(fake_input.prompts) == 8
    assert "Not a cell number" in output
    assert "Invalid position" in output
    assert "already occupied" in output
    assert "Player X wins!" in output


def test_quit_leaves_game_unfinished(capsys):
    session = GameSession(mode=GameMode.VS_PLAYER)
    game = ConsoleGame(session, INPUT_INDEX, _scripted(["5", "q"]))

    outcome = game.run()

    assert outcome.status == GameStatus.ONGOING
    assert "Game abandoned." in capsys.readouterr().out


def test_end_of_input_stops_the_game():
    session = GameSession(mode=GameMode.VS_PLAYER)
    game = ConsoleGame(session, INPUT_INDEX, _scripted(["5"]))

    assert game.run().status == GameStatus.ONGOING
    assert session.state.to_string() == "....X...."


def test_game_against_ai():
    session = GameSession(mode=GameMode.VS_AI, ai_player=Mark.O, verbose=False)

    def first_free(prompt):
        free = session.state.empty_positions()
        return "5" if 5 in free else str(free[0])

    outcome = ConsoleGame(session, INPUT_INDEX, first_free).run()

    assert outcome.status != GameStatus.ONGOING
    assert outcome.winner != Mark.X


if __name__ == "__main__":
    from test_modules import run_module_tests
    sys.exit(1 if run_module_tests(globals()) else 0)
