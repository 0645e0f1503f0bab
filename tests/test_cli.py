"""Terminal front-end tests with scripted input."""

import pytest

from cli.main import QuitGame, parse_args, prompt_difficulty, prompt_player_move, run_cli
from engine.board import Board, Move


def scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.difficulty is None
        assert args.human_side == "red"
        assert args.no_transposition is False
        assert args.log_level == "WARNING"

    def test_flags(self):
        args = parse_args(["--difficulty", "3", "--human-side", "black", "--no-transposition"])
        assert args.difficulty == 3
        assert args.human_side == "black"
        assert args.no_transposition is True

    def test_rejects_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            parse_args(["--difficulty", "7"])


class TestPrompts:
    def test_difficulty_reprompts(self):
        assert prompt_difficulty(scripted("5", "abc", "3")) == 3

    def test_player_move_reprompts_until_legal(self, capsys):
        board = Board()
        move = prompt_player_move(board, scripted("z9", "c3", "b3", "x", "b3", "h8", "b3", "c4"))
        assert move == Move(start=(2, 1), end=(3, 2))
        out = capsys.readouterr().out
        assert "Invalid position" in out
        assert "No valid moves" in out
        assert "a4 c4" in out
        assert "Invalid move" in out

    def test_quit(self):
        with pytest.raises(QuitGame):
            prompt_player_move(Board(), scripted("quit"))


class TestRunCli:
    def test_quit_from_difficulty_menu(self, capsys):
        run_cli([], input_fn=scripted("exit"))
        assert "Exiting game." in capsys.readouterr().out

    def test_human_then_ai_move(self, capsys):
        run_cli(["--difficulty", "1"], input_fn=scripted("b3", "c4", "quit"))
        out = capsys.readouterr().out
        assert "AI moves from" in out
        assert "Exiting game." in out

    def test_ai_opens_when_human_plays_black(self, capsys):
        run_cli(["--difficulty", "1", "--human-side", "black"], input_fn=scripted("quit"))
        out = capsys.readouterr().out
        assert out.count("AI moves from") == 1
