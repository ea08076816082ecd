import io
from unittest.mock import patch

import pytest

from townguard.board import Board
from townguard.game import HIDE_CURSOR, SHOW_CURSOR, handle_command, main


class FakeStdin:
    def __init__(self, text):
        self._buffer = io.StringIO(text)

    def read(self, n=-1):
        return self._buffer.read(n)

    def fileno(self):
        return 0


def run_main(monkeypatch, keys):
    monkeypatch.setattr("sys.stdin", FakeStdin(keys))
    with patch("townguard.terminal.termios") as fake_termios, patch(
        "townguard.game.time.sleep"
    ):
        fake_termios.ICANON = 2
        fake_termios.ECHO = 8
        fake_termios.VMIN = 6
        fake_termios.VTIME = 5
        fake_termios.TCSANOW = 0
        fake_termios.tcgetattr.return_value = [0, 0, 0, 15, 0, 0, [0] * 32]
        return main([])


def test_handle_command_quit():
    board = Board()
    assert handle_command(board, "Q") is False


def test_handle_command_wall():
    board = Board()
    assert handle_command(board, "W") is True
    assert len(board.walls) == 1


def test_handle_command_move():
    board = Board()
    start = board.player.position
    assert handle_command(board, "D") is True
    assert board.player.position.y == start.y + 1


def test_handle_command_builders():
    board = Board()
    handle_command(board, "M")
    assert len(board.gold_mines) == 1
    for _ in range(4):
        handle_command(board, "R")
    handle_command(board, "E")
    assert len(board.elixir_collectors) == 1


def test_handle_command_ignores_unknown_key():
    board = Board()
    before = board.player.position
    assert handle_command(board, "Z") is True
    assert board.player.position == before
    assert board.walls == []


def test_main_quits_on_q(monkeypatch, capsys):
    assert run_main(monkeypatch, "q") == 0
    out = capsys.readouterr().out
    assert out.startswith(HIDE_CURSOR)
    assert out.endswith(SHOW_CURSOR)
    assert "Gold = 400" in out


def test_main_applies_commands(monkeypatch, capsys):
    assert run_main(monkeypatch, "wq") == 0
    out = capsys.readouterr().out
    assert "Walls = 0/200" in out
    assert "Walls = 1/200" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    assert run_main(monkeypatch, "") == 0
    out = capsys.readouterr().out
    assert out.endswith(SHOW_CURSOR)


def test_main_rejects_unknown_option(monkeypatch):
    with pytest.raises(SystemExit):
        main(["--bogus"])