"""Command-line entry point running the interactive game loop."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from townguard.board import Board
from townguard.terminal import InputManager

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
TICK_SECONDS = 0.1


def handle_command(board: Board, key: str) -> bool:
    """Apply one key's command to ``board``; return False when the player quits."""
    if key in ("U", "D", "L", "R"):
        board.try_move_player(key)
    elif key == "W":
        board.place_wall()
    elif key == "M":
        board.place_gold_mine()
    elif key == "E":
        board.place_elixir_collector()
    elif key == "C":
        board.collect_resources()
    elif key == "Q":
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the player quits or the town hall falls."""
    parser = argparse.ArgumentParser(
        prog="townguard",
        description=(
            "Defend the town hall. Arrows move, W wall, M gold mine, "
            "E elixir collector, C collect, Q quit."
        ),
    )
    parser.parse_args(argv)

    out = sys.stdout
    out.write(HIDE_CURSOR)
    board = Board()
    with InputManager() as keyboard:
        while True:
            out.write(board.render())
            out.flush()
            if board.game_over:
                return 0
            key = keyboard.get_input()
            if not key or not handle_command(board, key):
                out.write(SHOW_CURSOR)
                out.flush()
                return 0
            board.update()
            time.sleep(TICK_SECONDS)