"""Keyboard input from a terminal put into unbuffered, no-echo mode."""

from __future__ import annotations

import sys
import termios
from collections.abc import Callable
from typing import Optional, TextIO

ESCAPE = "\x1b"
_ARROWS = {"A": "U", "B": "D", "C": "R", "D": "L"}


def decode_key(read: Callable[[], str]) -> str:
    """Read one key press through ``read`` and map arrow keys to U, D, R, L.

    Any other key comes back upper-cased; an empty string means end of input.
    """
    ch = read()
    if ch == ESCAPE:
        read()
        ch = read()
        if ch in _ARROWS:
            return _ARROWS[ch]
    return ch.upper()


class InputManager:
    """Context manager that switches the terminal to raw-ish key input."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved: Optional[list] = None

    def __enter__(self) -> InputManager:
        fd = self._stream.fileno()
        self._saved = termios.tcgetattr(fd)
        attrs = list(self._saved)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        control = list(attrs[6])
        control[termios.VMIN] = 1
        control[termios.VTIME] = 0
        attrs[6] = control
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._stream.fileno(), termios.TCSANOW, self._saved)
            self._saved = None

    def get_input(self) -> str:
        """Block for one key press and return its command letter."""
        return decode_key(lambda: self._stream.read(1))