"""Line-oriented terminal input and output used by the menu pages."""

from __future__ import annotations

import sys
from typing import TextIO


class InputClosed(EOFError):
    """Raised when input runs out before a requested value could be read."""


class Console:
    """Reads words, lines and numbers from a text stream and writes to another.

    Words are separated by any whitespace and may span several lines, so
    several answers can be typed on one line.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text as it is and flush it."""
        self._stdout.write(text)
        self._stdout.flush()

    def _show(self, prompt: str) -> None:
        if prompt:
            self.write(prompt)

    def _fetch_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise InputClosed("input closed")
        return line.rstrip("\n").rstrip("\r")

    def read_word(self, prompt: str = "") -> str:
        """Return the next whitespace-separated word."""
        self._show(prompt)
        while not self._pending.strip():
            self._pending = self._fetch_line()
        word, *rest = self._pending.split(maxsplit=1)
        self._pending = rest[0] if rest else ""
        return word

    def read_line(self, prompt: str = "") -> str:
        """Return a whole line of text, surrounding whitespace removed.

        Text left on the current line after earlier words is returned first;
        a current line holding nothing more is skipped.
        """
        self._show(prompt)
        if self._pending.strip():
            line = self._pending
        else:
            line = self._fetch_line()
        self._pending = ""
        return line.strip()

    def read_int(self, prompt: str = "") -> int:
        """Return the next word as an integer; raise ValueError if it is not one."""
        word = self.read_word(prompt)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def read_float(self, prompt: str = "") -> float:
        """Return the next word as a number; raise ValueError if it is not one."""
        word = self.read_word(prompt)
        try:
            return float(word)
        except ValueError:
            raise ValueError(f"expected a number, got {word!r}") from None