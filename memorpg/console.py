"""Line-oriented terminal input and output for the game."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_WORD_PATTERN = re.compile(r"\S+")
_INTEGER = re.compile(r"[+-]?\d+")


class Console:
    """Reads whitespace-separated words and writes text to a pair of streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text and flush it straight away."""
        self._out.write(text)
        self._out.flush()

    def read_token(self) -> str:
        """Return the next whitespace-separated word; raise EOFError at end of input."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            line = self._in.readline()
            if not line:
                self._pending = ""
                raise EOFError("no more input")
            self._pending = line
        match = _WORD_PATTERN.match(stripped)
        assert match is not None
        self._pending = stripped[match.end():]
        return match.group()

    def read_int(self) -> int:
        """Return the next word as an integer.

        A word that is not an integer is consumed and ValueError is raised.
        """
        word = self.read_token()
        if not _INTEGER.fullmatch(word):
            raise ValueError(f"not a number: {word!r}")
        return int(word)

    def read_ints(self, count: int) -> list[int]:
        """Return the next ``count`` words as integers."""
        return [self.read_int() for _ in range(count)]

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        if self._pending:
            self._pending = ""
        else:
            self._in.readline()