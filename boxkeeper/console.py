"""Token- and line-oriented terminal input and output."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class InputExhausted(EOFError):
    """Raised when input ends before a requested value could be read."""


class Console:
    """Reads whitespace-separated values and whole lines; writes prompts."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._in.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _skip_whitespace(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            self._buffer = ""
            if not self._fill():
                raise InputExhausted("input ended")

    def _take(self, pattern: re.Pattern[str], kind: str) -> str:
        self._skip_whitespace()
        match = pattern.match(self._buffer)
        if match is None:
            raise ValueError(f"expected {kind}")
        self._buffer = self._buffer[match.end():]
        return match.group()

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def say(self, text: str) -> None:
        self.write(text + "\n")

    def next_token(self) -> str:
        """Read the next whitespace-separated word."""
        self._skip_whitespace()
        parts = self._buffer.split(maxsplit=1)
        token = parts[0]
        self._buffer = self._buffer[self._buffer.index(token) + len(token):]
        return token

    def next_int(self) -> int:
        """Read a leading integer; on failure nothing but whitespace is consumed."""
        return int(self._take(_INT_RE, "an integer"))

    def next_float(self) -> float:
        """Read a leading decimal number; on failure nothing but whitespace is consumed."""
        return float(self._take(_FLOAT_RE, "a number"))

    def read_line(self) -> str:
        """Return the rest of the current line without its line break."""
        if not self._buffer and not self._fill():
            raise InputExhausted("input ended")
        line, newline, rest = self._buffer.partition("\n")
        self._buffer = rest if newline else ""
        return line

    def skip_line(self) -> None:
        """Discard input up to and including the next line break."""
        if not self._buffer and not self._fill():
            return
        _, _, rest = self._buffer.partition("\n")
        self._buffer = rest