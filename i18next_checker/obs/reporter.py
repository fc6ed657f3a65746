"""Console reporter used for the human-readable check report."""

from __future__ import annotations

import sys
from typing import TextIO

COLORS = {
    "reset": "\x1b[0m",
    "bright": "\x1b[1m",
    "dim": "\x1b[2m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "cyan": "\x1b[36m",
    "gray": "\x1b[90m",
}


class Reporter:
    """Leveled console output with optional ANSI colors.

    ``stream`` defaults to ``sys.stdout`` resolved at write time so that
    pytest's ``capsys`` sees the output. Colors are used when ``color`` is
    ``True``, or when it is ``None`` and the stream is a TTY.
    """

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _use_color(self) -> bool:
        if self._color is not None:
            return self._color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def _paint(self, text: str, *styles: str) -> str:
        if not self._use_color():
            return text
        return "".join(COLORS[s] for s in styles) + text + COLORS["reset"]

    def _write(self, line: str) -> None:
        stream = self.stream
        try:
            print(line, file=stream)
        except UnicodeEncodeError:
            # unencodable characters (markers on cp1252, lone surrogates) become "?"
            encoding = getattr(stream, "encoding", None) or "utf-8"
            print(line.encode(encoding, "replace").decode(encoding), file=stream)

    def title(self, text: str) -> None:
        self._write("\n" + self._paint(text, "bright", "cyan"))

    def success(self, text: str) -> None:
        self._write(f"{self._paint('✓', 'green')} {text}")

    def error(self, text: str) -> None:
        self._write(f"{self._paint('✗', 'red')} {text}")

    def warning(self, text: str) -> None:
        self._write(f"{self._paint('⚠', 'yellow')} {text}")

    def info(self, text: str) -> None:
        self._write(self._paint(text, "gray"))

    def dim(self, text: str) -> None:
        self._write(self._paint(text, "dim"))

    def divider(self) -> None:
        self._write(self._paint("─" * 60, "gray"))

    def summary(self, text: str) -> None:
        self._write("\n" + self._paint(text, "bright"))

    def language(self, text: str) -> None:
        self._write("\n" + self._paint(text, "blue"))

    def section_title(self, text: str, color: str = "red") -> None:
        self._write("  " + self._paint(text, color))

    def plain(self, text: str) -> None:
        self._write(text)
