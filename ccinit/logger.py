"""Console output with optional ANSI colours."""

from __future__ import annotations

import sys
from typing import TextIO

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_YELLOW = "\033[33m"
COLOR_BLUE = "\033[34m"
COLOR_GRAY = "\033[90m"


def pluralize(word: str, count: int) -> str:
    """Return the plural form of ``word`` unless ``count`` is exactly one."""
    if count == 1:
        return word
    if word == "directory":
        return "directories"
    return word + "s"


class Logger:
    """Writes formatted status lines; errors go to a separate stream."""

    def __init__(
        self,
        verbose: bool = False,
        no_color: bool = False,
        stream: TextIO | None = None,
        error_stream: TextIO | None = None,
    ) -> None:
        self.verbose = verbose
        self.no_color = no_color
        self._stream = stream
        self._error_stream = error_stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def error_stream(self) -> TextIO:
        return self._error_stream if self._error_stream is not None else sys.stderr

    def _colorize(self, color: str, text: str) -> str:
        if self.no_color:
            return text
        return f"{color}{text}{COLOR_RESET}"

    def _emit(self, prefix: str, message: str, stream: TextIO | None = None) -> None:
        (stream or self.stream).write(f"{prefix} {message}\n")

    def success(self, message: str) -> None:
        self._emit(self._colorize(COLOR_GREEN, "✓"), message)

    def info(self, message: str) -> None:
        self.stream.write(f"  {message}\n")

    def warning(self, message: str) -> None:
        self._emit(self._colorize(COLOR_YELLOW, "⚠"), message)

    def error(self, message: str) -> None:
        self._emit(self._colorize(COLOR_RED, "✗"), message, self.error_stream)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit(self._colorize(COLOR_GRAY, "[DEBUG]"), message)

    def detail(self, message: str) -> None:
        """Write a message only in verbose mode."""
        if self.verbose:
            self._emit(self._colorize(COLOR_BLUE, "→"), message)

    def file_created(self, path: str) -> None:
        self.success(f"Created file: {path}")

    def file_skipped(self, path: str) -> None:
        self.info(f"Skipped existing file: {path}")

    def dir_created(self, path: str) -> None:
        self.success(f"Created directory: {path}")

    def dir_skipped(self, path: str) -> None:
        self.info(f"Skipped existing directory: {path}")

    def summary(self, created: int, skipped: int) -> None:
        self.stream.write("\n")
        if created > 0:
            self.success(f"Created {created} {pluralize('item', created)}")
        if skipped > 0:
            self.info(f"Skipped {skipped} existing {pluralize('item', skipped)}")
        if created == 0 and skipped > 0:
            self.info("All files and directories already exist")