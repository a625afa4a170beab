"""A fixed-capacity text buffer made of lines."""

from __future__ import annotations

MAX_LINES = 256
MAX_LINE_LEN = 128


class Buffer:
    """Lines of text with bounded line count and line length.

    Storage for every one of the ``MAX_LINES`` lines always exists; only
    the first ``line_count`` of them are part of the text.
    """

    def __init__(self) -> None:
        self._lines = [""] * MAX_LINES
        self._count = 1

    @property
    def line_count(self) -> int:
        return self._count

    def get_line(self, line: int) -> str:
        """Return the given line, or an empty string if it does not exist."""
        if 0 <= line < self._count:
            return self._lines[line]
        return ""

    @staticmethod
    def _check_storage(line: int) -> None:
        if not 0 <= line < MAX_LINES:
            raise IndexError(f"line {line} out of range")

    def insert_char(self, line: int, col: int, ch: str) -> None:
        """Insert *ch* at column *col*; a column past the end changes nothing."""
        if len(ch) != 1:
            raise ValueError("exactly one character is required")
        self._check_storage(line)
        if not 0 <= col < MAX_LINE_LEN - 1:
            raise IndexError(f"column {col} out of range")
        text = self._lines[line]
        if len(text) >= MAX_LINE_LEN - 2:
            raise ValueError("line is full")
        if col <= len(text):
            self._lines[line] = text[:col] + ch + text[col:]

    def delete_char(self, line: int, col: int) -> None:
        """Remove the character at column *col*."""
        self._check_storage(line)
        text = self._lines[line]
        if not 0 <= col < len(text):
            raise IndexError(f"column {col} out of range")
        self._lines[line] = text[:col] + text[col + 1:]

    def delete_line(self, line: int) -> None:
        """Remove a line, moving the following lines up."""
        count = self._count
        if not 0 <= line < count:
            raise IndexError(f"line {line} out of range")
        self._lines[line:count - 1] = self._lines[line + 1:count]
        self._lines[count - 1] = ""
        self._count -= 1

    def insert_line(self, index: int) -> None:
        """Insert an empty line before *index* (or at the end)."""
        count = self._count
        if count >= MAX_LINES:
            raise ValueError("buffer is full")
        if not 0 <= index <= count:
            raise IndexError(f"line {index} out of range")
        self._lines[index + 1:count + 1] = self._lines[index:count]
        self._lines[index] = ""
        self._count += 1

    def clear(self) -> None:
        """Reset to a single empty line."""
        self._lines = [""] * MAX_LINES
        self._count = 1

    def all_text(self) -> str:
        """Return all lines, each followed by a newline."""
        return "".join(f"{text}\n" for text in self._lines[:self._count])