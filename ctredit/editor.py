"""A minimal line editor with a cursor."""

from __future__ import annotations

EDITOR_MAX_LINES = 1024
EDITOR_MAX_LINE_LENGTH = 256


class Editor:
    """Text lines and a cursor position (column, line)."""

    def __init__(self) -> None:
        self.lines: list[str] = [""]
        self.cursor_x = 0
        self.cursor_y = 0

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def insert_char(self, c: str) -> None:
        """Insert *c* at the cursor and move past it; full lines are left alone."""
        if self.cursor_y >= len(self.lines):
            return
        line = self.lines[self.cursor_y]
        if len(line) + 1 >= EDITOR_MAX_LINE_LENGTH:
            return
        x = self.cursor_x
        self.lines[self.cursor_y] = line[:x] + c + line[x:]
        self.cursor_x += 1

    def delete_char(self) -> None:
        """Remove the character before the cursor, if any."""
        if self.cursor_y >= len(self.lines) or self.cursor_x == 0:
            return
        line = self.lines[self.cursor_y]
        x = self.cursor_x
        self.lines[self.cursor_y] = line[:x - 1] + line[x:]
        self.cursor_x -= 1

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, keeping it within the text."""
        new_y = min(max(self.cursor_y + dy, 0), len(self.lines) - 1)
        new_x = min(max(self.cursor_x + dx, 0), len(self.lines[new_y]))
        self.cursor_x = new_x
        self.cursor_y = new_y

    def current_line(self) -> str | None:
        """Return the line under the cursor."""
        if self.cursor_y >= len(self.lines):
            return None
        return self.lines[self.cursor_y]