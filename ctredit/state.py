"""Editing state: text lines, cursor, mode, selection and scroll."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_LINE_LENGTH = 256
MAX_LINES = 1024


@dataclass
class State:
    """The text being edited and everything about how it is viewed."""

    lines: list[str] = field(default_factory=lambda: [""])
    cursor_x: int = 0
    cursor_y: int = 0
    insert_mode: bool = True
    has_selection: bool = False
    sel_start_x: int = 0
    sel_start_y: int = 0
    sel_end_x: int = 0
    sel_end_y: int = 0
    scroll_offset: int = 0

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def insert_char(self, c: str) -> None:
        """Insert or overwrite at the cursor, then move right; full lines are left alone."""
        if self.cursor_y >= len(self.lines):
            return
        line = self.lines[self.cursor_y]
        if len(line) >= MAX_LINE_LENGTH - 1:
            return
        x = self.cursor_x
        rest = line[x:] if self.insert_mode else line[x + 1:]
        self.lines[self.cursor_y] = line[:x] + c + rest
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
        self.cursor_y = min(max(self.cursor_y + dy, 0), len(self.lines) - 1)
        limit = len(self.lines[self.cursor_y])
        self.cursor_x = min(max(self.cursor_x + dx, 0), limit)