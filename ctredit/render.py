"""A character-cell screen buffer and its display."""

from __future__ import annotations

import sys
from typing import TextIO

from ctredit.state import State

_CLEAR = "\033[H\033[J"


class RenderContext:
    """A grid of characters, *width* columns by *height* rows."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("screen size must not be negative")
        self.width = width
        self.height = height
        self._rows = [[" "] * width for _ in range(height)]

    def clear(self) -> None:
        """Fill the screen with spaces."""
        for row in self._rows:
            row[:] = [" "] * self.width

    def draw_text(self, x: int, y: int, text: str) -> None:
        """Write *text* from column *x* of row *y*, clipped at the right edge."""
        if not 0 <= y < self.height:
            return
        x = max(x, 0)
        length = min(len(text), self.width - x)
        if length <= 0:
            return
        self._rows[y][x:x + length] = text[:length]

    def draw_cursor(self, x: int, y: int, visible: bool) -> None:
        """Highlight the cell at (x, y): a space becomes ``_``, a-z become upper case."""
        if not visible or not (0 <= x < self.width and 0 <= y < self.height):
            return
        c = self._rows[y][x]
        if c == " ":
            c = "_"
        elif "a" <= c <= "z":
            c = c.upper()
        self._rows[y][x] = c

    def lines(self) -> list[str]:
        """Return the screen rows as strings."""
        return ["".join(row) for row in self._rows]

    def refresh(self, file: TextIO | None = None) -> None:
        """Clear the terminal and write the screen to it."""
        out = sys.stdout if file is None else file
        out.write(_CLEAR)
        for line in self.lines():
            out.write(line + "\n")
        out.flush()

    def draw_state(self, state: State, file: TextIO | None = None) -> None:
        """Draw the text and cursor of *state*, then refresh."""
        self.clear()
        for y, line in enumerate(state.lines[:self.height]):
            self.draw_text(0, y, line)
        self.draw_cursor(state.cursor_x, state.cursor_y, True)
        self.refresh(file)