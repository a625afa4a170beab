"""An on-screen keyboard driven by the directional pad."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from ctredit.input import KeyCode

KBOARD_ROWS = 3
KBOARD_COLS = 10

_DEFAULT_KEYS = (
    "ABCDEFGHIJ",
    "KLMNOPQRST",
    "UVWXYZ_-.,",
)

BACKSPACE = "\b"


class KBoard:
    """A grid of characters with a selection cursor; hidden until shown."""

    def __init__(self) -> None:
        self.keys: tuple[str, ...] = _DEFAULT_KEYS
        self.cursor_row = 0
        self.cursor_col = 0
        self.visible = False

    def show(self, visible: bool) -> None:
        """Show or hide the keyboard."""
        self.visible = visible

    def draw(self, file: TextIO | None = None) -> None:
        """Write the keyboard, the selected key in brackets; nothing if hidden."""
        if not self.visible:
            return
        out = sys.stdout if file is None else file
        for r, row in enumerate(self.keys):
            cells = (
                f"[{ch}] " if (r, c) == (self.cursor_row, self.cursor_col) else f" {ch}  "
                for c, ch in enumerate(row)
            )
            out.write("".join(cells) + "\n")

    def process_input(self, keys: Iterable[KeyCode]) -> str | None:
        """Handle the buttons pressed this frame.

        Returns the selected character for A, a backspace for B, and
        ``None`` otherwise. Only the first matching button counts, in the
        order up, down, left, right, A, B.
        """
        if not self.visible:
            return None
        pressed = set(keys)
        if KeyCode.UP in pressed:
            self.cursor_row = max(self.cursor_row - 1, 0)
        elif KeyCode.DOWN in pressed:
            self.cursor_row = min(self.cursor_row + 1, KBOARD_ROWS - 1)
        elif KeyCode.LEFT in pressed:
            self.cursor_col = max(self.cursor_col - 1, 0)
        elif KeyCode.RIGHT in pressed:
            self.cursor_col = min(self.cursor_col + 1, KBOARD_COLS - 1)
        elif KeyCode.A in pressed:
            return self.keys[self.cursor_row][self.cursor_col]
        elif KeyCode.B in pressed:
            return BACKSPACE
        return None