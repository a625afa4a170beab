"""The editor application: keyboard, text state and screen together."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from ctredit.input import KeyCode
from ctredit.kboard import BACKSPACE, KBoard
from ctredit.render import RenderContext
from ctredit.state import State

SCREEN_COLS = 40
SCREEN_ROWS = 30

_MOVES = {
    KeyCode.UP: (0, -1),
    KeyCode.DOWN: (0, 1),
    KeyCode.LEFT: (-1, 0),
    KeyCode.RIGHT: (1, 0),
}


class App:
    """Editing state, a visible on-screen keyboard and a screen buffer."""

    def __init__(self) -> None:
        self.state = State()
        self.keyboard = KBoard()
        self.keyboard.show(True)
        self.screen = RenderContext(SCREEN_COLS, SCREEN_ROWS)

    def step(self, keys: Iterable[KeyCode], file: TextIO | None = None) -> bool:
        """Run one frame with the buttons pressed; return False when START quits."""
        pressed = set(keys)
        if KeyCode.START in pressed:
            return False

        c = self.keyboard.process_input(pressed)
        if c == BACKSPACE:
            self.state.delete_char()
        elif c and c != "\n":
            self.state.insert_char(c)

        for key, (dx, dy) in _MOVES.items():
            if key in pressed:
                self.state.move_cursor(dx, dy)

        self.screen.draw_state(self.state, file)
        self.keyboard.draw(file)
        return True


def _parse_keys(line: str) -> set[KeyCode]:
    names = (name.upper() for name in line.split())
    return {KeyCode[name] for name in names if name in KeyCode.__members__}


def main(argv: list[str] | None = None) -> int:
    """Read one frame per input line, as button names separated by spaces."""
    app = App()
    for line in sys.stdin:
        if not app.step(_parse_keys(line)):
            break
    return 0