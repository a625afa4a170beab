"""Button and touch input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_PRESSED = 16


class KeyCode(IntEnum):
    """Physical buttons."""

    NONE = 0
    A = 1
    B = 2
    X = 3
    Y = 4
    START = 5
    SELECT = 6
    L = 7
    R = 8
    UP = 9
    DOWN = 10
    LEFT = 11
    RIGHT = 12


def _valid_key(key: object) -> KeyCode | None:
    try:
        code = KeyCode(key)
    except ValueError:
        return None
    return None if code is KeyCode.NONE else code


@dataclass
class InputState:
    """Which buttons are held, which were newly pressed, and the touch state."""

    keys_down: set[KeyCode] = field(default_factory=set)
    keys_pressed: list[KeyCode] = field(default_factory=list)
    touch_x: int = 0
    touch_y: int = 0
    touch_active: bool = False

    @property
    def keys_pressed_count(self) -> int:
        return len(self.keys_pressed)

    def update_key(self, key: KeyCode, pressed: bool) -> None:
        """Record a button change; a new press is queued if there is room."""
        code = _valid_key(key)
        if code is None:
            return
        if pressed:
            if code not in self.keys_down:
                self.keys_down.add(code)
                if len(self.keys_pressed) < MAX_PRESSED:
                    self.keys_pressed.append(code)
        else:
            self.keys_down.discard(code)

    def clear_pressed(self) -> None:
        """Forget the queued presses."""
        self.keys_pressed.clear()

    def update_touch(self, active: bool, x: int, y: int) -> None:
        """Set touch state; the position changes only while touching."""
        self.touch_active = active
        if active:
            self.touch_x = x
            self.touch_y = y

    def is_key_down(self, key: KeyCode) -> bool:
        """Return whether *key* is currently held."""
        code = _valid_key(key)
        return code is not None and code in self.keys_down