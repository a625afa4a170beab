"""Terminal helpers using ANSI escape sequences."""

from __future__ import annotations

import sys
from typing import TextIO


def console_clear(file: TextIO | None = None) -> None:
    """Clear the terminal and put the cursor at the top left."""
    out = sys.stdout if file is None else file
    out.write("\x1b[2J")
    out.write("\x1b[H")
    out.flush()


def draw_rect(x: int, y: int, w: int, h: int, file: TextIO | None = None) -> None:
    """Draw an outlined rectangle with its top-left corner at column *x*, row *y*."""
    out = sys.stdout if file is None else file
    for i in range(h):
        out.write(f"\x1b[{y + i + 1};{x + 1}H")
        if i in (0, h - 1):
            out.write("-" * w)
        else:
            out.write("|" + " " * (w - 2) + "|")
    out.flush()