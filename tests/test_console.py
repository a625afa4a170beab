import io
import re

from ctredit.console import console_clear, draw_rect


def test_console_clear():
    out = io.StringIO()
    console_clear(out)
    assert out.getvalue() == "\x1b[2J\x1b[H"


def test_draw_rect_small():
    out = io.StringIO()
    draw_rect(0, 0, 4, 3, out)
    assert out.getvalue() == "\x1b[1;1H----\x1b[2;1H|  |\x1b[3;1H----"


def test_draw_rect_positions_each_row():
    out = io.StringIO()
    draw_rect(5, 2, 6, 4, out)
    moves = re.findall(r"\x1b\[(\d+);(\d+)H", out.getvalue())
    assert [int(r) for r, _ in moves] == [3, 4, 5, 6]
    assert {int(c) for _, c in moves} == {6}


def test_draw_rect_rows_have_width():
    out = io.StringIO()
    draw_rect(0, 0, 7, 5, out)
    rows = re.split(r"\x1b\[\d+;\d+H", out.getvalue())[1:]
    assert all(len(row) == 7 for row in rows)
    assert rows[0] == rows[-1] == "-" * 7


def test_draw_rect_zero_height_writes_nothing():
    out = io.StringIO()
    draw_rect(1, 1, 5, 0, out)
    assert out.getvalue() == ""