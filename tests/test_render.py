import io

import pytest

from ctredit.render import RenderContext
from ctredit.state import State


def test_new_screen_is_blank():
    ctx = RenderContext(8, 3)
    assert ctx.lines() == [" " * 8] * 3


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        RenderContext(-1, 3)


def test_draw_text_places_text():
    ctx = RenderContext(10, 2)
    ctx.draw_text(2, 1, "abc")
    assert ctx.lines()[1][2:5] == "abc"
    assert ctx.lines()[0] == " " * 10


def test_draw_text_clips_and_keeps_width():
    ctx = RenderContext(5, 1)
    ctx.draw_text(3, 0, "hello")
    line = ctx.lines()[0]
    assert len(line) == 5
    assert line[3:] == "he"


def test_draw_text_negative_x_starts_at_zero():
    ctx = RenderContext(5, 1)
    ctx.draw_text(-3, 0, "ab")
    assert ctx.lines()[0].startswith("ab")


def test_draw_text_outside_rows_ignored():
    ctx = RenderContext(5, 2)
    ctx.draw_text(0, 2, "ab")
    ctx.draw_text(0, -1, "ab")
    assert ctx.lines() == [" " * 5] * 2


def test_cursor_marks():
    ctx = RenderContext(4, 1)
    ctx.draw_text(0, 0, "aB")
    ctx.draw_cursor(0, 0, True)
    ctx.draw_cursor(1, 0, True)
    ctx.draw_cursor(2, 0, True)
    ctx.draw_cursor(3, 0, False)
    assert ctx.lines()[0] == "AB_ "


def test_clear_resets():
    ctx = RenderContext(3, 2)
    ctx.draw_text(0, 0, "xyz")
    ctx.clear()
    assert ctx.lines() == [" " * 3] * 2


def test_refresh_output():
    ctx = RenderContext(3, 2)
    ctx.draw_text(0, 0, "hi")
    out = io.StringIO()
    ctx.refresh(out)
    text = out.getvalue()
    assert text.startswith("\033[H\033[J")
    assert text[len("\033[H\033[J"):].splitlines() == ctx.lines()


def test_draw_state():
    state = State(lines=["ab", "cd"], cursor_x=2, cursor_y=0)
    ctx = RenderContext(4, 3)
    ctx.draw_state(state, io.StringIO())
    lines = ctx.lines()
    assert lines[0].startswith("ab_")
    assert lines[1].startswith("cd")