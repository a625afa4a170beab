from ctredit.state import MAX_LINE_LENGTH, State


def typed(text, **kwargs):
    state = State(**kwargs)
    for ch in text:
        state.insert_char(ch)
    return state


def test_initial_state():
    state = State()
    assert state.lines == [""]
    assert state.line_count == 1
    assert state.insert_mode is True
    assert state.has_selection is False
    assert state.scroll_offset == 0


def test_insert_mode_typing():
    state = typed("abc")
    assert state.lines[0] == "abc"
    assert state.cursor_x == 3


def test_insert_in_middle():
    state = typed("ac")
    state.move_cursor(-1, 0)
    state.insert_char("b")
    assert state.lines[0] == "abc"


def test_replace_mode_overwrites():
    state = typed("abc")
    state.insert_mode = False
    state.move_cursor(-3, 0)
    state.insert_char("x")
    assert state.lines[0] == "xbc"
    assert state.cursor_x == 1


def test_replace_mode_at_end_appends():
    state = typed("ab", insert_mode=False)
    assert state.lines[0] == "ab"
    assert state.cursor_x == 2


def test_delete_char():
    state = typed("abc")
    state.delete_char()
    assert state.lines[0] == "ab"
    assert state.cursor_x == 2


def test_delete_at_origin_does_nothing():
    state = typed("abc")
    state.move_cursor(-10, 0)
    state.delete_char()
    assert state.lines[0] == "abc"
    assert state.cursor_x == 0


def test_cursor_is_clamped():
    state = typed("abcd")
    state.move_cursor(50, 3)
    assert (state.cursor_x, state.cursor_y) == (4, 0)
    state.move_cursor(-50, -3)
    assert (state.cursor_x, state.cursor_y) == (0, 0)


def test_full_line_rejects_input():
    state = typed("z" * (MAX_LINE_LENGTH + 5))
    assert len(state.lines[0]) == MAX_LINE_LENGTH - 1
    assert state.cursor_x == MAX_LINE_LENGTH - 1