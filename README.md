# ctredit

A small console text editor driven by an on-screen keyboard, together with
the pieces of a tiny expression language: a lexer, a parser, an environment
of variables and an evaluator.

## Installing

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `ctredit`

Runs the editor one frame per line of standard input. Each line lists the
buttons pressed in that frame, as names separated by spaces
(case-insensitive): `A`, `B`, `X`, `Y`, `L`, `R`, `START`, `SELECT`, `UP`,
`DOWN`, `LEFT`, `RIGHT`. Unknown names are ignored.

In each frame:

- `START` quits.
- The direction buttons move the keyboard selection (only the first of up,
  down, left, right counts for the keyboard) and also move the text cursor.
- `A` types the selected keyboard character at the cursor.
- `B` deletes the character before the cursor.

After each frame the 40×30 text screen is written to standard output,
followed by the keyboard with the selected key in brackets.

```
printf 'A\nRIGHT\nA\nB\nSTART\n' | ctredit
```

### `ctredit-repl`

Reads lines from standard input, shows a `> ` prompt, and lexes and parses
each line as an expression. A line that parses prints `Parsing done.`; a
syntax error is printed as e.g. `[Syntax error] Line 1: unexpected token '+'`.
Type `exit`, or send end of input, to leave.

## Using it as a library

- `ctredit.buffer.Buffer`: up to 256 lines of up to 126 characters, with
  `get_line`, `insert_char`, `delete_char`, `insert_line`, `delete_line`,
  `clear` and `all_text()`. Out-of-range positions raise `IndexError`; a
  full line or buffer raises `ValueError`.
- `ctredit.editor.Editor` and `ctredit.state.State`: lines of text with a
  cursor, `insert_char`, `delete_char` (backspace) and `move_cursor`.
  `State` also has a replace mode (`insert_mode = False`), selection fields
  and a scroll offset.
- `ctredit.kboard.KBoard`: a 3×10 on-screen keyboard. `process_input(keys)`
  takes the `KeyCode`s pressed and returns the chosen character, `"\b"` for
  backspace, or `None`.
- `ctredit.render.RenderContext`: a character-cell screen buffer with
  `draw_text`, `draw_cursor`, `lines()`, `refresh(file)` and
  `draw_state(state, file)`.
- `ctredit.input.InputState` and `KeyCode`: which buttons are held, the
  order of up to 16 new presses, and touch position.
- `ctredit.console`: `console_clear` and `draw_rect` using ANSI escapes.
- `ctredit.app.App`: the editor above; `step(keys, file)` runs one frame.
- `ctredit.lexer.tokenize` / `Lexer`: turn a string into `LexToken`s.
- `ctredit.parser.parse` / `Parser`: build a tree of `ctredit.ast` nodes
  from `ctredit.token.Token`s, with `*` and `/` binding tighter than `+`
  and `-`. Errors raise `ctredit.error.InterpreterError`.
- `ctredit.eval.eval_node` with `ctredit.env.Env`: evaluate `IntLiteral`,
  `FloatLiteral`, `Ident` and `BinaryOp` nodes.

```python
from ctredit.env import Env, Value, ValueType
from ctredit.eval import BinaryOp, FloatLiteral, Ident, eval_node

env = Env()
env.set("x", Value(ValueType.INT, 2))
result = eval_node(BinaryOp(Ident("x"), FloatLiteral(0.5), "+"), env)
# Value(type=ValueType.FLOAT, data=2.5)
```

## What it does not do

- The editor cannot open or save files, split or join lines (Enter and
  backspace at the start of a line do nothing), or handle touch input on the
  keyboard.
- The REPL only checks that a line parses; it does not evaluate it or keep
  variables.
- The evaluator supports only `+`; other operators raise an
  `InterpreterError` of type `RUNTIME`.