"""Tokenizer for arithmetic expressions and assignments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


class LexTokenType(Enum):
    """Token kinds produced by :class:`Lexer`."""

    EOF = auto()
    INT_LITERAL = auto()
    FLOAT_LITERAL = auto()
    IDENT = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    LPAREN = auto()
    RPAREN = auto()
    ASSIGN = auto()
    NEWLINE = auto()
    UNKNOWN = auto()


_SINGLE = {
    "+": LexTokenType.PLUS,
    "-": LexTokenType.MINUS,
    "*": LexTokenType.MUL,
    "/": LexTokenType.DIV,
    "(": LexTokenType.LPAREN,
    ")": LexTokenType.RPAREN,
    "=": LexTokenType.ASSIGN,
    "\n": LexTokenType.NEWLINE,
}

_WHITESPACE = " \t\r"


@dataclass(frozen=True)
class LexToken:
    """A token, its text and the lexer's line count when it was made."""

    type: LexTokenType
    lexeme: str
    line: int

    @property
    def length(self) -> int:
        return len(self.lexeme)


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


class Lexer:
    """Reads tokens one at a time from a source string."""

    def __init__(self, source: str) -> None:
        end = source.find("\0")
        self.source = source if end < 0 else source[:end]
        self.pos = 0
        self.line = 1

    def _peek(self) -> str:
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def _advance(self) -> str:
        c = self._peek()
        if c:
            self.pos += 1
            if c == "\n":
                self.line += 1
        return c

    def _consume_while(self, predicate) -> None:
        while (c := self._peek()) and predicate(c):
            self._advance()

    def _make(self, kind: LexTokenType, start: int) -> LexToken:
        return LexToken(kind, self.source[start:self.pos], self.line)

    def next_token(self) -> LexToken:
        """Return the next token; at the end, an EOF token every time."""
        self._consume_while(lambda c: c in _WHITESPACE)
        start = self.pos
        c = self._peek()

        if not c:
            return self._make(LexTokenType.EOF, start)

        if _is_alpha(c) or c == "_":
            self._consume_while(lambda ch: _is_alpha(ch) or _is_digit(ch) or ch == "_")
            return self._make(LexTokenType.IDENT, start)

        if _is_digit(c):
            self._consume_while(_is_digit)
            kind = LexTokenType.INT_LITERAL
            if self._peek() == ".":
                kind = LexTokenType.FLOAT_LITERAL
                self._advance()
                self._consume_while(_is_digit)
            return self._make(kind, start)

        self._advance()
        return self._make(_SINGLE.get(c, LexTokenType.UNKNOWN), start)

    def __iter__(self) -> Iterator[LexToken]:
        """Yield the remaining tokens, ending with the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is LexTokenType.EOF:
                return


def tokenize(source: str) -> list[LexToken]:
    """Return every token of *source*, the EOF token last."""
    return list(Lexer(source))