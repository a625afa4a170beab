"""Recursive-descent parser turning tokens into expression trees."""

from __future__ import annotations

import re
from typing import Sequence

from ctredit.ast import Binary, Literal, Node, Variable
from ctredit.error import ErrorType, InterpreterError
from ctredit.token import Token, TokenType

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)

_EOF = Token(TokenType.EOF, None, 0)


def _leading_int(text: str | None) -> int:
    match = _INT_PREFIX.match(text or "")
    return int(match.group(1)) if match else 0


def _leading_float(text: str | None) -> float:
    match = _FLOAT_PREFIX.match(text or "")
    return float(match.group(1)) if match else 0.0


class Parser:
    """Parses arithmetic expressions from a sequence of tokens.

    Multiplication and division bind tighter than addition and
    subtraction; all four are left-associative.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.current = 0

    def _peek(self) -> Token:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return _EOF

    def _advance(self) -> Token:
        token = self._peek()
        if self.current < len(self.tokens):
            self.current += 1
        return token

    def _match(self, kind: TokenType) -> bool:
        if self._peek().type is kind:
            self._advance()
            return True
        return False

    def _primary(self) -> Node:
        token = self._peek()
        if self._match(TokenType.NUMBER):
            return Literal(_leading_int(token.lexeme))
        if self._match(TokenType.FLOAT_LITERAL):
            return Literal(_leading_float(token.lexeme))
        if self._match(TokenType.IDENT):
            return Variable(token.lexeme or "")
        if self._match(TokenType.LPAREN):
            expr = self.parse_expression()
            if not self._match(TokenType.RPAREN):
                raise InterpreterError(
                    ErrorType.SYNTAX,
                    "expected closing parenthesis",
                    self._peek().line,
                )
            return expr
        shown = token.lexeme if token.lexeme is not None else "EOF"
        raise InterpreterError(
            ErrorType.SYNTAX, f"unexpected token '{shown}'", token.line
        )

    def _binary_chain(self, operand, operators: tuple[TokenType, ...]) -> Node:
        node = operand()
        while self._peek().type in operators:
            op = self._advance().type
            node = Binary(node, op, operand())
        return node

    def _factor(self) -> Node:
        return self._binary_chain(self._primary, (TokenType.STAR, TokenType.SLASH))

    def _term(self) -> Node:
        return self._binary_chain(self._factor, (TokenType.PLUS, TokenType.MINUS))

    def parse_expression(self) -> Node:
        """Parse one expression starting at the current token."""
        return self._term()


def parse(tokens: Sequence[Token]) -> Node:
    """Parse an expression from *tokens*; tokens after it are ignored."""
    return Parser(tokens).parse_expression()