"""Token kinds of the scripting language and helpers to display them."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import TextIO


class TokenType(Enum):
    """Every kind of token the parser understands."""

    EOF = auto()
    ERROR = auto()

    NUMBER = auto()
    FLOAT_LITERAL = auto()
    STRING = auto()
    IDENT = auto()

    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    BANG_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()

    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()
    SEMICOLON = auto()

    IF = auto()
    ELSE = auto()
    WHILE = auto()
    FOR = auto()
    DEF = auto()
    RETURN = auto()
    PRINT = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    TRUE = auto()
    FALSE = auto()
    NONE = auto()


_NAMES: dict[TokenType, str] = {
    TokenType.EOF: "EOF",
    TokenType.ERROR: "ERROR",
    TokenType.NUMBER: "NUMBER",
    TokenType.FLOAT_LITERAL: "FLOAT",
    TokenType.STRING: "STRING",
    TokenType.IDENT: "IDENT",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.PERCENT: "%",
    TokenType.EQUAL: "=",
    TokenType.EQUAL_EQUAL: "==",
    TokenType.BANG_EQUAL: "!=",
    TokenType.LESS: "<",
    TokenType.LESS_EQUAL: "<=",
    TokenType.GREATER: ">",
    TokenType.GREATER_EQUAL: ">=",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.COMMA: ",",
    TokenType.DOT: ".",
    TokenType.COLON: ":",
    TokenType.SEMICOLON: ";",
    TokenType.IF: "if",
    TokenType.ELSE: "else",
    TokenType.WHILE: "while",
    TokenType.FOR: "for",
    TokenType.DEF: "def",
    TokenType.RETURN: "return",
    TokenType.PRINT: "print",
    TokenType.AND: "and",
    TokenType.OR: "or",
    TokenType.NOT: "not",
    TokenType.TRUE: "true",
    TokenType.FALSE: "false",
    TokenType.NONE: "none",
}


@dataclass(frozen=True)
class Token:
    """A token with its text and the line it was read on."""

    type: TokenType
    lexeme: str | None = None
    line: int = 0


def token_type_to_string(type: object) -> str:
    """Return the display name of a token type, or ``"unknown"``."""
    if isinstance(type, TokenType):
        return _NAMES.get(type, "unknown")
    return "unknown"


def print_token(token: Token, file: TextIO | None = None) -> None:
    """Write a one-line description of *token*."""
    out = sys.stdout if file is None else file
    out.write(
        f"[Token] type={token_type_to_string(token.type)}, "
        f"lexeme='{token.lexeme}', line={token.line}\n"
    )