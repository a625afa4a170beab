"""An interactive loop that reads expressions and parses them."""

from __future__ import annotations

import sys
from typing import TextIO

from ctredit.error import InterpreterError, report_error
from ctredit.lexer import LexToken, LexTokenType, tokenize
from ctredit.parser import parse
from ctredit.token import Token, TokenType

_TOKEN_KINDS = {
    LexTokenType.EOF: TokenType.EOF,
    LexTokenType.INT_LITERAL: TokenType.NUMBER,
    LexTokenType.FLOAT_LITERAL: TokenType.FLOAT_LITERAL,
    LexTokenType.IDENT: TokenType.IDENT,
    LexTokenType.PLUS: TokenType.PLUS,
    LexTokenType.MINUS: TokenType.MINUS,
    LexTokenType.MUL: TokenType.STAR,
    LexTokenType.DIV: TokenType.SLASH,
    LexTokenType.LPAREN: TokenType.LPAREN,
    LexTokenType.RPAREN: TokenType.RPAREN,
    LexTokenType.ASSIGN: TokenType.EQUAL,
    LexTokenType.UNKNOWN: TokenType.ERROR,
}


def _convert(tokens: list[LexToken]) -> list[Token]:
    return [
        Token(_TOKEN_KINDS[t.type], t.lexeme if t.type is not LexTokenType.EOF else None, t.line)
        for t in tokens
        if t.type is not LexTokenType.NEWLINE
    ]


def run_repl(input_stream: TextIO, output_stream: TextIO) -> None:
    """Read lines until ``exit`` or end of input, parsing each one."""
    output_stream.write("Mini REPL (tape 'exit' pour quitter)\n")
    while True:
        output_stream.write("> ")
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            output_stream.write("\nFin du REPL\n")
            break
        if line.endswith("\n"):
            line = line[:-1]
        if line == "exit":
            output_stream.write("Sortie du REPL\n")
            break
        try:
            parse(_convert(tokenize(line)))
        except InterpreterError as err:
            report_error(err, output_stream)
            continue
        output_stream.write("Parsing done.\n")
    output_stream.flush()


def main(argv: list[str] | None = None) -> int:
    """Run the loop on standard input and output."""
    run_repl(sys.stdin, sys.stdout)
    return 0