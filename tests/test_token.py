import io

import pytest

from ctredit.token import Token, TokenType, print_token, token_type_to_string


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenType.EOF, "EOF"),
        (TokenType.FLOAT_LITERAL, "FLOAT"),
        (TokenType.NUMBER, "NUMBER"),
        (TokenType.GREATER_EQUAL, ">="),
        (TokenType.BANG_EQUAL, "!="),
        (TokenType.RETURN, "return"),
        (TokenType.NONE, "none"),
    ],
)
def test_known_names(kind, text):
    assert token_type_to_string(kind) == text


def test_every_type_has_a_name():
    names = [token_type_to_string(kind) for kind in TokenType]
    assert "unknown" not in names
    assert len(set(names)) == len(names)


def test_unknown_for_foreign_value():
    assert token_type_to_string(12345) == "unknown"


def test_print_token_format():
    out = io.StringIO()
    print_token(Token(TokenType.IDENT, "x", 3), out)
    assert out.getvalue() == "[Token] type=IDENT, lexeme='x', line=3\n"


def test_print_token_operator():
    out = io.StringIO()
    print_token(Token(TokenType.PLUS, "+", 1), file=out)
    assert out.getvalue().startswith("[Token] type=+, lexeme='+'")