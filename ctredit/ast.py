"""Syntax tree nodes of the scripting language."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from ctredit.token import TokenType


class LiteralType(Enum):
    """Kind of value held by a literal."""

    INT = auto()
    FLOAT = auto()
    STRING = auto()


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


@dataclass(frozen=True)
class Literal:
    """A constant; floats are stored with single precision."""

    value: Union[int, float, str]
    type: LiteralType = field(init=False)

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool):
            raise TypeError("booleans are not literals")
        if isinstance(value, int):
            kind = LiteralType.INT
        elif isinstance(value, float):
            kind = LiteralType.FLOAT
            object.__setattr__(self, "value", _to_single(value))
        elif isinstance(value, str):
            kind = LiteralType.STRING
        else:
            raise TypeError(f"unsupported literal value {value!r}")
        object.__setattr__(self, "type", kind)


@dataclass(frozen=True)
class Variable:
    """A reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Unary:
    """A prefix operator applied to one operand."""

    op: TokenType
    operand: "Node"


@dataclass(frozen=True)
class Binary:
    """An infix operator applied to two operands."""

    left: "Node"
    op: TokenType
    right: "Node"


@dataclass(frozen=True)
class Assign:
    """Assignment of a value to a name."""

    name: str
    value: "Node"


@dataclass(frozen=True)
class Call:
    """A call of a named function."""

    function_name: str
    args: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Block:
    """A sequence of statements."""

    statements: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))


@dataclass(frozen=True)
class If:
    """A conditional with an optional else branch."""

    condition: "Node"
    then_branch: "Node"
    else_branch: Optional["Node"] = None


@dataclass(frozen=True)
class ExprStmt:
    """An expression used as a statement."""

    expression: "Node"


Node = Union[Literal, Variable, Unary, Binary, Assign, Call, Block, If, ExprStmt]