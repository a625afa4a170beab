"""Evaluation of simple expression trees against an environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ctredit.env import Env, Value, ValueType
from ctredit.error import ErrorType, InterpreterError


@dataclass(frozen=True)
class IntLiteral:
    """An integer constant."""

    value: int


@dataclass(frozen=True)
class FloatLiteral:
    """A floating-point constant."""

    value: float


@dataclass(frozen=True)
class Ident:
    """A variable reference."""

    name: Optional[str]


@dataclass(frozen=True)
class BinaryOp:
    """An infix operation whose operator is given as text."""

    left: Optional["ExprNode"]
    right: Optional["ExprNode"]
    op: Optional[str]


ExprNode = Union[IntLiteral, FloatLiteral, Ident, BinaryOp]

_NUMERIC = (ValueType.INT, ValueType.FLOAT)


def _add(left: Value, right: Value) -> Value:
    if left.type is ValueType.INT and right.type is ValueType.INT:
        return Value(ValueType.INT, left.data + right.data)
    if left.type in _NUMERIC and right.type in _NUMERIC:
        return Value(ValueType.FLOAT, float(left.data) + float(right.data))
    raise InterpreterError(ErrorType.TYPE, "Type error for '+' operator")


def eval_node(node: object, env: Env) -> Value:
    """Evaluate *node* and return its value; raise InterpreterError on failure."""
    if node is None:
        raise InterpreterError(ErrorType.INTERNAL, "AST node is NULL")

    if isinstance(node, IntLiteral):
        return Value(ValueType.INT, node.value)

    if isinstance(node, FloatLiteral):
        return Value(ValueType.FLOAT, float(node.value))

    if isinstance(node, Ident):
        if node.name is None:
            raise InterpreterError(ErrorType.INTERNAL, "AST_IDENT node has null name")
        value = env.get(node.name)
        if value is None:
            raise InterpreterError(ErrorType.NAME, f"Undefined variable '{node.name}'")
        return value

    if isinstance(node, BinaryOp):
        if node.left is None or node.right is None or not node.op:
            raise InterpreterError(ErrorType.INTERNAL, "Malformed binary operation")
        left = eval_node(node.left, env)
        right = eval_node(node.right, env)
        if node.op == "+":
            return _add(left, right)
        raise InterpreterError(ErrorType.RUNTIME, f"Unsupported operator '{node.op}'")

    raise InterpreterError(ErrorType.INTERNAL, f"Unknown AST node type {type(node).__name__}")