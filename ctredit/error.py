"""Interpreter errors and their display."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class ErrorType(Enum):
    """Categories of interpreter errors, each with its display label."""

    NONE = "No error"
    SYNTAX = "Syntax error"
    RUNTIME = "Runtime error"
    NAME = "Name error"
    TYPE = "Type error"
    VALUE = "Value error"
    IO = "IO error"
    INTERNAL = "Internal error"

    @property
    def label(self) -> str:
        return self.value


class InterpreterError(Exception):
    """An error raised while reading or evaluating a program."""

    def __init__(self, type: ErrorType, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.type = type
        self.message = message
        self.line = line

    def format(self) -> str:
        """Return the error as a single display line."""
        if self.line is not None and self.line >= 0:
            return f"[{self.type.label}] Line {self.line}: {self.message}"
        return f"[{self.type.label}]: {self.message}"


def report_error(error: InterpreterError, file: TextIO | None = None) -> None:
    """Write *error* to *file*, standard error by default."""
    out = sys.stderr if file is None else file
    out.write(error.format() + "\n")