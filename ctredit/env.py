"""Runtime values and the variable environment."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Union


class ValueType(Enum):
    """Kinds of runtime values."""

    INT = auto()
    FLOAT = auto()
    STRING = auto()
    NONE = auto()


_EXPECTED = {
    ValueType.INT: int,
    ValueType.FLOAT: float,
    ValueType.STRING: str,
}


@dataclass(frozen=True)
class Value:
    """A typed runtime value; ``data`` is ``None`` for NONE."""

    type: ValueType
    data: Union[int, float, str, None] = None

    def __post_init__(self) -> None:
        if self.type is ValueType.NONE:
            if self.data is not None:
                raise TypeError("a NONE value carries no data")
            return
        if self.type is ValueType.FLOAT and isinstance(self.data, int) and not isinstance(self.data, bool):
            object.__setattr__(self, "data", float(self.data))
        expected = _EXPECTED[self.type]
        if isinstance(self.data, bool) or not isinstance(self.data, expected):
            raise TypeError(f"{self.type.name} value needs {expected.__name__}, got {self.data!r}")


class Env:
    """Variables by name, kept in the order they were first set."""

    def __init__(self) -> None:
        self._vars: dict[str, Value] = {}

    def set(self, name: str, value: Value) -> None:
        """Define *name* or replace its value."""
        self._vars[name] = value

    def get(self, name: str) -> Value | None:
        """Return the value of *name*, or ``None`` if it is undefined."""
        return self._vars.get(name)

    def clear(self) -> None:
        """Remove every variable."""
        self._vars.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)