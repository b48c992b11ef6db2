"""Three-valued logic levels used throughout the simulator."""

from __future__ import annotations

from enum import Enum

__all__ = ["LogicValue", "logic_value_to_string"]


class LogicValue(Enum):
    """A logic level: low, high, or unknown."""

    ZERO = 0
    ONE = 1
    X = 2

    def __str__(self) -> str:
        return logic_value_to_string(self)


_SYMBOLS = {
    LogicValue.ZERO: "0",
    LogicValue.ONE: "1",
    LogicValue.X: "X",
}


def logic_value_to_string(value: LogicValue) -> str:
    """Return the one-character display form of a logic value."""
    try:
        return _SYMBOLS[value]
    except KeyError:
        raise ValueError(f"not a logic value: {value!r}") from None