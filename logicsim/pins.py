"""Output and input pins that link components together."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .logic import LogicValue

if TYPE_CHECKING:
    from .components import Component

__all__ = ["OutputPin", "InputPin"]


class OutputPin:
    """A driving pin holding a logic value, linked to at most one input pin."""

    def __init__(
        self,
        owner: Optional["Component"] = None,
        value: LogicValue = LogicValue.X,
    ) -> None:
        self.owner = owner
        self.value = value
        self.connection: Optional[InputPin] = None

    def connect(self, in_pin: "InputPin") -> None:
        """Record the input pin this output drives."""
        self.connection = in_pin

    def disconnect(self) -> None:
        """Forget the driven input pin."""
        self.connection = None

    def __repr__(self) -> str:
        return f"OutputPin(value={self.value})"


class InputPin:
    """A receiving pin that reads the value of the output pin it is wired to."""

    def __init__(self, owner: Optional["Component"] = None) -> None:
        self.owner = owner
        self.connection: Optional[OutputPin] = None

    @property
    def is_connected(self) -> bool:
        return self.connection is not None

    @property
    def value(self) -> LogicValue:
        """The driving output's value, or X when nothing is connected."""
        if self.connection is None:
            return LogicValue.X
        return self.connection.value

    def connect(self, pin: OutputPin) -> None:
        """Wire this input to ``pin``, replacing any earlier connection."""
        self.connection = pin
        pin.connect(self)

    def disconnect(self) -> None:
        """Break the connection, if any, on both ends."""
        if self.connection is not None:
            self.connection.disconnect()
            self.connection = None

    def __repr__(self) -> str:
        return f"InputPin(connected={self.is_connected})"