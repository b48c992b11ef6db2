"""Circuit components: gates, switches, probes and wires."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .logic import LogicValue
from .pins import InputPin, OutputPin

__all__ = [
    "Component",
    "LogicGate",
    "AND2",
    "OR2",
    "NOT",
    "BinarySwitch",
    "BinaryProbe",
    "Wire",
]


class Component(ABC):
    """Base class for anything with input and output pins."""

    def __init__(self, n_input_pins: int, n_output_pins: int, name: str) -> None:
        self.circuit_id = -1
        self.name = name
        self.input_pins = [InputPin(self) for _ in range(n_input_pins)]
        self.output_pins = [OutputPin(self) for _ in range(n_output_pins)]

    @property
    def num_input_pins(self) -> int:
        return len(self.input_pins)

    @property
    def num_output_pins(self) -> int:
        return len(self.output_pins)

    def reset_id(self) -> None:
        """Mark the component as belonging to no circuit."""
        self.circuit_id = -1

    @abstractmethod
    def resolve_output(self) -> None:
        """Recompute output pin values from the inputs."""

    def connect_input_pin(self, idx: int, out_pin: OutputPin) -> None:
        """Wire input pin ``idx`` to ``out_pin``."""
        self.input_pins[idx].connect(out_pin)

    def disconnect_input_pin(self, idx: int) -> None:
        """Disconnect input pin ``idx``."""
        self.input_pins[idx].disconnect()

    def output_pin(self, idx: int) -> Optional[OutputPin]:
        """Return the output pin for ``idx``; single-output parts ignore it."""
        return self.output_pins[0]

    def input_pin(self, idx: int) -> Optional[InputPin]:
        """Return input pin ``idx``."""
        return self.input_pins[idx]

    def clone(self) -> "Component":
        """Return a fresh, unconnected component of the same kind."""
        return type(self)()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(circuit_id={self.circuit_id})"


class LogicGate(Component):
    """A component whose single output is computed from its inputs."""

    @property
    def value(self) -> LogicValue:
        return self.output_pins[0].value


class AND2(LogicGate):
    """Two-input AND gate."""

    def __init__(self) -> None:
        super().__init__(2, 1, "2-AND")

    def resolve_output(self) -> None:
        result = LogicValue.ONE
        for pin in self.input_pins:
            if pin.value in (LogicValue.ZERO, LogicValue.X):
                result = pin.value
                break
        self.output_pins[0].value = result


class OR2(LogicGate):
    """Two-input OR gate."""

    def __init__(self) -> None:
        super().__init__(2, 1, "2-OR")

    def resolve_output(self) -> None:
        values = [pin.value for pin in self.input_pins]
        if LogicValue.ONE in values:
            result = LogicValue.ONE
        elif LogicValue.X in values:
            result = LogicValue.X
        else:
            result = LogicValue.ZERO
        self.output_pins[0].value = result


class NOT(LogicGate):
    """Inverter; only its first input pin takes part in the logic."""

    def __init__(self) -> None:
        super().__init__(2, 1, "NOT")

    def resolve_output(self) -> None:
        value = self.input_pins[0].value
        if value is LogicValue.ZERO:
            result = LogicValue.ONE
        elif value is LogicValue.ONE:
            result = LogicValue.ZERO
        else:
            result = LogicValue.X
        self.output_pins[0].value = result

    def input_pin(self, idx: int) -> InputPin:
        return self.input_pins[0]


class BinarySwitch(Component):
    """A user-controlled source that drives 0 or 1."""

    def __init__(self) -> None:
        super().__init__(0, 1, "Binary Switch")
        self.output_pins[0].value = LogicValue.ZERO

    @property
    def value(self) -> LogicValue:
        return self.output_pins[0].value

    def toggle(self) -> None:
        """Flip the switch between 0 and 1."""
        pin = self.output_pins[0]
        pin.value = LogicValue.ONE if pin.value is LogicValue.ZERO else LogicValue.ZERO
        self.resolve_output()

    def resolve_output(self) -> None:
        pass

    def connect_input_pin(self, idx: int, out_pin: OutputPin) -> None:
        pass

    def disconnect_input_pin(self, idx: int) -> None:
        pass

    def input_pin(self, idx: int) -> None:
        return None


class BinaryProbe(Component):
    """A sink that shows the value on its single input."""

    def __init__(self) -> None:
        super().__init__(1, 0, "Binary Probe")

    @property
    def value(self) -> LogicValue:
        return self.input_pins[0].value

    def resolve_output(self) -> None:
        pass

    def connect_input_pin(self, idx: int, out_pin: OutputPin) -> None:
        self.input_pins[0].connect(out_pin)

    def disconnect_input_pin(self, idx: int) -> None:
        self.input_pins[0].disconnect()

    def output_pin(self, idx: int) -> None:
        return None

    def input_pin(self, idx: int) -> InputPin:
        return self.input_pins[0]


class Wire(Component):
    """A single input fanned out to any number of outputs."""

    def __init__(self) -> None:
        super().__init__(1, 1, "Wire")

    def resolve_output(self) -> None:
        value = self.input_pins[0].value
        for pin in self.output_pins:
            pin.value = value

    def add_output_pin(self) -> OutputPin:
        """Append a new output pin and return it."""
        pin = OutputPin(self)
        self.output_pins.append(pin)
        return pin

    def remove_output_pin(self, pin: OutputPin) -> None:
        """Remove ``pin`` from the outputs if it belongs to this wire."""
        for i, existing in enumerate(self.output_pins):
            if existing is pin:
                del self.output_pins[i]
                break

    def connect_input_pin(self, idx: int, out_pin: OutputPin) -> None:
        self.input_pins[0].connect(out_pin)

    def disconnect_input_pin(self, idx: int) -> None:
        self.input_pins[0].disconnect()

    def output_pin(self, idx: int) -> OutputPin:
        """Return output ``idx``, growing by one pin when ``idx`` is the next slot."""
        if idx == len(self.output_pins):
            self.add_output_pin()
        return self.output_pins[idx]

    def input_pin(self, idx: int) -> InputPin:
        return self.input_pins[0]