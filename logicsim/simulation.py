"""The simulation: a pool of components, wiring, and circuit mapping."""

from __future__ import annotations

from collections import deque
from typing import List, Optional

from .circuit import Circuit
from .components import (
    AND2,
    NOT,
    OR2,
    BinaryProbe,
    BinarySwitch,
    Component,
    Wire,
)
from .pins import InputPin, OutputPin

__all__ = ["Simulation", "SimulationError"]

_SWITCH = "Binary Switch"
_WIRE = "Wire"


class SimulationError(Exception):
    """Raised when the component graph cannot be mapped into circuits."""


class Simulation:
    """Holds the components the user has placed and the circuits built from them."""

    def __init__(self) -> None:
        self.available_components: List[Component] = [
            BinaryProbe(),
            BinarySwitch(),
            Wire(),
            AND2(),
            OR2(),
            NOT(),
        ]
        self.components: List[Component] = []
        self.circuits: List[Circuit] = []

    def add_component(self, idx: int) -> Component:
        """Add a new component of available type ``idx`` and return it."""
        if not 0 <= idx < len(self.available_components):
            raise IndexError(f"no component type with index {idx}")
        comp = self.available_components[idx].clone()
        self.components.append(comp)
        return comp

    def remove_component(self, comp: Component) -> None:
        """Remove every occurrence of ``comp`` from the simulation."""
        self.components = [c for c in self.components if c is not comp]

    def remove_component_at(self, idx: int) -> None:
        """Remove the component at ``idx``; an out-of-range index is ignored."""
        if 0 <= idx < len(self.components):
            del self.components[idx]

    def connect(
        self, target_idx: int, target_pin: int, source_idx: int, source_pin: int
    ) -> None:
        """Drive input ``target_pin`` of one component from output ``source_pin`` of another."""
        target = self._component(target_idx)
        source = self._component(source_idx)
        target.connect_input_pin(target_pin, source.output_pin(source_pin))

    def disconnect(self, target_idx: int, target_pin: int) -> None:
        """Disconnect input ``target_pin`` of the component at ``target_idx``."""
        self._component(target_idx).disconnect_input_pin(target_pin)

    def resolve_output(self) -> None:
        """Resolve every mapped circuit."""
        for circuit in self.circuits:
            circuit.resolve_output()

    def map_components(self) -> List[Circuit]:
        """Group components into circuits and arrange them by logic depth.

        Each switch seeds a breadth-first search that labels its connected
        components with a circuit number; then the path from each switch is
        walked to assign logic depths. The resulting layout is printed and
        the circuits are returned.
        """
        for circuit in self.circuits:
            circuit.reset_ids()
        self.circuits = []

        switches = [i for i, c in enumerate(self.components) if c.name == _SWITCH]
        self._label_circuits(switches)
        for idx in switches:
            self._layer_from_switch(self.components[idx])
        self._print_layout()
        return self.circuits

    def _label_circuits(self, switches: List[int]) -> None:
        visited = [False] * len(self.components)
        circuit_no = 0
        for start in switches:
            if self.components[start].circuit_id != -1:
                continue
            circuit_no += 1
            self.circuits.append(Circuit(circuit_no))
            queue = deque([start])
            while queue:
                v = queue.popleft()
                if visited[v]:
                    continue
                comp = self.components[v]
                comp.circuit_id = circuit_no
                visited[v] = True
                neighbours = [
                    self._driven_component(comp.output_pin(i))
                    for i in range(comp.num_output_pins)
                ] + [
                    self._driving_component(comp.input_pin(i))
                    for i in range(comp.num_input_pins)
                ]
                for neighbour in neighbours:
                    index = self._index_of(neighbour)
                    if not visited[index]:
                        queue.append(index)

    def _layer_from_switch(self, switch: Component) -> None:
        circuit = self.circuits[switch.circuit_id - 1]
        depth = 1
        current = switch
        while True:
            if not circuit.check_component(current) and current.name != _WIRE:
                circuit.add_component(current, depth)
            for j in range(current.num_output_pins):
                nxt = self._driven_component(current.output_pin(j))
                if nxt.name == _WIRE and not circuit.check_wire(nxt):
                    circuit.add_wire(nxt, depth)
                    for k in range(nxt.num_output_pins):
                        beyond = self._driven_component(nxt.output_pin(k))
                        if beyond.name == _WIRE and not circuit.check_wire(beyond):
                            circuit.add_wire(beyond, depth)
                else:
                    current = nxt
                    if current.name != _WIRE:
                        depth += 1
                    break
            if current.output_pin(0) is None:
                break
        if current.name != _WIRE:
            if not circuit.check_component(current):
                circuit.add_component(current, depth)
        elif not circuit.check_wire(current):
            circuit.add_wire(current, depth - 1)

    def _print_layout(self) -> None:
        for circuit in self.circuits:
            for layers in (circuit.components, circuit.wires):
                for layer in layers:
                    print("".join(f"{self._find(c)}{c.name} " for c in layer))
                print()

    def _component(self, idx: int) -> Component:
        if not 0 <= idx < len(self.components):
            raise IndexError(f"no component with index {idx}")
        return self.components[idx]

    def _find(self, comp: Component) -> int:
        return next((i for i, c in enumerate(self.components) if c is comp), -1)

    def _index_of(self, comp: Component) -> int:
        index = self._find(comp)
        if index < 0:
            raise SimulationError(f"{comp.name} is not part of the simulation")
        return index

    @staticmethod
    def _driven_component(pin: Optional[OutputPin]) -> Component:
        if pin is None or pin.connection is None or pin.connection.owner is None:
            raise SimulationError("an output pin is not connected")
        return pin.connection.owner

    @staticmethod
    def _driving_component(pin: Optional[InputPin]) -> Component:
        if pin is None or pin.connection is None or pin.connection.owner is None:
            raise SimulationError("an input pin is not connected")
        return pin.connection.owner