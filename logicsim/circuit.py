"""A connected group of components arranged in logic-depth layers."""

from __future__ import annotations

from typing import List

from .components import Component

__all__ = ["Circuit"]


class Circuit:
    """Components and wires of one circuit, grouped by logic depth.

    Layer ``n`` (1-based) holds the components at logic depth ``n`` and the
    wires driven from that depth. Resolving walks the layers in order, each
    layer's components first and then its wires.
    """

    def __init__(self, circuit_id: int = -1) -> None:
        self.circuit_id = circuit_id
        self.num_components = 0
        self.depth = 1
        self.components: List[List[Component]] = [[]]
        self.wires: List[List[Component]] = [[]]

    def reset_ids(self) -> None:
        """Detach every member component and wire from this circuit."""
        for layer in (*self.components, *self.wires):
            for comp in layer:
                comp.reset_id()

    def resolve_output(self) -> None:
        """Recompute all outputs, one logic layer after another."""
        for comp_layer, wire_layer in zip(self.components, self.wires):
            for comp in comp_layer:
                comp.resolve_output()
            for wire in wire_layer:
                wire.resolve_output()

    def add_component(self, comp: Component, logic_depth: int) -> None:
        """Place ``comp`` at ``logic_depth``, opening one new layer if needed."""
        if logic_depth - self.depth == 1:
            self.depth += 1
            self.components.append([])
            self.wires.append([])
        self._layer(self.components, logic_depth).append(comp)

    def add_wire(self, comp: Component, logic_depth: int) -> None:
        """Place a wire in the existing layer ``logic_depth``."""
        self._layer(self.wires, logic_depth).append(comp)

    def check_component(self, comp: Component) -> bool:
        """Return whether ``comp`` is one of this circuit's components."""
        return any(c is comp for layer in self.components for c in layer)

    def check_wire(self, wire: Component) -> bool:
        """Return whether ``wire`` is one of this circuit's wires."""
        return any(w is wire for layer in self.wires for w in layer)

    @staticmethod
    def _layer(layers: List[List[Component]], logic_depth: int) -> List[Component]:
        if not 1 <= logic_depth <= len(layers):
            raise IndexError(
                f"logic depth {logic_depth} outside 1..{len(layers)}"
            )
        return layers[logic_depth - 1]

    def __repr__(self) -> str:
        return f"Circuit(id={self.circuit_id}, depth={self.depth})"