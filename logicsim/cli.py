"""Interactive command-line front end for the circuit simulator."""

from __future__ import annotations

import argparse
import re
import sys
from typing import List, Optional, TextIO

from .components import BinaryProbe, BinarySwitch
from .logic import LogicValue, logic_value_to_string
from .simulation import Simulation, SimulationError

__all__ = ["Interface", "main"]

_MENU = (
    "\n--- Commands ---\n"
    "  1. add          - Add a new component\n"
    "  2. connect      - Connect an output pin to an input pin\n"
    "  3. disconnect   - Disconnect an input pin\n"
    "  4. set_switch   - Set value of a Binary Switch\n"
    "  5. get_probe    - Get value from a Binary Probe\n"
    "  6. simulate     - Run circuit simulation (resolve outputs)\n"
    "  7. list_avail   - List available component types\n"
    "  8. list_current - List current components in simulation\n"
    "  9. help         - Show this menu\n"
    " 10. exit         - Exit the program\n"
    "----------------\n"
)

_AVAILABLE = (
    "\n--- Available Component Types ---\n"
    "  0: Binary Probe\n"
    "  1: Binary Switch\n"
    "  2: Wire\n"
    "  3: AND2\n"
    "  4: OR2\n"
    "  5: NOT\n"
    "------------------------------\n"
)

_RULE = "------------------------------------------------------------------\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Interface:
    """A line-oriented shell that drives a :class:`Simulation`."""

    def __init__(
        self,
        simulator: Optional[Simulation] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.simulator = simulator if simulator is not None else Simulation()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._commands = {
            "add": self._add_component,
            "connect": self._connect_pins,
            "disconnect": self._disconnect_pins,
            "set_switch": self._set_switch_value,
            "get_probe": self._get_probe_value,
            "simulate": self._run_simulation,
            "list_avail": self.list_available_components,
            "list_current": self.list_current_components,
            "help": self.display_menu,
        }

    # -- output -----------------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    # -- input ------------------------------------------------------------

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _ask_int(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            match = _LEADING_INT.match(self._read_line())
            if match:
                return int(match.group(1))
            self._write("Invalid input. Please enter a number.\n")

    def _ask_string(self, prompt: str) -> str:
        self._write(prompt)
        line = self._read_line()
        if line == "":
            line = self._read_line()
        return line

    def _ask_yes_no(self, prompt: str) -> bool:
        while True:
            self._write(f"{prompt} (y/n): ")
            answer = self._read_line().lower()
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._write("Invalid input. Please enter 'y' or 'n'.\n")

    # -- commands ---------------------------------------------------------

    def display_menu(self) -> None:
        """Print the list of commands."""
        self._write(_MENU)

    def process_command(self, command: str) -> None:
        """Run one command; names are matched case-insensitively."""
        handler = self._commands.get(command.lower())
        if handler is None:
            self._write(
                f"Unknown command: '{command}'. Type 'help' for a list of commands.\n"
            )
            return
        try:
            handler()
        except IndexError as exc:
            self._write(f"Invalid index: {exc}.\n")
        except SimulationError as exc:
            self._write(f"Simulation failed: {exc}.\n")

    def _add_component(self) -> None:
        self._write("\n--- Add Component ---\n")
        type_idx = self._ask_int("Enter component type index: ")
        self.simulator.add_component(type_idx)

    def _connect_pins(self) -> None:
        self._write("\n--- Connect Pins ---\n")
        self.list_current_components()
        self._write("\n--- Source Component (Output Pin) ---\n")
        source_comp = self._ask_int("Enter index of source component: ")
        source_pin = self._ask_int("Enter output pin index of source component: ")
        self._write("\n--- Target Component (Input Pin) ---\n")
        target_comp = self._ask_int("Enter index of target component: ")
        target_pin = self._ask_int("Enter input pin index of target component: ")
        self.simulator.connect(target_comp, target_pin, source_comp, source_pin)

    def _disconnect_pins(self) -> None:
        self._write("\n--- Disconnect Pin ---\n")
        self.list_current_components()
        target_comp = self._ask_int(
            "Enter index of component to disconnect input from: "
        )
        target_pin = self._ask_int("Enter input pin index to disconnect: ")
        self.simulator.disconnect(target_comp, target_pin)

    def _set_switch_value(self) -> None:
        self._write("\n--- Set Binary Switch Value ---\n")
        self.list_current_components()
        comp_idx = self._ask_int("Enter index of Binary Switch: ")
        components = self.simulator.components
        if not 0 <= comp_idx < len(components):
            self._write("Invalid component index.\n")
            return
        switch = components[comp_idx]
        if not isinstance(switch, BinarySwitch):
            self._write(f"Component at index {comp_idx} is not a Binary Switch.\n")
            return
        answer = self._ask_string("Enter value (0 or 1): ")
        levels = {"0": LogicValue.ZERO, "1": LogicValue.ONE}
        if answer in levels:
            switch.output_pins[0].value = levels[answer]
            self._write(f"Switch {switch.circuit_id} set to {answer}.\n")
        else:
            self._write("Invalid value. Please enter '0' or '1'.\n")
        self.simulator.resolve_output()

    def _get_probe_value(self) -> None:
        self._write("\n--- Get Binary Probe Value ---\n")
        self.list_current_components()
        comp_idx = self._ask_int("Enter index of Binary Probe: ")
        components = self.simulator.components
        if not 0 <= comp_idx < len(components):
            self._write("Invalid component index.\n")
            return
        probe = components[comp_idx]
        if not isinstance(probe, BinaryProbe):
            self._write(f"Component at index {comp_idx} is not a Binary Probe.\n")
            return
        self._write(
            f"Probe {probe.circuit_id} value: {logic_value_to_string(probe.value)}\n"
        )

    def _run_simulation(self) -> None:
        self._write("\n--- Running Simulation ---\n")
        self.simulator.map_components()
        self.simulator.resolve_output()
        self._write("Simulation complete. Check probe values.\n")

    def list_available_components(self) -> None:
        """Print the component types that can be added, with their indices."""
        self._write(_AVAILABLE)

    def list_current_components(self) -> None:
        """Print a table of the components placed so far."""
        self._write("\n--- Current Components in Simulation ---\n")
        components = self.simulator.components
        if not components:
            self._write("No components currently in simulation.\n")
            return
        widths = (5, 20, 15, 10, 10)

        def row(cells: List[str]) -> str:
            return "".join(cell.ljust(w) for cell, w in zip(cells, widths)) + "\n"

        self._write(row(["Idx", "Type", "ID", "Inputs", "Outputs"]))
        self._write(_RULE)
        for i, comp in enumerate(components):
            self._write(
                row(
                    [
                        str(i),
                        comp.name,
                        str(comp.circuit_id),
                        str(comp.num_input_pins),
                        str(comp.num_output_pins),
                    ]
                )
            )
        self._write(_RULE)

    def run(self) -> None:
        """Read and execute commands until ``exit`` or end of input."""
        self._write("\n--- Digital Circuit Simulator CLI ---\n")
        self._write("Type 'help' for commands.\n")
        while True:
            self._write("\n> ")
            try:
                command = self._read_line()
                if command == "exit":
                    self._write("Initiating exit...\n")
                    break
                self.process_command(command)
            except EOFError:
                self._write("\n")
                break
        self._write("Exiting CLI. Goodbye!\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Start the interactive simulator shell."""
    parser = argparse.ArgumentParser(
        prog="logicsim", description="Interactive digital circuit simulator."
    )
    parser.parse_args(argv)
    Interface().run()
    return 0