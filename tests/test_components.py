import itertools

import pytest

from logicsim.components import (
    AND2,
    NOT,
    OR2,
    BinaryProbe,
    BinarySwitch,
    Component,
    LogicGate,
    Wire,
)
from logicsim.logic import LogicValue
from logicsim.pins import OutputPin

Z, O, X = LogicValue.ZERO, LogicValue.ONE, LogicValue.X


def _drive(gate, *values):
    sources = [OutputPin(value=v) for v in values]
    for i, src in enumerate(sources):
        gate.connect_input_pin(i, src)
    gate.resolve_output()
    return gate.value


def _and_ref(a, b):
    if Z in (a, b):
        return Z
    if X in (a, b):
        return X
    return O


@pytest.mark.parametrize("a, b", list(itertools.product([Z, O, X], repeat=2)))
def test_and_truth_table(a, b):
    result = _drive(AND2(), a, b)
    # first ZERO or X encountered wins, scanning left to right
    if a in (Z, X):
        assert result is a
    elif b in (Z, X):
        assert result is b
    else:
        assert result is O


def test_and_both_high():
    assert _drive(AND2(), O, O) is O


def test_and_any_low_after_high():
    assert _drive(AND2(), O, Z) is Z


@pytest.mark.parametrize("a, b", list(itertools.product([Z, O, X], repeat=2)))
def test_or_truth_table(a, b):
    result = _drive(OR2(), a, b)
    if O in (a, b):
        assert result is O
    elif X in (a, b):
        assert result is X
    else:
        assert result is Z


@pytest.mark.parametrize("value, expected", [(Z, O), (O, Z), (X, X)])
def test_not(value, expected):
    assert _drive(NOT(), value) is expected


def test_not_has_two_input_pins_but_uses_first():
    gate = NOT()
    assert gate.num_input_pins == 2
    assert gate.input_pin(1) is gate.input_pins[0]


def test_unconnected_gate_gives_x():
    for gate in (AND2(), OR2(), NOT()):
        gate.resolve_output()
        assert gate.value is X


def test_gate_output_pin_ignores_index():
    gate = AND2()
    assert gate.output_pin(5) is gate.output_pins[0]


def test_gate_input_pin_by_index():
    gate = OR2()
    assert gate.input_pin(1) is gate.input_pins[1]
    with pytest.raises(IndexError):
        gate.input_pin(2)


def test_names():
    assert AND2().name == "2-AND"
    assert OR2().name == "2-OR"
    assert NOT().name == "NOT"
    assert BinarySwitch().name == "Binary Switch"
    assert BinaryProbe().name == "Binary Probe"
    assert Wire().name == "Wire"


@pytest.mark.parametrize(
    "cls, n_in, n_out",
    [(AND2, 2, 1), (OR2, 2, 1), (NOT, 2, 1), (BinarySwitch, 0, 1),
     (BinaryProbe, 1, 0), (Wire, 1, 1)],
)
def test_pin_counts(cls, n_in, n_out):
    comp = cls()
    assert (comp.num_input_pins, comp.num_output_pins) == (n_in, n_out)


def test_pins_owned_by_component():
    gate = AND2()
    assert all(pin.owner is gate for pin in gate.input_pins)
    assert all(pin.owner is gate for pin in gate.output_pins)


def test_circuit_id_and_reset():
    comp = Wire()
    assert comp.circuit_id == -1
    comp.circuit_id = 3
    comp.reset_id()
    assert comp.circuit_id == -1


def test_clone_is_fresh_instance_of_same_type():
    gate = AND2()
    gate.connect_input_pin(0, OutputPin(value=O))
    copy = gate.clone()
    assert type(copy) is AND2
    assert copy is not gate
    assert copy.input_pins[0].is_connected is False


def test_abstract_classes_not_instantiable():
    with pytest.raises(TypeError):
        Component(1, 1, "x")
    with pytest.raises(TypeError):
        LogicGate(1, 1, "x")


def test_disconnect_input_pin():
    gate = OR2()
    src = OutputPin(value=O)
    gate.connect_input_pin(0, src)
    gate.disconnect_input_pin(0)
    assert src.connection is None
    gate.resolve_output()
    assert gate.value is X


def test_switch_starts_low_and_toggles():
    sw = BinarySwitch()
    assert sw.value is Z
    sw.toggle()
    assert sw.value is O
    sw.toggle()
    assert sw.value is Z


def test_switch_has_no_inputs():
    sw = BinarySwitch()
    sw.connect_input_pin(0, OutputPin(value=O))
    sw.disconnect_input_pin(0)
    assert sw.input_pin(0) is None
    assert sw.num_input_pins == 0
    assert sw.output_pin(0) is sw.output_pins[0]


def test_switch_drives_gate():
    sw = BinarySwitch()
    gate = NOT()
    gate.connect_input_pin(0, sw.output_pin(0))
    gate.resolve_output()
    assert gate.value is O
    sw.toggle()
    gate.resolve_output()
    assert gate.value is Z


def test_probe_reads_input():
    probe = BinaryProbe()
    assert probe.value is X
    src = OutputPin(value=O)
    probe.connect_input_pin(7, src)
    assert probe.value is O
    assert probe.input_pin(3) is probe.input_pins[0]
    assert probe.output_pin(0) is None
    probe.disconnect_input_pin(0)
    assert probe.value is X


def test_wire_copies_input_to_all_outputs():
    wire = Wire()
    wire.add_output_pin()
    src = OutputPin(value=O)
    wire.connect_input_pin(0, src)
    wire.resolve_output()
    assert [p.value for p in wire.output_pins] == [O, O]


def test_wire_output_pin_grows_at_next_index():
    wire = Wire()
    first = wire.output_pin(0)
    second = wire.output_pin(1)
    assert wire.num_output_pins == 2
    assert first is not second
    assert second.owner is wire
    with pytest.raises(IndexError):
        wire.output_pin(5)


def test_wire_remove_output_pin():
    wire = Wire()
    extra = wire.add_output_pin()
    wire.remove_output_pin(extra)
    assert extra not in wire.output_pins
    assert wire.num_output_pins == 1
    wire.remove_output_pin(OutputPin())
    assert wire.num_output_pins == 1


def test_wire_input_pin_ignores_index():
    wire = Wire()
    assert wire.input_pin(4) is wire.input_pins[0]


def test_chain_switch_wire_and_probe():
    sw = BinarySwitch()
    wire = Wire()
    probe = BinaryProbe()
    wire.connect_input_pin(0, sw.output_pin(0))
    probe.connect_input_pin(0, wire.output_pin(0))
    sw.toggle()
    wire.resolve_output()
    assert probe.value is O
    assert _and_ref(probe.value, O) is O