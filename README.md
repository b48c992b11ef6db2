# logicsim

logicsim is a small interactive simulator for digital logic circuits. You build
a circuit from switches, wires, gates and probes. You then run the simulation
and read the values at the probes.

Signals carry one of three values: `0`, `1` or `X` (unknown). An input pin
that is not connected reads as `X`.

## Installation

```
pip install .
```

## Usage

Start the interactive shell:

```
logicsim
```

At the `>` prompt, enter one of these commands. Case does not matter, except
for `exit`, which must be typed in lower case:

| Command        | Action                                              |
|----------------|-----------------------------------------------------|
| `add`          | Add a component of a given type index               |
| `connect`      | Connect an output pin to an input pin               |
| `disconnect`   | Disconnect an input pin                             |
| `set_switch`   | Set a Binary Switch to 0 or 1                       |
| `get_probe`    | Read the value of a Binary Probe                    |
| `simulate`     | Map the circuits and resolve all outputs            |
| `list_avail`   | List the component types you can add                |
| `list_current` | List the components in the simulation               |
| `help`         | Show the command menu                               |
| `exit`         | Leave the program                                   |

The shell also stops at the end of input.

The component types, by index:

```
0: Binary Probe
1: Binary Switch
2: Wire
3: AND2
4: OR2
5: NOT
```

### Example session

This session connects a switch to a NOT gate through a wire, and puts a probe
on the gate's output:

```
> add        (type 1: Binary Switch  -> index 0)
> add        (type 2: Wire           -> index 1)
> add        (type 5: NOT            -> index 2)
> add        (type 2: Wire           -> index 3)
> add        (type 0: Binary Probe   -> index 4)
> connect    source 0 pin 0 -> target 1 pin 0
> connect    source 1 pin 0 -> target 2 pin 0
> connect    source 2 pin 0 -> target 3 pin 0
> connect    source 3 pin 0 -> target 4 pin 0
> simulate
> get_probe  4
Probe 1 value: 1
```

A new switch drives `0`. Switches, wires, gates and probes report the number
of the circuit they belong to, and `-1` until `simulate` has been run.
`simulate` prints each circuit's layout, layer by layer, before it resolves
the outputs.

### Wiring rules

- An output pin drives one input pin. A wire can fan out: when you ask a wire
  for the output pin just after its last one, the wire adds a new pin.
- A NOT gate has two input pins, but only the first one takes part in the
  logic. Any input pin index you give a NOT gate selects that first pin.
- `simulate` follows the connections from every Binary Switch. Every pin it
  reaches must be connected. If one is not, the shell reports
  `Simulation failed: ...` and resolves nothing. An index that is out of range
  is reported as `Invalid index: ...`.

## Using it as a library

You can also use the building blocks from Python:

```python
from logicsim.components import AND2, BinarySwitch, BinaryProbe
from logicsim.logic import logic_value_to_string

a, b = BinarySwitch(), BinarySwitch()
gate = AND2()
probe = BinaryProbe()

gate.connect_input_pin(0, a.output_pin(0))
gate.connect_input_pin(1, b.output_pin(0))
probe.connect_input_pin(0, gate.output_pin(0))

a.toggle()
b.toggle()
gate.resolve_output()
print(logic_value_to_string(probe.value))  # 1
```

The package has these modules:

- `logicsim.logic`: the `LogicValue` enum (`ZERO`, `ONE`, `X`) and
  `logic_value_to_string`.
- `logicsim.pins`: the `OutputPin` and `InputPin` classes.
- `logicsim.components`: `AND2`, `OR2`, `NOT`, `BinarySwitch`, `BinaryProbe`
  and `Wire`, with their base classes `Component` and `LogicGate`.
- `logicsim.circuit`: `Circuit`, which holds one circuit's components and
  wires grouped by logic depth.
- `logicsim.simulation`: `Simulation`, which holds components that you address
  by index. Its `map_components()` method groups the components into circuits,
  and its `resolve_output()` method evaluates them layer by layer. Mapping
  raises `SimulationError` when it reaches a pin that is not connected.
- `logicsim.cli`: the `Interface` shell and the `main` entry point.

## What it does not do

The package does not save or load circuits. A circuit exists only for the
length of one shell session. There is no way to remove a component from the
shell. `Simulation.remove_component` and `Simulation.remove_component_at` are
available only from Python.

## Running the tests

```
pip install .[test]
pytest
```