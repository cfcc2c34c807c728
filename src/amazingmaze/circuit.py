# src/amazingmaze/circuit.py
# Two-input logic gates. The evaluator must cover every Gate member.

from dataclasses import dataclass
from enum import IntEnum

from .rng import JavaRandom


class Gate(IntEnum):
    # Values double as the gate-kind field of gate tile ids.
    AND = 0
    NAND = 1
    OR = 2
    NOR = 3
    XOR = 4
    XNOR = 5


def evaluate_gate(gate: Gate, a: bool, b: bool) -> bool:
    if gate is Gate.AND:
        return a and b
    if gate is Gate.NAND:
        return not (a and b)
    if gate is Gate.OR:
        return a or b
    if gate is Gate.NOR:
        return not (a or b)
    if gate is Gate.XOR:
        return a != b
    if gate is Gate.XNOR:
        return a == b
    raise AssertionError(f"unhandled gate kind {gate!r}")


@dataclass(frozen=True)
class Circuit:
    gate: Gate
    input_a: bool
    input_b: bool

    @classmethod
    def generate(cls, desired_output: bool, rng: JavaRandom) -> "Circuit":
        """
        Draw a gate kind and two input bits, redrawing all three until the
        gate evaluates to desired_output. Each draw consumes next_int(6)
        then two next_boolean() calls from rng.
        """
        kinds = list(Gate)
        while True:
            gate = kinds[rng.next_int(len(kinds))]
            a = rng.next_boolean()
            b = rng.next_boolean()
            if evaluate_gate(gate, a, b) == desired_output:
                return cls(gate, a, b)

    @property
    def output(self) -> bool:
        return evaluate_gate(self.gate, self.input_a, self.input_b)

    @property
    def gate_id(self) -> int:
        return int(self.gate)
