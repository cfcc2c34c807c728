from itertools import product

import pytest

from amazingmaze.circuit import Circuit, Gate, evaluate_gate
from amazingmaze.rng import JavaRandom

TRUTH = {
    Gate.AND:  (False, False, False, True),
    Gate.NAND: (True, True, True, False),
    Gate.OR:   (False, True, True, True),
    Gate.NOR:  (True, False, False, False),
    Gate.XOR:  (False, True, True, False),
    Gate.XNOR: (True, False, False, True),
}

def test_truth_tables():
    assert set(TRUTH) == set(Gate)
    for gate, outs in TRUTH.items():
        for (a, b), want in zip(product((False, True), repeat=2), outs):
            assert evaluate_gate(gate, a, b) is want, f"{gate.name}({a}, {b})"

def test_unknown_gate_is_a_bug():
    with pytest.raises(AssertionError):
        evaluate_gate("MAYBE", True, True)

@pytest.mark.parametrize("desired", [True, False])
def test_generate_hits_desired_output(desired):
    rng = JavaRandom.from_seed(2017)
    for _ in range(100):
        c = Circuit.generate(desired, rng)
        assert c.output is desired
        assert c.output == evaluate_gate(c.gate, c.input_a, c.input_b)

def test_generate_is_deterministic():
    a = [Circuit.generate(i % 2 == 0, JavaRandom.from_seed(i)) for i in range(20)]
    b = [Circuit.generate(i % 2 == 0, JavaRandom.from_seed(i)) for i in range(20)]
    assert a == b

def test_generate_covers_every_kind():
    rng = JavaRandom.from_seed(5)
    kinds = {Circuit.generate(True, rng).gate for _ in range(300)}
    assert kinds == set(Gate)

def test_gate_id_is_enum_value():
    assert Circuit(Gate.XOR, True, False).gate_id == 4
