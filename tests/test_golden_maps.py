# tests/test_golden_maps.py
import os
from amazingmaze.circuit import Gate
from amazingmaze.grid import ITEM_LAYER, OBJECT_LAYER, WIRE_LAYER
from amazingmaze.mapgen.generator import generate_map
from amazingmaze.tiles import FishColour

GOLDEN_DIR = os.path.join(os.path.dirname(__file__), "..", "data", "golden_maps")

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return rows

# (seed, width, height) -> expected generation record.
# live: (gate, input_a, input_b, upper_is_live) per split.
GOLDENS = {
    (2017, 20, 20): {
        "splits": [3, 8, 13, 18],
        "barrier_rows": {3: 9, 8: 6, 13: 7, 18: 8},
        "live": [
            (Gate.XOR, True, False, True),
            (Gate.AND, True, True, True),
            (Gate.OR, True, True, True),
            (Gate.XOR, True, False, False),
        ],
        "items": [(2, 8), (7, 6), (9, 15), (11, 4), (17, 7)],
        "fish": [FishColour.ORANGE, FishColour.ORANGE, FishColour.RED, FishColour.RED, FishColour.GREEN],
    },
    (42, 25, 14): {
        "splits": [3, 8, 13, 18, 23],
        "barrier_rows": {3: 6, 8: 7, 13: 5, 18: 7, 23: 8},
        "live": [
            (Gate.OR, True, False, True),
            (Gate.NAND, False, False, False),
            (Gate.XOR, True, False, True),
            (Gate.XOR, True, False, False),
            (Gate.NAND, True, False, True),
        ],
        "items": [(1, 4), (7, 6), (12, 8), (24, 3)],
        "fish": [FishColour.PURPLE, FishColour.ORANGE, FishColour.RED, FishColour.GREEN],
    },
}

def test_golden_generation_records():
    for (seed, w, h), want in GOLDENS.items():
        m = generate_map(seed, w, h)
        tag = f"seed {seed} {w}x{h}"
        assert m.splits == want["splits"], tag
        assert m.barrier_rows == want["barrier_rows"], tag
        live = [(g.gate, g.input_a, g.input_b, m.upper_is_live(i)) for i, g in enumerate(m.live_gates)]
        assert live == want["live"], tag
        assert m.gate_locations == [p for c in want["splits"] for p in ((c, h - 2), (c, 1))], tag
        assert m.items == want["items"], tag
        items = m.layer(ITEM_LAYER)
        assert [items.get(c, r).colour for c, r in m.items] == want["fish"], tag

def test_golden_layers_match_tsv():
    for seed, w, h in GOLDENS:
        m = generate_map(seed, w, h)
        base = os.path.join(GOLDEN_DIR, f"{seed}_{w}x{h}")
        for name in (OBJECT_LAYER, WIRE_LAYER, ITEM_LAYER):
            want = read_tsv(os.path.join(base, f"{name}.tsv"))
            assert m.layer(name).as_matrix() == want, f"{name} mismatch for seed {seed} {w}x{h}"
