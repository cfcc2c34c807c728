# src/amazingmaze/mapgen/placement.py
from typing import Iterable, List, Optional, Tuple

from ..circuit import Circuit
from ..config import CONFIG, GenerationConfig
from ..grid import Cell, LayerGrid
from ..rng import JavaRandom, random_int
from ..tiles import (
    CHEESE, Direction, Facing, FishColour, Power, WireShape,
    fish_id, gate_id, power_for, wire_id,
)

XY = Tuple[int, int]

# Upper bounds of the colour bands over one next_double() draw.
FISH_BANDS = (
    (0.2, FishColour.BLUE),
    (0.4, FishColour.PURPLE),
    (0.6, FishColour.GREEN),
    (0.8, FishColour.RED),
)


def _place_inputs(
    layer: LayerGrid,
    circuit: Circuit,
    col: int,
    row: int,
    stub_dy: int,
    corner_a: Direction,
    corner_b: Direction,
) -> None:
    # Input A enters from the left, B from the right: a turn beside the gate
    # and a vertical stub one row further out.
    for dx, bit, corner in ((-1, circuit.input_a, corner_a), (1, circuit.input_b, corner_b)):
        power = power_for(bit)
        layer.set(col + dx, row + stub_dy, Cell(wire_id(WireShape.VERTICAL, power)))
        layer.set(col + dx, row, Cell(wire_id(WireShape.TURN, power, corner)))


def place_upper_circuit(layer: LayerGrid, circuit: Circuit, location: XY) -> Optional[XY]:
    """
    Gate at the top boundary facing down, inputs arriving from above.
    Returns the gate location, or None if the gate fell off the grid.
    """
    col, row = location
    landed = layer.set(col, row, Cell(gate_id(circuit.gate, Power.UNKNOWN, Facing.DOWN)))
    _place_inputs(layer, circuit, col, row, 1, Direction.UP_RIGHT, Direction.UP_LEFT)
    return location if landed else None


def place_lower_circuit(layer: LayerGrid, circuit: Circuit, location: XY) -> Optional[XY]:
    """Gate at the bottom boundary facing up, inputs arriving from below."""
    col, row = location
    landed = layer.set(col, row, Cell(gate_id(circuit.gate, Power.UNKNOWN, Facing.UP)))
    _place_inputs(layer, circuit, col, row, -1, Direction.DOWN_RIGHT, Direction.DOWN_LEFT)
    return location if landed else None


def fish_colour(r: float) -> FishColour:
    for upper, colour in FISH_BANDS:
        if r <= upper:
            return colour
    return FishColour.ORANGE


def _item_row(rng: JavaRandom, height: int, config: GenerationConfig) -> int:
    return random_int(rng, config.gate_space + 1, height - config.gate_space - 1)


def place_fish(layer: LayerGrid, rng: JavaRandom, col: int, config: GenerationConfig = CONFIG) -> Optional[XY]:
    # Colour is drawn before the row.
    colour = fish_colour(rng.next_double())
    row = _item_row(rng, layer.height, config)
    if not layer.set(col, row, Cell.fish(fish_id(colour), colour)):
        return None
    return (col, row)


def place_cheese(layer: LayerGrid, rng: JavaRandom, col: int, config: GenerationConfig = CONFIG) -> Optional[XY]:
    row = _item_row(rng, layer.height, config)
    if not layer.set(col, row, Cell(CHEESE)):
        return None
    return (col, row)


def place_items(
    layer: LayerGrid,
    rng: JavaRandom,
    splits: Iterable[int],
    config: GenerationConfig = CONFIG,
) -> List[XY]:
    """
    Walk columns left to right, skipping splits. Each column rolls for a fish,
    and only if that fails rolls again for cheese. A placement consumes the
    next column as well, so two items are never side by side. Only items
    that land on the grid are returned; a clamped off-grid row still
    consumes its draws and its column.
    """
    split_set = set(splits)
    placed: List[XY] = []
    c = config.first_item_column
    while c < layer.width:
        if c not in split_set:
            if rng.next_double() <= config.fish_chance:
                pos = place_fish(layer, rng, c, config)
            elif rng.next_double() <= config.cheese_chance:
                pos = place_cheese(layer, rng, c, config)
            else:
                c += 1
                continue
            if pos is not None:
                placed.append(pos)
            c += 1
        c += 1
    return placed
