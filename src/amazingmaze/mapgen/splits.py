# src/amazingmaze/mapgen/splits.py
# Split columns, their barrier + wire runs, and the sealed boundary rows.

from typing import Iterable, List

from ..config import CONFIG, GenerationConfig
from ..grid import Cell, LayerGrid
from ..rng import JavaRandom, random_int
from ..tiles import BARRIER, VERTICAL_UNKNOWN


def wire_locations(width: int, config: GenerationConfig = CONFIG) -> List[int]:
    """Split columns: start_distance, then every wire_distance, width // wire_distance of them."""
    return [config.start_distance + i * config.wire_distance for i in range(width // config.wire_distance)]


def top_boundary_row(height: int, config: GenerationConfig = CONFIG) -> int:
    return height - config.gate_space - 1


def bottom_boundary_row(config: GenerationConfig = CONFIG) -> int:
    return config.gate_space


def draw_barrier_row(rng: JavaRandom, height: int, config: GenerationConfig = CONFIG) -> int:
    # Clamps to height - band when the map is too short for the safety bands.
    return random_int(rng, config.band, height - config.band)


def place_split(
    objects: LayerGrid,
    wires: LayerGrid,
    col: int,
    barrier_row: int,
    upper_output: bool,
    config: GenerationConfig = CONFIG,
) -> None:
    """
    Barrier at (col, barrier_row); unknown vertical wires below it tagged
    `not upper_output` down to the bottom boundary row, and above it tagged
    `upper_output` up to the top boundary row.
    """
    objects.set(col, barrier_row, Cell(BARRIER))
    for r in range(barrier_row - 1, bottom_boundary_row(config) - 1, -1):
        wires.set(col, r, Cell.wire(VERTICAL_UNKNOWN, not upper_output))
    for r in range(barrier_row + 1, top_boundary_row(wires.height, config) + 1):
        wires.set(col, r, Cell.wire(VERTICAL_UNKNOWN, upper_output))


def seal_boundaries(objects: LayerGrid, splits: Iterable[int], config: GenerationConfig = CONFIG) -> None:
    """Barriers on both boundary rows of every column that is not a split."""
    split_set = set(splits)
    low = bottom_boundary_row(config)
    high = top_boundary_row(objects.height, config)
    for c in range(objects.width):
        if c in split_set:
            continue
        objects.set(c, low, Cell(BARRIER))
        objects.set(c, high, Cell(BARRIER))
