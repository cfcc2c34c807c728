# src/amazingmaze/mapgen/generator.py
# Maze map generator: gate splits, barriers, wires and power-ups over four layers.

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..circuit import Circuit
from ..config import CONFIG, GenerationConfig
from ..grid import (
    BACKGROUND_LAYER, ITEM_LAYER, LAYER_NAMES, OBJECT_LAYER, WIRE_LAYER,
    LayerGrid,
)
from ..rng import JavaRandom
from ..tiles import BACKGROUND, TileRegistry
from .placement import XY, place_items, place_lower_circuit, place_upper_circuit
from .splits import draw_barrier_row, place_split, seal_boundaries, wire_locations

logger = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 16


@dataclass
class GeneratedMap:
    seed: int
    width: int
    height: int
    tile_size: int
    layers: Dict[str, LayerGrid]
    splits: List[int] = field(default_factory=list)
    # One entry per gate that landed on the grid, upper then lower for each split.
    gate_locations: List[XY] = field(default_factory=list)
    # Intended (upper, lower) gate positions per split, on or off the grid.
    circuit_locations: List[Tuple[XY, XY]] = field(default_factory=list)
    # Exactly one per split, in split order.
    live_gates: List[Circuit] = field(default_factory=list)
    circuits: List[Tuple[Circuit, Circuit]] = field(default_factory=list)
    barrier_rows: Dict[int, int] = field(default_factory=dict)
    items: List[XY] = field(default_factory=list)

    def layer(self, name: str) -> LayerGrid:
        try:
            return self.layers[name]
        except KeyError:
            raise KeyError(f"no layer named {name!r}; expected one of {LAYER_NAMES}") from None

    def is_powered(self, col: int, row: int) -> Optional[bool]:
        """Power flag of the wire at (col, row), or None if there is no wire."""
        cell = self.layers[WIRE_LAYER].get(col, row)
        return None if cell is None else cell.powered

    def upper_is_live(self, index: int) -> bool:
        upper, _ = self.circuits[index]
        return self.live_gates[index] is upper

    def live_gate_location(self, index: int) -> XY:
        upper, lower = self.circuit_locations[index]
        return upper if self.upper_is_live(index) else lower

    def as_matrices(self, empty: int = -1) -> Dict[str, List[List[int]]]:
        return {name: g.as_matrix(empty) for name, g in self.layers.items()}


class MapGenerator:
    """
    Generates maps from one seeded random stream. Draw order is fixed, so the
    same (seed, width, height) always yields the same map. Not safe to share
    between threads; give each concurrent generation its own instance.
    """

    def __init__(
        self,
        seed: int,
        width: int,
        height: int,
        tile_size: int = DEFAULT_TILE_SIZE,
        registry: Optional[TileRegistry] = None,
        config: GenerationConfig = CONFIG,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"map size must be positive, got {width}x{height}")
        if tile_size <= 0:
            raise ValueError("tile_size must be positive")
        self.seed = seed
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.registry = registry
        self.config = config
        self.random = JavaRandom.from_seed(seed)
        self._missing: set = set()

    def generate_map(self) -> GeneratedMap:
        cfg = self.config
        w, h = self.width, self.height
        background = LayerGrid.filled(BACKGROUND_LAYER, w, h, BACKGROUND)
        objects = LayerGrid(OBJECT_LAYER, w, h)
        wires = LayerGrid(WIRE_LAYER, w, h)
        items = LayerGrid(ITEM_LAYER, w, h)

        if h < 2 * cfg.band + 1:
            logger.warning(
                "height %d leaves no room between the %d-row safety bands; barrier and item rows will clamp "
                "and anything clamped off the grid is left out of the map",
                h, cfg.band,
            )

        splits = wire_locations(w, cfg)
        out = GeneratedMap(
            seed=self.seed, width=w, height=h, tile_size=self.tile_size,
            layers={
                BACKGROUND_LAYER: background,
                OBJECT_LAYER: objects,
                WIRE_LAYER: wires,
                ITEM_LAYER: items,
            },
            splits=splits,
        )

        for col in splits:
            upper_output = self.random.next_boolean()
            upper = Circuit.generate(upper_output, self.random)
            lower = Circuit.generate(not upper_output, self.random)
            out.circuits.append((upper, lower))
            out.live_gates.append(upper if upper.output else lower)

            high, low = (col, h - cfg.gate_space), (col, cfg.gate_space - 1)
            out.circuit_locations.append((high, low))
            for placed in (place_upper_circuit(objects, upper, high), place_lower_circuit(objects, lower, low)):
                if placed is not None:
                    out.gate_locations.append(placed)

            barrier_row = draw_barrier_row(self.random, h, cfg)
            if objects.in_bounds(col, barrier_row):
                out.barrier_rows[col] = barrier_row
            place_split(objects, wires, col, barrier_row, upper_output, cfg)
            logger.debug(
                "split col=%d upper=%s(%d,%d) lower=%s(%d,%d) barrier=%d live=%s",
                col, upper.gate.name, upper.input_a, upper.input_b,
                lower.gate.name, lower.input_a, lower.input_b,
                barrier_row, "upper" if upper.output else "lower",
            )

        seal_boundaries(objects, splits, cfg)
        out.items = place_items(items, self.random, splits, cfg)

        if self.registry is not None:
            self._check_registry(out)
        logger.info(
            "generated %dx%d map seed=%d: %d splits, %d items",
            w, h, self.seed, len(splits), len(out.items),
        )
        return out

    def _check_registry(self, m: GeneratedMap) -> None:
        seen = {cell.tile_id for g in m.layers.values() for _, _, cell in g.occupied()}
        for tile_id in sorted(seen - self._missing):
            if not self.registry.has_tile(tile_id):
                self._missing.add(tile_id)
                logger.warning("tile id %d has no registered tile", tile_id)


def generate_map(
    seed: int,
    width: int,
    height: int,
    tile_size: int = DEFAULT_TILE_SIZE,
    registry: Optional[TileRegistry] = None,
    config: GenerationConfig = CONFIG,
) -> GeneratedMap:
    return MapGenerator(seed, width, height, tile_size, registry, config).generate_map()
