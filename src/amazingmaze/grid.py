# src/amazingmaze/grid.py
# Layer storage. Coordinates are (col, row) with row 0 at the bottom.

from dataclasses import dataclass, field
from typing import List, Optional

from .tiles import FishColour

BACKGROUND_LAYER = "background"
OBJECT_LAYER = "objects"
WIRE_LAYER = "wires"
ITEM_LAYER = "items"
LAYER_NAMES = (BACKGROUND_LAYER, OBJECT_LAYER, WIRE_LAYER, ITEM_LAYER)


@dataclass(frozen=True)
class Cell:
    """
    One tile on one layer. Wire cells set powered, fish cells set colour;
    every other cell leaves both as None.
    """
    tile_id: int
    powered: Optional[bool] = None
    colour: Optional[FishColour] = None

    @classmethod
    def wire(cls, tile_id: int, powered: bool) -> "Cell":
        return cls(tile_id, powered=powered)

    @classmethod
    def fish(cls, tile_id: int, colour: FishColour) -> "Cell":
        return cls(tile_id, colour=colour)

    @property
    def is_wire(self) -> bool:
        return self.powered is not None

    @property
    def is_fish(self) -> bool:
        return self.colour is not None


@dataclass
class LayerGrid:
    name: str
    width: int
    height: int
    buf: List[Optional[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.buf:
            self.buf = [None] * (self.width * self.height)

    @classmethod
    def filled(cls, name: str, width: int, height: int, tile_id: int) -> "LayerGrid":
        g = cls(name, width, height)
        g.buf = [Cell(tile_id)] * (width * height)
        return g

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def idx(self, col: int, row: int) -> int:
        if not self.in_bounds(col, row):
            raise IndexError(f"({col}, {row}) outside {self.width}x{self.height} layer {self.name!r}")
        return row * self.width + col

    def get(self, col: int, row: int) -> Optional[Cell]:
        return self.buf[self.idx(col, row)]

    def set(self, col: int, row: int, cell: Cell) -> bool:
        # Off-grid writes are dropped; the caller learns whether it landed.
        if not self.in_bounds(col, row):
            return False
        self.buf[self.idx(col, row)] = cell
        return True

    def tile_id(self, col: int, row: int) -> Optional[int]:
        cell = self.get(col, row)
        return None if cell is None else cell.tile_id

    def occupied(self):
        """Yield (col, row, cell) for every non-empty cell, bottom row first."""
        for i, cell in enumerate(self.buf):
            if cell is not None:
                yield i % self.width, i // self.width, cell

    def as_matrix(self, empty: int = -1) -> List[List[int]]:
        """Row-major tile ids, top row first, with empty cells as `empty`."""
        out = []
        for row in reversed(range(self.height)):
            out.append([
                empty if c is None else c.tile_id
                for c in self.buf[row * self.width:(row + 1) * self.width]
            ])
        return out
