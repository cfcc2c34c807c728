# src/amazingmaze/tiles.py
"""
Tile id addressing.

Every drawable tile variant is a (category, fields...) tuple packed into one
integer. Each category owns a disjoint id range starting at its base; its
fields are packed low to high as fixed-width bit fields:

    category     base  fields (width in bits)
    background      0  -
    placeholder     1  -
    barrier         2  -
    wire          100  shape (2), power (2), direction (4)
    gate          400  kind (3), power (2), facing (1)
    power-up      500  kind (1), colour (3)

Trailing fields may be omitted and default to 0. Shape/direction and
kind/colour combinations are checked so that no two accepted tuples share
an id.
"""
from dataclasses import dataclass
from enum import IntEnum
from itertools import product
from typing import Any, Dict, Iterator, List, NamedTuple, Protocol, Tuple, Type

from .circuit import Gate


class Category(IntEnum):
    BACKGROUND = 0
    PLACEHOLDER = 1
    BARRIER = 2
    WIRE = 3
    GATE = 4
    POWERUP = 5


class WireShape(IntEnum):
    VERTICAL = 0
    TURN = 1
    T = 2
    CROSS = 3


class Power(IntEnum):
    ON = 0
    OFF = 1
    UNKNOWN = 2


class Direction(IntEnum):
    NONE = 0
    # Turn corners
    UP_LEFT = 1
    UP_RIGHT = 2
    DOWN_LEFT = 3
    DOWN_RIGHT = 4
    # T stems
    UP = 5
    DOWN = 6
    LEFT = 7
    RIGHT = 8


class Facing(IntEnum):
    UP = 0
    DOWN = 1


class PowerUp(IntEnum):
    FISH = 0
    CHEESE = 1


class FishColour(IntEnum):
    BLUE = 0
    PURPLE = 1
    GREEN = 2
    RED = 3
    ORANGE = 4


CORNERS = (Direction.UP_LEFT, Direction.UP_RIGHT, Direction.DOWN_LEFT, Direction.DOWN_RIGHT)
STEMS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    enum: Type[IntEnum]
    width: int


@dataclass(frozen=True)
class CategorySpec:
    base: int
    fields: Tuple[FieldSpec, ...] = ()

    @property
    def span(self) -> int:
        return 1 << sum(f.width for f in self.fields)


LAYOUT: Dict[Category, CategorySpec] = {
    Category.BACKGROUND: CategorySpec(0),
    Category.PLACEHOLDER: CategorySpec(1),
    Category.BARRIER: CategorySpec(2),
    Category.WIRE: CategorySpec(100, (
        FieldSpec("shape", WireShape, 2),
        FieldSpec("power", Power, 2),
        FieldSpec("direction", Direction, 4),
    )),
    Category.GATE: CategorySpec(400, (
        FieldSpec("kind", Gate, 3),
        FieldSpec("power", Power, 2),
        FieldSpec("facing", Facing, 1),
    )),
    Category.POWERUP: CategorySpec(500, (
        FieldSpec("kind", PowerUp, 1),
        FieldSpec("colour", FishColour, 3),
    )),
}


class TileKey(NamedTuple):
    category: Category
    fields: Tuple[int, ...]


def _check_combination(category: Category, fields: List[int]) -> None:
    if category is Category.WIRE:
        shape, _, direction = fields
        if shape == WireShape.TURN:
            ok = direction in CORNERS
        elif shape == WireShape.T:
            ok = direction in STEMS
        else:
            ok = direction == Direction.NONE
        if not ok:
            raise ValueError(f"direction {Direction(direction).name} not valid for {WireShape(shape).name} wire")
    elif category is Category.POWERUP:
        kind, colour = fields
        # Cheese carries no colour; colour 0 is reserved for it.
        if kind == PowerUp.CHEESE and colour != 0:
            raise ValueError("cheese takes no colour")


def _normalise(category: Category, fields: Tuple[int, ...]) -> List[int]:
    spec = LAYOUT[category]
    if len(fields) > len(spec.fields):
        raise ValueError(f"{category.name} takes at most {len(spec.fields)} fields, got {len(fields)}")
    out = [int(v) for v in fields] + [0] * (len(spec.fields) - len(fields))
    for fs, v in zip(spec.fields, out):
        if v not in {m.value for m in fs.enum}:
            raise ValueError(f"{category.name}.{fs.name}={v} out of range")
    if category is Category.POWERUP and out[0] == PowerUp.FISH and len(fields) < 2:
        raise ValueError("fish needs a colour")
    _check_combination(category, out)
    return out


def compute_id(category: Category, *fields: int) -> int:
    """Pack (category, fields...) into its tile id."""
    category = Category(category)
    spec = LAYOUT[category]
    values = _normalise(category, fields)
    packed, shift = 0, 0
    for fs, v in zip(spec.fields, values):
        packed |= v << shift
        shift += fs.width
    return spec.base + packed


def category_of(tile_id: int) -> Category:
    for cat, spec in LAYOUT.items():
        if spec.base <= tile_id < spec.base + spec.span:
            return cat
    raise ValueError(f"tile id {tile_id} is outside every category range")


def decode_id(tile_id: int) -> TileKey:
    """Unpack a tile id into its full-width TileKey; inverse of compute_id."""
    category = category_of(tile_id)
    spec = LAYOUT[category]
    packed = tile_id - spec.base
    values: List[int] = []
    for fs in spec.fields:
        raw = packed & ((1 << fs.width) - 1)
        packed >>= fs.width
        try:
            values.append(fs.enum(raw))
        except ValueError:
            raise ValueError(f"tile id {tile_id}: {category.name}.{fs.name}={raw} out of range") from None
    _check_combination(category, values)
    return TileKey(category, tuple(values))


def all_tile_keys() -> Iterator[TileKey]:
    """Every valid full-width key, in category then field order."""
    for category, spec in LAYOUT.items():
        for combo in product(*(list(fs.enum) for fs in spec.fields)):
            try:
                _check_combination(category, list(combo))
            except ValueError:
                continue
            yield TileKey(category, tuple(combo))


def wire_id(shape: WireShape, power: Power, direction: Direction = Direction.NONE) -> int:
    return compute_id(Category.WIRE, shape, power, direction)


def gate_id(gate: Gate, power: Power, facing: Facing) -> int:
    return compute_id(Category.GATE, gate, power, facing)


def fish_id(colour: FishColour) -> int:
    return compute_id(Category.POWERUP, PowerUp.FISH, colour)


def power_for(bit: bool) -> Power:
    return Power.ON if bit else Power.OFF


BACKGROUND = compute_id(Category.BACKGROUND)
PLACEHOLDER = compute_id(Category.PLACEHOLDER)
BARRIER = compute_id(Category.BARRIER)
VERTICAL_UNKNOWN = wire_id(WireShape.VERTICAL, Power.UNKNOWN)
CHEESE = compute_id(Category.POWERUP, PowerUp.CHEESE)


class TileRegistry(Protocol):
    """Lookup from tile id to a drawable tile, owned by the asset side."""

    def has_tile(self, tile_id: int) -> bool: ...

    def get(self, tile_id: int) -> Any: ...
