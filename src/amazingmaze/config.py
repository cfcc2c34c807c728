# src/amazingmaze/config.py
from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationConfig:
    # Layout constants must match the original maze factory exactly.
    wire_distance: int = 5
    start_distance: int = 3
    gate_space: int = 2
    extra_room: int = 3

    # Power-up chances, tested with <= against a uniform [0, 1) draw.
    fish_chance: float = 0.25
    cheese_chance: float = 0.1
    first_item_column: int = 1

    def __post_init__(self) -> None:
        for name in ("wire_distance", "gate_space"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        for name in ("start_distance", "extra_room", "first_item_column"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        for name in ("fish_chance", "cheese_chance"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be within 0..1")

    @property
    def band(self) -> int:
        """Rows kept clear of barriers at each boundary (gates + turn wires)."""
        return self.gate_space + self.extra_room


# Global defaults (can be swapped by launcher)
CONFIG = GenerationConfig()
