# src/amazingmaze/rng.py
"""
Seeded random stream matching the 48-bit LCG the original maze factory was
seeded with, so a given 64-bit seed reproduces the same layouts draw for draw.
"""
from dataclasses import dataclass

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1
DOUBLE_UNIT = 1.0 / (1 << 53)


def scramble(seed: int) -> int:
    return (seed ^ MULTIPLIER) & MASK


def to_int32(v: int) -> int:
    """Interpret the low 32 bits of v as a signed 32-bit integer."""
    v &= 0xFFFFFFFF
    return v - (1 << 32) if v & 0x80000000 else v


def lcg_next(state: int) -> int:
    return (state * MULTIPLIER + ADDEND) & MASK


@dataclass
class JavaRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "JavaRandom":
        return cls(scramble(seed))

    def next_bits(self, bits: int) -> int:
        self.state = lcg_next(self.state)
        return to_int32(self.state >> (48 - bits))

    def next_boolean(self) -> bool:
        return self.next_bits(1) != 0

    def next_int(self, bound: int) -> int:
        """Uniform integer in [0, bound)."""
        if bound <= 0:
            raise ValueError("bound must be positive")
        if bound & -bound == bound:
            # Power of two: take the high bits directly.
            return (bound * self.next_bits(31)) >> 31
        while True:
            bits = self.next_bits(31)
            val = bits % bound
            # Reject the partial bucket at the top of the 31-bit range.
            if bits - val + (bound - 1) < (1 << 31):
                return val

    def next_double(self) -> float:
        return ((self.next_bits(26) << 27) + self.next_bits(27)) * DOUBLE_UNIT


def random_int(rng: JavaRandom, low: int, high: int) -> int:
    """
    Random integer in [low, high). When high <= low the range collapses and
    high itself is returned without consuming a draw.
    """
    if high <= low:
        return high
    return low + rng.next_int(high - low)
