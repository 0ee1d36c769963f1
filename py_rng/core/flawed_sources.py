"""
Generators with intentionally poor statistical quality.

Useful for stylised procedural content and as negative controls when
comparing generators. Each composes FlawMarker.
"""

from typing import Optional

from .bit_source import MASK32, MASK64, validate_bits
from .flaws import FlawMarker
from .seeding import Seed, coerce_seed
from .stateful_source import StatefulSource, to_u64


class CounterSource(StatefulSource, FlawMarker):
    """A Weyl counter that emits its own state.

    Each draw adds the golden-ratio increment and returns the high 32 bits of
    the counter, so consecutive outputs differ by an almost constant amount.
    Single values look uniform; pairs lie on a handful of lines.
    """

    INCREMENT = 0x9E3779B97F4A7C15

    def __init__(self, seed: Optional[Seed] = None):
        self._state = coerce_seed(seed)

    def next_long(self) -> int:
        self._state = (self._state + self.INCREMENT) & MASK64
        return self._state

    def next_int(self) -> int:
        return self.next_long() >> 32

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = to_u64(state)


class LowBitsLCGSource(StatefulSource, FlawMarker):
    """A power-of-two modulus LCG that hands out its low bits.

    Bit k of the output has period 2**(k+1): ``next(1)`` strictly alternates
    between 0 and 1.
    """

    MULTIPLIER = 0x5851F42D4C957F2D
    INCREMENT = 1

    def __init__(self, seed: Optional[Seed] = None):
        self._state = coerce_seed(seed)

    def next_long(self) -> int:
        self._state = (self._state * self.MULTIPLIER + self.INCREMENT) & MASK64
        return self._state

    def next_int(self) -> int:
        return self.next_long() & MASK32

    def next(self, bits: int) -> int:
        bits = validate_bits(bits)
        return self.next_int() & ((1 << bits) - 1)

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = to_u64(state)
