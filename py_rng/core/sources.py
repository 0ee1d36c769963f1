"""
Reference stateful generators.

All of them keep their state in a single unsigned 64-bit value, or pack it
there, so they satisfy the StatefulSource contract exactly. Python ints are
unbounded, so every step is masked back to the generator's word size.

Seeds may be ints (reduced modulo 2**64), strings (hashed) or omitted (drawn
from os.urandom).
"""

from typing import Optional

from .bit_source import MASK32, MASK64, validate_bits
from .seeding import Seed, coerce_seed
from .stateful_source import StatefulSource, to_u64


def _rotl64(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def _rotl32(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & MASK32


class LinnormSource(StatefulSource):
    """64-bit LCG state with an xorshift-multiply output mix.

    Every 64-bit state is valid, zero included; the period is 2**64.
    ``next_int`` returns the low 32 bits of the mixed 64-bit output.
    """

    MULTIPLIER = 0x369DEA0F31A53F85
    MIX = 0xAEF17502108EF2D9

    def __init__(self, seed: Optional[Seed] = None):
        self._state = coerce_seed(seed)

    def next_long(self) -> int:
        z = self._state = (self._state * self.MULTIPLIER + 1) & MASK64
        z = ((z ^ z >> 23 ^ z >> 47) * self.MIX) & MASK64
        return z ^ z >> 25

    def next_int(self) -> int:
        return self.next_long() & MASK32

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = to_u64(state)

    def copy(self) -> "LinnormSource":
        return type(self)(self._state)


class DiverSource(StatefulSource):
    """Xor-multiply state update with a rotate-multiply output mix.

    The state update is a bijection on 64-bit values, so every state is valid
    and the output is 1-dimensionally equidistributed.
    """

    XOR = 0x6C8E9CF570932BD5
    MULTIPLIER = 0xC6BC279692B5CC83
    MIX = 0xDB4F0B9175AE2165

    def __init__(self, seed: Optional[Seed] = None):
        self._state = coerce_seed(seed)

    def next_long(self) -> int:
        z = self._state = ((self._state ^ self.XOR) * self.MULTIPLIER) & MASK64
        z = (_rotl64(z, 27) * self.MIX) & MASK64
        return z ^ z >> 25

    def next_int(self) -> int:
        return self.next_long() & MASK32

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = to_u64(state)

    def copy(self) -> "DiverSource":
        return type(self)(self._state)


class PermutedSource(StatefulSource):
    """PCG-style generator: a 64-bit LCG whose output is a permutation of the
    state before the step.

    The constructor scrambles the seed once, so ``PermutedSource(s)`` and
    ``set_state(s)`` give different streams; only ``set_state`` takes a raw
    state. ``next_int`` is the high word of the permuted output and
    ``next(bits)`` keeps the low bits of that word.
    """

    MULTIPLIER = 6364136223846793005
    INCREMENT = 1442695040888963407
    PERMUTE_MIX = 0xAEF17502108EF2D9

    def __init__(self, seed: Optional[Seed] = None):
        seed = coerce_seed(seed)
        self._state = ((seed + self.INCREMENT) * self.MULTIPLIER + self.INCREMENT) & MASK64

    @classmethod
    def _permute(cls, p: int) -> int:
        p ^= p >> (5 + ((p >> 59) & 31))
        p = (p * cls.PERMUTE_MIX) & MASK64
        return p ^ (p >> 43)

    def next_long(self) -> int:
        old = self._state
        self._state = (old * self.MULTIPLIER + self.INCREMENT) & MASK64
        return self._permute(old)

    def next_int(self) -> int:
        return self.next_long() >> 32

    def next(self, bits: int) -> int:
        bits = validate_bits(bits)
        return self.next_int() & ((1 << bits) - 1)

    def get_state(self) -> int:
        return self._state

    def set_state(self, state: int) -> None:
        self._state = to_u64(state)


class Lathe32Source(StatefulSource):
    """Two-word xoroshiro-style generator working only with 32-bit math.

    State packing: word A lives in the low 32 bits of the 64-bit state and
    word B in the high 32 bits. Both words zero is a dead state, so
    ``set_state(0)`` stores word A as 1 and ``get_state()`` then reads 1.
    Period is 2**64 - 1.
    """

    def __init__(self, seed: Optional[Seed] = None):
        self._a = 1
        self._b = 0
        self.set_state(coerce_seed(seed))

    def next_int(self) -> int:
        s0 = self._a
        s1 = self._b
        result = (s0 + s1) & MASK32
        s1 ^= s0
        self._a = _rotl32(s0, 13) ^ s1 ^ ((s1 << 5) & MASK32)
        self._b = _rotl32(s1, 28)
        return (_rotl32(result, 10) + s0) & MASK32

    def get_state(self) -> int:
        return self._a | (self._b << 32)

    def set_state(self, state: int) -> None:
        state = to_u64(state)
        self._a = 1 if state == 0 else state & MASK32
        self._b = state >> 32
