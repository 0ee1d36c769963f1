"""
Raw bit emission contract.

A BitSource hands out uniformly distributed integers of a requested width.
State handling, distribution samplers and the concrete generators are all
built on this single operation:

- ``next(bits)``: ``bits`` uniform low-order bits, higher bits zero
- ``next_int()``: a full unsigned 32-bit draw
- ``next_long()``: a full unsigned 64-bit draw

Every call advances the generator; no two logically distinct calls may be
served from a cached value.
"""

from abc import ABC, abstractmethod

from ..config import settings
from .errors import InvalidArgument

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

MIN_BITS = 1
MAX_BITS = 32


def validate_bits(bits: int) -> int:
    """Check a bit request against 1..32.

    Under the ``strict`` policy an out-of-range request raises
    ``InvalidArgument``; under ``clamp`` it is clamped into range. A request
    that is not an int (``bool`` included) always raises.
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidArgument(f"bits must be an int, got {type(bits).__name__}")
    if MIN_BITS <= bits <= MAX_BITS:
        return bits
    if settings.bits_policy == "clamp":
        return MIN_BITS if bits < MIN_BITS else MAX_BITS
    raise InvalidArgument(f"bits must be between {MIN_BITS} and {MAX_BITS}, got {bits}")


class BitSource(ABC):
    """Emits uniformly distributed integer bit chunks on demand.

    Subclasses implement ``next_int``. The default ``next`` keeps the high
    ``bits`` bits of a 32-bit draw; generators whose best bits are the low
    ones override it. 64-bit generators should override ``next_long`` so a
    64-bit draw costs one step instead of two.
    """

    @abstractmethod
    def next_int(self) -> int:
        """Return the next draw in [0, 2**32)."""

    def next(self, bits: int) -> int:
        """Return the next draw in [0, 2**bits), 1 <= bits <= 32.

        The width is checked before drawing, so a rejected request leaves the
        stream where it was.
        """
        bits = validate_bits(bits)
        return self.next_int() >> (MAX_BITS - bits)

    def next_long(self) -> int:
        """Return the next draw in [0, 2**64), high word drawn first."""
        high = self.next_int()
        return (high << 32) | self.next_int()
