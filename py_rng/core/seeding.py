"""Turning user-facing seeds into 64-bit states."""

import os
from typing import Optional, Union

from .bit_source import MASK64
from .errors import InvalidArgument

Seed = Union[int, str]

FNV_OFFSET = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3


def hash64(text: str) -> int:
    """64-bit FNV-1a hash of the UTF-8 encoding of ``text``."""
    h = FNV_OFFSET
    for byte in text.encode("utf-8"):
        h ^= byte
        h = (h * FNV_PRIME) & MASK64
    return h


def random_seed() -> int:
    """Draw a 64-bit seed from the operating system."""
    return int.from_bytes(os.urandom(8), "little")


def coerce_seed(seed: Optional[Seed]) -> int:
    """Map a seed to a 64-bit value.

    ``None`` draws from ``os.urandom``; strings are hashed; ints are reduced
    modulo 2**64 so signed 64-bit seeds work unchanged.
    """
    if seed is None:
        return random_seed()
    if isinstance(seed, bool):
        raise InvalidArgument("seed must be an int or a str, not bool")
    if isinstance(seed, int):
        return seed & MASK64
    if isinstance(seed, str):
        return hash64(seed)
    raise InvalidArgument(f"seed must be an int or a str, got {type(seed).__name__}")
