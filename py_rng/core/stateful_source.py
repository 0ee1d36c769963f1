"""
State inspection, mutation and forking.

A StatefulSource is a BitSource whose whole future output is determined by a
single unsigned 64-bit value. That scalar is what save/restore tooling
persists and what ``copy()`` duplicates.
"""

from abc import abstractmethod
from copy import deepcopy
from typing import TypeVar

from .bit_source import MASK64, BitSource

S = TypeVar("S", bound="StatefulSource")


class StatefulSource(BitSource):
    """A BitSource with an inspectable, settable and copyable 64-bit state.

    Contract:
        - ``get_state()`` never advances the stream.
        - ``set_state(s)`` accepts any int (reduced modulo 2**64) and makes the
          next draw behave as if the generator had always held ``s``.
        - ``set_state(get_state())`` changes nothing about future output.
        - ``copy()`` returns an independent instance with the same future
          output; neither instance affects the other afterwards.

    Zero is a legal state. A generator that has to remap it internally must
    say so in its docstring.
    """

    @abstractmethod
    def get_state(self) -> int:
        """Return the current state in [0, 2**64)."""

    @abstractmethod
    def set_state(self, state: int) -> None:
        """Replace the state; must accept every int."""

    def copy(self: S) -> S:
        """Fork this source.

        The default deep-copies the instance, so subclasses holding mutable
        containers still never share them with the fork.
        """
        return deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, StatefulSource):
            return NotImplemented
        return type(self) is type(other) and self.get_state() == other.get_state()

    # Mutable, so instances must not be hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state=0x{self.get_state():016X})"


def to_u64(value: int) -> int:
    """Reduce any int to its unsigned 64-bit equivalent."""
    return value & MASK64
