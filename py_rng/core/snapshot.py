"""
Persistable snapshots of stateful sources.

A snapshot pairs the source's module-qualified class name with its 64-bit
state. That is all save/restore tooling needs to embed in a save file, and it
round-trips through JSON with pydantic.
"""

from __future__ import annotations

from typing import Type, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .bit_source import MASK64
from .errors import SnapshotMismatch
from .stateful_source import StatefulSource

logger = structlog.get_logger()

S = TypeVar("S", bound=StatefulSource)


def source_kind(source_type: type) -> str:
    """Module-qualified class name, so same-named classes stay distinct."""
    return f"{source_type.__module__}.{source_type.__qualname__}"


class SourceSnapshot(BaseModel):
    """Kind and state of a StatefulSource at one point in its stream."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(description="Module-qualified class name of the captured source")
    state: int = Field(ge=0, le=MASK64, description="Unsigned 64-bit state")

    @classmethod
    def capture(cls, source: StatefulSource) -> SourceSnapshot:
        """Record the current state of ``source`` without advancing it."""
        snapshot = cls(kind=source_kind(type(source)), state=source.get_state())
        logger.debug("Captured source snapshot", kind=snapshot.kind, state=snapshot.state)
        return snapshot

    def restore(self, source: S) -> S:
        """Rewind or advance ``source`` to this snapshot's state.

        Raises:
            SnapshotMismatch: if ``source`` is not of the captured kind
        """
        target = source_kind(type(source))
        if target != self.kind:
            raise SnapshotMismatch(
                f"Snapshot of {self.kind} cannot be restored into {target}"
            )
        source.set_state(self.state)
        logger.debug("Restored source snapshot", kind=self.kind, state=self.state)
        return source

    def build(self, source_type: Type[S]) -> S:
        """Construct a new ``source_type`` positioned at this snapshot."""
        return self.restore(source_type(0))
