"""
Marking generators whose output is knowingly non-uniform.

Some generators are kept for their look (visible banding in noise, repeating
patterns in dungeon layouts) or as bad examples in comparisons. They compose
``FlawMarker`` so test harnesses can find them by type and leave them out of
fairness statistics.
"""

from typing import Any


class FlawMarker:
    """Tag for a BitSource whose statistical quality is intentionally degraded.

    Carries no fields and no methods. Do not use a marked generator as a
    baseline for correctness comparisons.
    """

    __slots__ = ()


def is_flawed(source_type: Any) -> bool:
    """Return True if a source class (or the class of an instance) is marked."""
    if not isinstance(source_type, type):
        source_type = type(source_type)
    return issubclass(source_type, FlawMarker)


def requires_fairness(source_type: Any) -> bool:
    """Return True if uniformity checks should be applied to this source kind."""
    return not is_flawed(source_type)
