"""
Process-wide default random source.

Tools and scripts that just need "the" generator share one LinnormSource
seeded from settings. Game code that must be replayable should own its
sources instead of relying on this global.
"""

from typing import Optional

import structlog

from ..config import settings
from ..core.seeding import Seed
from ..core.sources import LinnormSource

logger = structlog.get_logger()

# Global source instance
_source: Optional[LinnormSource] = None


def set_random_seed(seed: Seed) -> None:
    """
    Reseed the default source.

    Args:
        seed: String or integer seed; strings are hashed to 64 bits
    """
    global _source

    _source = LinnormSource(seed)
    logger.info("Default source reseeded", seed=seed, state=_source.get_state())


def get_source() -> LinnormSource:
    """
    Get the default source, seeding it from settings on first use.

    Returns:
        LinnormSource instance
    """
    global _source
    if _source is None:
        _source = LinnormSource(settings.default_seed)
    return _source


def reset_source() -> None:
    """Forget the default source so the next get_source() reseeds it."""
    global _source
    _source = None
