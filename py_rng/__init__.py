"""
py-rng: pluggable random-number layer for game-content tooling.

Bit sources, stateful sources that can be saved and forked, distribution
samplers and a tag for deliberately flawed generators.
"""

from .core import *  # noqa: F401,F403
from .core import __all__

__version__ = "0.1.0"
