"""
Utilities: default source and logging setup.
"""

from .logging import configure_logging
from .random import get_source, reset_source, set_random_seed

__all__ = ['configure_logging', 'get_source', 'reset_source', 'set_random_seed']
