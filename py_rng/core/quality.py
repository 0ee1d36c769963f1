"""
Statistical checks for test harnesses.

Fairness checks only make sense for generators that are meant to be uniform;
use ``requires_fairness`` (from ``py_rng.core.flaws``) to skip marked ones.
"""

from typing import Tuple

import numpy as np
from scipy import stats

from .bit_source import BitSource, validate_bits
from .distributions import DistributionSampler
from .errors import InvalidArgument


def sample_doubles(sampler: DistributionSampler, source: BitSource, n: int) -> np.ndarray:
    """Draw ``n`` values from ``sampler`` using ``source``."""
    return np.fromiter((sampler.next_double(source) for _ in range(n)), dtype=np.float64, count=n)


def sample_bits(source: BitSource, bits: int, n: int) -> np.ndarray:
    """Draw ``n`` values of ``bits`` bits each."""
    bits = validate_bits(bits)
    return np.fromiter((source.next(bits) for _ in range(n)), dtype=np.uint64, count=n)


def chi_squared_uniformity(
    values: np.ndarray, bins: int = 10, low: float = 0.0, high: float = 1.0
) -> Tuple[float, float]:
    """Chi-squared test of ``values`` against a uniform distribution on [low, high).

    Returns:
        Tuple of (statistic, p_value)
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        raise InvalidArgument("Cannot test an empty sample")
    observed, _ = np.histogram(values, bins=bins, range=(low, high))
    expected = np.full(bins, observed.sum() / bins)
    statistic, p_value = stats.chisquare(observed, expected)
    return float(statistic), float(p_value)
