"""
Core random-number contracts and reference generators.
"""

from .errors import RNGError, InvalidArgument, SnapshotMismatch
from .bit_source import BitSource, validate_bits, MASK32, MASK64
from .stateful_source import StatefulSource
from .flaws import FlawMarker, is_flawed, requires_fairness
from .distributions import (
    Support, DistributionSampler, UniformDistribution, GaussianDistribution,
    ExponentialDistribution, SpikeDistribution, BathtubDistribution,
    CurvedDistribution, FractionalDistribution, FractionalOffsetDistribution,
    uniform_double,
)
from .sources import LinnormSource, DiverSource, PermutedSource, Lathe32Source
from .alea_source import AleaSource
from .flawed_sources import CounterSource, LowBitsLCGSource
from .snapshot import SourceSnapshot

__all__ = ['RNGError', 'InvalidArgument', 'SnapshotMismatch',
           'BitSource', 'validate_bits', 'MASK32', 'MASK64', 'StatefulSource',
           'FlawMarker', 'is_flawed', 'requires_fairness',
           'Support', 'DistributionSampler', 'UniformDistribution', 'GaussianDistribution',
           'ExponentialDistribution', 'SpikeDistribution', 'BathtubDistribution',
           'CurvedDistribution', 'FractionalDistribution', 'FractionalOffsetDistribution',
           'uniform_double',
           'LinnormSource', 'DiverSource', 'PermutedSource', 'Lathe32Source',
           'AleaSource', 'CounterSource', 'LowBitsLCGSource', 'SourceSnapshot']
