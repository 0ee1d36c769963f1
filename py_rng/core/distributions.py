"""
Distribution samplers built on raw bit draws.

A sampler is a pure function of the draws it takes from the BitSource passed
to each call. Samplers hold only immutable parameters, so one instance can
serve any number of sources.

The algorithms below are frozen. Changing one changes every sequence derived
from a persisted seed, which makes it a breaking change.

| Sampler | Draws per call | Support |
|---|---|---|
| UniformDistribution | 2 | [0, 1) |
| GaussianDistribution | 4 | [mean - L*stddev, mean + L*stddev], L = sqrt(-2 ln 2**-53) |
| ExponentialDistribution | 2 | [0, 53 ln 2 / rate] |
| SpikeDistribution | 2 | [-1, 1) |
| BathtubDistribution | 2 | [0, 1] |
| CurvedDistribution | 6 | [-1, 1] |
| FractionalDistribution | inner | [0, 1] |
| FractionalOffsetDistribution | inner | [0, 1] |
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from numbers import Real

from .bit_source import BitSource
from .errors import InvalidArgument

DOUBLE_UNIT = 2.0 ** -53

# Largest radius Box-Muller can produce from a 53-bit uniform
GAUSSIAN_LIMIT = math.sqrt(-2.0 * math.log(DOUBLE_UNIT))


@dataclass(frozen=True)
class Support:
    """Interval a sampler's output is guaranteed to lie in."""

    lower: float
    upper: float
    lower_inclusive: bool = True
    upper_inclusive: bool = True

    def contains(self, value: float) -> bool:
        above = value >= self.lower if self.lower_inclusive else value > self.lower
        below = value <= self.upper if self.upper_inclusive else value < self.upper
        return above and below

    def __str__(self) -> str:
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive else ")"
        return f"{left}{self.lower}, {self.upper}{right}"


def uniform_double(source: BitSource) -> float:
    """53-bit uniform double in [0, 1) from two draws (26 then 27 bits)."""
    return ((source.next(26) << 27) | source.next(27)) * DOUBLE_UNIT


def _check_finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidArgument(f"{name} must be a finite number, got {value!r}")
    return float(value)


def _check_positive(name: str, value) -> float:
    value = _check_finite(name, value)
    if value <= 0.0:
        raise InvalidArgument(f"{name} must be positive, got {value!r}")
    return value


def _check_bounded(sampler, lower: float, upper: float) -> None:
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise InvalidArgument(
            f"{sampler!r} would produce values outside the finite double range"
        )


class DistributionSampler(ABC):
    """Maps draws from a BitSource to a double with a fixed shape."""

    @abstractmethod
    def next_double(self, source: BitSource) -> float:
        """Draw one value using ``source``."""

    @property
    @abstractmethod
    def support(self) -> Support:
        """Exact interval the output lies in."""


@dataclass(frozen=True)
class UniformDistribution(DistributionSampler):
    """Uniform over [0, 1) with full double mantissa precision."""

    def next_double(self, source: BitSource) -> float:
        return uniform_double(source)

    @property
    def support(self) -> Support:
        return Support(0.0, 1.0, upper_inclusive=False)


@dataclass(frozen=True)
class GaussianDistribution(DistributionSampler):
    """Normal distribution via the cosine branch of Box-Muller.

    The sine branch is discarded rather than cached, so every call consumes
    exactly four draws and no state carries over between calls. Because the
    uniform inputs have 53 bits, the output can never be further than
    ``GAUSSIAN_LIMIT`` (about 8.57) standard deviations from the mean.
    """

    mean: float = 0.0
    stddev: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "mean", _check_finite("mean", self.mean))
        object.__setattr__(self, "stddev", _check_positive("stddev", self.stddev))
        _check_bounded(self, self.support.lower, self.support.upper)

    def next_double(self, source: BitSource) -> float:
        u1 = 1.0 - uniform_double(source)
        u2 = uniform_double(source)
        radius = math.sqrt(-2.0 * math.log(u1))
        return self.mean + self.stddev * (radius * math.cos(2.0 * math.pi * u2))

    @property
    def variance(self) -> float:
        return self.stddev * self.stddev

    @property
    def support(self) -> Support:
        return Support(
            self.mean + self.stddev * -GAUSSIAN_LIMIT,
            self.mean + self.stddev * GAUSSIAN_LIMIT,
        )


@dataclass(frozen=True)
class ExponentialDistribution(DistributionSampler):
    """Exponential distribution by inverse CDF: -ln(1 - u) / rate."""

    rate: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "rate", _check_positive("rate", self.rate))
        _check_bounded(self, self.support.lower, self.support.upper)

    def next_double(self, source: BitSource) -> float:
        return 0.0 - math.log(1.0 - uniform_double(source)) / self.rate

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def support(self) -> Support:
        return Support(0.0, 0.0 - math.log(DOUBLE_UNIT) / self.rate)


@dataclass(frozen=True)
class SpikeDistribution(DistributionSampler):
    """Cube of a uniform value in [-1, 1).

    Density grows without bound near 0 and thins out towards -1 and 1.
    """

    def next_double(self, source: BitSource) -> float:
        d = (uniform_double(source) - 0.5) * 2.0
        return d * d * d

    @property
    def support(self) -> Support:
        return Support(-1.0, 1.0, upper_inclusive=False)


@dataclass(frozen=True)
class CurvedDistribution(DistributionSampler):
    """Sum of three uniforms rescaled to [-1, 1]: bell-shaped but bounded."""

    def next_double(self, source: BitSource) -> float:
        total = uniform_double(source) + uniform_double(source) + uniform_double(source)
        return total / 1.5 - 1.0

    @property
    def support(self) -> Support:
        return Support(-1.0, 1.0)


@dataclass(frozen=True)
class FractionalDistribution(DistributionSampler):
    """Fractional part (x - floor(x)) of another sampler's output.

    Negative inputs wrap from the top, and a negative input smaller in
    magnitude than half an ulp of 1.0 rounds to exactly 1.0, so the upper
    bound is inclusive.
    """

    inner: DistributionSampler = field(default_factory=lambda: SpikeDistribution())

    def next_double(self, source: BitSource) -> float:
        x = self.inner.next_double(source)
        return x - math.floor(x)

    @property
    def support(self) -> Support:
        return Support(0.0, 1.0)


@dataclass(frozen=True)
class FractionalOffsetDistribution(DistributionSampler):
    """Fractional part of another sampler's output shifted by ``offset``."""

    inner: DistributionSampler = field(default_factory=lambda: SpikeDistribution())
    offset: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "offset", _check_finite("offset", self.offset))
        inner = self.inner.support
        _check_bounded(self, inner.lower + self.offset, inner.upper + self.offset)

    def next_double(self, source: BitSource) -> float:
        x = self.inner.next_double(source) + self.offset
        return x - math.floor(x)

    @property
    def support(self) -> Support:
        return Support(0.0, 1.0)


@dataclass(frozen=True)
class BathtubDistribution(FractionalDistribution):
    """Fractional part of SpikeDistribution.

    Mass piles up next to 0 (small positive spikes) and next to 1 (small
    negative spikes), with a trough around 0.5.
    """

    inner: DistributionSampler = field(default_factory=lambda: SpikeDistribution(), init=False)
