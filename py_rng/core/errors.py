"""Exceptions raised by the random-number layer."""


class RNGError(Exception):
    """Base class for all py_rng errors."""


class InvalidArgument(RNGError, ValueError):
    """An argument violates an operation's precondition.

    Raised for bit requests outside 1..32 (under the strict policy), for
    non-integer bit requests, for bad seeds and for invalid sampler
    parameters.
    """


class SnapshotMismatch(RNGError):
    """A snapshot was applied to a source of a different kind."""
