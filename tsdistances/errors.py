'''
Exceptions raised by the distance functions.

Every failure is an exception derived from DistanceError; no function returns
a sentinel value (0, -1, NaN) to signal a problem.
'''


class DistanceError(Exception):
    """Base class for all errors raised by tsdistances."""


class InvalidInput(DistanceError, ValueError):
    """
    Arguments cannot be used for the requested distance, e.g. sequences of
    different length for a fixed-form metric, a zero sample rate, a negative
    tolerance or an empty sequence passed to DTW.
    """


class AllocationFailure(DistanceError, MemoryError):
    """The scratch rows for a dynamic-programming pass could not be allocated."""
