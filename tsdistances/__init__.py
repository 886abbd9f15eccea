"""
Distances between univariate time series.

Fixed-form metrics (equal length): euclidean, manhattan, chebyshev, ssd,
correlation_distance.

Elastic metrics (any lengths): dtw and its window policies, lcss, edr, and
their truncated / sampled variants. All elastic metrics keep only two rows of
the alignment grid in memory.
"""
import logging

from tsdistances.band import BandPolicy, InitStrategy
from tsdistances.basic_distance_metrics import (
    chebyshev,
    correlation_distance,
    euclidean,
    manhattan,
    ssd,
)
from tsdistances.buffers import AlignmentBuffer
from tsdistances.config import DEFAULT_CONFIG, compute_distance, resolve_config
from tsdistances.errors import AllocationFailure, DistanceError, InvalidInput
from tsdistances.preprocessing import SequencePreprocessor
from tsdistances.temporal_distances import (
    dtw,
    dtw_default_window,
    dtw_full,
    edr,
    edr_fast,
    edr_sampled,
    fastdtw_distance,
    lcss,
    lcss_fast,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AlignmentBuffer',
    'AllocationFailure',
    'BandPolicy',
    'DEFAULT_CONFIG',
    'DistanceError',
    'InitStrategy',
    'InvalidInput',
    'SequencePreprocessor',
    'chebyshev',
    'compute_distance',
    'correlation_distance',
    'dtw',
    'dtw_default_window',
    'dtw_full',
    'edr',
    'edr_fast',
    'edr_sampled',
    'euclidean',
    'fastdtw_distance',
    'lcss',
    'lcss_fast',
    'manhattan',
    'resolve_config',
    'ssd',
]
