'''
Input validation and length reduction applied before an elastic distance.

- as_sequence: turns any 1-D array-like (list, np.ndarray, pd.Series) into a
  read-only float64 view
- truncate: keep the first K elements of both sequences
- sample: keep every K-th element of a sequence

Truncation and sampling trade accuracy for throughput on very long
sequences; they are only applied when the caller asks for them.
'''
import logging
import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .errors import InvalidInput

logger = logging.getLogger(__name__)


def as_sequence(x, name: str = "sequence") -> np.ndarray:
    """
    Validate a univariate series and return it as a read-only float64 array.

    Args:
        x: Array-like of real samples.
        name (str): Argument name used in error messages.
    Returns:
        np.ndarray: 1-D float64 view of ``x``; the caller's data is never copied
        unless a dtype conversion is needed, and never written.
    """
    try:
        seq = np.asarray(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must contain real numbers: {e}") from e
    if seq.ndim != 1:
        raise InvalidInput(f"{name} must be one-dimensional, got shape {seq.shape}")
    if not np.all(np.isfinite(seq)):
        raise InvalidInput(f"{name} contains NaN or infinite samples")
    seq = seq.view()
    seq.flags.writeable = False
    return seq


def check_epsilon(epsilon) -> float:
    """Matching tolerance: a real number >= 0."""
    if isinstance(epsilon, bool) or not isinstance(epsilon, numbers.Real):
        raise InvalidInput(f"epsilon must be a real number, got {epsilon!r}")
    epsilon = float(epsilon)
    if math.isnan(epsilon) or epsilon < 0:
        raise InvalidInput(f"epsilon must be non-negative, got {epsilon}")
    return epsilon


def check_count(value, name: str, minimum: int = 0) -> int:
    """Non-negative integer parameter such as a window radius or a sample rate."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < minimum:
        raise InvalidInput(f"{name} must be at least {minimum}, got {value}")
    return value


def truncate(a: np.ndarray, b: np.ndarray, max_length: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Keep the first ``max_length`` elements of both sequences. Without a limit,
    both are cut to the length of the shorter one.
    """
    limit = min(len(a), len(b)) if max_length is None else check_count(max_length, "max_length")
    return a[:limit], b[:limit]


def sample(x: np.ndarray, rate: int) -> np.ndarray:
    """
    Every ``rate``-th element of ``x``, starting with the first:
    ceil(len(x) / rate) samples, the last index clamped to the final element.
    """
    rate = check_count(rate, "sample_rate", minimum=1)
    n_sampled = -(-len(x) // rate)
    if n_sampled == 0:
        return x[:0]
    idx = np.minimum(np.arange(n_sampled) * rate, len(x) - 1)
    return x[idx]


@dataclass(frozen=True)
class SequencePreprocessor:
    """
    Optional length reduction for a pair of sequences.

    Attributes:
        max_length (int, optional): Keep only the first ``max_length`` elements.
        sample_rate (int, optional): Then keep every ``sample_rate``-th element.
    """

    max_length: Optional[int] = None
    sample_rate: Optional[int] = None

    def __post_init__(self):
        if self.max_length is not None:
            check_count(self.max_length, "max_length")
        if self.sample_rate is not None:
            check_count(self.sample_rate, "sample_rate", minimum=1)

    def __call__(self, a, b) -> Tuple[np.ndarray, np.ndarray]:
        a, b = as_sequence(a, "a"), as_sequence(b, "b")
        n, m = len(a), len(b)
        if self.max_length is not None:
            a, b = truncate(a, b, self.max_length)
        if self.sample_rate is not None:
            a, b = sample(a, self.sample_rate), sample(b, self.sample_rate)
        if (len(a), len(b)) != (n, m):
            logger.debug("Reduced sequence lengths from (%d, %d) to (%d, %d)", n, m, len(a), len(b))
        return a, b
