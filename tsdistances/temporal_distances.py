'''
Elastic distances between time series of possibly different length.

Each method fills a conceptual (n+1) x (m+1) alignment grid row by row,
keeping only two rows in an AlignmentBuffer. The longer series drives the
rows and the shorter one sets the row width, so scratch memory is
O(min(n, m)).
'''
import logging
import math
from typing import Optional

import numpy as np
from fastdtw import fastdtw

from .band import BandPolicy, BoundarySeeds, InitStrategy
from .buffers import AlignmentBuffer
from .errors import InvalidInput
from .preprocessing import SequencePreprocessor, as_sequence, check_count, check_epsilon

logger = logging.getLogger(__name__)


def _oriented(a: np.ndarray, b: np.ndarray):
    """(outer, inner) with the shorter series as inner."""
    return (a, b) if len(a) >= len(b) else (b, a)


def _truncating(a, b, max_length: Optional[int]) -> SequencePreprocessor:
    """Truncation to ``max_length``, or to the shorter series when no limit is given."""
    if max_length is None:
        max_length = min(len(a), len(b))
    return SequencePreprocessor(max_length=max_length)


'''
Method 1: Dynamic Time Warping (DTW)
'''

def _dtw_pass(outer: np.ndarray, inner: np.ndarray, policy: BandPolicy, init: InitStrategy, allocator) -> float:
    """
    One pass of the DTW recurrence restricted to ``policy``'s band.

    Cells just outside the band edges are written with their seed before the
    row is filled, so every cell read by row i is either computed in row i-1
    or seeded; stale values from two rows back are never read.
    """
    n, m = len(outer), len(inner)
    # the full grid never reads a seeded interior cell; keep the standard boundary
    seeds = BoundarySeeds(outer, inner, InitStrategy.INFINITY if policy.unconstrained else init)

    with AlignmentBuffer(m + 1, np.float64, allocator) as buf:
        buf.fill(seeds.first_row())
        for i in range(1, n + 1):
            lo, hi = policy.column_range(i)
            prev, curr = buf.previous, buf.current
            buf.set(0, seeds.column_zero(i))
            if lo > 1:
                buf.set(lo - 1, seeds.interior(i, lo - 1))
            if hi < m:
                buf.set(hi + 1, seeds.interior(i, hi + 1))

            costs = np.abs(inner[lo - 1:hi] - outer[i - 1])
            # best of the up and diagonal neighbours; the left one is carried below
            reach = np.minimum(prev[lo:hi + 1], prev[lo - 1:hi])
            left = float(curr[lo - 1])
            for j, (cost, best) in enumerate(zip(costs.tolist(), reach.tolist()), start=lo):
                left = cost + (best if best < left else left)
                curr[j] = left
            buf.swap()
        return float(buf.result)


def dtw(a, b, window: Optional[int] = None, init=InitStrategy.INFINITY, *, allocator=None) -> float:
    """
    Dynamic time warping distance with absolute-difference cost.

    Args:
        a, b: Univariate series, both non-empty.
        window (int, optional): Sakoe-Chiba radius; None for the full grid.
        init (InitStrategy or str): Seeding of cells outside the band.
        allocator (callable, optional): Scratch allocator, see AlignmentBuffer.
    Returns:
        float: Minimal cumulative cost of a monotone, continuous warping path.
    Raises:
        InvalidInput: If either series is empty or a parameter is invalid.
        AllocationFailure: If the scratch rows cannot be allocated.

    If the band cannot reach the end of both series, the radius is widened
    (at least doubled) and the pass is repeated, up to the full grid.
    """
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    if len(a) == 0 or len(b) == 0:
        raise InvalidInput("DTW is undefined for an empty series")
    init = InitStrategy.coerce(init)
    if window is not None:
        window = check_count(window, "window")

    outer, inner = _oriented(a, b)
    policy = BandPolicy(len(outer), len(inner), window)
    while True:
        if not policy.reaches_terminal():
            logger.debug("DTW band radius %s cannot reach cell (%d, %d); widening", policy.radius, policy.rows, policy.cols)
            policy = policy.widened()
            continue
        distance = _dtw_pass(outer, inner, policy, init, allocator)
        if distance == math.inf and not policy.unconstrained:
            logger.debug("DTW terminal cell unreached with radius %s; widening", policy.radius)
            policy = policy.widened()
            continue
        return distance


def dtw_default_window(a, b, *, allocator=None) -> float:
    """DTW with a radius of max(len/10, |len(a) - len(b)|, 1)."""
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    if len(a) == 0 or len(b) == 0:
        raise InvalidInput("DTW is undefined for an empty series")
    radius = BandPolicy.default(len(a), len(b)).radius
    return dtw(a, b, window=radius, allocator=allocator)


def dtw_full(a, b, *, allocator=None) -> float:
    return dtw(a, b, window=None, allocator=allocator)


def fastdtw_distance(a, b, radius: int = 1) -> float:
    """
    Approximate DTW through the FastDTW multi-resolution algorithm.
    Exact when both series are shorter than radius + 2.
    """
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    if len(a) == 0 or len(b) == 0:
        raise InvalidInput("DTW is undefined for an empty series")
    radius = check_count(radius, "radius", minimum=1)
    # default fastdtw cost for 1-D input is |x - y|; its C extension wants writeable buffers
    distance, _ = fastdtw(np.array(a), np.array(b), radius=radius)
    return float(distance)

'''
Method 2: Longest Common Subsequence (LCSS)
'''

def lcss(a, b, epsilon: float, *, allocator=None) -> float:
    """
    1 - (length of the longest common subsequence) / max(len(a), len(b)),
    where two samples match if they differ by at most ``epsilon``.

    0 means identical under the tolerance, 1 means nothing in common.
    Two empty series are identical (0.0); one empty series is maximally
    dissimilar (1.0).
    """
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    epsilon = check_epsilon(epsilon)
    n, m = len(a), len(b)
    if n == 0 and m == 0:
        return 0.0
    if n == 0 or m == 0:
        return 1.0

    outer, inner = _oriented(a, b)
    width = len(inner) + 1
    one, zero = np.uint32(1), np.uint32(0)
    with AlignmentBuffer(width, np.uint32, allocator) as buf:
        buf.fill(0)
        for x in outer:
            prev, curr = buf.previous, buf.current
            match = np.abs(inner - x) <= epsilon
            # Adjacent cells differ by at most one, so on a match the diagonal + 1
            # already dominates up and left; the row is a running max of
            # max(up, match ? diag + 1 : 0).
            np.maximum(prev[1:], np.where(match, prev[:-1] + one, zero), out=curr[1:])
            np.maximum.accumulate(curr[1:], out=curr[1:])
            curr[0] = 0
            buf.swap()
        lcs_len = int(buf.result)

    max_len = max(n, m)
    return 1.0 - (lcs_len / max_len)


def lcss_fast(a, b, epsilon: float, max_length: Optional[int] = None, *, allocator=None) -> float:
    """
    LCSS on the first ``max_length`` elements of each series (default: the
    length of the shorter one). Never samples, only truncates.
    """
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    a, b = _truncating(a, b, max_length)(a, b)
    return lcss(a, b, epsilon, allocator=allocator)

'''
Method 3: Edit Distance on Real sequences (EDR)
'''

def edr(a, b, epsilon: float, *, allocator=None) -> float:
    """
    Minimal number of insertions, deletions and substitutions turning one
    series into the other; a substitution is free when the two samples differ
    by at most ``epsilon``. The result lies in [0, max(len(a), len(b))].

    Rows are stored as float32 to halve scratch memory. Edit counts are whole
    numbers, which float32 holds exactly up to 2**24; the result is returned
    as a Python float.
    """
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    epsilon = check_epsilon(epsilon)
    n, m = len(a), len(b)
    if n == 0:
        return float(m)
    if m == 0:
        return float(n)

    outer, inner = _oriented(a, b)
    width = len(inner) + 1
    offsets = np.arange(width, dtype=np.float32)
    with AlignmentBuffer(width, np.float32, allocator) as buf:
        buf.fill(offsets)
        for i, x in enumerate(outer, start=1):
            prev, curr = buf.previous, buf.current
            cost = (np.abs(inner - x) > epsilon).astype(np.float32)
            curr[0] = i
            np.minimum(prev[1:] + 1, prev[:-1] + cost, out=curr[1:])
            # insertions: curr[j] = min over k <= j of curr[k] + (j - k)
            np.subtract(curr, offsets, out=curr)
            np.minimum.accumulate(curr, out=curr)
            np.add(curr, offsets, out=curr)
            buf.swap()
        return float(buf.result)


def edr_fast(a, b, epsilon: float, max_length: Optional[int] = None, *, allocator=None) -> float:
    """EDR on the first ``max_length`` elements of each series, see lcss_fast."""
    a, b = as_sequence(a, "a"), as_sequence(b, "b")
    a, b = _truncating(a, b, max_length)(a, b)
    return edr(a, b, epsilon, allocator=allocator)


def edr_sampled(a, b, epsilon: float, sample_rate: int, *, allocator=None) -> float:
    """
    EDR on every ``sample_rate``-th element of each series. Lossy; meant for
    very long series where the exact computation is too slow.
    """
    a, b = SequencePreprocessor(sample_rate=sample_rate)(a, b)
    return edr(a, b, epsilon, allocator=allocator)
