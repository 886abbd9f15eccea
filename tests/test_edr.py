"""Tests for edit distance on real sequences."""
import logging

import numpy as np
import pytest

from tsdistances import AllocationFailure, InvalidInput
from tsdistances.temporal_distances import edr, edr_fast, edr_sampled


def reference_edr(a, b, epsilon):
    """Full-matrix float64 EDR used as an oracle."""
    n, m = len(a), len(b)
    D = np.zeros((n + 1, m + 1))
    D[:, 0] = np.arange(n + 1)
    D[0, :] = np.arange(m + 1)
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0.0 if abs(a[i - 1] - b[j - 1]) <= epsilon else 1.0
            D[i, j] = min(D[i - 1, j] + 1, D[i, j - 1] + 1, D[i - 1, j - 1] + cost)
    return D[n, m]


@pytest.fixture
def walk_pair():
    np.random.seed(11)
    return np.random.randn(70).cumsum(), np.random.randn(52).cumsum()


class TestEDR:

    def test_reference_fixture(self):
        assert edr([1.0, 2.0, 3.0], [2.0, 3.0, 4.0, 5.0], 0.5) == 3.0

    def test_empty_series(self):
        assert edr([], [1.0, 2.0, 3.0], 0.1) == 3.0
        assert edr([1.0, 2.0], [], 0.1) == 2.0
        assert edr([], [], 0.1) == 0.0

    def test_identical_series(self, walk_pair):
        a, _ = walk_pair
        assert edr(a, a, 0.0) == 0.0

    def test_substitution_costs_one(self):
        assert edr([1.0, 2.0, 3.0], [1.0, 9.0, 3.0], 0.5) == 1.0

    @pytest.mark.parametrize("eps", [0.0, 0.25, 1.0])
    def test_matches_full_matrix(self, eps, walk_pair):
        a, b = walk_pair
        assert edr(a, b, eps) == reference_edr(a, b, eps)

    def test_bounded_by_longer_length(self, walk_pair):
        a, b = walk_pair
        d = edr(a, b, 0.01)
        assert 0.0 <= d <= max(len(a), len(b))
        assert d == edr(b, a, 0.01)

    def test_float32_rows_return_full_precision_float(self):
        # Rows are float32; edit counts are integers, exact in float32 up to
        # 2**24, and the result is handed back as a 64-bit Python float.
        dtypes = []

        def allocator(shape, dtype):
            dtypes.append(np.dtype(dtype))
            return np.empty(shape, dtype)

        d = edr(np.arange(300.0), np.arange(300.0) + 10.0, 0.0, allocator=allocator)
        assert dtypes == [np.dtype(np.float32)]
        assert type(d) is float
        assert d == 20.0

    def test_invalid_epsilon(self):
        with pytest.raises(InvalidInput):
            edr([1.0], [2.0], float("nan"))

    def test_allocation_failure(self):
        def allocator(shape, dtype):
            raise MemoryError

        with pytest.raises(AllocationFailure):
            edr([1.0], [2.0], 0.1, allocator=allocator)


class TestEDRFast:

    def test_long_limit_equals_exact(self, walk_pair):
        a, b = walk_pair
        assert edr_fast(a, b, 0.5, max_length=100) == edr(a, b, 0.5)

    def test_default_truncates_to_shorter(self, walk_pair):
        a, b = walk_pair
        assert edr_fast(a, b, 0.5) == edr(a[:len(b)], b, 0.5)


class TestEDRSampled:

    def test_rate_one_equals_exact(self, walk_pair):
        a, b = walk_pair
        assert edr_sampled(a, b, 0.5, 1) == edr(a, b, 0.5)

    def test_samples_every_kth(self, walk_pair):
        a, b = walk_pair
        assert edr_sampled(a, b, 0.5, 3) == edr(a[::3], b[::3], 0.5)

    def test_zero_rate(self):
        with pytest.raises(InvalidInput):
            edr_sampled([1.0], [1.0], 0.5, 0)

    def test_reduction_goes_through_preprocessor(self, walk_pair, caplog):
        a, b = walk_pair
        with caplog.at_level(logging.DEBUG, logger="tsdistances.preprocessing"):
            edr_sampled(a, b, 0.5, 4)
            edr_fast(a, b, 0.5)
        messages = [r.getMessage() for r in caplog.records]
        assert "Reduced sequence lengths from (70, 52) to (18, 13)" in messages
        assert "Reduced sequence lengths from (70, 52) to (52, 52)" in messages

    def test_negative_max_length(self):
        with pytest.raises(InvalidInput):
            edr_fast([1.0], [1.0], 0.5, max_length=-1)

    def test_empty_series(self):
        assert edr_sampled([], [1.0, 2.0, 3.0], 0.5, 2) == 2.0
