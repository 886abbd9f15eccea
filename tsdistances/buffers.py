'''
Rolling two-row scratch storage for the dynamic-programming distances.

The alignment grid of an elastic distance is (n+1) x (m+1), but row i only
depends on row i-1 and on the cells to its left, so only two rows are ever
kept in memory. Both rows live in a single (2, width) block that is acquired
when the buffer is entered and released when it is exited.
'''
from typing import Callable, Optional

import numpy as np

from .errors import AllocationFailure

Allocator = Callable[..., np.ndarray]


class AlignmentBuffer:
    def __init__(self, width: int, dtype=np.float64, allocator: Optional[Allocator] = None):
        """
        Args:
            width (int): Number of columns per row (length of the shorter sequence + 1).
            dtype: numpy dtype of the cells, e.g. float64 for DTW, uint32 for LCSS.
            allocator (callable, optional): Called as ``allocator(shape, dtype)``;
                defaults to ``numpy.empty``.
        """
        if width < 1:
            raise ValueError(f"Buffer width must be at least 1, got {width}")
        self.width = width
        self.dtype = np.dtype(dtype)
        self._allocator = allocator if allocator is not None else np.empty
        self._block = None
        self._prev = 0
        self.released = False

    def __enter__(self) -> "AlignmentBuffer":
        if self._block is not None or self.released:
            raise RuntimeError("AlignmentBuffer can only be acquired once")
        try:
            block = self._allocator((2, self.width), self.dtype)
        except MemoryError as e:
            self.released = True
            raise AllocationFailure(
                f"Could not allocate 2 x {self.width} {self.dtype} alignment rows"
            ) from e
        self._block = block
        self._prev = 0
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        self._block = None
        self.released = True

    def _rows(self) -> np.ndarray:
        if self._block is None:
            raise RuntimeError("AlignmentBuffer used outside of its `with` block")
        return self._block

    @property
    def previous(self) -> np.ndarray:
        """Row i-1 while row i is being filled; the last finished row after swap()."""
        return self._rows()[self._prev]

    @property
    def current(self) -> np.ndarray:
        return self._rows()[1 - self._prev]

    def get(self, col: int):
        return self.previous[col]

    def set(self, col: int, value) -> None:
        self.current[col] = value

    def fill(self, values) -> None:
        """Seed the previous row (row 0 of the grid) with a scalar or a full row."""
        self.previous[:] = values

    def swap(self) -> None:
        self._prev = 1 - self._prev

    @property
    def result(self):
        """Terminal cell of the last finished row."""
        return self.get(self.width - 1)
