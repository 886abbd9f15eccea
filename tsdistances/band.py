'''
Sakoe-Chiba banding and boundary seeding for windowed DTW.

A band of radius r admits the cells (i, j) of the alignment grid with
|i - j| <= r. The cells the band leaves out are never computed; the
InitStrategy decides which value a computed cell sees when one of its
neighbours lies outside the band.
'''
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .errors import InvalidInput


class InitStrategy(Enum):
    """How cells outside the band (and the grid boundary) are seeded."""

    INFINITY = "infinity"  # standard DP, unreached cells are +inf
    CUMULATIVE = "cumulative"  # row/column 0 hold running sums of |x|
    EUCLIDEAN = "euclidean"  # interior: distance of (a[i-1], b[j-1]) to the origin
    MANHATTAN = "manhattan"  # interior: |a[i-1]| + |b[j-1]|

    @classmethod
    def coerce(cls, value) -> "InitStrategy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise InvalidInput(f"Unknown init strategy: {value!r}. Valid options are {valid}.") from None


@dataclass(frozen=True)
class BandPolicy:
    """
    Admissible column range per row for an alignment grid of
    ``rows`` x ``cols`` (1-based cell indices, row/column 0 are the boundary).

    Attributes:
        rows (int): Length of the sequence driving the rows.
        cols (int): Length of the sequence driving the columns.
        radius (int, optional): Band radius; None means the full grid.
    """

    rows: int
    cols: int
    radius: Optional[int] = None

    def __post_init__(self):
        if self.radius is not None and self.radius < 0:
            raise InvalidInput(f"Window radius must be non-negative, got {self.radius}")

    @classmethod
    def default(cls, rows: int, cols: int) -> "BandPolicy":
        """
        Radius of a tenth of the longer sequence, but never less than the
        length difference, so the terminal cell is reachable in one pass.
        """
        radius = max(max(rows, cols) // 10, abs(rows - cols), 1)
        return cls(rows, cols, radius)

    @property
    def unconstrained(self) -> bool:
        return self.radius is None or self.radius >= max(self.rows, self.cols)

    def column_range(self, i: int) -> Tuple[int, int]:
        """Inclusive range of columns computed for row ``i``."""
        if self.unconstrained:
            return 1, self.cols
        return max(1, i - self.radius), min(self.cols, i + self.radius)

    def reaches_terminal(self) -> bool:
        return self.unconstrained or self.radius >= abs(self.rows - self.cols)

    def widened(self) -> "BandPolicy":
        """
        Policy to retry with when the terminal cell was not reached. The
        radius at least doubles (a radius of 0 becomes 1) and covers the
        length difference; it is capped at the full grid, so repeated
        widening always ends unconstrained.
        """
        if self.unconstrained:
            return self
        radius = max(2 * self.radius, self.radius + 1, abs(self.rows - self.cols))
        return BandPolicy(self.rows, self.cols, min(radius, max(self.rows, self.cols)))


class BoundarySeeds:
    """
    Values of the grid cells a pass does not compute, for one orientation of
    the two sequences (``outer`` drives the rows, ``inner`` the columns).
    """

    def __init__(self, outer: Sequence[float], inner: Sequence[float], strategy: InitStrategy):
        self.outer = outer
        self.inner = inner
        self.strategy = strategy
        self._column_zero = 0.0

    def first_row(self) -> list:
        row = [0.0] + [math.inf] * len(self.inner)
        if self.strategy is InitStrategy.CUMULATIVE:
            running = 0.0
            for j, x in enumerate(self.inner, start=1):
                running += abs(x)
                row[j] = running
        return row

    def column_zero(self, i: int) -> float:
        """Seed of cell (i, 0); must be called for i = 1, 2, ... in order."""
        if self.strategy is InitStrategy.CUMULATIVE:
            self._column_zero += abs(self.outer[i - 1])
            return self._column_zero
        return math.inf

    def interior(self, i: int, j: int) -> float:
        if self.strategy is InitStrategy.EUCLIDEAN:
            return math.hypot(self.outer[i - 1], self.inner[j - 1])
        if self.strategy is InitStrategy.MANHATTAN:
            return abs(self.outer[i - 1]) + abs(self.inner[j - 1])
        return math.inf
