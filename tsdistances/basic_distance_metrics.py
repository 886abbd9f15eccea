'''
This file contains the implementation of a few basic distance metrics to measure
distance between two equal-length time series x, y:
- Sum of Squared Distances (SSD)
- Euclidean Distance
- Manhattan Distance
- Chebyshev Distance
- Correlation Distance

These compare samples index by index, so both series must have the same length.
'''
import numpy as np
from scipy.spatial import distance

from .errors import InvalidInput
from .preprocessing import as_sequence


def _paired(x, y):
    x, y = as_sequence(x, "x"), as_sequence(y, "y")
    if len(x) != len(y):
        raise InvalidInput(f"Series must have equal length, got {len(x)} and {len(y)}")
    return x, y

def ssd(x, y) -> float:
    x, y = _paired(x, y)
    return float(np.sum((x - y)**2))

def euclidean(x, y) -> float:
    x, y = _paired(x, y)
    if len(x) == 0:
        return 0.0
    return float(distance.euclidean(x, y))

def manhattan(x, y) -> float:
    x, y = _paired(x, y)
    if len(x) == 0:
        return 0.0
    return float(distance.cityblock(x, y))

def chebyshev(x, y) -> float:
    x, y = _paired(x, y)
    if len(x) == 0:
        return 0.0
    return float(distance.chebyshev(x, y))

def correlation_distance(x, y) -> float:
    """1 - Pearson correlation; undefined for fewer than 2 samples or a constant series."""
    x, y = _paired(x, y)
    if len(x) < 2:
        raise InvalidInput("Correlation distance needs at least 2 samples")
    if np.std(x) == 0 or np.std(y) == 0:
        raise InvalidInput("Correlation distance is undefined for a constant series")
    return float(1 - np.corrcoef(x, y)[0, 1])
