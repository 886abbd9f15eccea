'''
Configuration for choosing a distance by name.

A config is a plain dict; keys left out fall back to DEFAULT_CONFIG.
'''
import logging

from .basic_distance_metrics import chebyshev, correlation_distance, euclidean, manhattan, ssd
from .errors import InvalidInput
from .temporal_distances import (
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

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "dist_metric": "dtw", # options: 'ssd', 'euclidean', 'manhattan', 'chebyshev', 'correlation', 'dtw', 'dtw_default', 'dtw_full', 'fastdtw', 'lcss', 'lcss_fast', 'edr', 'edr_fast', 'edr_sampled'
    "window": None, # Sakoe-Chiba radius for 'dtw'; None for the full grid
    "init": "infinity", # options: 'infinity', 'cumulative', 'euclidean', 'manhattan'
    "epsilon": 1e-4, # matching tolerance for LCSS / EDR, about the old 4-decimal rounding
    "max_length": None, # truncation for 'lcss_fast' / 'edr_fast'
    "sample_rate": 1, # stride for 'edr_sampled'
    "fastdtw_radius": 1,
}


def resolve_config(config: dict = None) -> dict:
    """
    Overlay ``config`` on the defaults.

    Returns:
        dict: A new dict with every key of DEFAULT_CONFIG.
    Raises:
        InvalidInput: If ``config`` contains a key DEFAULT_CONFIG does not know.
    """
    config = config or {}
    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise InvalidInput(f"Unknown config keys: {sorted(unknown)}. Valid keys are {sorted(DEFAULT_CONFIG)}.")
    return {**DEFAULT_CONFIG, **config}


def compute_distance(x, y, config: dict = None) -> float:
    """
    Distance between two series using the metric named by ``config['dist_metric']``.

    Parameters:
    -----------
    x, y: array-like
        Univariate series; fixed-form metrics need equal lengths
    config: dict, optional
        Partial configuration, see DEFAULT_CONFIG

    Returns:
    --------
    float
        The distance
    """
    config = resolve_config(config)
    metric = config["dist_metric"]
    logger.debug("Computing '%s' distance", metric)
    match metric:
        case "ssd":
            return ssd(x, y)
        case "euclidean":
            return euclidean(x, y)
        case "manhattan":
            return manhattan(x, y)
        case "chebyshev":
            return chebyshev(x, y)
        case "correlation":
            return correlation_distance(x, y)
        case "dtw":
            return dtw(x, y, window=config["window"], init=config["init"])
        case "dtw_default":
            return dtw_default_window(x, y)
        case "dtw_full":
            return dtw_full(x, y)
        case "fastdtw":
            return fastdtw_distance(x, y, radius=config["fastdtw_radius"])
        case "lcss":
            return lcss(x, y, config["epsilon"])
        case "lcss_fast":
            return lcss_fast(x, y, config["epsilon"], config["max_length"])
        case "edr":
            return edr(x, y, config["epsilon"])
        case "edr_fast":
            return edr_fast(x, y, config["epsilon"], config["max_length"])
        case "edr_sampled":
            return edr_sampled(x, y, config["epsilon"], config["sample_rate"])
        case _:
            raise InvalidInput(f"Unrecognized distance metric: {metric}")
