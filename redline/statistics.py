from typing import Optional, Sequence

import numpy as np

from .exceptions import InsufficientSamplesError
from .models.anomaly import SeriesStatistics


def _as_array(values: Sequence[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        raise InsufficientSamplesError("Cannot compute statistics of an empty sequence")
    return arr


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    return float(_as_array(values).mean())


def std_dev(values: Sequence[float], mean_value: Optional[float] = None) -> float:
    """
    Population standard deviation (variance divided by N, not N - 1).

    Args:
        values: Numeric sequence
        mean_value: Precomputed mean of the values, computed when omitted

    Returns:
        The standard deviation as a float
    """
    arr = _as_array(values)
    # A repeated float can still average to a slightly different value
    if np.ptp(arr) == 0:
        return 0.0
    if mean_value is None:
        mean_value = float(arr.mean())
    return float(np.sqrt(np.sum((arr - mean_value) ** 2) / arr.size))


def describe(
        values: Sequence[float],
        z_threshold: float = 1.0,
        precision: int = 2,
        field: Optional[str] = None
) -> SeriesStatistics:
    """
    Compute mean, standard deviation and the raw-value thresholds that
    correspond to z = +z_threshold and z = -z_threshold.
    """
    mean_value = mean(values)
    deviation = std_dev(values, mean_value)

    return SeriesStatistics(
        field=field,
        mean=mean_value,
        std_dev=deviation,
        threshold_high=round(mean_value + z_threshold * deviation, precision),
        threshold_low=round(mean_value - z_threshold * deviation, precision),
        z_threshold=z_threshold,
    )
