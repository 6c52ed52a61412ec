import logging
import math
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .exceptions import InsufficientSamplesError, InvalidSampleError
from .models.anomaly import ClassificationResult, ClassifiedPoint, FieldScore, SeriesStatistics
from .models.config import ClassifierConfig
from .statistics import describe

log = logging.getLogger(__name__)

MIN_SAMPLES = 2


def _field_values(samples: Sequence[Mapping[str, Any]], field_name: str) -> List[float]:
    values = []
    for i, record in enumerate(samples):
        try:
            value = record[field_name]
        except KeyError:
            raise InvalidSampleError(f"Sample {i} has no field {field_name!r}") from None
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise InvalidSampleError(f"Sample {i} field {field_name!r} is not a finite number: {value!r}")
        values.append(float(value))
    return values


def z_scores(values: Sequence[float], mean: float, std_dev: float) -> np.ndarray:
    """
    Z-score of every value. A zero standard deviation yields all zeros
    instead of non-finite scores.
    """
    arr = np.asarray(values, dtype=float)
    if std_dev == 0:
        return np.zeros_like(arr)
    return (arr - mean) / std_dev


def _score_field(
        samples: Sequence[Mapping[str, Any]],
        field_name: str,
        config: ClassifierConfig
) -> Tuple[List[FieldScore], SeriesStatistics]:
    values = _field_values(samples, field_name)
    stats = describe(values, z_threshold=config.z_threshold, precision=config.precision, field=field_name)

    if stats.std_dev == 0:
        log.warning("classify: field %s is constant (%s), no point is flagged", field_name, stats.mean)

    scores = [
        FieldScore(value=v, z_score=float(z), is_anomaly=bool(abs(z) > config.z_threshold))
        for v, z in zip(values, z_scores(values, stats.mean, stats.std_dev))
    ]
    return scores, stats


def _check_length(samples: Sequence[Mapping[str, Any]]):
    if len(samples) < MIN_SAMPLES:
        raise InsufficientSamplesError(
            f"Not enough samples for classification (minimum {MIN_SAMPLES} required, got {len(samples)})"
        )


def classify_fields(
        samples: Sequence[Mapping[str, Any]],
        field_names: Sequence[str],
        config: Optional[ClassifierConfig] = None
) -> Tuple[List[ClassifiedPoint], Dict[str, SeriesStatistics]]:
    """
    Classify several fields that share the same index axis.

    Args:
        samples: Ordered records holding every field in field_names
        field_names: Names of the numeric fields to score
        config: ClassifierConfig to use, defaults apply when omitted

    Returns:
        Tuple containing:
            - One ClassifiedPoint per record, with a score for every field
            - Dictionary mapping each field to its SeriesStatistics
    """
    config = config or ClassifierConfig()
    _check_length(samples)

    points = [ClassifiedPoint(index=i, record=record) for i, record in enumerate(samples)]
    statistics: Dict[str, SeriesStatistics] = {}

    for field_name in field_names:
        scores, stats = _score_field(samples, field_name, config)
        for point, score in zip(points, scores):
            point.scores[field_name] = score
        statistics[field_name] = stats

        log.debug(
            "classify: field=%s mean=%s std_dev=%s thresholds=(%s, %s) anomalies=%d",
            field_name, stats.mean, stats.std_dev, stats.threshold_low, stats.threshold_high,
            sum(1 for s in scores if s.is_anomaly),
        )

    return points, statistics


def classify(
        samples: Sequence[Mapping[str, Any]],
        field_name: str,
        config: Optional[ClassifierConfig] = None
) -> ClassificationResult:
    """Classify a single field of the samples."""
    points, statistics = classify_fields(samples, [field_name], config=config)
    return ClassificationResult(field=field_name, points=points, statistics=statistics[field_name])
