"""
Turns per-point anomaly flags into gradient stops along a [0, 100] axis.

Consecutive points are joined by straight lines, so the x position where a
line passes a threshold is found by linear interpolation inside the segment.
"""
import logging
from typing import List, Optional, Sequence

from .exceptions import InsufficientSamplesError
from .models.anomaly import ClassificationResult, ClassifiedPoint, FieldScore, SeriesStatistics
from .models.config import SegmentConfig
from .models.gradient import GradientStop, SegmentState

log = logging.getLogger(__name__)

AXIS_START = 0.0
AXIS_END = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _above(score: FieldScore) -> bool:
    return score.is_anomaly and score.z_score > 0


def _below(score: FieldScore) -> bool:
    return score.is_anomaly and score.z_score < 0


def _crossing_offset(prev: FieldScore, curr: FieldScore, limit: float, outside) -> Optional[float]:
    # Sides differ only if the values differ, so the division is safe
    if outside(prev) == outside(curr):
        return None
    return _clamp((limit - prev.value) / (curr.value - prev.value), 0.0, 1.0)


def find_crossings(
        points: Sequence[ClassifiedPoint],
        field_name: str,
        statistics: SeriesStatistics
) -> List[float]:
    """
    Offsets on the [0, 100] axis where the series passes one of its thresholds.

    Each of the N - 1 segments between consecutive points has width
    100 / (N - 1). A segment may cross both thresholds. The side of a
    point comes from its own anomaly flag, and the position inside the
    segment is interpolated against the unrounded limits.
    """
    if len(points) < 2:
        raise InsufficientSamplesError(f"At least 2 points are needed to build segments, got {len(points)}")

    segment_width = AXIS_END / (len(points) - 1)
    limits = ((statistics.limit_high, _above), (statistics.limit_low, _below))

    breakpoints = []
    for i in range(1, len(points)):
        prev = points[i - 1].scores[field_name]
        curr = points[i].scores[field_name]
        segment_start = (i - 1) * segment_width

        for limit, outside in limits:
            offset = _crossing_offset(prev, curr, limit, outside)
            if offset is not None:
                breakpoints.append(_clamp(segment_start + offset * segment_width, AXIS_START, AXIS_END))

    return sorted(breakpoints)


def build_segments(
        points: Sequence[ClassifiedPoint],
        field_name: str,
        breakpoints: Sequence[float],
        normal_color: str,
        anomaly_color: str
) -> List[GradientStop]:
    """
    Build gradient stops that switch color at every breakpoint.

    The color at offset 0 follows the classification of the first point.
    Each breakpoint contributes two stops at the same offset, the color
    before it and the color after it, so the gradient has hard edges.
    """
    if not points:
        raise InsufficientSamplesError("Cannot build segments without points")

    colors = {SegmentState.NORMAL: normal_color, SegmentState.ANOMALY: anomaly_color}
    state = SegmentState.ANOMALY if points[0].is_anomaly(field_name) else SegmentState.NORMAL

    stops = [GradientStop(offset=AXIS_START, color=colors[state], state=state)]
    for offset in sorted(_clamp(b, AXIS_START, AXIS_END) for b in breakpoints):
        stops.append(GradientStop(offset=offset, color=colors[state], state=state))
        state = state.flipped()
        stops.append(GradientStop(offset=offset, color=colors[state], state=state))
    stops.append(GradientStop(offset=AXIS_END, color=colors[state], state=state))

    return stops


def point_colors(
        points: Sequence[ClassifiedPoint],
        field_name: str,
        normal_color: str,
        anomaly_color: str
) -> List[str]:
    """Marker fill color of every point."""
    return [anomaly_color if p.is_anomaly(field_name) else normal_color for p in points]


def gradient_stops(result: ClassificationResult, config: Optional[SegmentConfig] = None) -> List[GradientStop]:
    config = config or SegmentConfig()
    breakpoints = find_crossings(result.points, result.field, result.statistics)
    log.debug("gradient_stops: field=%s crossings=%s", result.field, breakpoints)
    return build_segments(result.points, result.field, breakpoints, config.normal_color, config.anomaly_color)
