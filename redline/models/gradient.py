from dataclasses import dataclass
from enum import Enum


class SegmentState(str, Enum):
    NORMAL = 'normal'
    ANOMALY = 'anomaly'

    def flipped(self) -> 'SegmentState':
        return SegmentState.NORMAL if self is SegmentState.ANOMALY else SegmentState.ANOMALY


@dataclass(frozen=True)
class GradientStop:
    """A position on the [0, 100] axis where the line color is pinned."""
    offset: float
    color: str
    state: SegmentState

    def to_dict(self):
        return {'offset': self.offset, 'color': self.color}
