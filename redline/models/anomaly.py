from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class SeriesStatistics:
    """Statistics of one named field, computed over the whole sample."""
    field: str | None
    mean: float
    std_dev: float  # Population standard deviation
    threshold_high: float  # mean + z_threshold * std_dev, rounded
    threshold_low: float  # mean - z_threshold * std_dev, rounded
    z_threshold: float = 1.0

    @property
    def limit_high(self) -> float:
        """Unrounded counterpart of threshold_high."""
        return self.mean + self.z_threshold * self.std_dev

    @property
    def limit_low(self) -> float:
        return self.mean - self.z_threshold * self.std_dev


@dataclass
class FieldScore:
    """Z-score of a single value and whether it is an outlier."""
    value: float
    z_score: float
    is_anomaly: bool


@dataclass
class ClassifiedPoint:
    """A sample record augmented with per-field scores."""
    index: int
    record: Mapping[str, Any]
    scores: Dict[str, FieldScore] = field(default_factory=dict)

    def value(self, field_name: str) -> float:
        return self.scores[field_name].value

    def z_score(self, field_name: str) -> float:
        return self.scores[field_name].z_score

    def is_anomaly(self, field_name: str) -> bool:
        return self.scores[field_name].is_anomaly


@dataclass
class ClassificationResult:
    """Classified points and thresholds for one field."""
    field: str
    points: List[ClassifiedPoint]
    statistics: SeriesStatistics

    @property
    def anomaly_indices(self) -> List[int]:
        return [p.index for p in self.points if p.is_anomaly(self.field)]
