from dataclasses import dataclass

from ..exceptions import InvalidConfigError


@dataclass
class ClassifierConfig:
    """Configuration for z-score classification."""
    # Points with |z| strictly above this value are anomalies
    z_threshold: float = 1.0

    # Decimal places kept on the raw-value thresholds
    precision: int = 2

    def __post_init__(self):
        if self.z_threshold <= 0:
            raise InvalidConfigError(f"z_threshold must be positive, got {self.z_threshold}")
        if self.precision < 0:
            raise InvalidConfigError(f"precision must be >= 0, got {self.precision}")


@dataclass
class SegmentConfig:
    """Colors used when turning classified points into gradient stops."""
    normal_color: str = '#8884d8'  # Line color outside anomalous ranges
    anomaly_color: str = 'red'  # Line color inside anomalous ranges
