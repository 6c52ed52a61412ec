from .anomaly import ClassificationResult, ClassifiedPoint, FieldScore, SeriesStatistics
from .config import ClassifierConfig, SegmentConfig
from .gradient import GradientStop, SegmentState

__all__ = [
    'ClassificationResult',
    'ClassifiedPoint',
    'ClassifierConfig',
    'FieldScore',
    'GradientStop',
    'SegmentConfig',
    'SegmentState',
    'SeriesStatistics',
]
