import logging
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .classifier import classify, classify_fields
from .exceptions import InvalidConfigError
from .models.anomaly import ClassificationResult
from .models.config import ClassifierConfig, SegmentConfig
from .models.gradient import GradientStop
from .segments import build_segments, find_crossings, point_colors

log = logging.getLogger(__name__)

OVERRIDES = frozenset({'z_threshold', 'precision', 'normal_color', 'anomaly_color'})

Samples = Sequence[Mapping[str, Any]]
Callback = Callable[[List[GradientStop], Dict[str, Any]], None]


class RedlineClient:
    def __init__(
            self,
            default_classifier_config: Optional[ClassifierConfig] = None,
            default_segment_config: Optional[SegmentConfig] = None
    ):
        self.default_classifier_config = default_classifier_config or ClassifierConfig()
        self.default_segment_config = default_segment_config or SegmentConfig()

    def _resolve_configs(
            self,
            classifier_config: Optional[ClassifierConfig],
            segment_config: Optional[SegmentConfig],
            overrides: Dict[str, Any]
    ) -> Tuple[ClassifierConfig, SegmentConfig]:
        unknown = set(overrides) - OVERRIDES
        if unknown:
            raise InvalidConfigError(f"Unknown config overrides: {', '.join(sorted(unknown))}")

        classifier_config = classifier_config or self.default_classifier_config
        segment_config = segment_config or self.default_segment_config

        classifier_config = replace(
            classifier_config,
            z_threshold=overrides.get('z_threshold', classifier_config.z_threshold),
            precision=overrides.get('precision', classifier_config.precision),
        )
        segment_config = replace(
            segment_config,
            normal_color=overrides.get('normal_color', segment_config.normal_color),
            anomaly_color=overrides.get('anomaly_color', segment_config.anomaly_color),
        )
        return classifier_config, segment_config

    def segment(
            self,
            result: ClassificationResult,
            segment_config: SegmentConfig
    ) -> Tuple[List[GradientStop], Dict[str, Any]]:
        """
        Build gradient stops for an already classified field.

        Returns:
            Tuple containing:
                - List of GradientStop objects ordered by offset
                - Dictionary with metadata about the classification
        """
        stats = result.statistics
        breakpoints = find_crossings(result.points, result.field, stats)
        stops = build_segments(
            result.points,
            result.field,
            breakpoints,
            segment_config.normal_color,
            segment_config.anomaly_color
        )

        anomaly_indices = result.anomaly_indices
        metadata = {
            'field': result.field,
            'data_points_analyzed': len(result.points),
            'anomalies_found': len(anomaly_indices),
            'anomaly_indices': anomaly_indices,
            'mean': stats.mean,
            'std_dev': stats.std_dev,
            'thresholds': {
                'high': stats.threshold_high,
                'low': stats.threshold_low,
            },
            'crossings': breakpoints,
            'point_colors': point_colors(
                result.points,
                result.field,
                segment_config.normal_color,
                segment_config.anomaly_color
            ),
            'z_scores': [p.z_score(result.field) for p in result.points],
        }

        return stops, metadata

    def analyze(
            self,
            samples: Samples,
            field_name: str,
            classifier_config: Optional[ClassifierConfig] = None,
            segment_config: Optional[SegmentConfig] = None,
            callback: Optional[Callback] = None,
            **kwargs
    ) -> Tuple[List[GradientStop], Dict[str, Any]]:
        """
        Classify one field of the samples and turn it into gradient stops.

        Args:
            samples: Ordered records holding the field
            field_name: Name of the numeric field to analyze
            classifier_config: ClassifierConfig to use
            segment_config: SegmentConfig to use
            callback: Optional callback receiving the stops and metadata
            **kwargs: Optional arguments that override config values
                      (z_threshold, precision, normal_color, anomaly_color)

        Returns:
            Tuple containing:
                - List of GradientStop objects ordered by offset
                - Dictionary with metadata about the classification
        """
        classifier_config, segment_config = self._resolve_configs(classifier_config, segment_config, kwargs)

        result = classify(samples, field_name, config=classifier_config)
        stops, metadata = self.segment(result, segment_config)

        log.debug("analyze: field=%s stops=%d anomalies=%d", field_name, len(stops), metadata['anomalies_found'])

        if callback:
            callback(stops, metadata)

        return stops, metadata

    def analyze_fields(
            self,
            samples: Samples,
            fields: Union[Sequence[str], Mapping[str, SegmentConfig]],
            classifier_config: Optional[ClassifierConfig] = None,
            callback: Optional[Callback] = None,
            **kwargs
    ) -> Dict[str, Tuple[List[GradientStop], Dict[str, Any]]]:
        """
        Analyze several fields sharing the same index axis.

        Args:
            samples: Ordered records holding every field
            fields: Field names, or a mapping of field name to the SegmentConfig
                    holding that field's colors
            classifier_config: ClassifierConfig to use for every field
            callback: Optional callback, invoked once per field
            **kwargs: Optional arguments that override config values

        Returns:
            Dictionary mapping field names to their stops and metadata
        """
        if isinstance(fields, Mapping):
            segment_configs = dict(fields)
        else:
            segment_configs = {name: None for name in fields}

        classifier_config, _ = self._resolve_configs(classifier_config, None, kwargs)
        points, statistics = classify_fields(samples, list(segment_configs), config=classifier_config)

        results = {}
        for field_name, field_config in segment_configs.items():
            _, segment_config = self._resolve_configs(classifier_config, field_config, kwargs)
            result = ClassificationResult(field=field_name, points=points, statistics=statistics[field_name])
            stops, metadata = self.segment(result, segment_config)
            if callback:
                callback(stops, metadata)
            results[field_name] = (stops, metadata)

        return results
