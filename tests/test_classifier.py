import statistics
import unittest

from redline.classifier import classify, classify_fields, z_scores
from redline.datasets import PAGE_VIEWS
from redline.exceptions import InsufficientSamplesError, InvalidConfigError, InvalidSampleError
from redline.models.config import ClassifierConfig


class TestClassify(unittest.TestCase):
    def setUp(self):
        self.pv = [record['pv'] for record in PAGE_VIEWS]

    def test_page_views_thresholds(self):
        result = classify(PAGE_VIEWS, 'pv')
        m = statistics.fmean(self.pv)
        s = statistics.pstdev(self.pv)

        self.assertEqual(result.field, 'pv')
        self.assertEqual(result.statistics.threshold_high, round(m + s, 2))
        self.assertEqual(result.statistics.threshold_low, round(m - s, 2))

    def test_page_views_spike_is_anomaly(self):
        result = classify(PAGE_VIEWS, 'pv')

        self.assertTrue(result.points[2].is_anomaly('pv'))
        self.assertEqual(result.points[2].value('pv'), 9800.0)
        self.assertGreater(result.points[2].z_score('pv'), 1)
        self.assertEqual(result.anomaly_indices, [1, 2])

    def test_is_anomaly_iff_abs_z_above_one(self):
        result = classify(PAGE_VIEWS, 'uv')
        for point in result.points:
            score = point.scores['uv']
            self.assertEqual(score.is_anomaly, abs(score.z_score) > 1)
            # z sign follows the deviation from the mean
            self.assertEqual(score.z_score > 0, score.value > result.statistics.mean)

    def test_boundary_z_of_exactly_one_is_normal(self):
        samples = [{'v': 0}, {'v': 10}]
        result = classify(samples, 'v')

        self.assertEqual([p.z_score('v') for p in result.points], [-1.0, 1.0])
        self.assertEqual(result.anomaly_indices, [])

    def test_constant_series_has_no_anomalies(self):
        samples = [{'v': 7} for _ in range(5)]
        with self.assertLogs('redline.classifier', level='WARNING'):
            result = classify(samples, 'v')

        self.assertEqual(result.statistics.std_dev, 0.0)
        self.assertEqual(result.anomaly_indices, [])
        self.assertTrue(all(p.z_score('v') == 0.0 for p in result.points))

    def test_repeated_float_series_uses_constant_fallback(self):
        samples = [{'v': 0.1} for _ in range(3)]
        with self.assertLogs('redline.classifier', level='WARNING'):
            result = classify(samples, 'v')

        self.assertEqual(result.statistics.std_dev, 0.0)
        self.assertEqual([p.z_score('v') for p in result.points], [0.0, 0.0, 0.0])
        self.assertEqual(result.anomaly_indices, [])

    def test_custom_z_threshold(self):
        result = classify(PAGE_VIEWS, 'pv', config=ClassifierConfig(z_threshold=2.0))
        self.assertEqual(result.anomaly_indices, [2])

    def test_record_is_kept(self):
        result = classify(PAGE_VIEWS, 'pv')
        self.assertEqual(result.points[0].record['name'], 'Page A')
        self.assertEqual(result.points[6].index, 6)

    def test_insufficient_samples(self):
        with self.assertRaises(InsufficientSamplesError):
            classify([{'v': 1}], 'v')
        with self.assertRaises(InsufficientSamplesError):
            classify([], 'v')

    def test_missing_field(self):
        with self.assertRaises(InvalidSampleError):
            classify([{'v': 1}, {'w': 2}], 'v')

    def test_non_numeric_field(self):
        with self.assertRaises(InvalidSampleError):
            classify([{'v': 1}, {'v': 'two'}], 'v')
        with self.assertRaises(InvalidSampleError):
            classify([{'v': 1}, {'v': float('nan')}], 'v')
        with self.assertRaises(InvalidSampleError):
            classify([{'v': 1}, {'v': True}], 'v')


class TestClassifyFields(unittest.TestCase):
    def test_both_series_share_points(self):
        points, stats = classify_fields(PAGE_VIEWS, ['uv', 'pv'])

        self.assertEqual(len(points), len(PAGE_VIEWS))
        self.assertEqual(set(stats), {'uv', 'pv'})
        for point in points:
            self.assertEqual(set(point.scores), {'uv', 'pv'})

    def test_fields_are_independent(self):
        points, _ = classify_fields(PAGE_VIEWS, ['uv', 'pv'])
        single = classify(PAGE_VIEWS, 'uv')

        self.assertEqual(
            [p.is_anomaly('uv') for p in points],
            [p.is_anomaly('uv') for p in single.points],
        )
        self.assertEqual([i for i, p in enumerate(points) if p.is_anomaly('uv')], [0, 2, 4])


class TestZScores(unittest.TestCase):
    def test_zero_std_dev(self):
        self.assertEqual(list(z_scores([1, 1, 1], 1.0, 0.0)), [0.0, 0.0, 0.0])

    def test_values(self):
        self.assertEqual(list(z_scores([0, 5, 10], 5.0, 5.0)), [-1.0, 0.0, 1.0])


class TestClassifierConfig(unittest.TestCase):
    def test_rejects_invalid_values(self):
        with self.assertRaises(InvalidConfigError):
            ClassifierConfig(z_threshold=0)
        with self.assertRaises(InvalidConfigError):
            ClassifierConfig(precision=-1)


if __name__ == '__main__':
    unittest.main()
