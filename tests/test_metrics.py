"""Tests for distance metrics."""

import pytest
import numpy as np
from pixel_voronoi.core.metrics import DistanceMetric


class TestDistanceMetric:
    """Test scalar and vectorized distance scores."""

    def test_euclidean_is_squared(self):
        assert DistanceMetric.EUCLIDEAN.distance(2, 2, 4, 4) == 8
        assert DistanceMetric.EUCLIDEAN.distance(7, 7, 4, 4) == 18

    def test_manhattan(self):
        assert DistanceMetric.MANHATTAN.distance(2, 2, 4, 4) == 4
        assert DistanceMetric.MANHATTAN.distance(7, 7, 4, 4) == 6

    def test_symmetric_and_zero(self):
        for metric in DistanceMetric:
            assert metric.distance(3, 9, 3, 9) == 0
            assert metric.distance(1, 5, 8, 2) == metric.distance(8, 2, 1, 5)

    def test_seed_right_of_pixel_does_not_wrap(self):
        # Seed coordinate larger than pixel coordinate gives a negative delta
        assert DistanceMetric.MANHATTAN.distance(0, 0, 5, 3) == 8
        assert DistanceMetric.EUCLIDEAN.distance(0, 0, 5, 3) == 34

    def test_vectorized_matches_scalar(self):
        xs = np.arange(10, dtype=np.int64)
        for metric in DistanceMetric:
            scores = metric.distance(4, 6, xs, 2)
            expected = [metric.distance(4, 6, int(x), 2) for x in xs]
            np.testing.assert_array_equal(scores, expected)


class TestMetricParsing:
    """Test metric lookup by name."""

    def test_parse_names(self):
        assert DistanceMetric.parse("euclidean") is DistanceMetric.EUCLIDEAN
        assert DistanceMetric.parse("Manhattan") is DistanceMetric.MANHATTAN

    def test_parse_legacy_spelling(self):
        assert DistanceMetric.parse("euclidian") is DistanceMetric.EUCLIDEAN

    def test_parse_member_passthrough(self):
        assert DistanceMetric.parse(DistanceMetric.MANHATTAN) is DistanceMetric.MANHATTAN

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            DistanceMetric.parse("chebyshev")
