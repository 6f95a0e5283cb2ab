from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import stats

from pysatl_beta.stats.beta import (
    entropy,
    kurtosis,
    mean,
    median,
    mode,
    skewness,
    stdev,
    variance,
)

SHAPES = [(0.5, 0.5), (0.7, 3.0), (1.0, 3.0), (2.0, 4.0), (4.0, 12.0), (9.0, 1.5), (30.0, 30.0)]


class TestMomentsAgainstScipy:
    @pytest.mark.parametrize("a, b", SHAPES)
    def test_mean_variance_skewness_kurtosis(self, a, b):
        m, v, s, k = (float(value) for value in stats.beta(a, b).stats(moments="mvsk"))

        assert mean(a, b) == pytest.approx(m, rel=1e-14)
        assert variance(a, b) == pytest.approx(v, rel=1e-12)
        assert stdev(a, b) == pytest.approx(math.sqrt(v), rel=1e-12)
        assert skewness(a, b) == pytest.approx(s, rel=1e-10, abs=1e-14)
        assert kurtosis(a, b) == pytest.approx(k, rel=1e-10, abs=1e-14)

    @pytest.mark.parametrize("a, b", SHAPES)
    def test_entropy(self, a, b):
        assert entropy(a, b) == pytest.approx(float(stats.beta(a, b).entropy()), rel=1e-10, abs=1e-12)

    @pytest.mark.parametrize("a, b", SHAPES)
    def test_median(self, a, b):
        assert median(a, b) == pytest.approx(float(stats.beta(a, b).median()), rel=1e-10)


class TestUniform:
    def test_summary_statistics(self):
        assert mean(1.0, 1.0) == 0.5
        assert variance(1.0, 1.0) == pytest.approx(1.0 / 12.0)
        assert skewness(1.0, 1.0) == 0.0
        assert kurtosis(1.0, 1.0) == pytest.approx(-1.2)
        assert entropy(1.0, 1.0) == pytest.approx(0.0, abs=1e-15)
        assert median(1.0, 1.0) == 0.5


class TestMode:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (2.0, 4.0, 0.25),
            (5.0, 5.0, 0.5),
            (3.0, 1.0, 1.0),
            (1.0, 3.0, 0.0),
            (0.5, 3.0, 0.0),
            (3.0, 0.5, 1.0),
            (1.0, 0.5, 1.0),
            (0.5, 1.0, 0.0),
            (0.8, 1.5, 0.0),
            (1.5, 0.8, 1.0),
        ],
    )
    def test_unique_mode(self, a, b, expected):
        assert mode(a, b) == pytest.approx(expected)

    @pytest.mark.parametrize("a, b", [(1.0, 1.0), (0.5, 0.5), (0.2, 0.9)])
    def test_mode_not_unique(self, a, b):
        assert math.isnan(mode(a, b))

    def test_mode_maximizes_density(self):
        a, b = 4.0, 12.0
        x = mode(a, b)
        dist = stats.beta(a, b)
        assert dist.pdf(x) >= dist.pdf(x - 1e-4)
        assert dist.pdf(x) >= dist.pdf(x + 1e-4)


class TestMedianClosedForms:
    def test_symmetric(self):
        assert median(7.3, 7.3) == 0.5

    def test_unit_alpha(self):
        assert median(1.0, 3.0) == pytest.approx(1.0 - 2.0 ** (-1.0 / 3.0), rel=1e-14)

    def test_unit_beta(self):
        assert median(3.0, 1.0) == pytest.approx(2.0 ** (-1.0 / 3.0), rel=1e-14)

    def test_general_case_lies_between_mode_and_mean(self):
        # for 1 < alpha < beta: mode <= median <= mean
        a, b = 2.0, 4.0
        assert mode(a, b) <= median(a, b) <= mean(a, b)


@pytest.mark.parametrize("func", [mean, variance, stdev, mode, median, skewness, kurtosis, entropy])
@pytest.mark.parametrize("a, b", [(math.nan, 2.0), (2.0, math.nan), (0.0, 2.0), (2.0, -1.0)])
def test_invalid_shapes_give_nan(func, a, b):
    assert math.isnan(func(a, b))
