from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import numpy as np
import pytest

from pysatl_beta.distributions.support import UNIT_INTERVAL, ContinuousSupport, Support


class TestUnitInterval:
    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0.0, True),
            (1.0, True),
            (0.5, True),
            (-1e-12, False),
            (1.0 + 1e-12, False),
            (nan, False),
            (inf, False),
            (-inf, False),
        ],
        ids=["left_end", "right_end", "inside", "left_of", "right_of", "nan", "+inf", "-inf"],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in UNIT_INTERVAL) is expected_result
        assert UNIT_INTERVAL.contains(point) is expected_result

    def test_contains_array(self):
        result = UNIT_INTERVAL.contains(np.array([-0.5, 0.0, 0.25, 1.0, 2.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, True, False]

    def test_bounds(self):
        assert (UNIT_INTERVAL.left, UNIT_INTERVAL.right) == (0.0, 1.0)
        assert UNIT_INTERVAL.left_closed and UNIT_INTERVAL.right_closed

    def test_is_support(self):
        assert isinstance(UNIT_INTERVAL, Support)


class TestContinuousSupport:
    def test_open_end_excludes_bound(self):
        support = ContinuousSupport(left=0.0, right=1.0, left_closed=False, right_closed=True)
        assert 0.0 not in support
        assert 1.0 in support

    @pytest.mark.parametrize(
        "support, point, expected_result",
        [
            (ContinuousSupport(1, 0), 0.5, False),
            (ContinuousSupport(0, 0), 0.0, True),
            (ContinuousSupport(0, 0, right_closed=False), 0.0, False),
            (ContinuousSupport(left=0), 1e300, True),
            (ContinuousSupport(right=0), -1e300, True),
        ],
        ids=["reversed", "single_point", "degenerate_open", "ray_right", "ray_left"],
    )
    def test_contains_for_general_bounds(self, support, point, expected_result):
        assert (point in support) is expected_result

    def test_infinite_bounds_are_open(self):
        support = ContinuousSupport()
        assert support.left_closed is False
        assert support.right_closed is False
        assert inf not in support
