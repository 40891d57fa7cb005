import math
import random

import pytest

from plotcore.data import InfinityError
from plotcore.errorpoints import (
    mean_and_conf95,
    median_and_min_max,
    new_error_points,
)


def _groups():
    rnd = random.Random(1)
    groups = []
    for i in range(5):
        groups.append(
            [(i + rnd.random() - 0.5, i + rnd.random() - 0.5) for _ in range(10)]
        )
    return groups


def test_error_points_example_mean():
    groups = _groups()
    pts = new_error_points(mean_and_conf95, *groups)
    assert len(pts.xys) == len(pts.x_errors) == len(pts.y_errors) == 5
    for i, p in enumerate(pts.xys):
        assert abs(p.x - i) < 0.5
        assert abs(p.y - i) < 0.5
        assert pts.x_errors[i].low == pts.x_errors[i].high >= 0


def test_error_points_rejects_infinite_input():
    with pytest.raises(InfinityError):
        new_error_points(mean_and_conf95, [(1, 1), (math.inf, 2)])


def test_error_points_rejects_infinite_summary():
    with pytest.raises(InfinityError):
        new_error_points(lambda vs: (math.inf, 0, 0), [(1, 1)])


def test_mean_and_conf95():
    assert mean_and_conf95([2, 2, 2]) == (2, 0, 0)
    mean, low, high = mean_and_conf95([1, 1, 3, 3])
    assert mean == 2
    assert low == high == pytest.approx(0.98)


def test_mean_and_conf95_empty_is_nan():
    mean, low, high = mean_and_conf95([])
    assert [math.isnan(mean), math.isnan(low), math.isnan(high)] == [True, True, True]


def test_median_odd():
    assert median_and_min_max([3, 1, 2]) == (2, 1, 1)


def test_median_even():
    assert median_and_min_max([4, 1, 3, 2]) == (3.5, 2.5, 0.5)


def test_median_single():
    assert median_and_min_max([7.5]) == (7.5, 0, 0)


def test_median_does_not_modify_input():
    data = [3, 1, 2]
    median_and_min_max(data)
    assert data == [3, 1, 2]


def test_median_empty_raises():
    with pytest.raises(ValueError):
        median_and_min_max([])


def test_median_two_values_raises():
    with pytest.raises(IndexError):
        median_and_min_max([1, 2])