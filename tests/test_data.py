import math

import pytest

from plotcore.data import (
    XY,
    XYZ,
    ErrorRange,
    InfinityError,
    NoDataError,
    check_floats,
    copy_values,
    copy_xys,
    copy_xyzs,
    value_range,
    x_values,
    xy_range,
    y_values,
)


def test_value_range_ignores_nan():
    assert value_range([3.0, math.nan, -2.0, 5.0]) == (-2.0, 5.0)


def test_value_range_empty_is_inverted_infinity():
    assert value_range([]) == (math.inf, -math.inf)
    assert value_range([math.nan]) == (math.inf, -math.inf)


def test_value_range_bounds_every_value():
    data = [0.25, 7.5, -1.5, 3.0]
    lo, hi = value_range(data)
    assert all(lo <= v <= hi for v in data)
    assert lo in data and hi in data


def test_check_floats_rejects_infinity():
    with pytest.raises(InfinityError, match="Infinite data point"):
        check_floats(1.0, -math.inf)


def test_check_floats_allows_nan():
    assert check_floats(1.0, math.nan) is None


def test_copy_values_empty_raises():
    with pytest.raises(NoDataError, match="No data points"):
        copy_values([])


def test_copy_values_infinite_raises():
    with pytest.raises(InfinityError):
        copy_values([1.0, math.inf])


def test_copy_values_is_independent_copy():
    data = [1.0, 2.0, 3.0]
    copied = copy_values(data)
    assert copied == data
    copied[0] = 99.0
    assert data[0] == 1.0


def test_copy_xys_round_trip():
    data = [(1.0, 2.0), XY(3.0, 4.0)]
    copied = copy_xys(data)
    assert copied == [XY(1.0, 2.0), XY(3.0, 4.0)]
    assert x_values(copied) == [1.0, 3.0]
    assert y_values(copied) == [2.0, 4.0]


def test_copy_xys_empty_is_allowed():
    assert copy_xys([]) == []


def test_copy_xys_infinite_raises():
    with pytest.raises(InfinityError):
        copy_xys([(0.0, math.inf)])


def test_copy_xys_from_xyz_uses_x_and_y():
    assert copy_xys([XYZ(1.0, 2.0, 3.0)]) == [XY(1.0, 2.0)]


def test_copy_xyzs_round_trip_and_error():
    data = [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]
    assert copy_xyzs(data) == [XYZ(*d) for d in data]
    with pytest.raises(InfinityError):
        copy_xyzs([(1.0, 2.0, math.inf)])


def test_xy_range_matches_value_range_of_components():
    data = [(1.0, -4.0), (-2.0, 6.0), (math.nan, 0.5)]
    xmin, xmax, ymin, ymax = xy_range(data)
    assert (xmin, xmax) == value_range(x_values(data))
    assert (ymin, ymax) == value_range(y_values(data))
    assert (xmin, xmax, ymin, ymax) == (-2.0, 1.0, -4.0, 6.0)


def test_error_range_fields():
    e = ErrorRange(0.5, 1.5)
    assert (e.low, e.high) == (0.5, 1.5)