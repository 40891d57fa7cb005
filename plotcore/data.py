"""Basic data containers and validation helpers for plot data."""

from __future__ import annotations

import math
from typing import Any, Iterable, NamedTuple


class XY(NamedTuple):
    """An x and y value."""

    x: float
    y: float


class XYZ(NamedTuple):
    """An x, y and z value."""

    x: float
    y: float
    z: float


class ErrorRange(NamedTuple):
    """A low and high error value."""

    low: float
    high: float


class InfinityError(ValueError):
    """Raised when a data point is infinite."""

    def __init__(self, message: str = "Infinite data point") -> None:
        super().__init__(message)


class NoDataError(ValueError):
    """Raised when there are no data points."""

    def __init__(self, message: str = "No data points") -> None:
        super().__init__(message)


def _as_xy(item: Any) -> XY:
    if isinstance(item, XY):
        return item
    if hasattr(item, "x") and hasattr(item, "y"):
        return XY(float(item.x), float(item.y))
    x, y = item
    return XY(float(x), float(y))


def _as_xyz(item: Any) -> XYZ:
    if isinstance(item, XYZ):
        return item
    if all(hasattr(item, name) for name in ("x", "y", "z")):
        return XYZ(float(item.x), float(item.y), float(item.z))
    x, y, z = item
    return XYZ(float(x), float(y), float(z))


def value_range(values: Iterable[float]) -> tuple[float, float]:
    """Return the minimum and maximum of the values, ignoring NaN.

    With no usable values the result is ``(inf, -inf)``.
    """
    lo, hi = math.inf, -math.inf
    for v in values:
        if math.isnan(v):
            continue
        lo = min(lo, v)
        hi = max(hi, v)
    return lo, hi


def check_floats(*args: float) -> None:
    """Raise :class:`InfinityError` if any argument is infinite."""
    if any(math.isinf(f) for f in args):
        raise InfinityError()


def copy_values(values: Iterable[float]) -> list[float]:
    """Return a checked copy of the values.

    Raises :class:`NoDataError` when empty and :class:`InfinityError` when a
    value is infinite.
    """
    copied = [float(v) for v in values]
    if not copied:
        raise NoDataError()
    for v in copied:
        check_floats(v)
    return copied


def copy_xys(data: Iterable[Any]) -> list[XY]:
    """Return a checked copy of the x, y pairs in ``data``."""
    copied = []
    for item in data:
        xy = _as_xy(item)
        check_floats(xy.x, xy.y)
        copied.append(xy)
    return copied


def copy_xyzs(data: Iterable[Any]) -> list[XYZ]:
    """Return a checked copy of the x, y, z triples in ``data``."""
    copied = []
    for item in data:
        xyz = _as_xyz(item)
        check_floats(xyz.x, xyz.y, xyz.z)
        copied.append(xyz)
    return copied


def x_values(xys: Iterable[Any]) -> list[float]:
    """Return the x values of the pairs."""
    return [_as_xy(item).x for item in xys]


def y_values(xys: Iterable[Any]) -> list[float]:
    """Return the y values of the pairs."""
    return [_as_xy(item).y for item in xys]


def xy_range(xys: Iterable[Any]) -> tuple[float, float, float, float]:
    """Return ``(xmin, xmax, ymin, ymax)`` of the pairs, ignoring NaN."""
    pairs = [_as_xy(item) for item in xys]
    xmin, xmax = value_range(p.x for p in pairs)
    ymin, ymax = value_range(p.y for p in pairs)
    return xmin, xmax, ymin, ymax