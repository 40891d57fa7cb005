"""Points summarising groups of points, with error ranges in x and y."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from .data import XY, ErrorRange, check_floats, x_values, y_values

Summary = Callable[[list[float]], tuple[float, float, float]]


@dataclass
class ErrorPoints:
    """Centre points with their x and y error ranges."""

    xys: list[XY]
    x_errors: list[ErrorRange]
    y_errors: list[ErrorRange]


def new_error_points(f: Summary, *args: Iterable[Any]) -> ErrorPoints:
    """Summarise each group of x, y pairs with ``f``.

    ``f`` takes the x (then the y) values of a group and returns the centre
    and the low and high errors. Infinite inputs or results raise
    :class:`~plotcore.data.InfinityError`.
    """
    xys, x_errors, y_errors = [], [], []
    for group in args:
        pairs = list(group)
        xs, ys = x_values(pairs), y_values(pairs)
        for x, y in zip(xs, ys):
            check_floats(x, y)
        cx, xlo, xhi = f(xs)
        check_floats(cx, xlo, xhi)
        cy, ylo, yhi = f(ys)
        check_floats(cy, ylo, yhi)
        xys.append(XY(cx, cy))
        x_errors.append(ErrorRange(xlo, xhi))
        y_errors.append(ErrorRange(ylo, yhi))
    return ErrorPoints(xys=xys, x_errors=x_errors, y_errors=y_errors)


def mean_and_conf95(values: Sequence[float]) -> tuple[float, float, float]:
    """Return the mean and the 95% confidence interval half-width twice.

    With no values every result is NaN.
    """
    n = len(values)
    if n == 0:
        return math.nan, math.nan, math.nan
    mean = sum(values) / n
    stdev = math.sqrt(sum((v - mean) ** 2 for v in values) / n)
    conf = 1.96 * stdev / math.sqrt(n)
    return mean, conf, conf


def median_and_min_max(values: Sequence[float]) -> tuple[float, float, float]:
    """Return the median and its distances to the minimum and maximum.

    For an even count the centre is halfway between the two values just
    above the middle of the sorted data; two values are too few for that
    and raise :class:`IndexError`.
    """
    n = len(values)
    if n == 0:
        raise ValueError("median_and_min_max: no values")
    if n == 1:
        return values[0], 0.0, 0.0
    vls = sorted(values)
    half = n // 2
    if n % 2 == 0:
        if half + 1 >= n:
            raise IndexError("median_and_min_max: too few values")
        med = (vls[half + 1] - vls[half]) / 2 + vls[half]
    else:
        med = vls[half]
    return med, med - vls[0], vls[-1] - med