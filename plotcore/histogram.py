"""Histograms: binning of weighted x values into equal-width bins."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from .data import value_range, x_values, y_values

DEFAULT_FILL_COLOR = (128, 128, 128, 255)
DEFAULT_LINE_COLOR = (0, 0, 0, 255)
DEFAULT_LINE_WIDTH = 1.0


@dataclass
class HistogramBin:
    """A range of x values and the total weight that falls within it."""

    min: float
    max: float
    weight: float = 0.0


@dataclass
class Histogram:
    """A histogram made of equal-width bins.

    ``fill_color`` of ``None`` disables filling the bars. With ``log_y`` set
    the lower end of the y range is chosen so the smallest non-empty bin
    remains visible on a logarithmic axis.
    """

    bins: list[HistogramBin]
    width: float
    fill_color: Any = DEFAULT_FILL_COLOR
    line_color: Any = DEFAULT_LINE_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    log_y: bool = False
    line_dashes: list[float] = field(default_factory=list)

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` covered by the bins."""
        xmin, xmax = math.inf, -math.inf
        ymin, ymax = math.inf, -math.inf
        ylow = math.inf  # smallest non-zero weight
        for b in self.bins:
            xmax = max(xmax, b.max)
            xmin = min(xmin, b.min)
            ymax = max(ymax, b.weight)
            ymin = min(ymin, b.weight)
            if b.weight != 0 and b.weight < ylow:
                ylow = b.weight
        if self.log_y:
            if ymin == 0 and ylow != math.inf:
                ymin = ylow * 0.5
        else:
            ymin = 0.0
        return xmin, xmax, ymin, ymax

    def normalize(self, total: float) -> None:
        """Scale the weights so the area under the histogram equals ``total``."""
        mass = sum(b.weight for b in self.bins)
        denominator = self.width * mass
        if denominator == 0:
            raise ValueError("cannot normalize a histogram with no mass")
        factor = total / denominator
        for b in self.bins:
            b.weight *= factor


def bin_points(xys: Iterable[Any], n: int) -> tuple[list[HistogramBin], float]:
    """Bin the x, y pairs into ``n`` bins, summing y as the weight.

    When ``n`` is not positive the number of bins is the ceiling of the
    square root of the summed weights (each counted as at least 1).
    Returns the bins and their common width.
    """
    pairs = list(xys)
    xs = x_values(pairs)
    ys = y_values(pairs)
    xmin, xmax = value_range(xs)
    if n <= 0:
        m = sum(max(y, 1.0) for y in ys)
        n = int(math.ceil(math.sqrt(m)))
    if n < 1 or xmax <= xmin:
        n = 1

    w = (xmax - xmin) / n
    if w == 0:
        w = 1.0
    bins = [HistogramBin(xmin + i * w, xmin + (i + 1) * w) for i in range(n)]

    for x, y in zip(xs, ys):
        try:
            index = int((x - xmin) / w)
        except (ValueError, OverflowError) as exc:
            raise ValueError(
                f"{x:g}, xmin={xmin:g}, xmax={xmax:g}, w={w:g}, n={n}"
            ) from exc
        if x == xmax:
            index = n - 1
        if index < 0 or index >= n:
            raise ValueError(
                f"{x:g}, xmin={xmin:g}, xmax={xmax:g}, w={w:g}, bin={index}, n={n}"
            )
        bins[index].weight += y
    return bins, w


def new_histogram(xys: Iterable[Any], n: int) -> Histogram:
    """Return a histogram of the pairs, each y being the count for its x."""
    if n <= 0:
        raise ValueError("Histogram with non-positive number of bins")
    bins, width = bin_points(xys, n)
    return Histogram(bins=bins, width=width)


def new_hist(values: Iterable[float], n: int) -> Histogram:
    """Return a histogram of the values, each counted once."""
    return new_histogram([(v, 1.0) for v in values], n)