"""A raster image placed in a rectangle of data space."""

from __future__ import annotations

import math
from typing import Any


def _image_size(img: Any) -> tuple[int, int]:
    size = getattr(img, "size", None)
    if isinstance(size, tuple) and len(size) == 2:
        return int(size[0]), int(size[1])
    rows = len(img)
    cols = len(img[0]) if rows else 0
    return cols, rows


def _divide(a: float, b: int) -> float:
    if b == 0:
        return math.nan if a == 0 else math.inf
    return a / b


class ImagePlot:
    """An image scaled to fill the rectangle from (xmin, ymin) to (xmax, ymax).

    ``img`` is an object with a ``size`` of ``(width, height)`` or a sequence
    of pixel rows.
    """

    def __init__(self, img: Any, xmin: float, ymin: float, xmax: float, ymax: float) -> None:
        self.img = img
        self.cols, self.rows = _image_size(img)
        self.xmin, self.xmax = xmin, xmax
        self.ymin, self.ymax = ymin, ymax
        self.dx = _divide(abs(xmax - xmin), self.cols)
        self.dy = _divide(abs(ymax - ymin), self.rows)

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)``."""
        return self.xmin, self.xmax, self.ymin, self.ymax

    def x(self, c: int) -> float:
        """Return the data x coordinate of the left edge of column ``c``."""
        if c >= self.cols or c < 0:
            raise IndexError("image: illegal range")
        return self.xmin + c * self.dx

    def y(self, r: int) -> float:
        """Return the data y coordinate of the lower edge of row ``r``."""
        if r >= self.rows or r < 0:
            raise IndexError("image: illegal range")
        return self.ymin + r * self.dy