"""Heat maps of values arranged on a rectangular grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from .data import value_range


class GridXYZ:
    """Values on a rectangular grid with column and row coordinates.

    ``values`` is given row by row; ``xs`` and ``ys`` default to the column
    and row indices.
    """

    def __init__(
        self,
        values: Iterable[Iterable[float]],
        xs: Optional[Sequence[float]] = None,
        ys: Optional[Sequence[float]] = None,
    ) -> None:
        self.values = [[float(v) for v in row] for row in values]
        rows = len(self.values)
        cols = len(self.values[0]) if rows else 0
        if any(len(row) != cols for row in self.values):
            raise ValueError("grid rows differ in length")
        self.xs = [float(x) for x in (range(cols) if xs is None else xs)]
        self.ys = [float(y) for y in (range(rows) if ys is None else ys)]
        if len(self.xs) != cols:
            raise ValueError("number of x coordinates does not match columns")
        if len(self.ys) != rows:
            raise ValueError("number of y coordinates does not match rows")

    def dims(self) -> tuple[int, int]:
        """Return ``(columns, rows)``."""
        return len(self.xs), len(self.ys)

    def z(self, c: int, r: int) -> float:
        cols, rows = self.dims()
        if not (0 <= c < cols and 0 <= r < rows):
            raise IndexError("grid index out of range")
        return self.values[r][c]

    def x(self, c: int) -> float:
        if not 0 <= c < len(self.xs):
            raise IndexError("column index out of range")
        return self.xs[c]

    def y(self, r: int) -> float:
        if not 0 <= r < len(self.ys):
            raise IndexError("row index out of range")
        return self.ys[r]


def _scale(steps: int, span: float) -> float:
    if span == 0:
        return math.inf if steps else math.nan
    return steps / span


@dataclass
class HeatMap:
    """Colours the cells of a grid from a palette over ``[min, max]``.

    ``underflow`` and ``overflow`` colour values outside the range; ``nan``
    colours NaN values and cells that map to no unique palette colour.
    ``None`` means the cell is not filled.
    """

    grid: Any
    palette: Any
    underflow: Any = None
    overflow: Any = None
    nan: Any = None
    min: float = 0.0
    max: float = 0.0

    def _colors(self) -> list[Any]:
        colors = getattr(self.palette, "colors", None)
        if callable(colors):
            return list(colors())
        return list(self.palette)

    def _neighbour_offsets(self, i: int, n: int, coord) -> tuple[float, float]:
        if i == 0:
            high = 0.5 if n == 1 else (coord(1) - coord(0)) / 2
            low = -high
        elif i == n - 1:
            high = (coord(n - 1) - coord(n - 2)) / 2
            low = -high
        else:
            high = (coord(i + 1) - coord(i)) / 2
            low = -(coord(i) - coord(i - 1)) / 2
        return low, high

    def cell_bounds(self, c: int, r: int) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` of a cell in data coordinates."""
        cols, rows = self.grid.dims()
        if not (0 <= c < cols and 0 <= r < rows):
            raise IndexError("grid index out of range")
        left, right = self._neighbour_offsets(c, cols, self.grid.x)
        down, up = self._neighbour_offsets(r, rows, self.grid.y)
        x, y = self.grid.x(c), self.grid.y(r)
        return x + left, x + right, y + down, y + up

    def color_at(self, c: int, r: int) -> Any:
        """Return the fill colour of the cell at column ``c`` and row ``r``."""
        if self.min > self.max:
            raise ValueError("invalid Z range: min greater than max")
        pal = self._colors()
        if not pal:
            raise ValueError("heatmap: empty palette")
        ps = _scale(len(pal) - 1, self.max - self.min)
        v = self.grid.z(c, r)
        if v < self.min:
            return self.underflow
        if v > self.max:
            return self.overflow
        if math.isnan(v) or math.isinf(ps):
            return self.nan
        return pal[int((v - self.min) * ps + 0.5)]

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` covered by the cells."""
        cols, rows = self.grid.dims()
        x, y = self.grid.x, self.grid.y
        if cols == 1:
            xmin, xmax = x(0) - 0.5, x(0) + 0.5
        else:
            xmax = x(cols - 1) + (x(cols - 1) - x(cols - 2)) / 2
            xmin = x(0) - (x(1) - x(0)) / 2
        if rows == 1:
            ymin, ymax = y(0) - 0.5, y(0) + 0.5
        else:
            ymax = y(rows - 1) + (y(rows - 1) - y(rows - 2)) / 2
            ymin = y(0) - (y(1) - y(0)) / 2
        return xmin, xmax, ymin, ymax


def new_heat_map(grid: Any, palette: Any) -> HeatMap:
    """Return a heat map of the grid.

    The range is taken from the grid's own ``min()`` and ``max()`` when it
    has them, otherwise from its values, ignoring NaN.
    """
    get_min = getattr(grid, "min", None)
    get_max = getattr(grid, "max", None)
    if callable(get_min) and callable(get_max):
        lo, hi = get_min(), get_max()
    else:
        cols, rows = grid.dims()
        lo, hi = value_range(
            grid.z(c, r) for c in range(cols) for r in range(rows)
        )
    return HeatMap(grid=grid, palette=palette, min=lo, max=hi)