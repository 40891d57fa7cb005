"""Scatter plots of glyphs and polygons made of one or more rings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from .data import XY, copy_xys, value_range, xy_range

DEFAULT_COLOR = (0, 0, 0, 255)
DEFAULT_LINE_WIDTH = 1.0
DEFAULT_GLYPH_RADIUS = 2.5
DEFAULT_GLYPH_SHAPE = "ring"


@dataclass
class Scatter:
    """A glyph drawn at each of a set of points.

    ``glyph_style_func``, when set, is called with a point's index and
    overrides the common glyph style for that point.
    """

    xys: list[XY]
    color: Any = DEFAULT_COLOR
    radius: float = DEFAULT_GLYPH_RADIUS
    shape: str = DEFAULT_GLYPH_SHAPE
    glyph_style_func: Optional[Callable[[int], Any]] = None

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` of the points."""
        return xy_range(self.xys)


def new_scatter(xys: Iterable[Any]) -> Scatter:
    """Return a scatter of a checked copy of the points in the default style."""
    return Scatter(xys=copy_xys(xys))


@dataclass
class Polygon:
    """A polygon whose rings are lists of vertices.

    Inner rings wound opposite to the outer ring are holes. ``color`` of
    ``None`` leaves the polygon unfilled.
    """

    rings: list[list[XY]]
    line_color: Any = DEFAULT_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    line_dashes: list[float] = field(default_factory=list)
    color: Any = None

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` over all rings."""
        xmin, xmax = math.inf, -math.inf
        ymin, ymax = math.inf, -math.inf
        for ring in self.rings:
            rxmin, rxmax = value_range(p.x for p in ring)
            rymin, rymax = value_range(p.y for p in ring)
            xmin, xmax = min(xmin, rxmin), max(xmax, rxmax)
            ymin, ymax = min(ymin, rymin), max(ymax, rymax)
        return xmin, xmax, ymin, ymax

    def closed_rings(self) -> list[list[XY]]:
        """Return the rings, each ending on its first vertex as outlined."""
        closed = []
        for ring in self.rings:
            ring = list(ring)
            if ring and ring[-1] != ring[0]:
                ring.append(ring[0])
            closed.append(ring)
        return closed


def new_polygon(*args: Iterable[Any]) -> Polygon:
    """Return a polygon with the given rings, unfilled, in the default line style."""
    return Polygon(rings=[copy_xys(ring) for ring in args])