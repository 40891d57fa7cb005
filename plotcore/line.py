"""Lines connecting a sequence of points, optionally as steps."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from .data import XY, copy_xys, xy_range
from .markers import Scatter, new_scatter

DEFAULT_COLOR = (0, 0, 0, 255)
DEFAULT_LINE_WIDTH = 1.0


class StepKind(enum.IntEnum):
    """How two consecutive points are connected."""

    NO_STEP = 0
    PRE_STEP = 1
    MID_STEP = 2
    POST_STEP = 3


def _has_nan(p: XY) -> bool:
    return math.isnan(p.x) or math.isnan(p.y)


def step_points(points: Sequence[Any], kind: StepKind) -> list[XY]:
    """Return the vertices of the path through ``points`` for a step kind.

    ``PRE_STEP`` goes vertically then horizontally, ``POST_STEP``
    horizontally then vertically, and ``MID_STEP`` horizontally, vertically
    at the midpoint, then horizontally. No corner is added next to a point
    holding NaN, which breaks the line.
    """
    pts = [p if isinstance(p, XY) else XY(float(p[0]), float(p[1])) for p in points]
    if not pts:
        return []
    kind = StepKind(kind)
    out = [pts[0]]
    prev = pts[0]
    for pt in pts[1:]:
        if not (_has_nan(pt) or _has_nan(prev)):
            if kind is StepKind.PRE_STEP:
                out.append(XY(prev.x, pt.y))
            elif kind is StepKind.MID_STEP:
                mid = (prev.x + pt.x) / 2
                out.append(XY(mid, prev.y))
                out.append(XY(mid, pt.y))
            elif kind is StepKind.POST_STEP:
                out.append(XY(pt.x, prev.y))
        out.append(pt)
        prev = pt
    return out


@dataclass
class Line:
    """A line through points.

    A ``line_width`` of zero disables the line; ``fill_color`` other than
    ``None`` fills the area below it.
    """

    xys: list[XY]
    step_style: StepKind = StepKind.NO_STEP
    line_color: Any = DEFAULT_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    line_dashes: list[float] = field(default_factory=list)
    fill_color: Any = None

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(xmin, xmax, ymin, ymax)`` of the points."""
        return xy_range(self.xys)


def new_line(xys: Iterable[Any]) -> Line:
    """Return a line through a checked copy of the points in the default style."""
    return Line(xys=copy_xys(xys))


def new_line_points(xys: Iterable[Any]) -> tuple[Line, Scatter]:
    """Return a line and a scatter sharing the same copied points."""
    scatter = new_scatter(xys)
    return Line(xys=scatter.xys), scatter