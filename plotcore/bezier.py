"""Two-dimensional Bézier curves evaluated with Miller's quick method."""

from __future__ import annotations

import math
from typing import Iterable, NamedTuple


class Point(NamedTuple):
    """A point in two dimensions."""

    x: float
    y: float


def _as_point(p: Point | Iterable[float]) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


class Curve:
    """A Bézier curve defined by its control points.

    ``points`` holds the control points as given and ``controls`` the same
    points weighted by the binomial coefficients used during evaluation.
    """

    def __init__(self, *args: Point | Iterable[float]) -> None:
        self.points: tuple[Point, ...] = tuple(_as_point(p) for p in args)
        n = len(self.points)
        controls = []
        weight = 1.0
        for i, p in enumerate(self.points):
            if i == 0:
                weight = 1.0
            elif i == 1:
                weight = float(n - 1)
            else:
                weight *= (n - i) / i
            controls.append(Point(p.x * weight, p.y * weight))
        self.controls: tuple[Point, ...] = tuple(controls)

    def __len__(self) -> int:
        return len(self.points)

    def __repr__(self) -> str:
        return f"Curve{self.points!r}"

    def point(self, t: float) -> Point:
        """Return the point at parameter ``t`` along the curve, 0 ≤ t ≤ 1."""
        if not self.controls:
            raise ValueError("curve has no control points")
        scaled = [self.controls[0]]
        u = t
        for c in self.controls[1:]:
            scaled.append(Point(c.x * u, c.y * u))
            u *= t

        t1 = 1 - t
        tt = t1
        px, py = scaled[-1]
        for s in reversed(scaled[:-1]):
            px += s.x * tt
            py += s.y * tt
            tt *= t1
        return Point(px, py)

    def curve(self, n: int) -> list[Point]:
        """Return ``n`` points evenly spaced in ``t`` along the curve.

        With fewer than two points the positions are undefined (NaN for one).
        """
        if n < 0:
            raise ValueError("number of points must not be negative")
        last = n - 1
        return [self.point(i / last if last else math.nan) for i in range(n)]