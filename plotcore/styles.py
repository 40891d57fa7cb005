"""Default colours and dash patterns for drawing several data sets."""

from __future__ import annotations

Color = tuple[int, int, int, int]


def _rgb(r: int, g: int, b: int) -> Color:
    return (r, g, b, 255)


DARK_COLORS: list[Color] = [
    _rgb(238, 46, 47),
    _rgb(0, 140, 72),
    _rgb(24, 90, 169),
    _rgb(244, 125, 35),
    _rgb(102, 44, 145),
    _rgb(162, 29, 33),
    _rgb(180, 56, 148),
]

SOFT_COLORS: list[Color] = [
    _rgb(241, 90, 96),
    _rgb(122, 195, 106),
    _rgb(90, 155, 212),
    _rgb(250, 167, 91),
    _rgb(158, 103, 171),
    _rgb(206, 112, 88),
    _rgb(215, 127, 180),
]

DEFAULT_COLORS: list[Color] = SOFT_COLORS

DEFAULT_GLYPH_SHAPES: list[str] = [
    "ring",
    "square",
    "triangle",
    "cross",
    "plus",
    "circle",
    "box",
    "pyramid",
]

# Dash patterns, lengths in points; an empty pattern is a solid line.
DEFAULT_DASHES: list[list[float]] = [
    [],
    [6, 2],
    [2, 2],
    [1, 1],
    [5, 2, 1, 2],
    [10, 2, 2, 2, 2, 2, 2, 2],
    [10, 2, 2, 2],
    [5, 2, 5, 2, 2, 2, 2, 2],
    [4, 2, 4, 1, 1, 1, 1, 1, 1, 1],
]


def color(i: int) -> Color:
    """Return the ``i``-th default colour, wrapping around in both directions."""
    return DEFAULT_COLORS[i % len(DEFAULT_COLORS)]


def dashes(i: int) -> list[float]:
    """Return a copy of the ``i``-th default dash pattern, wrapping around."""
    return list(DEFAULT_DASHES[i % len(DEFAULT_DASHES)])