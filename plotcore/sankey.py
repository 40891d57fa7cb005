"""Sankey diagrams: stocks as bars and the flows between them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .bezier import Curve, Point

DEFAULT_FONT_SIZE = 10.0
DEFAULT_LINE_STYLE = {"color": (0, 0, 0, 255), "width": 1.0, "dashes": []}

_DIRECTION_OFFSET_FRAC = 0.3
_CURVE_POINTS = 20


@dataclass(frozen=True)
class Flow:
    """An amount flowing from a source stock to a receptor stock.

    The source category must be lower than the receptor category and the
    value must not be negative. ``group`` is used for styling and legends.
    """

    source_label: str
    receptor_label: str
    source_category: int
    receptor_category: int
    value: float
    group: str = ""


@dataclass
class Stock:
    """A stock, its flow totals and its place on the value axis."""

    label: str
    category: int
    order: int
    receptor_value: float = 0.0
    source_value: float = 0.0
    min: float = 0.0
    max: float = 0.0


class Sankey:
    """A Sankey diagram built from flows.

    ``flow_style(group)`` returns ``(color, line_style)`` for a flow group and
    ``stock_style(label, category)`` returns ``(text, text_style, x_offset,
    y_offset, color, line_style)`` for a stock; both default to the diagram's
    common ``color``, ``line_style`` and ``text_style``.
    """

    def __init__(self, *args: Flow) -> None:
        self.flows: tuple[Flow, ...] = tuple(args)
        self.stocks: dict[int, dict[str, Stock]] = {}
        for i, f in enumerate(self.flows):
            if f.source_category >= f.receptor_category:
                raise ValueError(
                    f"Flow {i} source category ({f.source_category}) >= "
                    f"receptor category ({f.receptor_category})"
                )
            if f.value < 0:
                raise ValueError(f"Flow {i} value ({f.value:g}) < 0")
            source = self._stock(f.source_label, f.source_category)
            receptor = self._stock(f.receptor_label, f.receptor_category)
            source.source_value += f.value
            receptor.receptor_value += f.value

        self.color: Any = None
        self.line_style: dict[str, Any] = dict(DEFAULT_LINE_STYLE, dashes=[])
        self.text_style: dict[str, Any] = {
            "font_size": DEFAULT_FONT_SIZE,
            "rotation": math.pi / 2,
            "x_align": "center",
            "y_align": "center",
        }
        self.stock_bar_width: float = DEFAULT_FONT_SIZE * 1.15
        self.flow_style: Callable[[str], tuple[Any, dict[str, Any]]] = (
            lambda _group: (self.color, self.line_style)
        )
        self.stock_style: Callable[[str, int], tuple] = (
            lambda label, _category: (
                label, self.text_style, 0.0, 0.0, self.color, self.line_style
            )
        )
        self._set_stock_ranges()

    def _stock(self, label: str, category: int) -> Stock:
        stocks = self.stocks.setdefault(category, {})
        if label not in stocks:
            stocks[label] = Stock(label=label, category=category, order=len(stocks))
        return stocks[label]

    def _set_stock_ranges(self) -> None:
        category: Optional[int] = None
        low = 0.0
        for stk in self.stock_list():
            if stk.category != category:
                low = 0.0
            category = stk.category
            stk.min = low
            stk.max = low + max(stk.source_value, stk.receptor_value)
            low = stk.max

    def stock_range(self, label: str, category: int) -> tuple[float, float]:
        """Return the extent of a stock on the value axis."""
        try:
            stk = self.stocks[category][label]
        except KeyError:
            raise KeyError(
                f"sankey diagram does not contain stock with "
                f"label={label} and category={category}"
            ) from None
        return stk.min, stk.max

    def stock_list(self) -> list[Stock]:
        """Return the stocks ordered by category, then by first appearance."""
        return sorted(
            (stk for stocks in self.stocks.values() for stk in stocks.values()),
            key=lambda s: (s.category, s.order),
        )

    def data_range(self) -> tuple[float, float, float, float]:
        """Return ``(catmin, catmax, valmin, valmax)``."""
        cat_min, cat_max = math.inf, -math.inf
        for cat in self.stocks:
            cat_min = min(cat_min, float(cat))
            cat_max = max(cat_max, float(cat))
        val_min, val_max = math.inf, -math.inf
        for stk in self.stock_list():
            val_min = min(val_min, stk.min)
            val_max = max(val_max, stk.max)
        return cat_min, cat_max, val_min, val_max

    def flow_groups(self) -> list[tuple[str, Any, dict[str, Any]]]:
        """Return ``(group, color, line_style)`` for each flow group, sorted by name."""
        groups = sorted({f.group for f in self.flows})
        return [(g, *self.flow_style(g)) for g in groups]


def flow_curve(begin: Any, end: Any) -> list[Point]:
    """Return the points of the curve a flow edge follows from begin to end."""
    bx, by = begin
    ex, ey = end
    curve = Curve(
        (bx, by),
        (bx + (ex - bx) * _DIRECTION_OFFSET_FRAC, by),
        (bx + (ex - bx) * (1 - _DIRECTION_OFFSET_FRAC), ey),
        (ex, ey),
    )
    return curve.curve(_CURVE_POINTS)