# plotcore

`plotcore` handles the data side of plotting. Each plot element is a plain
Python object. It checks its input, works out its data range and computes
its geometry, such as bins, cell bounds, step vertices and curve points.
You can pass the results to whatever drawing code you use.

## Modules

- `plotcore.bezier`: `Point` and `Curve(*points)`.
  - `curve.point(t)` returns the point at `t`, where 0 ≤ t ≤ 1.
  - `curve.curve(n)` returns `n` points evenly spaced in `t`.
  - A curve with no control points raises `ValueError` from `point`.
- `plotcore.data`: the records `XY`, `XYZ` and `ErrorRange`.
  - `copy_values` raises `NoDataError` when it is given nothing.
  - `copy_values`, `copy_xys` and `copy_xyzs` raise `InfinityError` when a value is infinite.
  - `check_floats(*values)` raises `InfinityError` for an infinite value.
  - `value_range` and `xy_range` return minima and maxima and ignore NaN.
  - `x_values` and `y_values` split pairs into their x and y values.
- `plotcore.johnson`:
  - `Tarjan(graph)` finds strongly connected components. They are stored in `sccs`, and `scc_subgraph(min_size)` returns the edges inside them.
  - `cycles_in(graph)` returns the elementary cycles. Each cycle starts and ends at its least vertex.
  - A graph is a list indexed by vertex. Each entry holds the vertices that vertex links to, or `None`.
- `plotcore.histogram`:
  - `new_histogram(xys, n)` bins (x, weight) pairs and `new_hist(values, n)` bins plain values. Both raise `ValueError` when `n` is not positive.
  - `bin_points(xys, n)` returns the `HistogramBin`s and their common width.
  - `Histogram.normalize(total)` scales the area to `total`. It raises `ValueError` when the histogram has no mass.
  - `Histogram.data_range()` returns the range the bins cover. When `log_y` is set, it keeps the smallest non-empty bin visible.
- `plotcore.heatmap`:
  - `GridXYZ(values, xs=None, ys=None)` holds values row by row.
  - `new_heat_map(grid, palette)` returns a `HeatMap`. It takes the z range from the grid's `min()` and `max()` when the grid has them, and otherwise from its values.
  - `HeatMap.cell_bounds(c, r)` returns a cell's bounds, `HeatMap.color_at(c, r)` returns its palette colour, and `HeatMap.data_range()` returns the range the cells cover.
- `plotcore.image`: `ImagePlot(img, xmin, ymin, xmax, ymax)` places a raster in a data rectangle. The raster is an object with a `size` or a list of pixel rows. `x(c)` and `y(r)` give the data coordinates of the pixel edges.
- `plotcore.markers`: `new_scatter(xys)` returns a `Scatter` and `new_polygon(*rings)` returns a `Polygon`. `Polygon.closed_rings()` returns each ring closed back to its first vertex.
- `plotcore.line`:
  - `new_line(xys)` returns a `Line` and `new_line_points(xys)` returns a line and a scatter that share their points.
  - `step_points(points, kind)` expands a path for a `StepKind` (`NO_STEP`, `PRE_STEP`, `MID_STEP` or `POST_STEP`).
- `plotcore.errorpoints`: `new_error_points(f, *groups)` summarises each group of points into an `ErrorPoints`.
  - `mean_and_conf95` gives the mean with a 95% confidence half-width.
  - `median_and_min_max` gives the median with its distances to the minimum and maximum.
- `plotcore.styles`:
  - `color(i)` cycles through the default colours, given as RGBA tuples. Negative indices wrap too.
  - `dashes(i)` cycles through the default dash patterns.
  - The lists are `DARK_COLORS`, `SOFT_COLORS`, `DEFAULT_COLORS`, `DEFAULT_GLYPH_SHAPES` and `DEFAULT_DASHES`.
- `plotcore.sankey`:
  - `Sankey(*flows)` lays out `Flow`s between `Stock`s. It raises `ValueError` when a flow does not go to a higher category or when a value is negative.
  - `stock_range(label, category)` returns a stock's extent and raises `KeyError` for an unknown stock.
  - `stock_list()`, `data_range()` and `flow_groups()` cover all the stocks and flow groups.
  - `flow_curve(begin, end)` returns the 20 curve points that a flow edge follows.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from plotcore.bezier import Curve, Point
from plotcore.histogram import new_hist
from plotcore.sankey import Flow, Sankey

curve = Curve(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))
print(curve.point(0.5))          # Point(x=0.5, y=0.75)

hist = new_hist([1, 2, 2, 3, 3, 3], 3)
hist.normalize(1)
print(hist.data_range())

sankey = Sankey(
    Flow(source_label="Large", source_category=0,
         receptor_label="Alice", receptor_category=1, value=5),
    Flow(source_label="Small", source_category=0,
         receptor_label="Alice", receptor_category=1, value=2),
)
print(sankey.stock_range("Alice", 1))   # (0.0, 7.0)
```

## What it does not do

`plotcore` does not draw anything. It has no canvas, axes, legends or
tick marks, and it does not save images or other output files. Colours,
line styles and glyph shapes are stored on the plot elements as plain
values, and your drawing code interprets them.