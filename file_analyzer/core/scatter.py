# file_analyzer/core/scatter.py
from typing import Optional, Sequence

from file_analyzer.core.cells import normalize, parse_number
from file_analyzer.core.models import AxisSummary, Point, ScatterPlot
from file_analyzer.core.numeric import summarize_numeric


def _as_float(raw: Optional[str]) -> Optional[float]:
    cell = normalize(raw)
    if cell.missing:
        return None
    value = parse_number(cell.value)
    return None if value is None else float(value)


def pair_values(x_cells: Sequence[Optional[str]], y_cells: Sequence[Optional[str]]) -> list:
    """Row-aligned (x, y) pairs; rows where either side is missing or not numeric are dropped."""
    points = []
    for x_raw, y_raw in zip(x_cells, y_cells):
        x, y = _as_float(x_raw), _as_float(y_raw)
        if x is not None and y is not None:
            points.append(Point(x=x, y=y))
    return points


def _axis(values: list) -> AxisSummary:
    stats = summarize_numeric(values)
    return AxisSummary(mean=stats.mean, median=stats.median, std_dev=stats.std_dev)


def build_scatter(x_cells: Sequence[Optional[str]], y_cells: Sequence[Optional[str]]) -> ScatterPlot:
    points = pair_values(x_cells, y_cells)
    if not points:
        return ScatterPlot()
    return ScatterPlot(
        points=points,
        x=_axis([p.x for p in points]),
        y=_axis([p.y for p in points]),
    )
