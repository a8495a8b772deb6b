# file_analyzer/core/numeric.py
import math
from typing import Sequence

import numpy as np

from file_analyzer.core.errors import MalformedNumericError
from file_analyzer.core.models import NumericStats


def median(ordered: np.ndarray) -> float:
    n = len(ordered)
    if n % 2 == 0:
        return float((ordered[n // 2 - 1] + ordered[n // 2]) / 2.0)
    return float(ordered[n // 2])


def positional_quartiles(ordered: np.ndarray) -> tuple:
    """Quartiles by direct indexing into sorted data, without interpolation.

    When ``n`` is a multiple of four each quartile is the mean of the two
    elements straddling the cut; otherwise it is the element at ``n // 4``
    (resp. ``3n // 4``). This differs from ``np.percentile`` on purpose.
    """
    n = len(ordered)
    lower, upper = n // 4, (3 * n) // 4
    if n % 4 == 0:
        q1 = (ordered[lower - 1] + ordered[lower]) / 2.0
        q3 = (ordered[upper - 1] + ordered[upper]) / 2.0
    else:
        q1, q3 = ordered[lower], ordered[upper]
    return float(q1), float(q3)


def summarize_numeric(values: Sequence[float]) -> NumericStats:
    if len(values) == 0:
        raise MalformedNumericError("Cannot summarize an empty numeric column")

    ordered = np.sort(np.asarray(values, dtype=np.float64))
    q1, q3 = positional_quartiles(ordered)

    mean = float(ordered.mean())
    # population deviation, divides by n
    std_dev = float(ordered.std(ddof=0))
    if not (math.isfinite(mean) and math.isfinite(std_dev)):
        raise MalformedNumericError("Numeric values are too large to summarize")

    return NumericStats(
        mean=mean,
        median=median(ordered),
        std_dev=std_dev,
        q1=q1,
        q3=q3,
        min=float(ordered[0]),
        max=float(ordered[-1]),
    )
