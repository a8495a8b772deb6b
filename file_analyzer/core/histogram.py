# file_analyzer/core/histogram.py
import math
from typing import Sequence

import numpy as np

from file_analyzer.core.errors import MalformedNumericError
from file_analyzer.core.models import Histogram

MIN_BINS = 10
MAX_BINS = 50


def default_bin_count(n: int) -> int:
    return min(MAX_BINS, max(MIN_BINS, math.ceil(math.sqrt(n))))


def build_histogram(values: Sequence[float], bins: int = None) -> Histogram:
    """Equal-width bins over [min, max]; the last bin includes the maximum."""
    if len(values) == 0:
        raise MalformedNumericError("Cannot build a histogram without numeric values")

    bins = default_bin_count(len(values)) if bins is None else bins
    counts, edges = np.histogram(np.asarray(values, dtype=np.float64), bins=bins)
    return Histogram(edges=edges.tolist(), counts=counts.tolist())
