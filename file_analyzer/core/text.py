# file_analyzer/core/text.py
from collections import Counter
from typing import Iterable

from file_analyzer import config
from file_analyzer.core.models import TextStats, ValueCount


def top_values(values: Iterable[str], limit: int = None) -> list:
    """Most frequent values, count descending.

    ``Counter`` keeps first-occurrence order and ``most_common`` sorts
    stably, so ties come out in the order the values first appeared.
    """
    limit = config.TOP_VALUES if limit is None else limit
    counts = Counter(values)
    return [ValueCount(value=v, count=c) for v, c in counts.most_common(max(0, limit))]


def summarize_text(values: Iterable[str], limit: int = None) -> TextStats:
    values = list(values)
    if not values:
        return TextStats()
    return TextStats(unique_count=len(set(values)), top_values=top_values(values, limit))
