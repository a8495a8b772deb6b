# file_analyzer/core/inference.py
import logging
from typing import Iterable, Optional

from file_analyzer import config
from file_analyzer.core.cells import Cell, normalize, parse_integer, parse_float
from file_analyzer.core.models import ColumnType

logger = logging.getLogger(__name__)


def infer_type(cells: Iterable[Optional[str]], threshold: float = None) -> ColumnType:
    """Decide the type of a column from its raw cells.

    A column is numeric when at least ``threshold`` of its present cells
    parse as numbers; it is INTEGER when every one of those parsed as an
    integer and FLOAT otherwise. Columns without present cells are TEXT.
    """
    normalized = [c if isinstance(c, Cell) else normalize(c) for c in cells]
    return infer_from_present(
        [cell.value for cell in normalized if not cell.missing], threshold
    )


def infer_from_present(values: list, threshold: float = None) -> ColumnType:
    threshold = config.NUMERIC_THRESHOLD if threshold is None else config.numeric_threshold(threshold)
    if not values:
        return ColumnType.TEXT

    numeric_count = 0
    all_integers = True
    for value in values:
        if parse_integer(value) is not None:
            numeric_count += 1
        elif parse_float(value) is not None:
            numeric_count += 1
            all_integers = False

    ratio = numeric_count / len(values)
    logger.debug("numeric ratio %.3f over %d present cells", ratio, len(values))

    if ratio < threshold:
        return ColumnType.TEXT
    return ColumnType.INTEGER if all_integers else ColumnType.FLOAT
