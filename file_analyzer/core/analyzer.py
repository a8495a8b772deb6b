# file_analyzer/core/analyzer.py
import logging
from pathlib import Path
from typing import Optional, Sequence

from file_analyzer import config
from file_analyzer.core.cells import normalize, parse_number, present_values
from file_analyzer.core.errors import EmptyInputError, MalformedNumericError
from file_analyzer.core.inference import infer_from_present
from file_analyzer.core.ingest import read_table
from file_analyzer.core.models import (
    ColumnType,
    NumericColumnStats,
    RawTable,
    TableAnalysis,
    TextColumnStats,
)
from file_analyzer.core.numeric import summarize_numeric
from file_analyzer.core.text import summarize_text

logger = logging.getLogger(__name__)


def numeric_values(present: Sequence[str]) -> list:
    """Present cells that parse as numbers, widened to float."""
    return [float(n) for n in map(parse_number, present) if n is not None]


def _numeric_column(data_type, present, counts):
    numbers = numeric_values(present)
    if present and not numbers:
        raise MalformedNumericError(
            f"Column classified as {data_type.value} has no parseable values"
        )
    if not numbers:
        return NumericColumnStats(data_type=data_type, **counts)
    stats = summarize_numeric(numbers)
    return NumericColumnStats(data_type=data_type, **counts, **stats.model_dump(by_alias=False))


def _text_column(data_type, present, counts):
    stats = summarize_text(present)
    return TextColumnStats(**counts, top_values=stats.top_values)


_SUMMARIZERS = {
    ColumnType.INTEGER: _numeric_column,
    ColumnType.FLOAT: _numeric_column,
    ColumnType.TEXT: _text_column,
}


def column_cells(table: RawTable, index: int) -> list:
    # rows shorter than the header contribute a missing cell
    return [row[index] if index < len(row) else None for row in table.rows]


def analyze_column(cells: Sequence[Optional[str]]):
    normalized = [normalize(c) for c in cells]
    present = present_values(normalized)
    data_type = infer_from_present(present)

    counts = {
        "total_count": len(normalized),
        "null_count": len(normalized) - len(present),
        "unique_count": len(set(present)),
    }
    return _SUMMARIZERS[data_type](data_type, present, counts)


def _column_keys(headers: Sequence[str]) -> list:
    """Mapping keys for each header; repeated names get a ``(n)`` suffix."""
    seen = {}
    keys = []
    for header in headers:
        key = header
        while key in seen:
            seen[header] += 1
            key = f"{header} ({seen[header]})"
        seen.setdefault(key, 1)
        keys.append(key)
    return keys


def build_table_analysis(
    table: RawTable,
    file_name: str,
    require_rows: bool = False,
    preview_rows: int = None,
) -> TableAnalysis:
    preview_rows = config.PREVIEW_ROWS if preview_rows is None else preview_rows

    if not table.rows:
        if require_rows:
            raise EmptyInputError(f"'{file_name}' has a header but no data rows")
        logger.warning("Analyzing '%s' with zero data rows", file_name)

    column_analysis = {}
    for index, key in enumerate(_column_keys(table.headers)):
        stats = analyze_column(column_cells(table, index))
        logger.debug("Column '%s' inferred as %s", key, stats.data_type.value)
        column_analysis[key] = stats

    return TableAnalysis(
        file_name=file_name,
        headers=list(table.headers),
        row_count=len(table.rows),
        column_count=len(table.headers),
        column_analysis=column_analysis,
        preview_data=[list(row) for row in table.rows[:preview_rows]],
    )


def order_columns(analysis: TableAnalysis, sort: str = "default") -> dict:
    """Return ``column_analysis`` in display order.

    ``default`` keeps header order; ``type`` lists numeric columns first and
    text columns after, each group still in header order.
    """
    if sort == "default":
        return dict(analysis.column_analysis)
    if sort == "type":
        items = list(analysis.column_analysis.items())
        numeric = [(k, v) for k, v in items if v.data_type.is_numeric]
        text = [(k, v) for k, v in items if not v.data_type.is_numeric]
        return dict(numeric + text)
    raise ValueError(f"Unknown sort order: {sort!r}")


def analyze_csv(path: str, require_rows: bool = False) -> TableAnalysis:
    table = read_table(path)
    analysis = build_table_analysis(table, file_name=Path(path).name, require_rows=require_rows)
    logger.info(
        "Analyzed %s: %d rows, %d columns", analysis.file_name, analysis.row_count, analysis.column_count
    )
    return analysis
