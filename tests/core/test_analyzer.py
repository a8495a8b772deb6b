import pytest

from file_analyzer.core.analyzer import (
    analyze_column,
    analyze_csv,
    build_table_analysis,
    order_columns,
)
from file_analyzer.core.errors import EmptyInputError
from file_analyzer.core.models import ColumnType, RawTable


def _table(headers, rows) -> RawTable:
    return RawTable(headers=headers, rows=rows)


def test_analyze_column_counts_missing_cells() -> None:
    stats = analyze_column(["1", "NA", " na ", "2"])
    assert stats.data_type is ColumnType.INTEGER
    assert stats.total_count == 4
    assert stats.null_count == 2
    assert stats.unique_count == 2
    assert stats.mean == pytest.approx(1.5)
    assert stats.min == 1
    assert stats.max == 2


def test_analyze_column_text() -> None:
    stats = analyze_column(["a", "b", "a", "c", "a", "b"])
    assert stats.data_type is ColumnType.TEXT
    assert stats.unique_count == 3
    assert [(v.value, v.count) for v in stats.top_values] == [("a", 3), ("b", 2), ("c", 1)]


def test_numeric_stats_ignore_non_numeric_minority() -> None:
    stats = analyze_column(["10", "20", "30", "40", "n/a"])
    assert stats.data_type is ColumnType.INTEGER
    assert stats.null_count == 0
    assert stats.unique_count == 5
    assert stats.mean == pytest.approx(25.0)
    assert stats.max == 40


def test_null_and_present_counts_add_up() -> None:
    for cells in (["1", None, "x"], ["NA", "NA"], [], ["1.5", "2", " NA"]):
        stats = analyze_column(cells)
        present = [c for c in cells if c is not None and c.strip().lower() != "na"]
        assert stats.null_count + len(present) == stats.total_count


def test_all_missing_column_has_no_numeric_fields() -> None:
    stats = analyze_column(["NA", None])
    assert stats.data_type is ColumnType.TEXT
    dumped = stats.model_dump()
    assert dumped == {
        "dataType": "TEXT",
        "totalCount": 2,
        "nullCount": 2,
        "uniqueCount": 0,
        "topValues": [],
    }


def test_table_analysis_preserves_header_order() -> None:
    headers = ["zeta", "alpha", "mid"]
    rows = [["1", "a", "2.5"], ["2", "b", "3"]]
    analysis = build_table_analysis(_table(headers, rows), "data.csv")

    assert list(analysis.column_analysis) == headers
    assert analysis.headers == headers
    assert analysis.row_count == 2
    assert analysis.column_count == 3
    assert analysis.column_analysis["zeta"].data_type is ColumnType.INTEGER
    assert analysis.column_analysis["alpha"].data_type is ColumnType.TEXT
    assert analysis.column_analysis["mid"].data_type is ColumnType.FLOAT

    dumped = analysis.model_dump()
    assert list(dumped["columnAnalysis"]) == headers


def test_preview_is_limited_to_fifty_rows() -> None:
    rows = [[str(i)] for i in range(120)]
    analysis = build_table_analysis(_table(["n"], rows), "big.csv")
    assert len(analysis.preview_data) == 50
    assert analysis.preview_data[0] == ["0"]
    assert analysis.column_analysis["n"].total_count == 120

    small = build_table_analysis(_table(["n"], rows[:3]), "small.csv")
    assert len(small.preview_data) == 3


def test_preview_keeps_raw_rows() -> None:
    rows = [[" NA ", "x", "extra"]]
    analysis = build_table_analysis(_table(["a", "b"], rows), "raw.csv")
    assert analysis.preview_data == [[" NA ", "x", "extra"]]


def test_header_only_table() -> None:
    analysis = build_table_analysis(_table(["a", "b"], []), "empty.csv")
    assert analysis.row_count == 0
    assert analysis.preview_data == []
    for stats in analysis.column_analysis.values():
        assert stats.data_type is ColumnType.TEXT
        assert stats.total_count == 0
        assert stats.null_count == 0
        assert "mean" not in stats.model_dump()


def test_header_only_table_can_be_rejected() -> None:
    with pytest.raises(EmptyInputError):
        build_table_analysis(_table(["a"], []), "empty.csv", require_rows=True)


def test_short_rows_count_as_missing() -> None:
    rows = [["1", "x"], ["2"], ["3", "y", "ignored"]]
    analysis = build_table_analysis(_table(["n", "s"], rows), "short.csv")
    s = analysis.column_analysis["s"]
    assert s.total_count == 3
    assert s.null_count == 1
    assert s.unique_count == 2
    assert analysis.column_analysis["n"].total_count == 3


def test_duplicate_headers_are_kept_apart() -> None:
    rows = [["1", "a", "2"]]
    analysis = build_table_analysis(_table(["v", "v", "v"], rows), "dup.csv")
    assert list(analysis.column_analysis) == ["v", "v (2)", "v (3)"]
    assert analysis.column_analysis["v (2)"].data_type is ColumnType.TEXT
    assert analysis.headers == ["v", "v", "v"]


def test_order_columns_by_type() -> None:
    headers = ["name", "age", "city", "score"]
    rows = [["ann", "30", "oslo", "1.5"], ["bob", "41", "rome", "2"]]
    analysis = build_table_analysis(_table(headers, rows), "people.csv")

    assert list(order_columns(analysis)) == headers
    assert list(order_columns(analysis, "type")) == ["age", "score", "name", "city"]
    with pytest.raises(ValueError):
        order_columns(analysis, "size")


def test_analyze_csv_reads_file(tmp_path) -> None:
    path = tmp_path / "sales.csv"
    path.write_text("region,units\nnorth,10\nsouth,NA\nnorth,14\n", encoding="utf-8")

    analysis = analyze_csv(str(path))

    assert analysis.file_name == "sales.csv"
    assert analysis.row_count == 3
    units = analysis.column_analysis["units"]
    assert units.data_type is ColumnType.INTEGER
    assert units.null_count == 1
    assert units.median == pytest.approx(12.0)
    region = analysis.column_analysis["region"]
    assert region.top_values[0].value == "north"
    assert region.top_values[0].count == 2


def test_overflowing_literal_is_not_summarized_as_number() -> None:
    stats = analyze_column(["1e999", "1"])
    assert stats.data_type is ColumnType.TEXT
    assert "mean" not in stats.model_dump()

    stats = analyze_column(["1e999", "1", "2", "3", "4"])
    assert stats.data_type is ColumnType.INTEGER
    assert stats.mean == pytest.approx(2.5)
    assert stats.unique_count == 5
