"""Value objects produced by the analysis engine.

Every model is frozen and serializes with camelCase keys. Optional statistics
that were not computed are left out of the dumped document entirely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ColumnType(str, Enum):
    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    TEXT = "TEXT"

    @property
    def is_numeric(self) -> bool:
        return self is not ColumnType.TEXT


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    def model_dump(self, *args: Any, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        kwargs.setdefault("exclude_none", True)
        kwargs.setdefault("by_alias", True)
        return super().model_dump(*args, **kwargs)

    def model_dump_json(self, *args: Any, **kwargs: Any) -> str:  # type: ignore[override]
        kwargs.setdefault("exclude_none", True)
        kwargs.setdefault("by_alias", True)
        return super().model_dump_json(*args, **kwargs)


class ValueCount(_Frozen):
    value: str
    count: int


class NumericStats(_Frozen):
    mean: float
    median: float
    std_dev: float
    q1: float
    q3: float
    min: float
    max: float


class TextStats(_Frozen):
    unique_count: int = 0
    top_values: list[ValueCount] = Field(default_factory=list)


class NumericColumnStats(_Frozen):
    data_type: Literal[ColumnType.INTEGER, ColumnType.FLOAT]
    total_count: int
    null_count: int
    unique_count: int
    mean: float | None = None
    median: float | None = None
    std_dev: float | None = None
    q1: float | None = None
    q3: float | None = None
    min: float | None = None
    max: float | None = None


class TextColumnStats(_Frozen):
    data_type: Literal[ColumnType.TEXT] = ColumnType.TEXT
    total_count: int
    null_count: int
    unique_count: int
    top_values: list[ValueCount] = Field(default_factory=list)


ColumnStats = Union[NumericColumnStats, TextColumnStats]


@dataclass(frozen=True, slots=True)
class RawTable:
    """Header names plus string rows, as handed over by ingestion."""

    headers: list[str]
    rows: list[list[str | None]] = field(default_factory=list)


class TableAnalysis(_Frozen):
    file_name: str
    headers: list[str]
    row_count: int
    column_count: int
    # insertion order follows ``headers``
    column_analysis: dict[str, ColumnStats]
    preview_data: list[list[str | None]]


class Histogram(_Frozen):
    edges: list[float]
    counts: list[int]


class Point(_Frozen):
    x: float
    y: float


class AxisSummary(_Frozen):
    mean: float
    median: float
    std_dev: float


class ScatterPlot(_Frozen):
    points: list[Point] = Field(default_factory=list)
    # absent when no row has both values
    x: AxisSummary | None = None
    y: AxisSummary | None = None


__all__ = [
    "AxisSummary",
    "ColumnStats",
    "ColumnType",
    "Histogram",
    "NumericColumnStats",
    "NumericStats",
    "Point",
    "RawTable",
    "ScatterPlot",
    "TableAnalysis",
    "TextColumnStats",
    "TextStats",
    "ValueCount",
]
