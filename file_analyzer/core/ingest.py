"""Turn uploaded file text into a ``RawTable``.

Lines are split on newlines and then on commas. There is no quoting or
escaping: a comma or newline inside a field splits it.
"""

from __future__ import annotations

from pathlib import Path

from file_analyzer.core.errors import EmptyInputError, UnsupportedFileError
from file_analyzer.core.models import RawTable

SUPPORTED_SUFFIX = ".csv"


def check_file_name(file_name: str | None) -> str:
    if not file_name or not file_name.lower().endswith(SUPPORTED_SUFFIX):
        raise UnsupportedFileError("Only CSV files are supported")
    return file_name


def parse_table(text: str, delimiter: str = ",") -> RawTable:
    # A UTF-8 BOM would otherwise become part of the first header name.
    if text.startswith("\ufeff"):
        text = text[1:]

    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise EmptyInputError("File has no header row")

    header, *data = lines
    return RawTable(
        headers=header.split(delimiter),
        rows=[line.split(delimiter) for line in data],
    )


def read_table(path: str | Path, encoding: str = "utf-8") -> RawTable:
    return parse_table(Path(path).read_text(encoding=encoding))


__all__ = ["SUPPORTED_SUFFIX", "check_file_name", "parse_table", "read_table"]
