import io

import pandas as pd

from file_analyzer.core.analyzer import order_columns
from file_analyzer.core.models import TableAnalysis

REPORT_COLUMNS = [
    "column",
    "dataType",
    "totalCount",
    "nullCount",
    "uniqueCount",
    "mean",
    "median",
    "stdDev",
    "q1",
    "q3",
    "min",
    "max",
    "topValues",
]


def _format_top_values(top_values) -> str:
    return "; ".join(f"{item['value']}:{item['count']}" for item in top_values)


def generate_csv(analysis: TableAnalysis, sort: str = "default"):
    rows = []

    for column, stats in order_columns(analysis, sort).items():
        row = {"column": column, **stats.model_dump(mode="json")}
        if "topValues" in row:
            row["topValues"] = _format_top_values(row["topValues"])
        rows.append(row)

    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    output = io.StringIO()
    df.to_csv(output, index=False)
    output.seek(0)
    return output
