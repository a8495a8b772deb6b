import argparse
import json
import sys
import os
sys.path.append(os.path.abspath("."))

from file_analyzer.core.analyzer import analyze_csv, order_columns


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the column analysis of a CSV file.")
    parser.add_argument("path", help="CSV file to analyze")
    parser.add_argument("--sort", default="default", choices=["default", "type"])
    args = parser.parse_args()

    analysis = analyze_csv(args.path)
    result = analysis.model_dump(mode="json")
    result["columnAnalysis"] = {
        column: stats.model_dump(mode="json")
        for column, stats in order_columns(analysis, args.sort).items()
    }
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
