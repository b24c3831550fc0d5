"""
Data export utilities for brand-signals.

Exports analysis records to CSV for spreadsheet analysis.

Key features:
- One row per analyzed response (export_analyses_csv)
- One row per detected competitor (export_competitors_csv)
- UTF-8 encoding for CJK brand names
- Headers are written even when there is nothing to export

Records may be AnalysisResult objects or their to_dict() form.

Example:
    >>> results = [analyzer.analyze(item) for item in inputs]
    >>> export_analyses_csv("./output/analyses.csv", results)
    12
"""

import csv
import logging
from pathlib import Path
from typing import Any

from brand_signals.exceptions import ExportError

from ..extractor.models import AnalysisResult

logger = logging.getLogger(__name__)

ANALYSIS_COLUMNS = [
    "Query",
    "Provider",
    "Response",
    "Target Brand Rank",
    "Mentions Count",
    "Total Brands Found",
    "Extracted Brands",
]

COMPETITOR_COLUMNS = [
    "query",
    "provider",
    "timestamp",
    "name",
    "category",
    "mentions",
    "best_rank",
    "is_implicit",
    "is_heuristic",
]

NO_RANK = "-"


def _as_record(record: AnalysisResult | dict[str, Any]) -> dict[str, Any]:
    if isinstance(record, AnalysisResult):
        return record.to_dict()
    return record


def _format_rank(rank: int | None) -> str:
    return str(rank) if rank else NO_RANK


def _analysis_row(record: dict[str, Any]) -> dict[str, Any]:
    meta = record.get("meta") or {}
    brand = record.get("brandAnalysis") or {}
    detected = (record.get("competitorAnalysis") or {}).get("detected", [])

    brands_list = "; ".join(
        f"{c['name']}(#{_format_rank(c['ranking'].get('bestRank'))})"
        for c in detected
    )

    brand_rank = (brand.get("ranking") or {}).get("bestRank")

    return {
        "Query": meta.get("query") or "",
        "Provider": meta.get("provider") or "",
        "Response": record.get("originalContent") or "",
        "Target Brand Rank": _format_rank(brand_rank),
        "Mentions Count": brand.get("totalMentions") or 0,
        "Total Brands Found": len(detected),
        "Extracted Brands": brands_list,
    }


def _write_csv(
    output_path: str | Path, fieldnames: list[str], rows: list[dict[str, Any]]
) -> int:
    output_path = Path(output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)
    except OSError as e:
        logger.error(f"File write error: {e}", exc_info=True)
        raise ExportError(f"Cannot write CSV file '{output_path}': {e}") from e

    return len(rows)


def export_analyses_csv(
    output_path: str | Path,
    records: list[AnalysisResult] | list[dict[str, Any]],
) -> int:
    """
    Export one CSV row per analyzed response.

    Columns: Query, Provider, Response, Target Brand Rank ("-" when unranked),
    Mentions Count, Total Brands Found, Extracted Brands ("Name(#rank)"
    entries joined by "; ").

    Args:
        output_path: Path to output CSV file
        records: Analysis records

    Returns:
        Number of rows exported

    Raises:
        ExportError: If the file cannot be written
    """
    logger.info(f"Exporting analyses to CSV: {output_path}")

    rows = [_analysis_row(_as_record(record)) for record in records]
    if not rows:
        logger.warning("No analyses to export")

    row_count = _write_csv(output_path, ANALYSIS_COLUMNS, rows)
    logger.info(f"Exported {row_count} analyses to {output_path}")
    return row_count


def export_competitors_csv(
    output_path: str | Path,
    records: list[AnalysisResult] | list[dict[str, Any]],
) -> int:
    """
    Export one CSV row per detected competitor per response.

    Args:
        output_path: Path to output CSV file
        records: Analysis records

    Returns:
        Number of rows exported

    Raises:
        ExportError: If the file cannot be written
    """
    logger.info(f"Exporting competitors to CSV: {output_path}")

    rows = []
    for record in map(_as_record, records):
        meta = record.get("meta") or {}
        for competitor in (record.get("competitorAnalysis") or {}).get("detected", []):
            ranking = competitor.get("ranking") or {}
            rows.append(
                {
                    "query": meta.get("query") or "",
                    "provider": meta.get("provider") or "",
                    "timestamp": meta.get("timestamp") or "",
                    "name": competitor["name"],
                    "category": competitor.get("category", ""),
                    "mentions": competitor.get("mentions", 0),
                    "best_rank": ranking.get("bestRank") or "",
                    "is_implicit": ranking.get("isImplicit", False),
                    "is_heuristic": competitor.get("isHeuristic", False),
                }
            )

    row_count = _write_csv(output_path, COMPETITOR_COLUMNS, rows)
    logger.info(f"Exported {row_count} competitors to {output_path}")
    return row_count
