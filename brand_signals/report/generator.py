"""
HTML report generation for brand-signals.

Renders a batch of analyses and their AnalysisSummary into a self-contained
HTML report with inline CSS and no external assets.

Key features:
- Jinja2 templating with autoescaping enabled (response text and brand names
  come from untrusted LLM output)
- Headline brand metrics, top competitors, per-provider rank buckets
- Per-response table with the extracted brands and their ranks

Example:
    >>> summary = summarize_analyses(results)
    >>> html = generate_report(results, summary, "MyBrand", "2025-11-02T08-00-00Z")
    >>> write_report("./output/report.html", results, summary, "MyBrand")
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from brand_signals.exceptions import ExportError

from ..extractor.models import AnalysisResult
from ..storage.writer import write_report_html
from ..utils.time import batch_id_from_timestamp
from .summary import RANK_BUCKETS, AnalysisSummary

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "report.html.j2"


def _build_rows(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    rows = []
    for record in records:
        meta = record.get("meta") or {}
        brand = record.get("brandAnalysis") or {}
        detected = (record.get("competitorAnalysis") or {}).get("detected", [])
        rows.append(
            {
                "query": meta.get("query") or "",
                "provider": meta.get("provider") or "",
                "brand_rank": (brand.get("ranking") or {}).get("bestRank"),
                "brand_mentions": brand.get("totalMentions") or 0,
                "competitors": [
                    {
                        "name": c["name"],
                        "rank": c["ranking"].get("bestRank"),
                        "implicit": c["ranking"].get("isImplicit", False),
                        "heuristic": c.get("isHeuristic", False),
                    }
                    for c in detected
                ],
            }
        )
    return rows


def generate_report(
    records: list[AnalysisResult] | list[dict[str, Any]],
    summary: AnalysisSummary,
    target_brand: str,
    batch_id: str,
) -> str:
    """
    Render the HTML report.

    Args:
        records: Analysis records (objects or dict form)
        summary: Aggregate summary of the same records
        target_brand: Brand the report is about
        batch_id: Batch identifier shown in the header

    Returns:
        HTML string (self-contained, ready to write to file)

    Raises:
        ExportError: If the template cannot be loaded or rendered
    """
    logger.info(f"Generating HTML report for batch: {batch_id}")

    template_dir = Path(__file__).parent / "templates"
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )

    try:
        template = env.get_template(TEMPLATE_NAME)
        return template.render(
            batch_id=batch_id,
            target_brand=target_brand or "(none)",
            summary=summary,
            rank_buckets=RANK_BUCKETS,
            rows=_build_rows(
                [r.to_dict() if isinstance(r, AnalysisResult) else r for r in records]
            ),
        )
    except TemplateError as e:
        logger.error(f"Failed to render report template: {e}", exc_info=True)
        raise ExportError(f"Cannot render report template: {e}") from e


def write_report(
    filepath: str | Path,
    records: list[AnalysisResult] | list[dict[str, Any]],
    summary: AnalysisSummary,
    target_brand: str,
    batch_id: str | None = None,
) -> None:
    """
    Generate the HTML report and write it to ``filepath``.

    Raises:
        ExportError: If rendering or writing fails
    """
    batch_id = batch_id or batch_id_from_timestamp()
    html = generate_report(records, summary, target_brand, batch_id)
    write_report_html(filepath, html)
