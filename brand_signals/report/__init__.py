"""
Batch reporting for brand-signals.

Aggregates many analyses into headline brand metrics and renders them as a
self-contained HTML report (Jinja2 with autoescaping).

Key exports:
    - summarize_analyses: Aggregate analysis records into an AnalysisSummary
    - AnalysisSummary: Mention rate, average rank, top competitors, providers
    - generate_report: Render the HTML report string
    - write_report: Render and write the HTML report to disk
"""

from .generator import generate_report, write_report
from .summary import AnalysisSummary, summarize_analyses

__all__ = [
    "AnalysisSummary",
    "generate_report",
    "summarize_analyses",
    "write_report",
]
