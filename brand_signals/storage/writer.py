"""
File writing utilities for brand-signals.

This module handles file output for analysis artifacts: JSON records and the
HTML batch report.

Key features:
- UTF-8 encoding for all text files
- Pretty-printed JSON (indent=2), CJK written as-is (ensure_ascii=False)
- Parent directories created on demand
- Failures surface as ExportError with the offending path

Example:
    >>> write_json("./output/analysis.json", result.to_dict())
    >>> write_report_html("./output/report.html", html)
"""

import json
import logging
from pathlib import Path

from brand_signals.exceptions import ExportError

logger = logging.getLogger(__name__)


def _ensure_parent(filepath: Path) -> None:
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Failed to create directory: {filepath.parent}", exc_info=True)
        raise ExportError(
            f"Cannot create output directory '{filepath.parent}': {e}"
        ) from e


def write_json(filepath: str | Path, data: dict | list) -> None:
    """
    Write data to a JSON file with UTF-8 encoding.

    Args:
        filepath: Full path to JSON file to write
        data: Dictionary or list to serialize

    Raises:
        ExportError: If data is not JSON-serializable or the file cannot be
            written (permissions, disk full)

    Example:
        >>> write_json("./output/analysis.json", {"meta": {...}})
    """
    filepath = Path(filepath)
    _ensure_parent(filepath)

    try:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    except TypeError as e:
        logger.error(f"Cannot serialize data to JSON: {e}", exc_info=True)
        raise ExportError(
            f"Cannot write JSON to '{filepath}': Data is not JSON-serializable. {e}"
        ) from e

    try:
        with filepath.open("w", encoding="utf-8") as f:
            f.write(payload)
            # Add newline at end of file for POSIX compliance
            f.write("\n")
        logger.debug(f"Wrote JSON file: {filepath}")
    except OSError as e:
        logger.error(f"Failed to write JSON file: {filepath}", exc_info=True)
        raise ExportError(
            f"Cannot write JSON file '{filepath}': {e}. "
            f"Check disk space and permissions."
        ) from e


def write_report_html(filepath: str | Path, html: str) -> None:
    """
    Write a rendered HTML report.

    Raises:
        ExportError: If the file cannot be written
    """
    filepath = Path(filepath)
    _ensure_parent(filepath)

    try:
        filepath.write_text(html, encoding="utf-8")
        logger.info(f"Wrote HTML report: {filepath}")
    except OSError as e:
        logger.error(f"Failed to write HTML report: {filepath}", exc_info=True)
        raise ExportError(f"Cannot write HTML report '{filepath}': {e}") from e
