"""
Input loading for batch analysis.

load_analysis_inputs() reads the responses to analyze from either a JSON
array or a JSON Lines file (one object per line). Each item is validated as
an AnalysisInput; blank lines in JSON Lines files are skipped.

Example file (JSON Lines):
    {"query": "Best smart bands?", "provider": "deepseek", "response": "..."}
    {"query": "Best smart bands?", "provider": "kimi", "response": "..."}
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from brand_signals.exceptions import InputFileNotFoundError, InputValidationError

from ..config.schema import AnalysisInput

logger = logging.getLogger(__name__)


def _validate_item(item: Any, where: str) -> AnalysisInput:
    if not isinstance(item, dict):
        raise InputValidationError(
            f"{where}: expected an object, got {type(item).__name__}"
        )
    try:
        return AnalysisInput.model_validate(item)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(x) for x in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise InputValidationError(f"{where}: {details}") from e


def _parse_json_lines(content: str, path: Path) -> list[AnalysisInput]:
    inputs = []
    for line_number, line in enumerate(content.splitlines(), start=1):
        if not line.strip():
            continue
        where = f"{path} line {line_number}"
        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputValidationError(f"{where}: invalid JSON ({e.msg})") from e
        inputs.append(_validate_item(item, where))
    return inputs


def load_analysis_inputs(input_path: str | Path) -> list[AnalysisInput]:
    """
    Load responses to analyze from a JSON array or JSON Lines file.

    A file whose first non-whitespace character is "[" is parsed as a JSON
    array; anything else is parsed line by line.

    Args:
        input_path: Path to the input file

    Returns:
        AnalysisInput list in file order

    Raises:
        InputFileNotFoundError: If the file doesn't exist
        InputValidationError: If the file can't be read or parsed, or an item
            fails validation (the message names the item or line)
    """
    path = Path(input_path)

    if not path.exists():
        raise InputFileNotFoundError(f"Input file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputValidationError(f"Failed to read input file {path}: {e}") from e

    if content.lstrip().startswith("["):
        try:
            items = json.loads(content)
        except json.JSONDecodeError as e:
            raise InputValidationError(f"Invalid JSON in {path}: {e}") from e
        inputs = [
            _validate_item(item, f"{path} item {index}")
            for index, item in enumerate(items)
        ]
    else:
        inputs = _parse_json_lines(content, path)

    logger.info(f"Loaded {len(inputs)} analysis inputs from {path}")
    return inputs
