"""
Configuration loader for brand-signals.

This module loads YAML analyzer configuration files and validates them with
the Pydantic models in config.schema.

Functions:
    load_config: Main entrypoint to load and validate an analyzer YAML file
    parse_config: Validate an already-parsed mapping (dict from YAML/JSON)
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from brand_signals.exceptions import ConfigFileNotFoundError, ConfigValidationError

from .schema import AnalyzerConfig


def _format_validation_error(error: ValidationError, source: str) -> str:
    """Render pydantic errors as one '  - loc: msg' line per error."""
    error_messages = []
    for item in error.errors():
        loc = ".".join(str(x) for x in item["loc"])
        msg = item["msg"]
        error_messages.append(f"  - {loc}: {msg}")

    return f"Configuration validation failed in {source}:\n" + "\n".join(
        error_messages
    )


def parse_config(raw_config: Any, source: str = "<mapping>") -> AnalyzerConfig:
    """
    Validate a raw configuration mapping into an AnalyzerConfig.

    Args:
        raw_config: Mapping with snake_case or camelCase keys
        source: Human-readable origin used in error messages

    Returns:
        Validated, immutable AnalyzerConfig

    Raises:
        ConfigValidationError: If the mapping is not a dict or fails validation
    """
    if not isinstance(raw_config, dict):
        raise ConfigValidationError(
            f"Configuration in {source} must be a mapping, "
            f"got: {type(raw_config).__name__}"
        )

    try:
        return AnalyzerConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigValidationError(_format_validation_error(e, source)) from e


def load_config(config_path: str | Path) -> AnalyzerConfig:
    """
    Load an analyzer YAML configuration file.

    This function:
    1. Loads YAML from the specified path
    2. Validates structure using the AnalyzerConfig Pydantic model
    3. Returns the immutable configuration ready for ResponseAnalyzer

    Args:
        config_path: Path to the YAML file (relative or absolute)

    Returns:
        AnalyzerConfig with defaults applied

    Raises:
        ConfigFileNotFoundError: If config file doesn't exist at the specified path
        ConfigValidationError: If YAML is invalid, empty, or fails validation

    Example:
        >>> config = load_config("examples/analyzer.yaml")
        >>> config.target_brand
        'MyBrand'

    Security:
        - Uses yaml.safe_load() to prevent code injection
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigValidationError(
            f"Failed to read configuration file {config_path}: {e}"
        ) from e

    if raw_config is None:
        raise ConfigValidationError(f"Configuration file is empty: {config_path}")

    return parse_config(raw_config, source=str(config_path))
