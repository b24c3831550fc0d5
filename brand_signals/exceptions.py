"""
Custom exceptions for brand-signals.

The analysis engine itself never raises for untrusted response text: malformed
Markdown, missing brand names or empty competitor lists degrade to partial or
empty results. These exceptions belong to the surfaces around the engine
(configuration loading, batch input files, exports) and let the CLI map
failures onto exit codes.

Exception Hierarchy:
    BrandSignalsError (base)
    ├── ConfigurationError
    │   ├── ConfigFileNotFoundError
    │   └── ConfigValidationError
    ├── InputError
    │   ├── InputFileNotFoundError
    │   └── InputValidationError
    └── ExportError

Usage:
    from brand_signals.exceptions import ConfigurationError

    try:
        config = load_config(path)
    except ConfigFileNotFoundError as e:
        logger.error(f"Config file not found: {e}")
        sys.exit(1)
"""


class BrandSignalsError(Exception):
    """
    Base exception for all brand-signals errors.

    Enables catching all application-specific errors with a single except clause.
    """

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(BrandSignalsError):
    """
    Base class for configuration-related errors.

    Raised when configuration loading, parsing, or validation fails.
    Should be caught and result in exit code 1 (configuration error).
    """

    pass


class ConfigFileNotFoundError(ConfigurationError):
    """
    Configuration file does not exist at the specified path.

    Example:
        raise ConfigFileNotFoundError("/path/to/analyzer.yaml")
    """

    pass


class ConfigValidationError(ConfigurationError):
    """
    Configuration file is invalid (YAML syntax or schema validation failed).

    Should include details about which field(s) failed validation.

    Example:
        raise ConfigValidationError("competitors.0.name: Value error, name cannot be empty")
    """

    pass


# ============================================================================
# Input Errors
# ============================================================================


class InputError(BrandSignalsError):
    """
    Base class for batch input errors (response files, JSON Lines inputs).

    Should be caught and result in exit code 2 (input error).
    """

    pass


class InputFileNotFoundError(InputError):
    """
    Input file does not exist at the specified path.

    Example:
        raise InputFileNotFoundError("Input file not found: responses.jsonl")
    """

    pass


class InputValidationError(InputError):
    """
    Input file content is not valid JSON / JSON Lines or a record is malformed.

    Example:
        raise InputValidationError("Line 3: Invalid JSON: Expecting value")
    """

    pass


# ============================================================================
# Export Errors
# ============================================================================


class ExportError(BrandSignalsError):
    """
    Writing an output artifact (JSON, CSV) failed.

    Should be caught and result in exit code 3 (output error).

    Example:
        raise ExportError("Cannot write CSV export 'out/report.csv': Permission denied")
    """

    pass
