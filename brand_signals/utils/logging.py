"""
Structured JSON logging for brand-signals.

Provides standardized logging with:
- JSON formatted output to stderr
- UTC timestamps with timezone info
- Structured context fields
- Component-based logger creation

All logs use Python's standard logging module with custom formatting.
Log level defaults to INFO; setup_logging(verbose=True) enables DEBUG (one
record per analysis and per discovery strategy), quiet_logs=True keeps only
warnings and errors.

Examples:
    >>> from brand_signals.utils.logging import setup_logging, get_logger
    >>> setup_logging(verbose=True)
    >>> logger = get_logger("config.loader")
    >>> logger.info("Config loaded", extra={"context": {"competitors": 5}})

Notes:
    - Only stderr is used (stdout reserved for user output and JSON mode)
    - Non-ASCII text (CJK brand names) is written as-is, not \\u-escaped
"""

import json
import logging
import sys
from typing import Any

from brand_signals.utils.time import utc_timestamp


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs logs as JSON with structured fields.

    Each log record is formatted as a JSON object with:
    - timestamp: ISO 8601 UTC timestamp
    - level: Log level (INFO, WARNING, ERROR, DEBUG)
    - component: Module/component name (from logger name)
    - message: Human-readable log message
    - context: Additional structured data (from 'context' in extra)
    - batch_id: Current batch identifier (from 'batch_id' in extra, if available)
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": utc_timestamp(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        # Add context if provided via extra={'context': {...}}
        if hasattr(record, "context") and isinstance(record.context, dict):
            log_entry["context"] = record.context

        if hasattr(record, "batch_id"):
            log_entry["batch_id"] = record.batch_id

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


def setup_logging(verbose: bool = False, quiet_logs: bool = False) -> None:
    """
    Configure structured JSON logging for the application.

    Sets up:
    - JSON formatter for structured output
    - stderr output (stdout reserved for user-facing content)
    - Log level: DEBUG if verbose, WARNING if quiet_logs, INFO otherwise

    Args:
        verbose: If True, set log level to DEBUG
        quiet_logs: If True (and not verbose), only log warnings and errors

    Example:
        >>> setup_logging(verbose=True)
        >>> logger = get_logger("my.component")
        >>> logger.debug("Debug message")  # Will appear in logs
    """
    if verbose:
        level = logging.DEBUG
    elif quiet_logs:
        level = logging.WARNING
    else:
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers (prevents duplicate logs)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())

    root_logger.addHandler(handler)


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger instance for a specific component.

    All loggers share the configuration set by setup_logging().

    Args:
        component: Component name (e.g., "config.loader", "extractor.analyzer")

    Returns:
        Logger instance configured for JSON output
    """
    return logging.getLogger(component)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    context: dict[str, Any] | None = None,
    batch_id: str | None = None,
) -> None:
    """
    Log a message with structured context and optional batch_id.

    Equivalent to
    logger.log(level, message, extra={'context': {...}, 'batch_id': '...'})

    Args:
        logger: Logger instance (from get_logger)
        level: Log level (logging.INFO, logging.WARNING, etc.)
        message: Human-readable log message
        context: Optional dict with additional structured data
        batch_id: Optional batch identifier to include in log

    Example:
        >>> logger = get_logger("cli")
        >>> log_with_context(
        ...     logger,
        ...     logging.INFO,
        ...     "Batch analyzed",
        ...     context={"responses": 12, "mention_rate": 0.75},
        ...     batch_id="2025-11-02T08-30-00Z"
        ... )
    """
    extra = {}

    if context is not None:
        extra["context"] = context

    if batch_id is not None:
        extra["batch_id"] = batch_id

    logger.log(level, message, extra=extra if extra else None)
