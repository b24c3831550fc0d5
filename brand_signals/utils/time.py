"""
UTC timestamp utilities for brand-signals.

All timestamps MUST be in UTC with explicit timezone markers.

This module provides:
- utc_now(): Current time as timezone-aware datetime
- utc_timestamp(): ISO 8601 timestamp string with 'Z' suffix
- batch_id_from_timestamp(): Filesystem-safe timestamp slug for batch IDs
- format_duration_ms(): Elapsed seconds rendered as the "<ms>ms" string used in
  analysis metadata

Examples:
    >>> from brand_signals.utils.time import utc_timestamp, format_duration_ms
    >>> utc_timestamp()
    '2025-11-02T08:30:45Z'
    >>> format_duration_ms(0.00042)
    '0.42ms'
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return current time in UTC with timezone info.

    Returns:
        datetime: Current UTC time with tzinfo=timezone.utc

    Note:
        NEVER use datetime.now() without timezone parameter.
        NEVER use datetime.utcnow() (deprecated, returns naive datetime).
    """
    return datetime.now(UTC)


def utc_timestamp() -> str:
    """
    Return ISO 8601 timestamp string with 'Z' suffix.

    Format: YYYY-MM-DDTHH:MM:SSZ (with colons in time)

    Returns:
        str: ISO 8601 formatted timestamp in UTC

    Example:
        >>> timestamp = utc_timestamp()
        >>> timestamp.endswith('Z')
        True
    """
    return utc_now().strftime("%Y-%m-%dT%H:%M:%SZ")


def batch_id_from_timestamp(dt: datetime | None = None) -> str:
    """
    Generate batch_id slug from UTC timestamp.

    Format: YYYY-MM-DDTHH-MM-SSZ (hyphens instead of colons), safe for
    filenames and sortable chronologically.

    Args:
        dt: Optional datetime to convert. If None, uses utc_now().
            Must be timezone-aware if provided.

    Returns:
        str: Filesystem-safe timestamp slug

    Raises:
        ValueError: If dt is provided but is naive (missing timezone)

    Examples:
        >>> from datetime import datetime, timezone
        >>> batch_id_from_timestamp(datetime(2025, 11, 2, 8, 30, 45, tzinfo=timezone.utc))
        '2025-11-02T08-30-45Z'
    """
    if dt is None:
        dt = utc_now()

    if dt.tzinfo is None:
        raise ValueError(
            "Datetime must be timezone-aware (use timezone.utc). "
            "Got naive datetime. Use utc_now() or ensure dt has tzinfo set."
        )

    return dt.strftime("%Y-%m-%dT%H-%M-%SZ")


def format_duration_ms(seconds: float) -> str:
    """
    Format an elapsed duration (in seconds) as milliseconds with 2 decimals.

    Args:
        seconds: Elapsed time, e.g. the difference of two time.perf_counter() calls

    Returns:
        String like "12.34ms"

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative, got: {seconds}")
    return f"{seconds * 1000:.2f}ms"
