"""
Formatting helpers shared by the compiling context.

Small pure functions for absent-safe collection handling and display strings.
"""

from typing import Any, Iterable, List, Optional, Sequence

DATE_RANGE_SEPARATOR = " – "
META_SEPARATOR = " · "


def safe(value: Any) -> Sequence:
    """
    Coerce an optional collection to an ordered sequence.

    Args:
        value: List, tuple, None, or any other value

    Returns:
        value unchanged if it is a list or tuple, otherwise an empty list

    Examples:
        >>> safe(["a", "b"])
        ['a', 'b']
        >>> safe(None)
        []
        >>> safe("not a list")
        []
    """
    if isinstance(value, (list, tuple)):
        return value
    return []


def has_items(value: Any) -> bool:
    """True if value is a non-empty list or tuple."""
    return len(safe(value)) > 0


def format_date_range(
    start: Optional[str] = None, end: Optional[str] = None, fallback: str = "Present"
) -> Optional[str]:
    """
    Format a start/end pair as a single date range line.

    Args:
        start: Start date string (e.g. "2020-01")
        end: End date string (e.g. "2021-01" or "Present")
        fallback: Label used as the end when only start is present

    Returns:
        None if both are absent, "start – end" if both are present,
        "start – fallback" if only start is present, end alone otherwise

    Examples:
        >>> format_date_range("2020-01", "2021-01")
        '2020-01 – 2021-01'
        >>> format_date_range("2020-01")
        '2020-01 – Present'
        >>> format_date_range(None, "2021-01")
        '2021-01'
    """
    if not start and not end:
        return None
    if start and end:
        return f"{start}{DATE_RANGE_SEPARATOR}{end}"
    if start:
        return f"{start}{DATE_RANGE_SEPARATOR}{fallback}"
    return end


def join_present(values: Iterable[Optional[str]], separator: str = META_SEPARATOR) -> str:
    """
    Join the non-empty values with separator, skipping absent ones.

    Never produces a leading or trailing separator.

    Examples:
        >>> join_present(["+1 555", None, "me@example.com", ""])
        '+1 555 · me@example.com'
    """
    present: List[str] = [value for value in values if value]
    return separator.join(present)
