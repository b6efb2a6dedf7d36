"""Date formatting utilities for resume display."""

from datetime import datetime
from typing import Optional

PRESENT = "Present"


def format_month(iso_month: Optional[str]) -> str:
    """
    Format a YYYY-MM (or YYYY-MM-DD) date for display.

    Args:
        iso_month: ISO formatted month string, or None for an ongoing range

    Returns:
        Human-readable month (e.g., "Jun 2021"), "Present" when missing

    Examples:
        format_month("2021-06")
        # "Jun 2021"

        format_month(None)
        # "Present"
    """
    if not iso_month:
        return PRESENT

    for pattern in ("%Y-%m", "%Y-%m-%d", "%Y"):
        try:
            dt = datetime.strptime(iso_month, pattern)
        except ValueError:
            continue
        if pattern == "%Y":
            return dt.strftime("%Y")
        return dt.strftime("%b %Y")

    # Return original if parsing fails
    return iso_month


def format_date_range(from_date: Optional[str], to_date: Optional[str], current: bool = False) -> str:
    """
    Format a from/to pair as "Mon YYYY - Mon YYYY".

    A current entry always ends in "Present", regardless of to_date.
    """
    end = PRESENT if current else format_month(to_date)
    return f"{format_month(from_date)} - {end}"
