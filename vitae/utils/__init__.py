"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Logging setup
- Settings and environment paths
- Date display formatting
- Report formatting
"""

from vitae.utils.dates import format_date_range, format_month

__all__ = ["format_date_range", "format_month"]
