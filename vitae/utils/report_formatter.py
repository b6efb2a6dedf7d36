"""
Utility for formatting text-based summary reports.

Provides consistent key/value layout for document summaries printed by scripts.
"""

from typing import Any, Iterable, List


class SummaryFormatter:
    """Builder for aligned key/value summary reports."""

    def __init__(self, key_width: int = 22, total_width: int = 60, bullet: str = "•"):
        """
        Args:
            key_width: Width reserved for the key column
            total_width: Total report width for separators
            bullet: Marker printed before each entry
        """
        self.key_width = key_width
        self.total_width = total_width
        self.bullet = bullet
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "SummaryFormatter":
        """Add section title followed by a separator line."""
        self.lines.append(title)
        self.lines.append("-" * self.total_width)
        return self

    def add_entry(self, key: str, value: Any) -> "SummaryFormatter":
        """Add one aligned `key: value` line."""
        label = f"{key}:"
        self.lines.append(f"  {self.bullet} {label:<{self.key_width}} {value}")
        return self

    def add_list(self, key: str, items: Iterable[str], empty: str = "(none)") -> "SummaryFormatter":
        """Add a comma-joined list entry, or `empty` when there are no items."""
        items = list(items)
        return self.add_entry(key, ", ".join(items) if items else empty)

    def add_blank_line(self) -> "SummaryFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "SummaryFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)


def pluralize(count: int, singular: str, plural: str = None) -> str:
    """Format a count with the matching noun form (e.g., "1 role", "3 roles")."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"
