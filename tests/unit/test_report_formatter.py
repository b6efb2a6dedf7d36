"""Unit tests for SummaryFormatter."""

import pytest

from vitae.utils.report_formatter import SummaryFormatter, pluralize


@pytest.mark.unit
def test_summary_layout():
    """Test header, aligned entries and empty-list placeholder."""
    report = (
        SummaryFormatter(key_width=10, total_width=20)
        .add_section_header("Summary")
        .add_entry("Roles", 4)
        .add_list("Labels", [])
        .render()
    )

    assert report.splitlines() == [
        "Summary",
        "-" * 20,
        "  • Roles:     4",
        "  • Labels:    (none)",
    ]


@pytest.mark.unit
def test_add_list_joins_items():
    """Test that list entries are comma-joined."""
    report = SummaryFormatter().add_list("Labels", ["ML", "backend"]).render()

    assert report.endswith("ML, backend")


@pytest.mark.unit
def test_pluralize():
    """Test singular, default plural and explicit plural forms."""
    assert pluralize(1, "issue") == "1 issue"
    assert pluralize(3, "issue") == "3 issues"
    assert pluralize(2, "entry", "entries") == "2 entries"


@pytest.mark.unit
def test_free_text_block_after_blank_line():
    """Test a blank line and free-text lines around a section header."""
    report = (
        SummaryFormatter(total_width=8)
        .add_blank_line()
        .add_section_header("Warnings")
        .add_text("  ! design is unused")
        .render()
    )

    assert report.splitlines() == ["", "Warnings", "-" * 8, "  ! design is unused"]
