"""
Presentation Context

Responsibilities:
- Renders a filtered resume view as markdown text
- Shows an explicit "no results" block for categories emptied by a filter
- Formats dates for display

Owns: Text layout of resume content
Never: Decides which content is shown, reads files
"""

from vitae.contexts.presentation.markdown_formatter import (
    format_experience_markdown,
    format_no_results,
    format_skills_markdown,
    render_markdown,
)

__all__ = [
    "render_markdown",
    "format_experience_markdown",
    "format_skills_markdown",
    "format_no_results",
]
