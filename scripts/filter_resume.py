#!/usr/bin/env python3
"""
Filter a resume by labels and print the result.

Usage:
    python scripts/filter_resume.py --label backend
    python scripts/filter_resume.py -l backend -l ML --format json > filtered.json
    python scripts/filter_resume.py data/resume_data.json --list-labels
"""

import json
from enum import Enum
from typing import List, Optional

import typer

from vitae.contexts.document import ResumeLoadError, document_to_dict, load_resume
from vitae.contexts.filtering import build_view, collect_labels, unknown_labels
from vitae.contexts.filtering.logger import setup_filtering_logger
from vitae.contexts.presentation import render_markdown
from vitae.utils.logger import session_log_dir
from vitae.utils.settings import LOGS_PATH, RESUME_DATA_PATH

app = typer.Typer(add_completion=False, help="Filter a resume by labels.")


class OutputFormat(str, Enum):
    markdown = "markdown"
    json = "json"


@app.command()
def main(
    source: str = typer.Argument(
        str(RESUME_DATA_PATH), help="Path or URL of the resume data file (JSON or YAML)"
    ),
    labels: Optional[List[str]] = typer.Option(
        None, "--label", "-l", help="Label to filter by (repeat for several; none shows everything)"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.markdown, "--format", "-f", help="Output format"
    ),
    list_labels: bool = typer.Option(
        False, "--list-labels", help="Print available labels and exit"
    ),
    log: bool = typer.Option(False, "--log", help=f"Write a session log under {LOGS_PATH}"),
):
    """Print the resume filtered to the selected labels."""
    labels = labels or []
    if log:
        setup_filtering_logger(session_log_dir(LOGS_PATH, "filter"), selection=labels)

    try:
        document = load_resume(source)
    except ResumeLoadError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if list_labels:
        for label in document.available_labels:
            typer.echo(label)
        extra = sorted(collect_labels(document) - set(document.available_labels))
        for label in extra:
            typer.echo(f"{label} (undeclared)")
        raise typer.Exit()

    unknown = unknown_labels(labels, document)
    if unknown:
        typer.secho(
            f"! Unknown label(s), matching nothing: {', '.join(sorted(unknown))}",
            fg=typer.colors.YELLOW,
            err=True,
        )

    view = build_view(document, labels)

    if output_format == OutputFormat.json:
        data = document_to_dict(view.document)
        data["skills"] = [
            {"name": s.name, "label": s.label, "fromDate": s.from_date, "toDate": s.to_date}
            for s in view.skills
        ]
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        typer.echo(render_markdown(view))


if __name__ == "__main__":
    app()
