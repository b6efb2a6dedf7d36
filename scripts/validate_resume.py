#!/usr/bin/env python3
"""
Validate a resume data file before publishing it.

Reports every schema issue with its path (e.g. WorkExperience[2].roles[0].skills[1].label)
and, on success, prints entry counts and the labels used in the document.

Usage:
    python scripts/validate_resume.py
    python scripts/validate_resume.py data/resume_data.json
    python scripts/validate_resume.py https://example.com/data/resume-data.json --strict-labels
"""

from typing import Optional

import typer

from vitae.contexts.document import ResumeLoadError, SchemaError, load_resume
from vitae.contexts.document.logger import setup_document_logger
from vitae.contexts.filtering import audit_available_labels, collect_labels
from vitae.utils.report_formatter import SummaryFormatter, pluralize
from vitae.utils.logger import session_log_dir
from vitae.utils.settings import LOGS_PATH, RESUME_DATA_PATH, load_settings

app = typer.Typer(add_completion=False, help="Validate a resume data file.")


@app.command()
def main(
    source: str = typer.Argument(
        str(RESUME_DATA_PATH), help="Path or URL of the resume data file (JSON or YAML)"
    ),
    strict_labels: Optional[bool] = typer.Option(
        None,
        "--strict-labels/--lenient-labels",
        help="Fail when content uses labels missing from availableLabels (default from settings)",
    ),
    log: bool = typer.Option(False, "--log", help=f"Write a session log under {LOGS_PATH}"),
):
    """Validate resume data and display a summary."""
    if log:
        log_file = setup_document_logger(session_log_dir(LOGS_PATH, "validate"), source=source)
        typer.echo(f"Log file: {log_file}")

    typer.echo(f"\nValidating resume data: {source}\n")

    try:
        document = load_resume(source, strict_labels=strict_labels, settings=load_settings())
    except SchemaError as e:
        typer.secho(f"✗ Validation failed ({pluralize(len(e.issues), 'issue')}):", fg=typer.colors.RED, err=True)
        for issue in e.issues:
            typer.echo(f"  - {issue.path}: {issue.reason}", err=True)
        raise typer.Exit(1)
    except ResumeLoadError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.secho("✓ Validation successful! Your resume data is valid.\n", fg=typer.colors.GREEN)

    counts = document.counts
    labels = sorted(collect_labels(document))
    audit = audit_available_labels(document)

    report = (
        SummaryFormatter()
        .add_section_header("Summary")
        .add_entry("Profile", document.profile.name)
        .add_entry("Education entries", counts["education"])
        .add_entry("Work experiences", counts["work_experience"])
        .add_entry("Internships", counts["internships"])
        .add_entry("Total roles", counts["roles"])
        .add_entry("Publications", counts["publications"])
        .add_entry("Unique labels", len(labels))
        .add_list("Labels", labels)
    )
    typer.echo(report.render())

    # Warnings
    warnings = []
    if audit.undeclared:
        warnings.append(f"Labels missing from availableLabels: {', '.join(sorted(audit.undeclared))}")
    if audit.unused:
        warnings.append(f"availableLabels with no matching content: {', '.join(sorted(audit.unused))}")

    if warnings:
        warning_report = SummaryFormatter().add_blank_line().add_section_header("Warnings")
        for w in warnings:
            warning_report.add_text(f"  ! {w}")
        typer.echo(warning_report.render())


if __name__ == "__main__":
    app()
