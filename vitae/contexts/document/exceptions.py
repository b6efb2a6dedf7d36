"""Custom exceptions for loading resume documents."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class SchemaIssue:
    """
    A single schema violation.

    Attributes:
        path: Structured location (e.g., "WorkExperience[2].roles[0].skills[1]")
        reason: What is wrong at that location
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class ResumeLoadError(Exception):
    """Base class for every failure that prevents a resume document from loading."""

    pass


class SchemaError(ResumeLoadError, ValueError):
    """
    Exception raised when raw data does not conform to the resume document schema.

    Always fatal to the load: no partial document is accepted.

    Attributes:
        issues: Every violation found (at least one)
        path: Location of the first violation
        reason: Description of the first violation
    """

    def __init__(self, issues: List[SchemaIssue]):
        if not issues:
            raise ValueError("SchemaError requires at least one issue")
        self.issues = list(issues)
        self.path = self.issues[0].path
        self.reason = self.issues[0].reason

        parts = [f"Invalid resume data ({len(self.issues)} issue(s))"]
        parts.extend(f"  - {issue}" for issue in self.issues)
        super().__init__("\n".join(parts))

    @classmethod
    def single(cls, path: str, reason: str) -> "SchemaError":
        return cls([SchemaIssue(path, reason)])


class TransportError(ResumeLoadError):
    """
    Exception raised when the resume document cannot be retrieved.

    Attributes:
        source: Path or URL that was requested
        original_error: Underlying I/O or HTTP error, if any
    """

    def __init__(self, message: str, source: str, original_error: Optional[Exception] = None):
        self.source = source
        self.original_error = original_error

        parts = [f"{message}: {source}"]
        if original_error:
            parts.append(f"Original error: {original_error}")
        super().__init__("\n".join(parts))


class ParseError(ResumeLoadError):
    """
    Exception raised when the raw input is not well-formed JSON or YAML.

    The parser message is surfaced verbatim.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        prefix = f"Could not parse {source}" if source else "Could not parse resume data"
        super().__init__(f"{prefix}: {message}")
