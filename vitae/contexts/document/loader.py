"""
Resume document loading.

The one I/O boundary of VITAE: reads raw resume data from a local file or an
http(s) URL, parses it (JSON, or YAML for .yaml/.yml sources), validates it and
returns a frozen ResumeDocument. Each step raises its own ResumeLoadError
subclass, so callers get either a complete document or a typed error:

    read_source   -> TransportError
    parse_raw     -> ParseError
    validate      -> SchemaError
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

import requests
import yaml

from vitae.contexts.document.exceptions import (
    ParseError,
    ResumeLoadError,
    SchemaError,
    SchemaIssue,
    TransportError,
)
from vitae.contexts.document.logger import (
    _log_debug,
    log_load_failure,
    log_load_result,
    log_load_start,
)
from vitae.contexts.document.resume_data_structure import ResumeDocument
from vitae.contexts.document.validator import validate_resume_data
from vitae.contexts.filtering import label_index
from vitae.utils.settings import RESUME_DATA_PATH, load_settings

YAML_SUFFIXES = (".yaml", ".yml")


def is_url(source: Union[str, Path]) -> bool:
    return str(source).startswith(("http://", "https://"))


def source_format(source: Union[str, Path]) -> str:
    """Return "yaml" for .yaml/.yml sources (files or URL paths), "json" otherwise."""
    path = urlparse(str(source)).path if is_url(source) else str(source)
    return "yaml" if path.lower().endswith(YAML_SUFFIXES) else "json"


def read_source(source: Union[str, Path], timeout: float = 10) -> str:
    """
    Read raw resume text from a file path or an http(s) URL.

    Args:
        source: Local path or URL
        timeout: Seconds to wait for an HTTP response

    Returns:
        Raw document text

    Raises:
        TransportError: If the file is missing/unreadable or the request fails
        ParseError: If a local file is not valid UTF-8
    """
    if is_url(source):
        url = str(source)
        _log_debug(f"Fetching {url} (timeout {timeout}s)")
        try:
            response = requests.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError("Failed to fetch resume data", url, e) from e
        return response.text

    path = Path(source)
    if not path.is_file():
        raise TransportError("Resume data file not found", str(path))

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"not valid UTF-8 ({e})", str(path)) from e
    except OSError as e:
        raise TransportError("Failed to read resume data", str(path), e) from e


def parse_raw(text: str, fmt: str = "json", source: Optional[str] = None) -> Any:
    """
    Parse raw text into plain Python data (dicts, lists, scalars).

    Args:
        text: Raw document text
        fmt: "json" or "yaml"
        source: Where the text came from, for error messages

    Raises:
        ParseError: If the text is not well-formed; the parser message is kept verbatim
    """
    if fmt == "yaml":
        # Scalars and lists come back as-is; the validator rejects non-mapping documents
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParseError(str(e), source) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), source) from e


def load_resume(
    source: Optional[Union[str, Path]] = None,
    strict_labels: Optional[bool] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> ResumeDocument:
    """
    Load, parse and validate a resume document.

    Args:
        source: File path or URL (defaults to RESUME_DATA_PATH)
        strict_labels: Fail when content uses labels missing from availableLabels.
            Defaults to the `labels.strict` setting.
        settings: Pre-loaded settings dict (defaults to load_settings())

    Returns:
        Validated ResumeDocument

    Raises:
        TransportError: Document could not be retrieved
        ParseError: Document is not well-formed JSON/YAML
        SchemaError: Document does not match the schema (or, in strict mode,
            uses undeclared labels)

    Example:
        >>> document = load_resume("data/resume_data.json")
        >>> document.profile.name
        'Jane Doe'
    """
    if source is None:
        source = RESUME_DATA_PATH
    if settings is None:
        settings = load_settings()
    if strict_labels is None:
        strict_labels = settings["labels"]["strict"]

    source_name = str(source)
    log_load_start(source_name)

    try:
        text = read_source(source, timeout=settings["fetch"]["timeout_seconds"])
        raw = parse_raw(text, source_format(source), source_name)
        document = validate_resume_data(raw)

        audit = label_index.audit_available_labels(document)
        if strict_labels and not audit.is_consistent:
            raise SchemaError(
                [
                    SchemaIssue("availableLabels", f"missing label '{label}' used in content")
                    for label in sorted(audit.undeclared)
                ]
            )
    except ResumeLoadError as e:
        log_load_failure(source_name, e)
        raise

    log_load_result(source_name, document.counts)
    return document
