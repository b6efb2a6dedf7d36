"""Integration tests for loading resume documents from files and URLs."""

import json
from pathlib import Path

import pytest
import requests

from vitae.contexts.document import (
    ParseError,
    SchemaError,
    SchemaIssue,
    TransportError,
    collect_schema_issues,
    document_to_dict,
    document_to_json,
    load_resume,
    validate_resume_data,
)
from vitae.contexts.document.loader import parse_raw, source_format
from vitae.contexts.filtering import filter_document
from vitae.utils.settings import DEFAULT_SETTINGS

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def _settings(strict: bool = False) -> dict:
    return {"labels": {"strict": strict}, "fetch": dict(DEFAULT_SETTINGS["fetch"])}


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Client Error")


@pytest.mark.integration
def test_load_json_fixture():
    """Test loading the JSON fixture from disk."""
    document = load_resume(FIXTURES_PATH / "resume_data.json", settings=_settings())

    assert document.profile.name == "Jane Doe"
    assert document.counts["roles"] == 4


@pytest.mark.integration
def test_load_yaml_fixture():
    """Test loading a YAML resume."""
    document = load_resume(FIXTURES_PATH / "resume_data.yaml", settings=_settings())

    assert document.work_experience[0].current is True
    assert document.work_experience[0].roles[0].from_date == "2021-06"
    assert document.available_labels == ("backend",)


@pytest.mark.integration
def test_missing_file_raises_transport_error(tmp_path):
    """Test that a missing file is a transport failure naming the source."""
    missing = tmp_path / "nope.json"

    with pytest.raises(TransportError) as exc_info:
        load_resume(missing, settings=_settings())

    assert exc_info.value.source == str(missing)


@pytest.mark.integration
def test_malformed_json_raises_parse_error():
    """Test that broken JSON is a parse failure naming the file."""
    with pytest.raises(ParseError, match="resume_data_malformed.json"):
        load_resume(FIXTURES_PATH / "resume_data_malformed.json", settings=_settings())


@pytest.mark.integration
def test_non_utf8_file_raises_parse_error(tmp_path):
    """Test that undecodable bytes are a parse failure."""
    path = tmp_path / "latin1.json"
    path.write_bytes('{"name": "Jürgen"}'.encode("latin-1"))

    with pytest.raises(ParseError):
        load_resume(path, settings=_settings())


@pytest.mark.integration
def test_invalid_document_raises_schema_error():
    """Test that schema issues surface with their paths."""
    with pytest.raises(SchemaError) as exc_info:
        load_resume(FIXTURES_PATH / "resume_data_invalid.json", settings=_settings())

    assert [issue.path for issue in exc_info.value.issues] == [
        "availableLabels",
        "WorkExperience[0].roles[0].skills[0].label",
    ]


@pytest.mark.integration
def test_strict_labels_rejects_undeclared_labels(tmp_path, raw_resume):
    """Test lenient and strict handling of undeclared labels."""
    raw_resume["availableLabels"] = ["backend", "infra", "ML"]
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(raw_resume))

    # Lenient by default: the document loads
    assert load_resume(path, settings=_settings()).available_labels == ("backend", "infra", "ML")

    with pytest.raises(SchemaError) as exc_info:
        load_resume(path, settings=_settings(strict=True))
    assert [str(issue) for issue in exc_info.value.issues] == [
        "availableLabels: missing label 'leadership' used in content",
        "availableLabels: missing label 'research' used in content",
    ]

    # Explicit argument overrides the setting
    load_resume(path, strict_labels=False, settings=_settings(strict=True))


@pytest.mark.integration
def test_load_from_url(monkeypatch):
    """Test loading over HTTP with the configured timeout."""
    text = (FIXTURES_PATH / "resume_data.json").read_text(encoding="utf-8")
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse(text)

    monkeypatch.setattr(requests, "get", fake_get)

    document = load_resume("https://example.com/data/resume-data.json", settings=_settings())

    assert document.profile.name == "Jane Doe"
    assert calls == [("https://example.com/data/resume-data.json", 10)]


@pytest.mark.integration
def test_http_error_raises_transport_error(monkeypatch):
    """Test that an HTTP error status is a transport failure."""
    monkeypatch.setattr(requests, "get", lambda url, timeout: _FakeResponse("", status_code=404))

    with pytest.raises(TransportError, match="404"):
        load_resume("https://example.com/missing.json", settings=_settings())


@pytest.mark.integration
def test_network_failure_raises_transport_error(monkeypatch):
    """Test that a connection failure keeps the original error."""
    def fake_get(url, timeout):
        raise requests.exceptions.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "get", fake_get)

    with pytest.raises(TransportError) as exc_info:
        load_resume("http://localhost:9/resume.json", settings=_settings())

    assert isinstance(exc_info.value.original_error, requests.exceptions.ConnectionError)


@pytest.mark.integration
def test_source_format():
    """Test format detection for paths and URLs."""
    assert source_format("data/resume.yml") == "yaml"
    assert source_format("https://example.com/resume.YAML?v=2") == "yaml"
    assert source_format("data/resume_data.json") == "json"


@pytest.mark.integration
def test_filtered_document_serialises_to_valid_data(resume):
    """Test that serialised documents validate back to equal documents."""
    filtered = filter_document(resume, {"ML", "infra"})

    assert validate_resume_data(document_to_dict(filtered)) == filtered
    assert validate_resume_data(json.loads(document_to_json(resume))) == resume


@pytest.mark.integration
def test_yaml_scalar_document_is_not_an_object(tmp_path):
    """Test that a YAML file holding a bare scalar reports one top-level shape issue."""
    path = tmp_path / "resume.yaml"
    path.write_text("hello\n")

    with pytest.raises(SchemaError) as exc_info:
        load_resume(path, settings=_settings())

    assert exc_info.value.issues == [SchemaIssue("resume", "must be an object")]


@pytest.mark.integration
def test_yaml_list_document_is_not_an_object():
    """Test that a top-level YAML list is parsed as-is and rejected by shape."""
    assert parse_raw("- a\n- b\n", "yaml") == ["a", "b"]
    assert collect_schema_issues(parse_raw("- a\n", "yaml")) == [SchemaIssue("resume", "must be an object")]


@pytest.mark.integration
def test_malformed_yaml_raises_parse_error(tmp_path):
    """Test that broken YAML syntax surfaces as a ParseError naming the file."""
    path = tmp_path / "broken.yaml"
    path.write_text("profile: [unclosed\n")

    with pytest.raises(ParseError, match="broken.yaml"):
        load_resume(path, settings=_settings())
