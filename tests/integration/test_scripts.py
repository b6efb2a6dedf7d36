"""Integration tests for the validate_resume and filter_resume command-line tools."""

import importlib.util
import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

REPO_ROOT = Path(__file__).parent.parent.parent
FIXTURES_PATH = REPO_ROOT / "tests" / "fixtures"

runner = CliRunner()


def _load_script(name: str):
    """Import a script from scripts/ as a module (scripts/ is not a package)."""
    spec = importlib.util.spec_from_file_location(name, REPO_ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def validate_app():
    return _load_script("validate_resume").app


@pytest.fixture(scope="module")
def filter_app():
    return _load_script("filter_resume").app


@pytest.mark.integration
def test_validate_valid_file(validate_app):
    """Test the summary and warnings printed for a valid file."""
    result = runner.invoke(validate_app, [str(FIXTURES_PATH / "resume_data.json")])

    assert result.exit_code == 0
    assert "Validation successful" in result.output
    assert "Total roles:" in result.output
    assert "Labels:" in result.output
    assert "ML, backend, infra, leadership, research" in result.output
    assert "\nWarnings\n" + "-" * 60 in result.output
    assert "  ! availableLabels with no matching content: design" in result.output


@pytest.mark.integration
def test_validate_reports_issue_paths(validate_app):
    """Test that every schema issue is printed with its path."""
    result = runner.invoke(validate_app, [str(FIXTURES_PATH / "resume_data_invalid.json")])

    assert result.exit_code == 1
    assert "Validation failed (2 issues)" in result.output
    assert "WorkExperience[0].roles[0].skills[0].label: missing required field" in result.output


@pytest.mark.integration
def test_validate_missing_file(validate_app, tmp_path):
    """Test the exit code and message for a missing file."""
    result = runner.invoke(validate_app, [str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Resume data file not found" in result.output


@pytest.mark.integration
def test_validate_malformed_file(validate_app):
    """Test the exit code and message for a malformed file."""
    result = runner.invoke(validate_app, [str(FIXTURES_PATH / "resume_data_malformed.json")])

    assert result.exit_code == 1
    assert "Could not parse" in result.output


@pytest.mark.integration
def test_validate_strict_labels(validate_app, tmp_path, raw_resume):
    """Test the lenient and strict label flags."""
    raw_resume["availableLabels"] = ["backend"]
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(raw_resume))

    lenient = runner.invoke(validate_app, [str(path), "--lenient-labels"])
    assert lenient.exit_code == 0
    assert "Labels missing from availableLabels" in lenient.output

    strict = runner.invoke(validate_app, [str(path), "--strict-labels"])
    assert strict.exit_code == 1
    assert "availableLabels: missing label 'infra' used in content" in strict.output


@pytest.mark.integration
def test_filter_markdown(filter_app):
    """Test markdown output for a label selection."""
    result = runner.invoke(filter_app, [str(FIXTURES_PATH / "resume_data.json"), "-l", "backend"])

    assert result.exit_code == 0
    assert "Filters: `backend`" in result.output
    assert "#### Backend Engineer" in result.output
    assert "Platform Engineer" not in result.output


@pytest.mark.integration
def test_filter_json(filter_app):
    """Test JSON output with the filtered skills list."""
    result = runner.invoke(
        filter_app,
        [str(FIXTURES_PATH / "resume_data.json"), "--label", "infra", "--format", "json"],
    )

    assert result.exit_code == 0
    # Log lines may precede the document when stderr is mixed in
    data = json.loads(result.stdout[result.stdout.index("{\n"):])
    assert [exp["id"] for exp in data["workExperience"]] == ["work-acme"]
    assert [role["id"] for role in data["workExperience"][0]["roles"]] == ["role-backend", "role-platform"]
    assert [skill["name"] for skill in data["skills"]] == ["Terraform", "Kubernetes"]


@pytest.mark.integration
def test_filter_warns_on_unknown_label(filter_app):
    """Test the warning for a label the document does not know."""
    result = runner.invoke(filter_app, [str(FIXTURES_PATH / "resume_data.json"), "-l", "bakcend"])

    assert result.exit_code == 0
    assert "Unknown label(s), matching nothing: bakcend" in result.output
    assert "### No experience found" in result.output


@pytest.mark.integration
def test_filter_list_labels(filter_app):
    """Test listing the declared labels."""
    result = runner.invoke(filter_app, [str(FIXTURES_PATH / "resume_data.json"), "--list-labels"])

    assert result.exit_code == 0
    assert result.output.splitlines()[-6:] == ["backend", "infra", "ML", "leadership", "research", "design"]


@pytest.mark.integration
def test_filter_missing_file(filter_app, tmp_path):
    """Test the exit code and message for a missing file."""
    result = runner.invoke(filter_app, [str(tmp_path / "missing.json"), "-l", "ML"])

    assert result.exit_code == 1
    assert "Resume data file not found" in result.output
