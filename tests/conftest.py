"""Shared fixtures for VITAE tests."""

import json
from pathlib import Path

import pytest

from vitae.contexts.document import ResumeDocument, validate_resume_data

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def raw_resume() -> dict:
    """Raw parsed data of the full fixture resume."""
    return json.loads((FIXTURES_PATH / "resume_data.json").read_text(encoding="utf-8"))


@pytest.fixture
def resume(raw_resume) -> ResumeDocument:
    """Validated fixture resume."""
    return validate_resume_data(raw_resume)
