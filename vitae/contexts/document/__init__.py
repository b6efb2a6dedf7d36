"""
Document Context

Responsibilities:
- Defines the typed, immutable resume document model
- Validates raw JSON/YAML data against the schema with structured error paths
- Loads resume data from files or URLs
- Serialises documents back to the wire format

Owns: Resume document representation, schema validation, load errors
Never: Decides which content a viewer sees
"""

from vitae.contexts.document.exceptions import (
    ParseError,
    ResumeLoadError,
    SchemaError,
    SchemaIssue,
    TransportError,
)
from vitae.contexts.document.resume_data_structure import (
    Education,
    Experience,
    Highlight,
    Internship,
    Language,
    Profile,
    Publication,
    ResumeDocument,
    Role,
    Skill,
    WorkExperience,
)
from vitae.contexts.document.validator import collect_schema_issues, validate_resume_data
from vitae.contexts.document.serialization import document_to_dict, document_to_json
from vitae.contexts.document.loader import load_resume, parse_raw, read_source

__all__ = [
    # Data structure classes
    "ResumeDocument",
    "Profile",
    "Education",
    "Experience",
    "WorkExperience",
    "Internship",
    "Role",
    "Highlight",
    "Skill",
    "Publication",
    "Language",
    # Validation
    "validate_resume_data",
    "collect_schema_issues",
    # Loading
    "load_resume",
    "read_source",
    "parse_raw",
    # Serialisation
    "document_to_dict",
    "document_to_json",
    # Errors
    "ResumeLoadError",
    "SchemaError",
    "SchemaIssue",
    "TransportError",
    "ParseError",
]
