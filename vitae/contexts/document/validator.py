"""
Resume data validation.

Checks raw parsed data (dicts and lists from JSON/YAML) against the resume
document schema and builds a frozen ResumeDocument from it. Every violation is
collected with a structured path (e.g. "WorkExperience[2].roles[0].skills[1].label")
before failing, so a single run reports everything that needs fixing.

Optional collections (role highlights and skills, languages, coursework) default
to empty tuples instead of being reported.
"""

import re
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from vitae.contexts.document.exceptions import SchemaError, SchemaIssue
from vitae.contexts.document.logger import _log_debug, _log_warning
from vitae.contexts.document.resume_data_structure import (
    Education,
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

PROFILE_FIELDS = ["name", "title", "summary", "email", "linkedin", "github"]
REQUIRED_TOP_LEVEL_KEYS = [
    "profile",
    "education",
    "workExperience",
    "internships",
    "publications",
    "availableLabels",
]

# Dates are compared as strings, which only orders correctly for ISO formats
ISO_DATE_PATTERN = re.compile(r"^\d{4}(-\d{2}){0,2}$")

_MISSING = object()


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


class _SchemaChecker:
    """Accumulates schema issues while extracting typed values from raw data."""

    def __init__(self):
        self.issues: List[SchemaIssue] = []

    def fail(self, path: str, reason: str) -> None:
        self.issues.append(SchemaIssue(path, reason))

    def required_str(self, data: Mapping, key: str, path: str, allow_empty: bool = False) -> str:
        value = data.get(key, _MISSING)
        if value is _MISSING or value is None:
            self.fail(_join(path, key), "missing required field")
            return ""
        if not isinstance(value, str):
            self.fail(_join(path, key), f"must be a string, got {type(value).__name__}")
            return ""
        if not allow_empty and not value.strip():
            self.fail(_join(path, key), "must not be empty")
        return value

    def optional_str(self, data: Mapping, key: str, path: str) -> Optional[str]:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            self.fail(_join(path, key), f"must be a string, got {type(value).__name__}")
            return None
        return value or None

    def required_bool(self, data: Mapping, key: str, path: str) -> bool:
        value = data.get(key, _MISSING)
        if value is _MISSING:
            self.fail(_join(path, key), "missing required field")
            return False
        if not isinstance(value, bool):
            self.fail(_join(path, key), "must be a boolean")
            return False
        return value

    def str_list(self, data: Mapping, key: str, path: str, required: bool = True) -> Tuple[str, ...]:
        value = data.get(key, _MISSING)
        if value is _MISSING or value is None:
            if required:
                self.fail(_join(path, key), "missing required field")
            return ()
        if not isinstance(value, (list, tuple)):
            self.fail(_join(path, key), "must be an array")
            return ()

        items = []
        for index, item in enumerate(value):
            if not isinstance(item, str):
                self.fail(f"{_join(path, key)}[{index}]", "must be a string")
                continue
            items.append(item)
        return tuple(items)

    def object_list(
        self, data: Mapping, key: str, path: str, required: bool = True, non_empty: bool = False
    ) -> List[Mapping]:
        """Return the raw items of data[key]; callers report items that are not objects."""
        value = data.get(key, _MISSING)
        if value is _MISSING or value is None:
            if required:
                self.fail(_join(path, key), "missing required field")
            return []
        if not isinstance(value, (list, tuple)):
            self.fail(_join(path, key), "must be an array")
            return []
        if non_empty and not value:
            self.fail(_join(path, key), "must be a non-empty array")
        return list(value)

    def mapping(self, value: Any, path: str) -> Optional[Mapping]:
        if not isinstance(value, Mapping):
            self.fail(path, "must be an object")
            return None
        return value

    def iso_date(self, value: Optional[str], path: str) -> None:
        """Warn (without failing) about dates that will not sort chronologically."""
        if value and not ISO_DATE_PATTERN.match(value):
            _log_warning(f"{path}: date '{value}' is not in YYYY-MM format")


def _parse_profile(checker: _SchemaChecker, raw: Any) -> Optional[Profile]:
    profile = checker.mapping(raw, "profile")
    if profile is None:
        return None
    values = {key: checker.required_str(profile, key, "profile", allow_empty=True) for key in PROFILE_FIELDS}
    return Profile(**values)


def _parse_education(checker: _SchemaChecker, raw: Any, index: int) -> Optional[Education]:
    path = f"Education[{index}]"
    edu = checker.mapping(raw, path)
    if edu is None:
        return None

    # Older data files call coursework "learnings"
    coursework_key = "coursework" if "coursework" in edu else "learnings"

    return Education(
        id=checker.required_str(edu, "id", path),
        institution=checker.required_str(edu, "institution", path),
        location=checker.required_str(edu, "location", path),
        degree=checker.required_str(edu, "degree", path),
        field=checker.required_str(edu, "field", path),
        from_date=checker.required_str(edu, "fromDate", path),
        to_date=checker.required_str(edu, "toDate", path),
        labels=checker.str_list(edu, "labels", path),
        description=checker.optional_str(edu, "description", path),
        coursework=checker.str_list(edu, coursework_key, path, required=False),
    )


def _parse_highlight(checker: _SchemaChecker, raw: Any, path: str) -> Optional[Highlight]:
    highlight = checker.mapping(raw, path)
    if highlight is None:
        return None
    return Highlight(
        text=checker.required_str(highlight, "text", path),
        labels=checker.str_list(highlight, "labels", path),
    )


def _parse_skill(checker: _SchemaChecker, raw: Any, path: str) -> Optional[Skill]:
    skill = checker.mapping(raw, path)
    if skill is None:
        return None
    return Skill(
        name=checker.required_str(skill, "name", path),
        label=checker.required_str(skill, "label", path),
    )


def _parse_role(checker: _SchemaChecker, raw: Any, path: str) -> Optional[Role]:
    role = checker.mapping(raw, path)
    if role is None:
        return None

    highlights = [
        _parse_highlight(checker, item, f"{path}.highlights[{h_index}]")
        for h_index, item in enumerate(checker.object_list(role, "highlights", path, required=False))
    ]
    skills = [
        _parse_skill(checker, item, f"{path}.skills[{s_index}]")
        for s_index, item in enumerate(checker.object_list(role, "skills", path, required=False))
    ]

    from_date = checker.optional_str(role, "fromDate", path)
    to_date = checker.optional_str(role, "toDate", path)
    checker.iso_date(from_date, f"{path}.fromDate")
    checker.iso_date(to_date, f"{path}.toDate")

    return Role(
        id=checker.required_str(role, "id", path),
        position=checker.required_str(role, "position", path),
        from_date=from_date,
        to_date=to_date,
        description=checker.optional_str(role, "description", path),
        highlights=tuple(h for h in highlights if h is not None),
        skills=tuple(s for s in skills if s is not None),
    )


def _parse_roles(checker: _SchemaChecker, experience: Mapping, path: str) -> Tuple[Role, ...]:
    roles = [
        _parse_role(checker, item, f"{path}.roles[{r_index}]")
        for r_index, item in enumerate(checker.object_list(experience, "roles", path, non_empty=True))
    ]
    return tuple(role for role in roles if role is not None)


def _parse_work_experience(checker: _SchemaChecker, raw: Any, index: int) -> Optional[WorkExperience]:
    path = f"WorkExperience[{index}]"
    work = checker.mapping(raw, path)
    if work is None:
        return None
    return WorkExperience(
        id=checker.required_str(work, "id", path),
        company=checker.required_str(work, "company", path),
        location=checker.required_str(work, "location", path),
        from_date=checker.required_str(work, "fromDate", path),
        to_date=checker.optional_str(work, "toDate", path),
        current=checker.required_bool(work, "current", path),
        roles=_parse_roles(checker, work, path),
    )


def _parse_internship(checker: _SchemaChecker, raw: Any, index: int) -> Optional[Internship]:
    path = f"Internship[{index}]"
    intern = checker.mapping(raw, path)
    if intern is None:
        return None
    return Internship(
        id=checker.required_str(intern, "id", path),
        company=checker.required_str(intern, "company", path),
        location=checker.required_str(intern, "location", path),
        from_date=checker.required_str(intern, "fromDate", path),
        to_date=checker.optional_str(intern, "toDate", path),
        roles=_parse_roles(checker, intern, path),
    )


def _parse_publication(checker: _SchemaChecker, raw: Any, index: int) -> Optional[Publication]:
    path = f"Publication[{index}]"
    pub = checker.mapping(raw, path)
    if pub is None:
        return None
    return Publication(
        id=checker.required_str(pub, "id", path),
        title=checker.required_str(pub, "title", path),
        authors=checker.str_list(pub, "authors", path),
        venue=checker.required_str(pub, "venue", path),
        date=checker.required_str(pub, "date", path),
        type=checker.required_str(pub, "type", path),
        labels=checker.str_list(pub, "labels", path),
        link=checker.optional_str(pub, "link", path),
        description=checker.optional_str(pub, "description", path),
    )


def _parse_language(checker: _SchemaChecker, raw: Any, index: int) -> Optional[Language]:
    path = f"Language[{index}]"
    language = checker.mapping(raw, path)
    if language is None:
        return None
    return Language(
        name=checker.required_str(language, "name", path),
        proficiency=checker.required_str(language, "proficiency", path),
    )


def _build_document(checker: _SchemaChecker, data: Mapping) -> Optional[ResumeDocument]:
    for key in REQUIRED_TOP_LEVEL_KEYS:
        if key not in data:
            checker.fail(key, "missing required field")

    profile = _parse_profile(checker, data["profile"]) if "profile" in data else None

    education = [
        _parse_education(checker, item, index)
        for index, item in enumerate(checker.object_list(data, "education", "", required=False))
    ]
    work_experience = [
        _parse_work_experience(checker, item, index)
        for index, item in enumerate(checker.object_list(data, "workExperience", "", required=False))
    ]
    internships = [
        _parse_internship(checker, item, index)
        for index, item in enumerate(checker.object_list(data, "internships", "", required=False))
    ]
    publications = [
        _parse_publication(checker, item, index)
        for index, item in enumerate(checker.object_list(data, "publications", "", required=False))
    ]
    languages = [
        _parse_language(checker, item, index)
        for index, item in enumerate(checker.object_list(data, "languages", "", required=False))
    ]

    available_labels = ()
    if "availableLabels" in data:
        available_labels = checker.str_list(data, "availableLabels", "")
        # Keep declared order, drop duplicates
        available_labels = tuple(dict.fromkeys(available_labels))

    if checker.issues or profile is None:
        return None

    return ResumeDocument(
        profile=profile,
        education=tuple(education),
        work_experience=tuple(work_experience),
        internships=tuple(internships),
        publications=tuple(publications),
        available_labels=available_labels,
        languages=tuple(languages),
    )


def collect_schema_issues(data: Any) -> List[SchemaIssue]:
    """
    Check raw resume data without raising.

    Args:
        data: Parsed JSON/YAML content

    Returns:
        Every schema issue found (empty list when the data is valid)
    """
    if not isinstance(data, Mapping):
        return [SchemaIssue("resume", "must be an object")]

    checker = _SchemaChecker()
    _build_document(checker, data)
    return checker.issues


def validate_resume_data(data: Any) -> ResumeDocument:
    """
    Validate raw resume data and build an immutable ResumeDocument.

    Args:
        data: Parsed JSON/YAML content (top-level mapping)

    Returns:
        ResumeDocument instance

    Raises:
        SchemaError: If any required field is absent or has the wrong type.
            All issues are reported at once via SchemaError.issues.

    Example:
        >>> document = validate_resume_data(json.loads(text))
        >>> document.profile.name
        'Jane Doe'
    """
    if not isinstance(data, Mapping):
        raise SchemaError.single("resume", "must be an object")

    checker = _SchemaChecker()
    document = _build_document(checker, data)

    if checker.issues:
        _log_debug(f"Schema validation found {len(checker.issues)} issue(s)")
        raise SchemaError(checker.issues)

    return document
