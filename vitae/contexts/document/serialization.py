"""
Convert ResumeDocument instances back to wire-format dictionaries.

Output uses the original camelCase keys, so a validated (and possibly filtered)
document can be written out as JSON and re-validated. Optional fields that are
unset are omitted rather than written as null.
"""

import json
from typing import Any, Dict, Optional

from vitae.contexts.document.resume_data_structure import (
    Education,
    Experience,
    Publication,
    ResumeDocument,
    Role,
    WorkExperience,
)


def _put_optional(data: Dict[str, Any], key: str, value: Optional[Any]) -> None:
    if value:
        data[key] = value


def role_to_dict(role: Role) -> Dict[str, Any]:
    data = {"id": role.id, "position": role.position}
    _put_optional(data, "fromDate", role.from_date)
    _put_optional(data, "toDate", role.to_date)
    _put_optional(data, "description", role.description)
    data["highlights"] = [
        {"text": highlight.text, "labels": list(highlight.labels)} for highlight in role.highlights
    ]
    data["skills"] = [{"name": skill.name, "label": skill.label} for skill in role.skills]
    return data


def experience_to_dict(experience: Experience) -> Dict[str, Any]:
    data = {
        "id": experience.id,
        "company": experience.company,
        "location": experience.location,
        "fromDate": experience.from_date,
    }
    _put_optional(data, "toDate", experience.to_date)
    if isinstance(experience, WorkExperience):
        data["current"] = experience.current
    data["roles"] = [role_to_dict(role) for role in experience.roles]
    return data


def education_to_dict(education: Education) -> Dict[str, Any]:
    data = {
        "id": education.id,
        "institution": education.institution,
        "location": education.location,
        "degree": education.degree,
        "field": education.field,
        "fromDate": education.from_date,
        "toDate": education.to_date,
    }
    _put_optional(data, "description", education.description)
    _put_optional(data, "coursework", list(education.coursework))
    data["labels"] = list(education.labels)
    return data


def publication_to_dict(publication: Publication) -> Dict[str, Any]:
    data = {
        "id": publication.id,
        "title": publication.title,
        "authors": list(publication.authors),
        "venue": publication.venue,
        "date": publication.date,
        "type": publication.type,
    }
    _put_optional(data, "link", publication.link)
    _put_optional(data, "description", publication.description)
    data["labels"] = list(publication.labels)
    return data


def document_to_dict(document: ResumeDocument) -> Dict[str, Any]:
    """
    Convert a ResumeDocument to a JSON-serialisable dict in wire format.

    Args:
        document: Validated (optionally filtered) document

    Returns:
        Dict with the same top-level keys the validator requires
    """
    profile = document.profile
    data: Dict[str, Any] = {
        "profile": {
            "name": profile.name,
            "title": profile.title,
            "summary": profile.summary,
            "email": profile.email,
            "linkedin": profile.linkedin,
            "github": profile.github,
        },
        "education": [education_to_dict(edu) for edu in document.education],
        "workExperience": [experience_to_dict(exp) for exp in document.work_experience],
        "internships": [experience_to_dict(intern) for intern in document.internships],
        "publications": [publication_to_dict(pub) for pub in document.publications],
        "availableLabels": list(document.available_labels),
    }
    if document.languages:
        data["languages"] = [
            {"name": language.name, "proficiency": language.proficiency}
            for language in document.languages
        ]
    return data


def document_to_json(document: ResumeDocument, indent: int = 2) -> str:
    """Serialise a document to a JSON string (UTF-8 characters kept as-is)."""
    return json.dumps(document_to_dict(document), indent=indent, ensure_ascii=False)
