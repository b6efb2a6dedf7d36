"""
Skill Aggregator

Flattens the skills of every role into one deduplicated list for the skills
panel, annotated with when each skill was first exercised.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from vitae.contexts.document.resume_data_structure import ResumeDocument


@dataclass(frozen=True)
class AggregatedSkill:
    """
    A distinct skill with the dates of the role where it was first used.

    Attributes:
        name: Skill name (identity key)
        label: Label of the winning (earliest) occurrence
        from_date: Start month of the winning role, if dated
        to_date: End month of the winning role, None when ongoing or undated
    """

    name: str
    label: str
    from_date: Optional[str] = None
    to_date: Optional[str] = None


def _is_earlier(candidate: Optional[str], current: Optional[str]) -> bool:
    """
    Strict YYYY-MM comparison. Undated occurrences never win and are never displaced.

    Ties are not earlier, so the first occurrence encountered keeps its place.
    """
    if candidate is None or current is None:
        return False
    return candidate < current


def aggregate_skills(document: ResumeDocument) -> List[AggregatedSkill]:
    """
    Collect distinct skills across work experience and internships.

    Work experience is scanned before internships. When a skill name appears
    in several roles, the occurrence whose role has the earliest fromDate
    supplies the label and dates. The list keeps the position where each name
    was first encountered, even when a later occurrence replaces it.

    Args:
        document: Validated resume document

    Returns:
        Aggregated skills in first-encountered order
    """
    skills: Dict[str, AggregatedSkill] = {}

    for role in document.iter_roles():
        for skill in role.skills:
            existing = skills.get(skill.name)
            if existing is None or _is_earlier(role.from_date, existing.from_date):
                # Reassigning an existing key keeps its insertion position
                skills[skill.name] = AggregatedSkill(
                    name=skill.name,
                    label=skill.label,
                    from_date=role.from_date,
                    to_date=role.to_date,
                )

    return list(skills.values())


def filter_skills(aggregated: Iterable[AggregatedSkill], selected_labels: Iterable[str]) -> List[AggregatedSkill]:
    """
    Keep aggregated skills whose label is selected.

    Returns every skill when the selection is empty.
    """
    aggregated = list(aggregated)
    selection = {selected_labels} if isinstance(selected_labels, str) else set(selected_labels)
    if not selection:
        return aggregated
    return [skill for skill in aggregated if skill.label in selection]
