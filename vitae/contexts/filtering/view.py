"""
Filtered resume view.

Bundles everything the presentation layer needs for one label selection:
the filtered document and the filtered skill list. Both are derived from the
original document on every selection change.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple

from vitae.contexts.document.resume_data_structure import ResumeDocument
from vitae.contexts.filtering.filter_engine import filter_document
from vitae.contexts.filtering.skill_aggregator import AggregatedSkill, aggregate_skills, filter_skills


@dataclass(frozen=True)
class ResumeView:
    """
    Derived state for one selection.

    Attributes:
        source: The original, unfiltered document
        document: The filtered document (identical to source when unfiltered)
        skills: Aggregated skills matching the selection
        selection: Labels currently selected
    """

    source: ResumeDocument
    document: ResumeDocument
    skills: Tuple[AggregatedSkill, ...]
    selection: FrozenSet[str]

    @property
    def is_filtered(self) -> bool:
        return bool(self.selection)

    @property
    def has_experience(self) -> bool:
        return bool(self.document.work_experience or self.document.internships)

    @property
    def has_education(self) -> bool:
        return bool(self.document.education)

    @property
    def has_publications(self) -> bool:
        return bool(self.document.publications)

    @property
    def has_skills(self) -> bool:
        return bool(self.skills)


def build_view(document: ResumeDocument, selected_labels: Iterable[str] = ()) -> ResumeView:
    """
    Derive the filtered view of a document for a label selection.

    Args:
        document: Original validated document
        selected_labels: Labels chosen by the viewer (empty means no filter)

    Returns:
        ResumeView with filtered document and skills
    """
    if isinstance(selected_labels, str):
        selected_labels = [selected_labels]
    selection = frozenset(selected_labels)

    return ResumeView(
        source=document,
        document=filter_document(document, selection),
        skills=tuple(filter_skills(aggregate_skills(document), selection)),
        selection=selection,
    )


def toggle_label(selection: Iterable[str], label: str) -> FrozenSet[str]:
    """Return a new selection with `label` added, or removed if already selected."""
    current = frozenset(selection)
    if label in current:
        return current - {label}
    return current | {label}


def clear_selection() -> FrozenSet[str]:
    """Return the empty selection (show everything)."""
    return frozenset()
