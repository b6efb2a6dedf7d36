"""
Label Filtering Engine

Computes the subset of a resume document that is relevant to a selection of labels.

The document is treated as a tree and filtered bottom-up in a single pass:

    Experience -> Role -> {Highlight, Skill}
    Education, Publication (leaves)

Each prune function returns the rebuilt node when it survives, or None when
it is pruned. A Role survives if at least one highlight OR one skill matches;
an Experience survives if at least one of its roles survives. Surviving nodes
keep their original relative order and every field other than the filtered
children passes through unchanged.

Matching is exact set membership with OR semantics across the selection.
An empty selection means "no filter" and returns the document itself.
"""

from dataclasses import replace
from functools import lru_cache
from typing import AbstractSet, Iterable, Optional, Tuple, TypeVar

from vitae.contexts.document.resume_data_structure import (
    Education,
    Experience,
    Highlight,
    Publication,
    ResumeDocument,
    Role,
    Skill,
)
from vitae.contexts.filtering.logger import log_filter_result

E = TypeVar("E", bound=Experience)

# Documents are hashable, so identical (document, selection) pairs can share a result
FILTER_CACHE_SIZE = 64


def matches_any(labels: Iterable[str], selection: AbstractSet[str]) -> bool:
    """True if any label is in the selection. Empty labels never match."""
    return any(label in selection for label in labels)


def highlight_matches(highlight: Highlight, selection: AbstractSet[str]) -> bool:
    return matches_any(highlight.labels, selection)


def skill_matches(skill: Skill, selection: AbstractSet[str]) -> bool:
    """A skill matches on its single label, never on its name."""
    return skill.label in selection


def prune_role(role: Role, selection: AbstractSet[str]) -> Optional[Role]:
    """
    Keep only the highlights and skills of a role that match the selection.

    Returns:
        Rebuilt Role if anything survived, None if the role is pruned
    """
    highlights = tuple(h for h in role.highlights if highlight_matches(h, selection))
    skills = tuple(s for s in role.skills if skill_matches(s, selection))

    if not highlights and not skills:
        return None
    return replace(role, highlights=highlights, skills=skills)


def prune_experience(experience: E, selection: AbstractSet[str]) -> Optional[E]:
    """
    Keep only the surviving roles of an experience entry.

    Works for both WorkExperience and Internship; the entry type is preserved.

    Returns:
        Rebuilt entry if at least one role survived, None otherwise
    """
    roles = tuple(
        pruned for pruned in (prune_role(role, selection) for role in experience.roles) if pruned is not None
    )
    if not roles:
        return None
    return replace(experience, roles=roles)


def _prune_experiences(experiences: Tuple[E, ...], selection: AbstractSet[str]) -> Tuple[E, ...]:
    pruned = (prune_experience(experience, selection) for experience in experiences)
    return tuple(experience for experience in pruned if experience is not None)


def education_matches(education: Education, selection: AbstractSet[str]) -> bool:
    return matches_any(education.labels, selection)


def publication_matches(publication: Publication, selection: AbstractSet[str]) -> bool:
    return matches_any(publication.labels, selection)


@lru_cache(maxsize=FILTER_CACHE_SIZE)
def _filter_document(document: ResumeDocument, selection: frozenset) -> ResumeDocument:
    filtered = replace(
        document,
        education=tuple(edu for edu in document.education if education_matches(edu, selection)),
        work_experience=_prune_experiences(document.work_experience, selection),
        internships=_prune_experiences(document.internships, selection),
        publications=tuple(pub for pub in document.publications if publication_matches(pub, selection)),
    )
    log_filter_result(selection, document.counts, filtered.counts)
    return filtered


def filter_document(document: ResumeDocument, selected_labels: Iterable[str]) -> ResumeDocument:
    """
    Filter a resume document down to the content matching the selected labels.

    Args:
        document: Validated resume document (never modified)
        selected_labels: Labels chosen by the viewer; any iterable of strings

    Returns:
        The same document when the selection is empty, otherwise a new
        ResumeDocument containing only matching entries. Profile, languages
        and availableLabels always pass through.

    Example:
        >>> filtered = filter_document(document, {"backend"})
        >>> [exp.company for exp in filtered.work_experience]
        ['Acme Corp']
    """
    if isinstance(selected_labels, str):
        selected_labels = [selected_labels]

    selection = frozenset(selected_labels)
    if not selection:
        return document
    return _filter_document(document, selection)
