"""
Label Index

Derives the set of labels used anywhere in a resume document and checks it
against the document's declared availableLabels.

The declared list may deliberately curate a subset of labels for the filter
controls, so a mismatch is reported, not rejected (unless strict mode is on,
see vitae.contexts.document.loader).
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Set

from vitae.contexts.document.resume_data_structure import ResumeDocument
from vitae.contexts.filtering.logger import _log_debug, _log_warning


@dataclass(frozen=True)
class LabelAudit:
    """
    Comparison of declared availableLabels with labels found in content.

    Attributes:
        used: Every label found in content
        undeclared: Used in content but missing from availableLabels
        unused: Declared in availableLabels but never used in content
    """

    used: FrozenSet[str]
    undeclared: FrozenSet[str]
    unused: FrozenSet[str]

    @property
    def is_consistent(self) -> bool:
        """True when availableLabels covers every label used in content."""
        return not self.undeclared


def collect_labels(document: ResumeDocument) -> Set[str]:
    """
    Collect every label used anywhere in the document.

    Scans education labels, highlight labels and skill labels of every role
    (work experience and internships), and publication labels.

    Args:
        document: Validated resume document

    Returns:
        Set of label strings (order-independent)
    """
    labels: Set[str] = set()

    for education in document.education:
        labels.update(education.labels)

    for role in document.iter_roles():
        for highlight in role.highlights:
            labels.update(highlight.labels)
        labels.update(skill.label for skill in role.skills)

    for publication in document.publications:
        labels.update(publication.labels)

    return labels


def audit_available_labels(document: ResumeDocument) -> LabelAudit:
    """
    Compare the declared availableLabels with the labels actually used.

    Undeclared labels are logged as a data-quality warning; unused
    declarations are only logged at debug level.
    """
    used = frozenset(collect_labels(document))
    declared = frozenset(document.available_labels)
    audit = LabelAudit(used=used, undeclared=used - declared, unused=declared - used)

    if audit.undeclared:
        _log_warning(
            f"Labels used in content but missing from availableLabels: {', '.join(sorted(audit.undeclared))}"
        )
    if audit.unused:
        _log_debug(f"Declared labels with no matching content: {', '.join(sorted(audit.unused))}")

    return audit


def unknown_labels(selection: Iterable[str], document: ResumeDocument) -> Set[str]:
    """
    Return selected labels that neither are declared nor appear in content.

    Such labels are not an error (they just match nothing) but usually
    indicate a typo in the selection.
    """
    known = set(document.available_labels) | collect_labels(document)
    return set(selection) - known
