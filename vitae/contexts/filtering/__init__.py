"""
Filtering Context

Responsibilities:
- Derives the set of labels used in a resume document and audits it against availableLabels
- Filters a document down to the content matching a selection of labels
- Aggregates and filters the deduplicated skill list
- Bundles per-selection derived state for presentation

Owns: Label matching, cascading pruning, skill aggregation
Never: Reads files or URLs, renders output, mutates a document
"""

from vitae.contexts.filtering.filter_engine import filter_document
from vitae.contexts.filtering.label_index import (
    LabelAudit,
    audit_available_labels,
    collect_labels,
    unknown_labels,
)
from vitae.contexts.filtering.skill_aggregator import (
    AggregatedSkill,
    aggregate_skills,
    filter_skills,
)
from vitae.contexts.filtering.view import ResumeView, build_view, clear_selection, toggle_label

__all__ = [
    # Label index
    "collect_labels",
    "audit_available_labels",
    "unknown_labels",
    "LabelAudit",
    # Filtering engine
    "filter_document",
    # Skill aggregation
    "aggregate_skills",
    "filter_skills",
    "AggregatedSkill",
    # Derived view
    "build_view",
    "toggle_label",
    "clear_selection",
    "ResumeView",
]
