"""
VITAE - Viewer-Indexed Tagging And Extraction for resumes

Renders a personal resume from a structured data document and narrows the
displayed content to a viewer's selection of topical labels.

Architecture:
- Document Context: Resume data model, schema validation, loading
- Filtering Context: Label index, cascading label filter, skill aggregation
- Presentation Context: Markdown rendering of filtered views
"""

__version__ = "0.1.0"
