"""
Markdown Formatting

Renders a filtered resume view as markdown. Collections left empty by an
active filter get an explicit "no results" block instead of disappearing.
"""

from typing import List, Sequence

from vitae.contexts.document.resume_data_structure import (
    Education,
    Experience,
    Language,
    Profile,
    Publication,
    Role,
    WorkExperience,
)
from vitae.contexts.filtering.skill_aggregator import AggregatedSkill
from vitae.contexts.filtering.view import ResumeView
from vitae.utils.dates import format_date_range, format_month

NO_RESULTS_HINT = "Try adjusting your filters to see more content."


def format_no_results(category: str) -> str:
    """Format the placeholder shown when a filter leaves a category empty."""
    return f"### No {category} found\n\n{NO_RESULTS_HINT}"


def format_profile_markdown(profile: Profile) -> str:
    parts = [f"# {profile.name}", "", f"**{profile.title}**", ""]
    if profile.summary:
        parts.extend([profile.summary, ""])

    contacts = [value for value in (profile.email, profile.linkedin, profile.github) if value]
    if contacts:
        parts.append(" | ".join(contacts))
    return "\n".join(parts).rstrip()


def format_role_markdown(role: Role) -> str:
    """
    Format a single role as markdown.

    Position as #### header, optional dates and description, then highlight
    bullets and a comma-separated skills line.
    """
    parts = [f"#### {role.position}"]
    if role.from_date:
        parts.append(f"*{format_date_range(role.from_date, role.to_date)}*")
    if role.description:
        parts.append(role.description)

    if role.highlights:
        parts.append("")
        for highlight in role.highlights:
            parts.append(f"- {highlight.text}")

    if role.skills:
        parts.append("")
        parts.append("Skills: " + ", ".join(skill.name for skill in role.skills))

    return "\n".join(parts)


def format_experience_markdown(experience: Experience) -> str:
    """
    Format a work experience or internship entry as markdown.

    Company is formatted as ### (section header added separately by caller).
    """
    current = isinstance(experience, WorkExperience) and experience.current
    parts = [
        f"### {experience.company}",
        "",
        f"*{format_date_range(experience.from_date, experience.to_date, current=current)}* | {experience.location}",
    ]
    for role in experience.roles:
        parts.append("")
        parts.append(format_role_markdown(role))
    return "\n".join(parts)


def format_education_markdown(education: Education) -> str:
    parts = [
        f"### {education.institution}",
        "",
        f"**{education.degree}**, {education.field}",
        f"*{format_date_range(education.from_date, education.to_date)}* | {education.location}",
    ]
    if education.description:
        parts.extend(["", education.description])
    if education.coursework:
        parts.append("")
        parts.append("Coursework: " + ", ".join(education.coursework))
    return "\n".join(parts)


def format_publication_markdown(publication: Publication) -> str:
    title = f"[{publication.title}]({publication.link})" if publication.link else publication.title
    parts = [
        f"### {title}",
        "",
        ", ".join(publication.authors),
        f"*{publication.venue}* ({format_month(publication.date)}) | {publication.type}",
    ]
    if publication.description:
        parts.extend(["", publication.description])
    return "\n".join(parts)


def format_skills_markdown(skills: Sequence[AggregatedSkill], languages: Sequence[Language] = ()) -> str:
    """Format the aggregated skills panel, with spoken languages appended."""
    parts = ["## Skills", ""]
    for skill in skills:
        since = f" (since {format_month(skill.from_date)})" if skill.from_date else ""
        parts.append(f"- {skill.name} `{skill.label}`{since}")

    if languages:
        parts.extend(["", "### Languages", ""])
        for language in languages:
            parts.append(f"- {language.name}: {language.proficiency}")
    return "\n".join(parts)


def _format_section(title: str, entries: List[str], category: str, filtered: bool) -> str:
    """Join entries under a ## header; an empty filtered section gets a no-results block."""
    parts = [f"## {title}"]
    if entries:
        parts.extend(entries)
    elif filtered:
        parts.append(format_no_results(category))
    else:
        parts.append("(No entries)")
    return "\n\n".join(parts)


def render_markdown(view: ResumeView) -> str:
    """
    Render a complete resume view as markdown.

    Args:
        view: Filtered view from build_view()

    Returns:
        Markdown document: profile, active filters, skills, experience,
        internships, education and publications
    """
    document = view.document
    sections = [format_profile_markdown(document.profile)]

    if view.is_filtered:
        sections.append("Filters: " + ", ".join(f"`{label}`" for label in sorted(view.selection)))

    if view.has_skills:
        sections.append(format_skills_markdown(view.skills, document.languages))

    # Internships alone still count as experience, so no placeholder is shown for them
    experience_entries = [format_experience_markdown(exp) for exp in document.work_experience]
    if experience_entries or not view.has_experience:
        sections.append(_format_section("Work Experience", experience_entries, "experience", view.is_filtered))

    if document.internships:
        sections.append(
            "\n\n".join(["## Internships"] + [format_experience_markdown(i) for i in document.internships])
        )

    education_entries = [format_education_markdown(edu) for edu in document.education]
    sections.append(_format_section("Education", education_entries, "education", view.is_filtered))

    publication_entries = [format_publication_markdown(pub) for pub in document.publications]
    sections.append(_format_section("Publications", publication_entries, "publications", view.is_filtered))

    return "\n\n".join(sections) + "\n"
