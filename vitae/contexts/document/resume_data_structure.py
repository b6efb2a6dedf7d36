"""
Resume Document Structure

Defines the typed, immutable representation of a resume document for VITAE.
This structure is the interface between the Document, Filtering and Presentation contexts.

Document owns:
- Validating raw data into ResumeDocument instances
- Loading raw data from files or URLs

Filtering and Presentation only ever read ResumeDocument instances; every
derived view is a new instance built with dataclasses.replace().

All sequences are tuples so that documents are hashable and can never be
patched in place.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Profile:
    """
    Singleton header record. Has no labels, is never filtered.

    Attributes:
        name: Full name
        title: Professional title
        summary: Short professional summary
        email: Contact email
        linkedin: LinkedIn profile URL
        github: GitHub profile URL
    """

    name: str
    title: str
    summary: str
    email: str
    linkedin: str
    github: str


@dataclass(frozen=True)
class Highlight:
    """A single achievement bullet within a role."""

    text: str
    labels: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Skill:
    """
    A skill exercised in a role.

    Attributes:
        name: Identity key (not unique across roles)
        label: The single label this skill belongs to
    """

    name: str
    label: str


@dataclass(frozen=True)
class Role:
    """
    A position held within one experience entry.

    Attributes:
        id: Unique role identifier
        position: Position title
        from_date: Start month (YYYY-MM), optional
        to_date: End month (YYYY-MM), None when ongoing or undated
        description: Optional free-text description
        highlights: Ordered achievement bullets
        skills: Ordered skills used in this role
    """

    id: str
    position: str
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    description: Optional[str] = None
    highlights: Tuple[Highlight, ...] = ()
    skills: Tuple[Skill, ...] = ()


@dataclass(frozen=True)
class Experience:
    """
    Shared shape of work experience and internship entries.

    Attributes:
        id: Unique entry identifier
        company: Employer name
        location: Where the work took place
        from_date: Start month (YYYY-MM)
        roles: Ordered roles held at this company
        to_date: End month (YYYY-MM), None when ongoing
    """

    id: str
    company: str
    location: str
    from_date: str
    roles: Tuple[Role, ...] = ()
    to_date: Optional[str] = None


@dataclass(frozen=True)
class WorkExperience(Experience):
    """Employment entry. `current` marks the position as ongoing."""

    current: bool = False


@dataclass(frozen=True)
class Internship(Experience):
    """Internship entry; same shape as Experience."""

    pass


@dataclass(frozen=True)
class Education:
    """Education entry, matched against a selection by its own labels."""

    id: str
    institution: str
    location: str
    degree: str
    field: str
    from_date: str
    to_date: str
    labels: Tuple[str, ...] = ()
    description: Optional[str] = None
    coursework: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Publication:
    """Publication entry, matched against a selection by its own labels."""

    id: str
    title: str
    authors: Tuple[str, ...]
    venue: str
    date: str
    type: str
    labels: Tuple[str, ...] = ()
    link: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Language:
    """Spoken language with a proficiency description."""

    name: str
    proficiency: str


@dataclass(frozen=True)
class ResumeDocument:
    """
    Root aggregate of a complete resume.

    Constructed once per load by the validator. Owns every collection by
    composition; no entity is shared across collections.

    Attributes:
        profile: Header record
        education: Education entries in display order
        work_experience: Employment entries in display order
        internships: Internship entries in display order
        publications: Publications in display order
        available_labels: Labels offered to the viewer as filters, in declared order
        languages: Optional spoken languages
    """

    profile: Profile
    education: Tuple[Education, ...] = ()
    work_experience: Tuple[WorkExperience, ...] = ()
    internships: Tuple[Internship, ...] = ()
    publications: Tuple[Publication, ...] = ()
    available_labels: Tuple[str, ...] = ()
    languages: Tuple[Language, ...] = ()

    def iter_experiences(self) -> Iterator[Experience]:
        """Yield work experience entries first, then internships."""
        yield from self.work_experience
        yield from self.internships

    def iter_roles(self) -> Iterator[Role]:
        """Yield every role of every experience entry, in display order."""
        for experience in self.iter_experiences():
            yield from experience.roles

    @property
    def counts(self) -> Dict[str, int]:
        """Entry counts per collection, plus the total number of roles."""
        return {
            "education": len(self.education),
            "work_experience": len(self.work_experience),
            "internships": len(self.internships),
            "roles": sum(1 for _ in self.iter_roles()),
            "publications": len(self.publications),
        }
