# canonical profile shape as served by the Truth Engine (camelCase keys kept)
from __future__ import annotations
from typing import List, Literal, TypedDict, get_args

EducationStatus = Literal["completed", "in-progress", "incomplete", "withdrawn"]
EDUCATION_STATUSES = get_args(EducationStatus)

SECTION_ORDER = ("header", "experience", "education", "skills", "projects", "footer")
LIST_SECTIONS = ("experience", "education", "skills", "projects")


class Location(TypedDict, total=False):
    city: str
    region: str
    country: str


class _IdentityRequired(TypedDict):
    name: str


class Identity(_IdentityRequired, total=False):
    headline: str
    summary: str
    image: str
    location: Location


class Links(TypedDict, total=False):
    website: str
    sameAs: List[str]


class Contact(TypedDict, total=False):
    publicEmail: str
    phone: str


class _ExperienceRequired(TypedDict):
    organization: str
    title: str


class Experience(_ExperienceRequired, total=False):
    location: str
    startDate: str
    endDate: str
    isCurrent: bool
    highlights: List[str]
    tags: List[str]


class _EducationRequired(TypedDict):
    institution: str


class Education(_EducationRequired, total=False):
    program: str
    degree: str
    startDate: str
    endDate: str
    status: EducationStatus


class SkillCategory(TypedDict):
    category: str
    items: List[str]


class _ProjectRequired(TypedDict):
    name: str


class Project(_ProjectRequired, total=False):
    description: str
    tech: List[str]
    url: str
    repoUrl: str


class _ProfileRequired(TypedDict):
    identity: Identity


class Profile(_ProfileRequired, total=False):
    schemaVersion: str
    handle: str
    versionId: str
    lastUpdated: str
    contentHash: str
    links: Links
    contact: Contact
    experience: List[Experience]
    education: List[Education]
    skills: List[SkillCategory]
    projects: List[Project]
