"""Typed content models for the portfolio page and the JSON API."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

BadgeColor = Literal["indigo", "blue", "purple", "green", "orange"]
Highlight = Literal["yellow", "blue", "green"]


class _Content(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContactLink(_Content):
    label: str
    href: HttpUrl
    icon: str = Field("external-link", description="Lucide icon name.")


class Contact(_Content):
    location: str
    email: str
    phone: str
    links: tuple[ContactLink, ...] = ()


class Profile(_Content):
    name: str
    tagline: str
    title: str
    avatar: str = Field(..., description="Asset path of the profile picture.")
    biography: str = Field(..., description="Biography text following the name.")
    contact: Contact


class Experience(_Content):
    role: str
    company: str
    period: str
    summary: str


class Education(_Content):
    qualification: str
    institution: str
    period: str
    score: str


class Project(_Content):
    name: str
    description: str
    tech: tuple[str, ...]
    url: HttpUrl
    link_label: str
    badge_color: BadgeColor = "blue"


class Award(_Content):
    rank: str
    event: str
    note: str
    highlight: Highlight = "yellow"


class SkillGroup(_Content):
    name: str
    skills: tuple[str, ...]
    badge_color: BadgeColor = "blue"


class QuickFact(_Content):
    label: str
    value: str
    highlight: Optional[Highlight] = None


class Portfolio(_Content):
    """The ordered, read-only content set rendered once the splash ends."""

    profile: Profile
    experience: tuple[Experience, ...]
    education: tuple[Education, ...]
    projects: tuple[Project, ...]
    awards: tuple[Award, ...]
    skills: tuple[SkillGroup, ...]
    quick_facts: tuple[QuickFact, ...]
