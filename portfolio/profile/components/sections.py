from __future__ import annotations

import datetime
from typing import Optional

import reflex as rx

from ...core.palette import ACCENTS, themed
from ..models import Award, Education, Experience, Portfolio, Profile, Project


def themed_card(*children: rx.Component, **props) -> rx.Component:
    """Bordered card whose colours follow the active theme."""

    padding = props.pop("padding", "1rem")
    return rx.box(
        *children,
        padding=padding,
        border_radius="0.5rem",
        border="1px solid",
        border_color=themed("card_border"),
        background=themed("card_bg"),
        box_shadow=themed("card_shadow"),
        transition="background-color 300ms, border-color 300ms",
        width="100%",
        **props,
    )


def tech_badge(label: str, color: str) -> rx.Component:
    return rx.badge(
        label,
        variant="soft",
        radius="full",
        background=themed(f"badge_{color}_bg"),
        color=themed(f"badge_{color}_text"),
    )


def section(title: str, *children: rx.Component) -> rx.Component:
    return rx.el.section(
        rx.heading(
            title,
            as_="h2",
            size="6",
            font_family="serif",
            font_weight="normal",
            color=themed("heading"),
            border_bottom="1px solid",
            border_color=themed("rule"),
            padding_bottom="0.5rem",
            margin_bottom="1rem",
        ),
        rx.vstack(*children, spacing="4", width="100%"),
        width="100%",
    )


def page_header(profile: Profile) -> rx.Component:
    return rx.box(
        rx.heading(
            profile.name,
            as_="h1",
            size="8",
            font_family="serif",
            font_weight="normal",
            color=themed("heading"),
            margin_bottom="0.5rem",
        ),
        rx.text(profile.tagline, size="2", color=themed("muted_text")),
        border_bottom="1px solid",
        border_color=themed("rule"),
        padding_bottom="1rem",
        margin_bottom="1.5rem",
    )


def biography(profile: Profile) -> rx.Component:
    return rx.el.section(
        rx.text(
            rx.text.strong(profile.name, color=themed("heading")),
            " ",
            profile.biography,
            size="4",
            line_height="1.75",
            color=themed("body_text"),
        ),
    )


def _experience_card(item: Experience) -> rx.Component:
    return themed_card(
        rx.heading(item.role, as_="h3", size="4", color=themed("heading")),
        rx.text(f"{item.company} • {item.period}", color=ACCENTS["link"], margin_bottom="0.5rem"),
        rx.text(item.summary, size="2", color=themed("muted_text")),
    )


def _education_card(item: Education) -> rx.Component:
    return themed_card(
        rx.heading(item.qualification, as_="h3", size="4", color=themed("heading")),
        rx.text(item.institution, color=ACCENTS["link"]),
        rx.text(item.period, size="2", color=themed("muted_text")),
        rx.text(item.score, size="2", weight="bold", color=themed("faint_text")),
    )


def _project_card(item: Project) -> rx.Component:
    return themed_card(
        rx.heading(item.name, as_="h3", size="4", color=themed("heading"), margin_bottom="0.5rem"),
        rx.text(
            item.description,
            size="2",
            line_height="1.6",
            color=themed("muted_text"),
            margin_bottom="0.75rem",
        ),
        rx.flex(
            *[tech_badge(tech, item.badge_color) for tech in item.tech],
            wrap="wrap",
            spacing="2",
            margin_bottom="0.75rem",
        ),
        rx.link(
            rx.hstack(
                rx.icon("external-link", size=14),
                rx.text(item.link_label, as_="span"),
                spacing="1",
                align="center",
            ),
            href=str(item.url),
            is_external=True,
            color=ACCENTS["link"],
            size="2",
        ),
        padding="1.5rem",
    )


def _award_item(item: Award) -> rx.Component:
    accent = ACCENTS[item.highlight]
    return rx.hstack(
        rx.box(
            width="0.5rem",
            height="0.5rem",
            border_radius="9999px",
            background=accent,
            margin_top="0.5rem",
            flex_shrink="0",
        ),
        rx.box(
            rx.text(
                rx.text.strong(item.rank, color=accent),
                f" - {item.event}",
                size="2",
            ),
            rx.text(item.note, size="1", color=themed("faint_text")),
        ),
        spacing="3",
        align="start",
    )


def experience_section(items: tuple[Experience, ...]) -> rx.Component:
    return section("Professional Experience", *[_experience_card(item) for item in items])


def education_section(items: tuple[Education, ...]) -> rx.Component:
    return section("Education", *[_education_card(item) for item in items])


def projects_section(items: tuple[Project, ...]) -> rx.Component:
    return section("Notable Projects", *[_project_card(item) for item in items])


def awards_section(items: tuple[Award, ...]) -> rx.Component:
    return section(
        "Awards and Recognition",
        themed_card(
            rx.vstack(*[_award_item(item) for item in items], spacing="3"),
            padding="1.5rem",
        ),
    )


def last_edited_label(today: Optional[datetime.date] = None) -> str:
    """Footer text, e.g. ``This page was last edited on March 4, 2025.``"""

    today = today or datetime.date.today()
    return f"This page was last edited on {today:%B} {today.day}, {today.year}."


def footer() -> rx.Component:
    return rx.box(
        rx.text(last_edited_label(), size="1"),
        margin_top="3rem",
        padding_top="1.5rem",
        border_top="1px solid",
        border_color=themed("rule"),
        color=themed("faint_text"),
    )


def main_column(portfolio: Portfolio) -> rx.Component:
    return rx.vstack(
        biography(portfolio.profile),
        experience_section(portfolio.experience),
        education_section(portfolio.education),
        projects_section(portfolio.projects),
        awards_section(portfolio.awards),
        spacing="7",
        width="100%",
    )
