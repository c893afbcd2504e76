from __future__ import annotations

import reflex as rx

from ...core.palette import ACCENTS, themed
from ..models import Portfolio, Profile, QuickFact, SkillGroup
from .sections import tech_badge, themed_card


def _card_title(title: str) -> rx.Component:
    return rx.heading(title, as_="h3", size="4", color=themed("heading"), margin_bottom="0.75rem")


def _contact_row(icon: str, *children: rx.Component) -> rx.Component:
    return rx.hstack(
        rx.icon(icon, size=16, color=themed("faint_text")),
        *children,
        spacing="2",
        align="center",
    )


def profile_card(profile: Profile) -> rx.Component:
    contact = profile.contact
    links = [
        _contact_row(
            link.icon,
            rx.link(link.label, href=str(link.href), is_external=True, color=ACCENTS["link"]),
        )
        for link in contact.links
    ]

    return themed_card(
        rx.vstack(
            rx.box(
                rx.image(
                    src=profile.avatar,
                    alt=profile.name,
                    width="100%",
                    height="100%",
                    object_fit="cover",
                ),
                width="8rem",
                height="8rem",
                border_radius="9999px",
                overflow="hidden",
                border="2px solid",
                border_color=themed("avatar_border"),
                background=themed("avatar_bg"),
            ),
            rx.heading(profile.name, as_="h3", size="5", color=themed("heading")),
            rx.text(profile.title, size="2", color=ACCENTS["link"]),
            align="center",
            spacing="2",
            width="100%",
            margin_bottom="1rem",
        ),
        rx.vstack(
            _contact_row("map-pin", rx.text(contact.location, as_="span")),
            _contact_row("mail", rx.text(contact.email, as_="span")),
            _contact_row("phone", rx.text(contact.phone, as_="span")),
            *links,
            spacing="2",
            font_size="0.875rem",
            color=themed("muted_text"),
        ),
        padding="1.5rem",
    )


def _skill_group(group: SkillGroup) -> rx.Component:
    return rx.box(
        rx.heading(group.name, as_="h4", size="2", color=themed("body_text"), margin_bottom="0.5rem"),
        rx.flex(
            *[tech_badge(skill, group.badge_color) for skill in group.skills],
            wrap="wrap",
            spacing="1",
        ),
    )


def skills_card(groups: tuple[SkillGroup, ...]) -> rx.Component:
    return themed_card(
        _card_title("Technical Skills"),
        rx.vstack(*[_skill_group(group) for group in groups], spacing="4"),
        padding="1.5rem",
    )


def _quick_fact(fact: QuickFact) -> rx.Component:
    value_color = ACCENTS[fact.highlight] if fact.highlight else themed("body_text")
    return rx.hstack(
        rx.text(f"{fact.label}:", weight="medium", color=themed("muted_text")),
        rx.text(fact.value, weight="bold" if fact.highlight else "regular", color=value_color),
        justify="between",
        align="center",
        width="100%",
    )


def quick_facts_card(facts: tuple[QuickFact, ...]) -> rx.Component:
    return themed_card(
        _card_title("Quick Facts"),
        rx.vstack(*[_quick_fact(fact) for fact in facts], spacing="3", font_size="0.875rem"),
        padding="1.5rem",
    )


def sidebar(portfolio: Portfolio) -> rx.Component:
    return rx.vstack(
        profile_card(portfolio.profile),
        skills_card(portfolio.skills),
        quick_facts_card(portfolio.quick_facts),
        spacing="6",
        width="100%",
    )
