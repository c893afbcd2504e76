from __future__ import annotations

import reflex as rx

from ..palette import themed
from ..state import AppState


def theme_toggle() -> rx.Component:
    """Fixed light/dark switch shown in both the splash and content views."""

    theme_icon = rx.cond(
        AppState.dark_mode,
        rx.icon("sun", size=16),
        rx.icon("moon", size=16),
    )

    return rx.button(
        theme_icon,
        rx.text(AppState.toggle_label, as_="span"),
        on_click=AppState.toggle_theme,
        aria_label="Toggle theme",
        variant="outline",
        size="2",
        position="fixed",
        top="1rem",
        right="1rem",
        z_index="40",
        background=themed("toggle_bg"),
        color=themed("toggle_text"),
        border="1px solid",
        border_color=themed("toggle_border"),
        transition="all 300ms",
        cursor="pointer",
    )
