from __future__ import annotations

import reflex as rx

from .components import theme_toggle
from .palette import themed


def app_shell(*children: rx.Component, max_width: str | None = "56rem") -> rx.Component:
    """Wrap the page in the themed shell with the persistent theme toggle."""

    content = rx.box(
        *children,
        width="100%",
        padding="1.5rem",
    )

    if max_width is not None:
        content = rx.box(content, max_width=max_width, margin_x="auto")

    return rx.box(
        theme_toggle(),
        content,
        width="100%",
        min_height="100vh",
        transition="background-color 300ms, color 300ms",
        background=themed("page_bg"),
        color=themed("page_text"),
    )
