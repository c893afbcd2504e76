from __future__ import annotations

import reflex as rx

from ..palette import themed

_MARK_COLOR = "#3b82f6"

# Left branch, right branch, stem; each stroke starts half a second later.
_STROKES: list[tuple[str, str]] = [
    ("M20 20 L64 64", "0s"),
    ("M108 20 L64 64", "0.5s"),
    ("M64 64 L64 108", "1s"),
]


def _mark_svg() -> str:
    paths = "".join(
        f'<path d="{d}" stroke="{_MARK_COLOR}" stroke-width="6" stroke-linecap="round" '
        f'fill="none" style="animation: drawLine 2s ease-in-out infinite alternate; '
        f'animation-delay: {delay};" />'
        for d, delay in _STROKES
    )
    return f'<svg width="128" height="128" viewBox="0 0 128 128">{paths}</svg>'


def _bouncing_dot(delay: str) -> rx.Component:
    return rx.box(
        width="0.5rem",
        height="0.5rem",
        border_radius="9999px",
        background=_MARK_COLOR,
        animation="bounce 1s infinite",
        animation_delay=delay,
    )


def splash() -> rx.Component:
    """Full-screen loading animation displayed while the session is loading."""

    return rx.center(
        rx.vstack(
            rx.box(rx.html(_mark_svg()), width="8rem", height="8rem"),
            rx.hstack(
                *[_bouncing_dot(delay) for delay in ("0s", "0.1s", "0.2s")],
                spacing="1",
                justify="center",
                width="100%",
            ),
            spacing="7",
            align="center",
        ),
        position="fixed",
        inset="0",
        z_index="50",
        background=themed("splash_bg"),
        transition="background-color 300ms",
    )
