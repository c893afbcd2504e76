from __future__ import annotations

import reflex as rx

from ...profile import PORTFOLIO, Portfolio
from ...profile.components import footer, main_column, page_header, sidebar
from ..components import splash, theme_toggle
from ..layout import app_shell
from ..state import AppState, splash_visible


def portfolio_content(portfolio: Portfolio = PORTFOLIO) -> rx.Component:
    """Header, two-column body and footer of the portfolio."""

    return rx.fragment(
        page_header(portfolio.profile),
        rx.grid(
            main_column(portfolio),
            sidebar(portfolio),
            grid_template_columns=["1fr", "1fr", "1fr", "2fr 1fr"],
            gap="1.5rem",
            width="100%",
            align_items="start",
        ),
        footer(),
    )


def index() -> rx.Component:
    """Splash while the session loads, then the full page."""

    return rx.box(
        rx.cond(
            splash_visible(),
            rx.fragment(theme_toggle(), splash()),
            app_shell(portfolio_content()),
        ),
        on_unmount=AppState.end_session,
    )
