from __future__ import annotations

import reflex as rx

from .core import AppState
from .core.log import configure_logging
from .core.pages.index import index
from .profile import PORTFOLIO


def _create_app() -> rx.App:
    """Instantiate the Reflex app with the splash keyframes stylesheet."""

    configure_logging()
    return rx.App(stylesheets=["/styles.css"])


app = _create_app()

app.add_page(
    index,
    route="/",
    title=f"{PORTFOLIO.profile.name} Portfolio",
    description=f"Created by {PORTFOLIO.profile.name}",
    on_load=AppState.start_session,
)
