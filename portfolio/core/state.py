from __future__ import annotations

import asyncio
import logging
import uuid

import reflex as rx

from .session import (
    LIGHT_THEME,
    SPLASH_DURATION,
    THEME_KEY,
    dark_mode_from_store,
    theme_value,
)

logger = logging.getLogger("portfolio.session")


class AppState(rx.State):
    """Per-browser page session: splash flag and persisted theme."""

    theme: str = rx.LocalStorage(LIGHT_THEME, name=THEME_KEY)
    loading: bool = True
    dark_mode: bool = False
    session_token: str = ""

    @rx.event
    def start_session(self):
        """Restore the stored theme and start the splash timer."""

        token = uuid.uuid4().hex
        self.session_token = token
        self.loading = True
        self.dark_mode = dark_mode_from_store(self.theme)
        self.theme = theme_value(self.dark_mode)
        logger.debug("Browser session %s started (theme=%s)", token, self.theme)
        return AppState.run_splash_timer(token)

    @rx.event(background=True)
    async def run_splash_timer(self, token: str):
        await asyncio.sleep(SPLASH_DURATION)
        async with self:
            self._finish_splash(token)

    def _finish_splash(self, token: str) -> None:
        # A cleared or replaced token means the session was torn down.
        if self.session_token != token:
            return
        self.loading = False

    @rx.event
    def end_session(self):
        self.session_token = ""

    @rx.event
    def toggle_theme(self):
        """Toggle between light and dark color schemes."""

        self.dark_mode = not self.dark_mode
        self.theme = theme_value(self.dark_mode)

    @rx.var
    def toggle_label(self) -> str:
        return "Light" if self.dark_mode else "Dark"


def splash_visible() -> rx.Var:
    """True until ``on_load`` has run for this page load and the timer has fired.

    After a reload the server still holds ``loading=False`` from the previous
    load, and that snapshot reaches the browser before ``start_session`` runs.
    """

    return AppState.loading | ~rx.State.is_hydrated
