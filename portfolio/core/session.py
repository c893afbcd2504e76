"""Page session lifecycle: splash timer and theme persistence.

A :class:`SessionController` owns the two flags the page renders from. The
``loading`` flag starts ``True`` and is cleared once by a one-shot timer; the
``dark_mode`` flag is read from a durable store when the session starts and
written back every time it changes.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Callable, List, Optional

from .errors import SessionStateError, ThemeStoreError
from .store import ThemeStore

logger = logging.getLogger("portfolio.session")

THEME_KEY = "theme"
DARK_THEME = "dark"
LIGHT_THEME = "light"
SPLASH_DURATION = 3.0


def dark_mode_from_store(value: Optional[str]) -> bool:
    """Only the exact string ``"dark"`` selects the dark theme."""

    return value == DARK_THEME


def theme_value(dark_mode: bool) -> str:
    return DARK_THEME if dark_mode else LIGHT_THEME


class View(str, enum.Enum):
    SPLASH = "splash"
    CONTENT = "content"


Listener = Callable[["SessionController"], None]


class SessionController:
    """One lifetime of the page, from :meth:`on_start` to :meth:`teardown`."""

    def __init__(
        self,
        store: ThemeStore,
        splash_duration: float = SPLASH_DURATION,
    ) -> None:
        if splash_duration < 0:
            raise ValueError("Splash duration must not be negative.")
        self._store = store
        self._splash_duration = splash_duration
        self._loading = True
        self._dark_mode = False
        self._started = False
        self._closed = False
        self._timer: Optional[asyncio.TimerHandle] = None
        self._loaded: Optional[asyncio.Event] = None
        self._listeners: List[Listener] = []

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    @property
    def view(self) -> View:
        return View.SPLASH if self._loading else View.CONTENT

    @property
    def started(self) -> bool:
        return self._started

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* after every state change; returns an unsubscriber."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def on_start(self) -> None:
        """Restore the theme and schedule the splash timer.

        Must be called from a running event loop, and only once.
        """

        if self._started:
            raise SessionStateError("Session has already been started.")
        if self._closed:
            raise SessionStateError("Session has been torn down.")
        loop = asyncio.get_running_loop()
        self._started = True

        self._dark_mode = dark_mode_from_store(self._read_theme())
        self.on_theme_changed(self._dark_mode)

        self._loaded = asyncio.Event()
        self._timer = loop.call_later(self._splash_duration, self._finish_loading)
        logger.debug(
            "Session started (dark_mode=%s, splash=%.2fs)",
            self._dark_mode,
            self._splash_duration,
        )
        self._notify()

    def _read_theme(self) -> Optional[str]:
        try:
            return self._store.get(THEME_KEY)
        except ThemeStoreError as exc:
            logger.warning("Theme store unavailable, using light theme: %s", exc)
            return None

    def _finish_loading(self) -> None:
        self._timer = None
        if self._closed:
            return
        self._loading = False
        if self._loaded is not None:
            self._loaded.set()
        logger.debug("Splash finished, showing content")
        self._notify()

    def on_theme_changed(self, dark_mode: bool) -> None:
        """Write *dark_mode* through to the durable store."""

        try:
            self._store.set(THEME_KEY, theme_value(dark_mode))
        except ThemeStoreError as exc:
            logger.warning("Could not persist theme preference: %s", exc)

    def toggle_theme(self) -> bool:
        if self._closed:
            logger.debug("Ignoring theme toggle on a closed session")
            return self._dark_mode
        self._dark_mode = not self._dark_mode
        self.on_theme_changed(self._dark_mode)
        logger.debug("Theme toggled to %s", theme_value(self._dark_mode))
        self._notify()
        return self._dark_mode

    async def wait_loaded(self) -> None:
        """Block until the splash timer has fired."""

        if not self._loading:
            return
        if self._loaded is None:
            raise SessionStateError("Session has not been started.")
        if self._closed:
            raise SessionStateError("Session was torn down before loading finished.")
        await self._loaded.wait()

    def teardown(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._listeners.clear()
        logger.debug("Session torn down (loading=%s)", self._loading)
