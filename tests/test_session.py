"""Tests for portfolio.core.session: splash timer and theme write-through."""

import asyncio

import pytest

from portfolio.core.errors import SessionStateError, ThemeStoreError
from portfolio.core.session import (
    SPLASH_DURATION,
    THEME_KEY,
    SessionController,
    View,
    dark_mode_from_store,
    theme_value,
)
from portfolio.core.store import MemoryThemeStore

FAST = 0.01


class BrokenStore:
    def get(self, key):
        raise ThemeStoreError("storage disabled")

    def set(self, key, value):
        raise ThemeStoreError("storage disabled")


class TestStoreLiterals:
    def test_dark_literal(self) -> None:
        assert dark_mode_from_store("dark") is True

    @pytest.mark.parametrize("value", [None, "light", "Dark", "DARK", "true", "", " dark"])
    def test_anything_else_is_light(self, value) -> None:
        assert dark_mode_from_store(value) is False

    def test_theme_value(self) -> None:
        assert theme_value(True) == "dark"
        assert theme_value(False) == "light"

    def test_defaults(self) -> None:
        assert THEME_KEY == "theme"
        assert SPLASH_DURATION == 3.0


class TestLifecycle:
    def test_initial_state_before_start(self) -> None:
        controller = SessionController(MemoryThemeStore())

        assert controller.loading is True
        assert controller.dark_mode is False
        assert controller.view is View.SPLASH
        assert controller.started is False
        assert controller.closed is False

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValueError):
            SessionController(MemoryThemeStore(), splash_duration=-1)

    def test_duration_is_constructor_only(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)

        assert not hasattr(controller, "splash_duration")

    def test_start_requires_running_loop(self) -> None:
        controller = SessionController(MemoryThemeStore())

        with pytest.raises(RuntimeError):
            controller.on_start()
        assert controller.started is False

    @pytest.mark.anyio
    async def test_fresh_session_shows_splash(self) -> None:
        store = MemoryThemeStore()
        controller = SessionController(store)
        controller.on_start()

        assert controller.view is View.SPLASH
        assert controller.dark_mode is False
        assert store.get(THEME_KEY) == "light"
        controller.teardown()

    @pytest.mark.anyio
    async def test_double_start_rejected(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        controller.on_start()

        with pytest.raises(SessionStateError):
            controller.on_start()
        controller.teardown()

    @pytest.mark.anyio
    async def test_start_after_teardown_rejected(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        controller.teardown()

        with pytest.raises(SessionStateError):
            controller.on_start()

    @pytest.mark.anyio
    @pytest.mark.parametrize("stored", [None, "light", "dark"])
    async def test_timer_moves_to_content(self, stored) -> None:
        initial = {} if stored is None else {THEME_KEY: stored}
        controller = SessionController(MemoryThemeStore(initial), splash_duration=FAST)
        controller.on_start()

        await asyncio.wait_for(controller.wait_loaded(), timeout=1)

        assert controller.loading is False
        assert controller.view is View.CONTENT
        assert controller.dark_mode is (stored == "dark")

    @pytest.mark.anyio
    async def test_content_is_terminal(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        controller.on_start()
        await controller.wait_loaded()

        controller.toggle_theme()
        await asyncio.sleep(FAST * 3)
        controller.toggle_theme()

        assert controller.view is View.CONTENT

    @pytest.mark.anyio
    async def test_wait_loaded_before_start(self) -> None:
        controller = SessionController(MemoryThemeStore())

        with pytest.raises(SessionStateError):
            await controller.wait_loaded()


class TestTheme:
    @pytest.mark.anyio
    async def test_stored_dark_restored(self) -> None:
        controller = SessionController(MemoryThemeStore({THEME_KEY: "dark"}), splash_duration=FAST)
        controller.on_start()

        assert controller.dark_mode is True
        controller.teardown()

    @pytest.mark.anyio
    async def test_toggle_persists_across_sessions(self) -> None:
        store = MemoryThemeStore()
        first = SessionController(store, splash_duration=FAST)
        first.on_start()

        assert first.toggle_theme() is True
        assert first.dark_mode is True
        assert store.get(THEME_KEY) == "dark"
        first.teardown()

        second = SessionController(store, splash_duration=FAST)
        second.on_start()
        assert second.dark_mode is True
        second.teardown()

    @pytest.mark.anyio
    @pytest.mark.parametrize("stored", ["light", "dark"])
    async def test_double_toggle_restores(self, stored) -> None:
        store = MemoryThemeStore({THEME_KEY: stored})
        controller = SessionController(store, splash_duration=FAST)
        controller.on_start()
        original = controller.dark_mode

        controller.toggle_theme()
        controller.toggle_theme()

        assert controller.dark_mode is original
        assert store.get(THEME_KEY) == stored
        controller.teardown()

    def test_toggle_before_start_writes_through(self) -> None:
        store = MemoryThemeStore()
        controller = SessionController(store)

        controller.toggle_theme()

        assert store.get(THEME_KEY) == "dark"

    @pytest.mark.anyio
    async def test_unavailable_store_falls_back_to_light(self) -> None:
        controller = SessionController(BrokenStore(), splash_duration=FAST)
        controller.on_start()

        assert controller.dark_mode is False
        assert controller.toggle_theme() is True
        await controller.wait_loaded()
        assert controller.view is View.CONTENT


class TestTeardown:
    @pytest.mark.anyio
    async def test_no_update_after_teardown(self) -> None:
        changes = []
        controller = SessionController(MemoryThemeStore(), splash_duration=0.05)
        controller.on_start()
        controller.subscribe(changes.append)

        controller.teardown()
        await asyncio.sleep(0.15)

        assert controller.loading is True
        assert controller.closed is True
        assert changes == []

    @pytest.mark.anyio
    async def test_toggle_after_teardown_ignored(self) -> None:
        store = MemoryThemeStore()
        controller = SessionController(store, splash_duration=FAST)
        controller.on_start()
        controller.teardown()

        assert controller.toggle_theme() is False
        assert store.get(THEME_KEY) == "light"

    @pytest.mark.anyio
    async def test_teardown_after_timer_is_noop(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        controller.on_start()
        await controller.wait_loaded()

        controller.teardown()
        controller.teardown()

        assert controller.view is View.CONTENT

    @pytest.mark.anyio
    async def test_wait_loaded_after_teardown(self) -> None:
        controller = SessionController(MemoryThemeStore(), splash_duration=1)
        controller.on_start()
        controller.teardown()

        with pytest.raises(SessionStateError):
            await controller.wait_loaded()


class TestListeners:
    @pytest.mark.anyio
    async def test_listener_sees_each_change(self) -> None:
        views = []
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        controller.subscribe(lambda c: views.append((c.view, c.dark_mode)))

        controller.on_start()
        controller.toggle_theme()
        await controller.wait_loaded()

        assert views == [
            (View.SPLASH, False),
            (View.SPLASH, True),
            (View.CONTENT, True),
        ]
        controller.teardown()

    @pytest.mark.anyio
    async def test_unsubscribe(self) -> None:
        calls = []
        controller = SessionController(MemoryThemeStore(), splash_duration=FAST)
        unsubscribe = controller.subscribe(calls.append)
        unsubscribe()
        unsubscribe()

        controller.on_start()
        controller.toggle_theme()

        assert calls == []
        controller.teardown()
