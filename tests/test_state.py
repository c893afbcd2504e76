"""Tests for portfolio.core.state: the browser session the page runs."""

import pytest

from portfolio.core.state import AppState, splash_visible


@pytest.fixture
def state() -> AppState:
    return AppState(_reflex_internal_init=True)


def start(state: AppState) -> str:
    AppState.start_session.fn(state)
    return state.session_token


class TestStartSession:
    def test_defaults(self, state) -> None:
        assert state.loading is True
        assert state.dark_mode is False
        assert state.theme == "light"
        assert state.toggle_label == "Dark"

    def test_stored_dark_restored(self, state) -> None:
        state.theme = "dark"
        start(state)

        assert state.dark_mode is True
        assert state.theme == "dark"
        assert state.toggle_label == "Light"

    @pytest.mark.parametrize("stored", ["Dark", "true", "", "light"])
    def test_other_values_are_light(self, state, stored) -> None:
        state.theme = stored
        start(state)

        assert state.dark_mode is False
        assert state.theme == "light"

    def test_start_shows_splash_with_new_token(self, state) -> None:
        state.loading = False
        start(state)
        first = state.session_token
        start(state)

        assert state.loading is True
        assert first
        assert state.session_token != first


class TestToggleTheme:
    def test_toggle_writes_through(self, state) -> None:
        start(state)
        AppState.toggle_theme.fn(state)

        assert state.dark_mode is True
        assert state.theme == "dark"

    @pytest.mark.parametrize("stored", ["light", "dark"])
    def test_double_toggle_restores(self, state, stored) -> None:
        state.theme = stored
        start(state)
        original = state.dark_mode

        AppState.toggle_theme.fn(state)
        AppState.toggle_theme.fn(state)

        assert state.dark_mode is original
        assert state.theme == stored


class TestSplashTimer:
    def test_matching_token_shows_content(self, state) -> None:
        token = start(state)
        state._finish_splash(token)

        assert state.loading is False

    def test_stale_token_ignored(self, state) -> None:
        stale = start(state)
        start(state)
        state._finish_splash(stale)

        assert state.loading is True

    def test_ended_session_ignored(self, state) -> None:
        token = start(state)
        AppState.end_session.fn(state)
        state._finish_splash(token)

        assert state.loading is True
        assert state.session_token == ""


class TestSplashGate:
    def test_gate_waits_for_hydration(self) -> None:
        gate = str(splash_visible())

        assert "loading" in gate
        assert "is_hydrated" in gate
