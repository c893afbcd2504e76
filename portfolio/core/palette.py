"""Light and dark colour palettes.

Every themed style in the page is looked up here by role, so the rendered
appearance is a pure function of ``AppState.dark_mode``.
"""

from __future__ import annotations

from typing import Mapping

import reflex as rx

from .state import AppState

LIGHT: Mapping[str, str] = {
    "page_bg": "#f9fafb",
    "page_text": "#111827",
    "heading": "#111827",
    "body_text": "#374151",
    "muted_text": "#4b5563",
    "faint_text": "#6b7280",
    "card_bg": "#ffffff",
    "card_border": "#e5e7eb",
    "card_shadow": "0 1px 2px rgba(0, 0, 0, 0.05)",
    "rule": "#d1d5db",
    "avatar_bg": "#f3f4f6",
    "avatar_border": "#d1d5db",
    "toggle_bg": "#ffffff",
    "toggle_border": "#d1d5db",
    "toggle_text": "#374151",
    "splash_bg": "#ffffff",
    "accent": "#3b82f6",
    "badge_indigo_bg": "#e0e7ff",
    "badge_indigo_text": "#3730a3",
    "badge_blue_bg": "#dbeafe",
    "badge_blue_text": "#1e40af",
    "badge_purple_bg": "#f3e8ff",
    "badge_purple_text": "#6b21a8",
    "badge_green_bg": "#dcfce7",
    "badge_green_text": "#166534",
    "badge_orange_bg": "#ffedd5",
    "badge_orange_text": "#9a3412",
}

DARK: Mapping[str, str] = {
    "page_bg": "#111827",
    "page_text": "#f3f4f6",
    "heading": "#ffffff",
    "body_text": "#e5e7eb",
    "muted_text": "#d1d5db",
    "faint_text": "#9ca3af",
    "card_bg": "#1f2937",
    "card_border": "#374151",
    "card_shadow": "none",
    "rule": "#374151",
    "avatar_bg": "#374151",
    "avatar_border": "#4b5563",
    "toggle_bg": "#1f2937",
    "toggle_border": "#4b5563",
    "toggle_text": "#e5e7eb",
    "splash_bg": "#111827",
    "accent": "#3b82f6",
    "badge_indigo_bg": "#4338ca",
    "badge_indigo_text": "#ffffff",
    "badge_blue_bg": "#1e3a8a",
    "badge_blue_text": "#bfdbfe",
    "badge_purple_bg": "#581c87",
    "badge_purple_text": "#e9d5ff",
    "badge_green_bg": "#14532d",
    "badge_green_text": "#bbf7d0",
    "badge_orange_bg": "#7c2d12",
    "badge_orange_text": "#fed7aa",
}

# Colours that do not change with the theme.
ACCENTS: Mapping[str, str] = {
    "yellow": "#ca8a04",
    "blue": "#2563eb",
    "green": "#16a34a",
    "link": "#3b82f6",
}


def palette_for(dark_mode: bool) -> Mapping[str, str]:
    return DARK if dark_mode else LIGHT


def themed(role: str) -> rx.Var:
    """Return a reactive colour that follows ``AppState.dark_mode``."""

    if role not in LIGHT:
        raise KeyError(f"Unknown palette role: {role!r}")
    return rx.cond(AppState.dark_mode, DARK[role], LIGHT[role])
