from __future__ import annotations

from .layout import app_shell
from .state import AppState

__all__ = ["AppState", "app_shell"]
