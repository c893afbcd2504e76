"""Durable key-value stores used to remember the theme preference."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from threading import Lock
from typing import Dict, Optional, Protocol

from .errors import ThemeStoreError

logger = logging.getLogger("portfolio.store")


class ThemeStore(Protocol):
    """Minimal string key-value interface the session controller relies on."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryThemeStore:
    """Dictionary-backed store, shared between sessions of one process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def as_dict(self) -> Dict[str, str]:
        return dict(self._data)


class JsonThemeStore:
    """Persist string pairs to a JSON file.

    The whole mapping is read on every access and written back in full on
    every change. Any failure to read, parse or write the file is reported as
    :class:`ThemeStoreError` so callers can treat the store as best effort.
    """

    def __init__(self, storage_path: Path) -> None:
        self._path = Path(storage_path)
        self._lock = Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, ValueError) as exc:
            raise ThemeStoreError(f"Unable to read {self._path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise ThemeStoreError(f"{self._path} does not contain a JSON object.")
        return payload

    def _write(self, payload: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, sort_keys=True)
        except OSError as exc:
            raise ThemeStoreError(f"Unable to write {self._path}: {exc}") from exc

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            raise ThemeStoreError(f"Stored value for {key!r} is not a string.")
        return value

    def set(self, key: str, value: str) -> None:
        with self._lock:
            payload = self._read()
            payload[key] = value
            self._write(payload)
        logger.debug("Stored %s=%s in %s", key, value, self._path)
