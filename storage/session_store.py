"""Durable key-value storage for session flags.

Purpose:
- Persist small UI flags ("isLoggedIn", "profileSubmitted") across visits.
- Give components a get/set capability they receive at construction, so tests
  can swap in an in-memory store.

Notes:
- Values are stored as strings; a flag counts as set only when its value is "true".
- Flags never expire. Delete the JSON file (or call clear()) to reset them.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from models import SessionFlags

logger = logging.getLogger(__name__)

LOGGED_IN_KEY = "isLoggedIn"
PROFILE_SUBMITTED_KEY = "profileSubmitted"
TRUE_VALUE = "true"


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemorySessionStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class JsonFileSessionStore:
    """Store backed by a JSON object on disk.

    Every write rewrites the whole file through a temp file and an atomic
    replace. Reads go to disk each time so an external reset is picked up
    on the next page load.
    """

    def __init__(self, path: os.PathLike | str):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except Exception as exc:
            # Corrupt or unreadable file – fail soft and start fresh
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        tmp_path.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


def is_flag_set(store: SessionStore, key: str) -> bool:
    return store.get(key) == TRUE_VALUE


def read_session_flags(store: SessionStore) -> SessionFlags:
    """Read both flags in one go; callers do this once per page load."""
    return SessionFlags(
        logged_in=is_flag_set(store, LOGGED_IN_KEY),
        profile_submitted=is_flag_set(store, PROFILE_SUBMITTED_KEY),
    )


def mark_logged_in(store: SessionStore) -> None:
    store.set(LOGGED_IN_KEY, TRUE_VALUE)


def mark_profile_submitted(store: SessionStore) -> None:
    store.set(PROFILE_SUBMITTED_KEY, TRUE_VALUE)
