# ui/navigation/state.py
"""
Centralized navigation state management for the HackHub app.
Defines the canonical navigation state keys and provides state manipulation functions.
"""

import streamlit as st
from typing import Dict, Any, Set

from ui.constants import HOME_PATH
from ui_core import DEFAULT_SETTINGS

# Canonical navigation state keys
NAV_KEYS: Set[str] = {
    "page",         # current path, e.g. "/hackathons"
    "return_to",    # path to go back to after signing in
    "search_text",  # hackathon search term
}


def _st():
    return st


def snapshot_state() -> Dict[str, Any]:
    """Return a snapshot of only the navigation state keys."""
    return {key: st.session_state.get(key) for key in NAV_KEYS}


def apply_state(patch: Dict[str, Any]) -> None:
    """Apply a patch to session state, only for navigation keys."""
    for key, value in patch.items():
        if key in NAV_KEYS:
            st.session_state[key] = value


def normalize_path(path: Any) -> str:
    """Coerce a path-like value into "/name" form."""
    text = str(path or "").strip()
    if not text:
        return DEFAULT_SETTINGS["ui"]["default_page"]
    if not text.startswith("/"):
        text = "/" + text
    return text.rstrip("/") or DEFAULT_SETTINGS["ui"]["default_page"]


def normalize_state() -> None:
    """Coerce session state into a consistent navigation state.

    URL sync can leave stale combinations (e.g. a search term on a page
    without a search box).
    """
    st.session_state.page = normalize_path(st.session_state.get("page"))

    return_to = st.session_state.get("return_to")
    st.session_state.return_to = normalize_path(return_to) if return_to else None

    search_text = st.session_state.get("search_text")
    st.session_state.search_text = search_text if isinstance(search_text, str) else ""


def defaults() -> Dict[str, Any]:
    """Return default values for navigation state."""
    return {
        "page": HOME_PATH,
        "return_to": None,
        "search_text": "",
    }
