"""
Per-session wiring: settings, the durable session store, session flags and the identity provider.
"""

from pathlib import Path

import streamlit as st

from identity import StoreIdentityProvider
from models import SessionFlags
from storage.session_store import JsonFileSessionStore, SessionStore, read_session_flags
from ui.constants import SESSION_FLAGS_KEY
from ui_core import DEFAULT_SETTINGS, load_settings


@st.cache_resource
def _session_store(path: str) -> JsonFileSessionStore:
    return JsonFileSessionStore(Path(path))


def get_settings() -> dict:
    if "app_settings" not in st.session_state:
        st.session_state.app_settings = load_settings()
    return st.session_state.app_settings


def get_session_store() -> SessionStore:
    settings = get_settings()
    path = settings.get("storage", {}).get("session_file") or DEFAULT_SETTINGS["storage"]["session_file"]
    return _session_store(str(path))


def get_session_flags() -> SessionFlags:
    """Flags as read at page load. Later writes are not re-read until the next load."""
    if SESSION_FLAGS_KEY not in st.session_state:
        st.session_state[SESSION_FLAGS_KEY] = read_session_flags(get_session_store())
    return st.session_state[SESSION_FLAGS_KEY]


def reload_session_flags() -> SessionFlags:
    """Re-read flags; used when the app itself navigates after a login."""
    st.session_state.pop(SESSION_FLAGS_KEY, None)
    return get_session_flags()


def get_identity() -> StoreIdentityProvider:
    return StoreIdentityProvider(get_session_store())
