# ui/navigation/url_sync.py
"""
URL synchronization for navigation state.
Handles encoding/decoding navigation state to/from URL query parameters.
"""

import streamlit as st
from typing import Dict, Any

from .state import NAV_KEYS, snapshot_state, apply_state


def _get_query_params() -> Dict[str, Any]:
    """Get current URL query parameters."""
    query_params = st.query_params
    return dict(query_params) if query_params else {}


def _set_query_params(params: Dict[str, Any]) -> None:
    """Set URL query parameters."""
    # Clear existing params
    st.query_params.clear()
    # Set new params
    for key, value in params.items():
        if value is not None:
            st.query_params[key] = str(value)


def encode_state_for_url(state: Dict[str, Any]) -> Dict[str, Any]:
    """Encode navigation state for URL representation.

    Empty values are left out so the URL stays short.
    """
    params = {}

    for key in sorted(NAV_KEYS):
        value = state.get(key)
        if value is None or value == "":
            continue
        params[key] = str(value)

    return params


def decode_state_from_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the navigation keys out of query parameters."""
    new_state = {}
    for key in NAV_KEYS:
        if key in params:
            value = params[key]
            # Repeated params come back as lists; keep the last one
            if isinstance(value, list):
                value = value[-1] if value else ""
            new_state[key] = str(value)
    return new_state


def apply_state_from_url() -> bool:
    """Apply navigation state from URL query parameters. Returns True if state changed."""
    params = _get_query_params()
    if not params:
        return False

    new_state = decode_state_from_params(params)

    # Apply the state if it's different
    current_state = snapshot_state()
    if new_state != {k: v for k, v in current_state.items() if k in new_state}:
        apply_state(new_state)
        return True

    return False


def sync_url_with_state() -> None:
    """Sync current navigation state to URL query parameters."""
    current_state = snapshot_state()
    url_params = encode_state_for_url(current_state)

    current_url_params = _get_query_params()

    if url_params != current_url_params:
        _set_query_params(url_params)
