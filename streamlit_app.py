"""
HackHub - Streamlit UI
Hackathon listings, site navigation and the profile/skills form.
"""

import json
import logging

import streamlit as st

# Import navigation system
from ui.navigation.actions import navigate_to
from ui.navigation.state import defaults, normalize_state
from ui.navigation.url_sync import apply_state_from_url, sync_url_with_state

# Import router
from ui.router import dispatch

# Import layout components
from ui.components.nav_header import render_nav_header
from ui.components.sidebar import render_sidebar
from ui.constants import ACCENT_COLOR, ACCOUNT_ITEMS, NAV_ITEMS
from ui.app_context import get_settings


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def init_session_state():
    """Initialize session state with navigation defaults."""
    nav_defaults = defaults()
    for key, value in nav_defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    if "last_url_state" not in st.session_state:
        st.session_state.last_url_state = None


def inject_css():
    """Inject custom CSS for the application."""
    st.markdown(f"""
    <style>
    .stButton button, .stFormSubmitButton button {{
        border-radius: 9999px;
    }}
    .stFormSubmitButton button[kind="primaryFormSubmit"] {{
        background-color: {ACCENT_COLOR};
        border-color: {ACCENT_COLOR};
    }}
    </style>
    """, unsafe_allow_html=True)


def main():
    """Main entry point for the Streamlit app."""
    configure_logging()
    settings = get_settings()

    st.set_page_config(
        page_title=settings["ui"]["page_title"],
        page_icon="🏁",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    init_session_state()
    inject_css()

    # Navigation sync: apply URL state early, before rendering the header
    params = st.query_params
    params_str = json.dumps(dict(params) if params else {}, sort_keys=True)

    if st.session_state.get("last_url_state") != params_str:
        state_changed = apply_state_from_url()
        st.session_state.last_url_state = params_str
        if state_changed:
            normalize_state()
            st.rerun()

    normalize_state()

    render_nav_header(NAV_ITEMS, st.session_state.page, navigate_to, account_items=ACCOUNT_ITEMS)
    render_sidebar()

    # Dispatch to the appropriate view
    dispatch()

    # Sync URL at end of run
    sync_url_with_state()


if __name__ == "__main__":
    main()
