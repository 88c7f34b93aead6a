"""
Sign-in page view.

Account management belongs to the identity provider; this page records the
durable login flag and sends the user back where they came from.
"""

import streamlit as st

from storage.session_store import mark_logged_in
from ui.app_context import get_session_flags, get_session_store, reload_session_flags
from ui.constants import HOME_PATH
from ui.navigation.actions import navigate_to


def render_sign_in_page():
    """Render the sign-in page."""
    st.title("Sign In")

    return_to = st.session_state.get("return_to") or HOME_PATH
    flags = get_session_flags()

    if flags.logged_in:
        st.success("You are signed in.")
        if st.button("Continue", type="primary", key="sign_in_continue"):
            navigate_to(return_to)
        return

    st.caption("Sign in to register for hackathons and submit your profile.")
    if st.button("Sign in", type="primary", key="sign_in_submit"):
        mark_logged_in(get_session_store())
        reload_session_flags()
        navigate_to(return_to)
