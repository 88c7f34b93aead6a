# ui/components/sidebar.py
"""
Sidebar component for account status and quick links.
"""

import streamlit as st

from ui.app_context import get_session_flags
from ui.constants import PROFILE_PATH, SIGN_IN_PATH
from ui.navigation.actions import navigate_to, request_sign_in, sign_in_return_path


def render_sidebar() -> None:
    """Render the application sidebar with session status."""
    with st.sidebar:
        st.title("🏁 HackHub")
        st.markdown("---")

        flags = get_session_flags()
        current_page = st.session_state.get("page")

        if flags.logged_in:
            st.caption("✅ Signed in")
        else:
            st.caption("🔒 Not signed in")
            if st.button("Sign in", use_container_width=True, key="sidebar_sign_in",
                         type="primary" if current_page == SIGN_IN_PATH else "secondary"):
                request_sign_in(return_to=sign_in_return_path(current_page))

        if flags.profile_submitted:
            st.caption("📄 Profile submitted")

        if st.button("👤 Profile", use_container_width=True, key="sidebar_profile",
                     type="primary" if current_page == PROFILE_PATH else "secondary"):
            navigate_to(PROFILE_PATH)
