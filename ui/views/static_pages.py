"""
Simple content pages: home, about, contact.
"""

import streamlit as st

from ui.app_context import get_session_flags
from ui.constants import HACKATHONS_PATH, PROFILE_PATH
from ui.navigation.actions import navigate_to


def render_home_page():
    """Render the landing page."""
    st.title("HackHub")
    st.markdown("Find hackathons, build your technical profile and register in one place.")

    flags = get_session_flags()

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Browse Hackathons", type="primary", use_container_width=True, key="home_hackathons"):
            navigate_to(HACKATHONS_PATH)
    with col2:
        label = "View Profile" if flags.profile_submitted else "Create Profile"
        if st.button(label, use_container_width=True, key="home_profile"):
            navigate_to(PROFILE_PATH)


def render_about_page():
    st.title("About")
    st.markdown(
        "HackHub collects upcoming hackathons and lets participants share their "
        "skills and interests so organisers and teammates can find them."
    )


def render_contact_page():
    st.title("Contact")
    st.markdown("Questions or a hackathon to list? Reach the team at **hello@hackhub.dev**.")


def render_not_found_page():
    st.title("Page not found")
    st.info(f"There is nothing at `{st.session_state.get('page')}`.")
    if st.button("Go home", key="not_found_home"):
        navigate_to("/home")
