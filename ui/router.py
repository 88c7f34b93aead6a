# ui/router.py
"""
Thin router for dispatching to page views.
Maps page paths to their respective view functions.
"""

import streamlit as st

from ui.constants import (
    ABOUT_PATH,
    CONTACT_PATH,
    HACKATHONS_PATH,
    HOME_PATH,
    LOGIN_PATH,
    PROFILE_PATH,
    REGISTER_PATH,
    SIGN_IN_PATH,
)
from ui.views.hackathons import render_hackathons_page
from ui.views.profile import render_profile_page
from ui.views.sign_in import render_sign_in_page
from ui.views.static_pages import (
    render_about_page,
    render_contact_page,
    render_home_page,
    render_not_found_page,
)


# Route mapping: path -> view function
ROUTES = {
    HOME_PATH: render_home_page,
    HACKATHONS_PATH: render_hackathons_page,
    PROFILE_PATH: render_profile_page,
    ABOUT_PATH: render_about_page,
    CONTACT_PATH: render_contact_page,
    SIGN_IN_PATH: render_sign_in_page,
    LOGIN_PATH: render_sign_in_page,
    REGISTER_PATH: render_sign_in_page,
}


def dispatch() -> None:
    """Dispatch to the appropriate view based on current page state."""
    page = st.session_state.get("page", HOME_PATH)
    view = ROUTES.get(page, render_not_found_page)
    view()
