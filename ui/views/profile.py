"""
Profile page view: the skills form, or the confirmation once a profile was submitted.
"""

from typing import Iterable

import streamlit as st

from models import SkillOption
from profile_submission import (
    SIGN_IN_NOTICE,
    ProfileFormController,
    ProfileSubmission,
    initial_submission,
)
from ui.app_context import get_identity, get_session_store, get_settings
from ui.components.notice import render_notice, show_toast
from ui.constants import PROFILE_PATH, PROFILE_SUBMISSION_KEY
from ui.io_cache import get_skill_options
from ui.navigation.actions import navigate_to, request_sign_in


def _save_submission(state: ProfileSubmission) -> None:
    st.session_state[PROFILE_SUBMISSION_KEY] = state


def _load_submission() -> ProfileSubmission:
    state = st.session_state.get(PROFILE_SUBMISSION_KEY)
    if not isinstance(state, ProfileSubmission):
        state = initial_submission(get_session_store())
        _save_submission(state)
    return state


def selected_skill_options(selected: Iterable[str], options: Iterable[SkillOption]) -> list[SkillOption]:
    """Map multiselect labels back to skill pairs; unknown labels are user-created skills."""
    by_label = {option.label: option for option in options}
    return [by_label.get(label) or SkillOption.coerce(label) for label in selected]


def build_controller() -> ProfileFormController:
    return ProfileFormController(
        get_session_store(),
        get_identity(),
        settings=get_settings(),
        navigate=navigate_to,
        state=_load_submission(),
        on_state_change=_save_submission,
    )


def render_profile_page():
    """Render the profile page."""
    st.title("Create Your Profile")
    st.caption("Fill in the details to build your technical profile.")

    controller = build_controller()
    state = controller.state

    # Toasts are one-shot
    show_toast(state.toast)
    controller.clear_toast()

    render_notice(state.notice)
    if state.notice == SIGN_IN_NOTICE:
        if st.button("Sign in", key="profile_sign_in"):
            request_sign_in(return_to=PROFILE_PATH)

    if state.show_confirmation:
        _render_confirmation(controller)
        return

    _render_form(controller)


def _render_form(controller: ProfileFormController) -> None:
    form = controller.state.form
    skill_options = get_skill_options()
    skill_labels = [option.label for option in skill_options]
    current_labels = [skill.label for skill in form.skills]
    # User-created skills must be in the option list to show as selected
    extra_labels = list(dict.fromkeys(label for label in current_labels if label not in skill_labels))

    with st.form("profile_form"):
        name = st.text_input("Name", value=form.name, placeholder="Enter your name")
        email = st.text_input("Email", value=form.email, placeholder="Enter your email")
        college = st.text_input("College", value=form.college, placeholder="Enter your college")
        interests = st.text_area(
            "Technical Interests",
            value=form.interests,
            placeholder="Enter your technical interests (e.g., Web Development, AI, etc.)",
            height=100,
        )
        skills = st.multiselect(
            "Skills",
            options=skill_labels + extra_labels,
            default=list(dict.fromkeys(current_labels)),
            placeholder="Select or add your skills...",
            accept_new_options=True,
        )

        submitted = st.form_submit_button(
            "Submit Profile",
            type="primary",
            use_container_width=True,
            disabled=controller.is_submission_in_flight(),
        )

    if submitted:
        controller.update_field("name", name)
        controller.update_field("email", email)
        controller.update_field("college", college)
        controller.update_field("interests", interests)
        controller.update_skills(selected_skill_options(skills, skill_options))
        with st.spinner("Submitting profile..."):
            controller.submit()
        st.rerun()


def _render_confirmation(controller: ProfileFormController) -> None:
    with st.container(border=True):
        st.subheader("Profile Submitted!")
        st.markdown("Your profile has been submitted successfully. Click below to edit it.")
        if st.button("Edit Profile", type="primary", key="edit_profile"):
            controller.edit_profile()
