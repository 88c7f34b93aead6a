import streamlit as st
from typing import Callable

from hackathon_selection import REGISTER_LABEL, register_action, resolve_register_url
from models import HackathonListing
from .hackathon_card import _render_tag_chips


def render_hackathon_detail(
    listing: HackathonListing,
    logged_in: bool,
    default_register_url: str,
    on_login: Callable[[], None],
    on_close: Callable[[], None]
) -> None:
    """
    Render the detail panel for the selected hackathon.

    Args:
        listing: The selected hackathon
        logged_in: Login flag read at page load; decides Register vs Login to Register
        default_register_url: Used when the listing has no registration link of its own
        on_login: Callback for the "Login to Register" button
        on_close: Callback for the "Close" button
    """

    with st.container(border=True):
        st.markdown(f"### {listing.title}")
        st.caption(listing.time_left)
        st.markdown(listing.location)
        st.markdown(f"**{listing.prize}**")
        st.caption(listing.participants)
        if listing.description:
            st.markdown(listing.description)
        _render_tag_chips(listing.tags)

        col1, col2 = st.columns(2)

        with col1:
            if register_action(logged_in) == REGISTER_LABEL:
                st.link_button(
                    REGISTER_LABEL,
                    resolve_register_url(listing, default_register_url),
                    type="primary",
                    use_container_width=True,
                )
            else:
                if st.button(register_action(logged_in), key="hackathon_login_to_register", use_container_width=True):
                    on_login()

        with col2:
            if st.button("Close", key="hackathon_detail_close", use_container_width=True):
                on_close()
