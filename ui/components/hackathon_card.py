import html

import streamlit as st
from typing import Callable

from models import HackathonListing


def render_hackathon_card(
    listing: HackathonListing,
    index: int,
    on_select: Callable[[int], None],
    is_selected: bool = False
) -> None:
    """
    Render a single hackathon card with tag chips and a details button.

    Args:
        listing: Hackathon to show
        index: Position in the full listing (used for widget keys and selection)
        on_select: Callback when the card's details button is clicked
        is_selected: Whether this listing is open in the detail overlay
    """

    with st.container(border=True):
        st.markdown(f"#### {listing.title}")
        st.caption(listing.time_left)
        st.markdown(listing.location)
        st.markdown(f"**{listing.prize}**")
        st.caption(listing.participants)

        _render_tag_chips(listing.tags)

        label = "Viewing" if is_selected else "View details"
        if st.button(label, key=f"hackathon_card_{index}", use_container_width=True, disabled=is_selected):
            on_select(index)


def _render_tag_chips(tags) -> None:
    """Render tags as rounded chips."""
    if not tags:
        return
    chips = "".join(
        f'<span style="background-color: #44403c; color: #fafaf9; padding: 2px 10px; '
        f'border-radius: 12px; font-size: 0.8em; margin-right: 6px; display: inline-block;">'
        f"{html.escape(tag)}</span>"
        for tag in tags
    )
    st.markdown(chips, unsafe_allow_html=True)
