"""
HackHub - Hackathons View
Searchable hackathon cards with a detail panel for the selected listing.
"""

import streamlit as st

from hackathon_filter import filter_listings
from hackathon_selection import DetailView
from ui.app_context import get_session_flags, get_session_store, get_settings, reload_session_flags
from ui.components.hackathon_card import render_hackathon_card
from ui.components.hackathon_detail import render_hackathon_detail
from ui.components.hackathon_search_bar import render_hackathon_search_bar
from ui.constants import DETAIL_VIEW_KEY
from ui.io_cache import get_hackathons
from ui.navigation.actions import login_to_register

CARDS_PER_ROW = 2


def _detail_view() -> DetailView:
    view = st.session_state.get(DETAIL_VIEW_KEY)
    return view if isinstance(view, DetailView) else DetailView()


def _set_detail_view(view: DetailView) -> None:
    st.session_state[DETAIL_VIEW_KEY] = view


def render_hackathons_page():
    """Render the hackathon listings page."""
    st.title("Discover Your Next Hackathon Challenge")

    listings = get_hackathons()
    flags = get_session_flags()
    settings = get_settings()
    view = _detail_view()

    def _on_search_change(term: str) -> None:
        st.session_state.search_text = term

    search_text = st.session_state.get("search_text", "") or ""
    filtered = filter_listings(listings, search_text)

    render_hackathon_search_bar(search_text, _on_search_change, len(listings), len(filtered))

    if view.is_open:
        def _on_close() -> None:
            _set_detail_view(view.close())
            st.rerun()

        def _on_logged_in() -> None:
            # Coming back from sign-in starts with the overlay closed
            _set_detail_view(view.close())
            reload_session_flags()

        render_hackathon_detail(
            view.selected,
            logged_in=flags.logged_in,
            default_register_url=settings["hackathons"]["default_register_url"],
            on_login=lambda: login_to_register(get_session_store(), on_logged_in=_on_logged_in),
            on_close=_on_close,
        )

    if not filtered:
        st.info("No hackathons match your search.")
        return

    def _on_select(index: int) -> None:
        _set_detail_view(view.select(listings[index]))
        st.rerun()

    # Card keys use the position in the full list so they stay stable while filtering
    positions = {id(listing): i for i, listing in enumerate(listings)}
    for row_start in range(0, len(filtered), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, listing in zip(cols, filtered[row_start:row_start + CARDS_PER_ROW]):
            with col:
                index = positions[id(listing)]
                render_hackathon_card(
                    listing,
                    index,
                    _on_select,
                    is_selected=view.selected == listing,
                )
