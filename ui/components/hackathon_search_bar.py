import streamlit as st
from typing import Callable

SEARCH_WIDGET_KEY = "hackathon_search"


def render_hackathon_search_bar(
    search_text: str,
    on_search_change: Callable[[str], None],
    total_listings: int,
    filtered_listings: int
) -> None:
    """
    Render the search box with a results summary.

    Args:
        search_text: Current search term
        on_search_change: Called from widget callbacks with the new term (no rerun needed)
        total_listings: Number of listings available
        filtered_listings: Number of listings after filtering
    """

    # Keep the widget in step with navigation, which may reset the term
    st.session_state[SEARCH_WIDGET_KEY] = search_text

    def _on_input() -> None:
        on_search_change(st.session_state.get(SEARCH_WIDGET_KEY, ""))

    def _on_clear() -> None:
        st.session_state[SEARCH_WIDGET_KEY] = ""
        on_search_change("")

    with st.container():
        col1, col2 = st.columns([4, 1])

        with col1:
            st.text_input(
                "Search hackathons",
                placeholder="Search by name or tags...",
                label_visibility="collapsed",
                key=SEARCH_WIDGET_KEY,
                on_change=_on_input
            )

        with col2:
            st.button(
                "Clear",
                use_container_width=True,
                key="clear_hackathon_search",
                on_click=_on_clear,
                disabled=not search_text
            )

        _render_results_summary(search_text, total_listings, filtered_listings)


def _render_results_summary(search_text: str, total_listings: int, filtered_listings: int) -> None:
    if filtered_listings != total_listings:
        summary_text = f"Showing {filtered_listings} of {total_listings} hackathons"
    else:
        summary_text = f"{total_listings} hackathons"

    if search_text:
        st.caption(f"{summary_text} • search: '{search_text}'")
    else:
        st.caption(summary_text)
