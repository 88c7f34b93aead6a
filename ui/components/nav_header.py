import streamlit as st
from typing import Callable, Iterable, List, Optional

from models import NavItem, NavLink
from ui.constants import ACTIVE_UNDERLINE_COLOR


def build_nav_links(nav_items: Iterable[NavItem], current_path: str) -> List[NavLink]:
    """Resolve nav items against the current path; only an exact match is active."""
    return [
        NavLink(name=item.name, link=item.link, active=item.link == current_path)
        for item in nav_items
    ]


def render_nav_header(
    nav_items: List[NavItem],
    current_path: str,
    on_navigate: Callable[[str], None],
    account_items: Optional[List[NavItem]] = None,
) -> None:
    """
    Render the site header: nav links on the left, account buttons on the right.

    Args:
        nav_items: Links in display order
        current_path: Path of the page being shown
        on_navigate: Called with the target link when an item is clicked
        account_items: Optional buttons rendered on the right (register, login)
    """

    links = build_nav_links(nav_items, current_path)

    header_cols = st.columns([3, 1]) if account_items else [st.container()]

    with header_cols[0]:
        link_cols = st.columns(len(links)) if links else []
        for i, link in enumerate(links):
            with link_cols[i]:
                _render_nav_link(link, on_navigate)

    if account_items:
        with header_cols[1]:
            account_cols = st.columns(len(account_items))
            for i, item in enumerate(account_items):
                with account_cols[i]:
                    if st.button(item.name, key=f"account_{item.link}", use_container_width=True):
                        on_navigate(item.link)

    st.divider()


def _render_nav_link(link: NavLink, on_navigate: Callable[[str], None]) -> None:
    """
    Render one nav link. The active link is bold with an underline bar and is not clickable.
    """
    if link.active:
        st.markdown(
            f"""
            <div style="text-align: center; font-weight: 600; padding: 0.4em 0;">
                {link.name}
                <div style="height: 2px; background-color: {ACTIVE_UNDERLINE_COLOR}; border-radius: 2px; margin-top: 2px;"></div>
            </div>
            """,
            unsafe_allow_html=True
        )
    else:
        if st.button(link.name, key=f"nav_{link.link}", type="tertiary", use_container_width=True):
            on_navigate(link.link)
