# ui/navigation/actions.py
"""
Navigation actions for the HackHub app.
Centralized functions for changing navigation state and URL.
"""

from typing import Callable, Optional

from storage.session_store import SessionStore, mark_logged_in
from ui.constants import HACKATHONS_PATH, SIGN_IN_PATH
from .state import apply_state, defaults, normalize_path, _st
from .url_sync import sync_url_with_state


def navigate_to(page: str, **kwargs) -> None:
    """Navigate to a page with optional state parameters."""
    st = _st()
    # Start with defaults for the target page
    new_state = defaults()
    new_state["page"] = normalize_path(page)

    # Apply any provided kwargs
    for key, value in kwargs.items():
        new_state[key] = value

    # Apply the new state
    apply_state(new_state)

    # Sync to URL
    sync_url_with_state()

    # Trigger rerun to show new page
    st.rerun()


def sign_in_return_path(current_page: Optional[str]) -> Optional[str]:
    """Page to come back to after signing in; none when already on sign-in."""
    if not current_page or normalize_path(current_page) == SIGN_IN_PATH:
        return None
    return normalize_path(current_page)


def request_sign_in(return_to: Optional[str] = None) -> None:
    """Send the user to the sign-in page, remembering where to come back to."""
    navigate_to(SIGN_IN_PATH, return_to=normalize_path(return_to) if return_to else None)


def login_to_register(store: SessionStore, on_logged_in: Optional[Callable[[], None]] = None) -> None:
    """Demonstration login from the hackathon detail overlay.

    Sets the durable login flag, then goes through sign-in back to the
    hackathons page. `on_logged_in` runs before navigation (e.g. to refresh
    cached flags).
    """
    mark_logged_in(store)
    if on_logged_in:
        on_logged_in()
    request_sign_in(return_to=HACKATHONS_PATH)
