"""Selection state for the hackathon detail overlay.

Kept Streamlit-free; views keep the current snapshot in session state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from models import HackathonListing

REGISTER_LABEL = "Register"
LOGIN_TO_REGISTER_LABEL = "Login to Register"


@dataclass(frozen=True)
class DetailView:
    """Closed when `selected` is None, otherwise Open on that listing."""
    selected: Optional[HackathonListing] = None

    @property
    def is_open(self) -> bool:
        return self.selected is not None

    def select(self, listing: HackathonListing) -> "DetailView":
        return DetailView(selected=listing)

    def close(self) -> "DetailView":
        return DetailView()


def register_action(logged_in: bool) -> str:
    """Label of the overlay's primary action for the current login state."""
    return REGISTER_LABEL if logged_in else LOGIN_TO_REGISTER_LABEL


def resolve_register_url(listing: HackathonListing, default_url: str) -> str:
    return listing.register_url or default_url
