"""Search filtering for hackathon listings."""

from typing import Iterable, List

from models import HackathonListing


def matches_search(listing: HackathonListing, term: str) -> bool:
    """True if `term` occurs in the title or any tag, ignoring case."""
    needle = (term or "").casefold()
    if not needle:
        return True
    if needle in listing.title.casefold():
        return True
    return any(needle in tag.casefold() for tag in listing.tags)


def filter_listings(listings: Iterable[HackathonListing], term: str) -> List[HackathonListing]:
    """Return the listings matching `term`, in their original order.

    An empty term returns every listing.
    """
    return [listing for listing in listings if matches_search(listing, term)]
