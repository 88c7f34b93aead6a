from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import pytest

# Ensure repo root (top-level .py modules) is importable when running pytest.
# Pytest's import mode can vary by version/config; this keeps tests stable.
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from models import HackathonListing  # noqa: E402
from storage.session_store import MemorySessionStore  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int = 200, json_body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text if text is not None else ("" if json_body is None else str(json_body))

    def json(self):
        if self._json_body is None:
            raise ValueError("No JSON object could be decoded")
        return self._json_body


class FakeHttpSession:
    """Records POST calls; returns a canned response or raises `exc`."""

    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[BaseException] = None):
        self.response = response or FakeResponse(200, {"ok": True})
        self.exc = exc
        self.calls: list[dict] = []

    def post(self, url: str, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def memory_store():
    return MemorySessionStore()


@pytest.fixture
def sample_listings():
    return [
        HackathonListing(
            title="HackMIT",
            time_left="30 days left",
            location="Cambridge, MA",
            prize="$20,000",
            participants="1,000 participants",
            description="MIT's annual hackathon.",
            tags=("AI", "Hardware"),
        ),
        HackathonListing(
            title="ETHGlobal Online",
            time_left="5 days left",
            location="Online",
            prize="$500,000",
            participants="3,400 participants",
            description="Smart contracts and more.",
            tags=("Blockchain", "Web3"),
        ),
        HackathonListing(
            title="NASA Space Apps Challenge",
            time_left="18 days left",
            location="Global",
            prize="Global recognition",
            participants="5,000 participants",
            description="Open data for Earth and space.",
            tags=("Space", "Data Science"),
        ),
    ]
