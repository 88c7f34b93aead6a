from pathlib import Path

import streamlit as st

from hackathon_data import HACKATHONS_FILE, SKILLS_FILE, load_hackathons, load_skill_options
from models import HackathonListing, SkillOption


def _mtime(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError:
        return 0.0


@st.cache_data(show_spinner=False)
def _load_hackathons_cached(path: str, mtime: float) -> list[HackathonListing]:
    return load_hackathons(path)


@st.cache_data(show_spinner=False)
def _load_skill_options_cached(path: str, mtime: float) -> list[SkillOption]:
    return load_skill_options(path)


def get_hackathons(path: Path = HACKATHONS_FILE) -> list[HackathonListing]:
    """Hackathon listings, re-read only when the data file changes."""
    return _load_hackathons_cached(str(path), _mtime(path))


def get_skill_options(path: Path = SKILLS_FILE) -> list[SkillOption]:
    return _load_skill_options_cached(str(path), _mtime(path))
