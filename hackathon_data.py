"""Static hackathon and skill data loaded from JSON files under data/."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List

from models import HackathonListing, SkillOption
from ui_core import DATA_DIR

logger = logging.getLogger(__name__)

HACKATHONS_FILE = DATA_DIR / "hackathons.json"
SKILLS_FILE = DATA_DIR / "skills.json"


def _read_json_list(path: Path) -> list:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON list, got {type(data).__name__}")
    return data


def load_hackathons(path: os.PathLike | str | None = None) -> List[HackathonListing]:
    """Load the ordered hackathon listings.

    Non-object entries are skipped; a missing file is an error since the
    listings page has nothing to show without it.
    """
    data_path = Path(path) if path is not None else HACKATHONS_FILE
    listings = []
    for record in _read_json_list(data_path):
        if not isinstance(record, dict):
            logger.warning("Skipping malformed hackathon record in %s: %r", data_path, record)
            continue
        listings.append(HackathonListing.from_dict(record))
    return listings


def load_skill_options(path: os.PathLike | str | None = None) -> List[SkillOption]:
    data_path = Path(path) if path is not None else SKILLS_FILE
    return [SkillOption.coerce(option) for option in _read_json_list(data_path)]
