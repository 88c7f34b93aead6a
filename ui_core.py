from __future__ import annotations

from pathlib import Path
import json
import copy
import logging


logger = logging.getLogger(__name__)

# Settings management
STATE_DIR = Path(__file__).parent / "state"
SETTINGS_FILE = STATE_DIR / "app_settings.json"
DATA_DIR = Path(__file__).parent / "data"

DEFAULT_SETTINGS = {
    "api": {
        "base_url": "http://localhost:5001",
        "timeout_seconds": 15,
    },
    "storage": {
        "session_file": str(STATE_DIR / "session_flags.json"),
    },
    "hackathons": {
        "default_register_url": "https://unstop.com/competitions/1170040/register",
    },
    "ui": {
        "page_title": "HackHub",
        "default_page": "/home",
    },
}

SETTINGS_SECTIONS = ("api", "storage", "hackathons", "ui")


def load_settings(path: Path | None = None) -> dict:
    """Load settings from JSON file, with defaults fallback."""
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    if settings_file.exists():
        try:
            with open(settings_file, "r", encoding="utf-8") as f:
                saved = json.load(f)
            # Merge with defaults to ensure all keys exist
            settings = copy.deepcopy(DEFAULT_SETTINGS)
            for section in SETTINGS_SECTIONS:
                if section in saved:
                    if isinstance(settings.get(section), dict) and isinstance(saved.get(section), dict):
                        settings[section].update(saved[section])
            return settings
        except Exception as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", settings_file, exc)
    return copy.deepcopy(DEFAULT_SETTINGS)


def save_settings(settings: dict, path: Path | None = None) -> None:
    """Save settings to JSON file."""
    settings_file = Path(path) if path is not None else SETTINGS_FILE
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def users_endpoint(settings: dict) -> str:
    """Absolute URL of the profile submission endpoint."""
    base_url = str(settings.get("api", {}).get("base_url") or DEFAULT_SETTINGS["api"]["base_url"])
    return base_url.rstrip("/") + "/api/users"


def request_timeout(settings: dict) -> float:
    """Bounded request timeout in seconds (clamped to 1-60)."""
    raw = settings.get("api", {}).get("timeout_seconds", DEFAULT_SETTINGS["api"]["timeout_seconds"])
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = float(DEFAULT_SETTINGS["api"]["timeout_seconds"])
    return min(max(value, 1.0), 60.0)
