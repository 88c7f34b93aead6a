"""Data models for hackathon listings, skills and the profile form."""
from dataclasses import dataclass, asdict, replace
from typing import Any, Iterable, Optional


@dataclass(frozen=True)
class HackathonListing:
    """Represents one hackathon card."""
    title: str
    time_left: str
    location: str
    prize: str
    participants: str
    description: str
    tags: tuple[str, ...] = ()
    register_url: Optional[str] = None  # Falls back to the configured default

    @classmethod
    def from_dict(cls, data: dict) -> "HackathonListing":
        """Build a listing from a JSON record (camelCase or snake_case keys)."""
        return cls(
            title=str(data.get("title", "")),
            time_left=str(data.get("time_left", data.get("timeLeft", ""))),
            location=str(data.get("location", "")),
            prize=str(data.get("prize", "")),
            participants=str(data.get("participants", "")),
            description=str(data.get("description", "")),
            tags=tuple(str(t) for t in data.get("tags") or ()),
            register_url=data.get("register_url") or data.get("registerUrl"),
        )

    def to_dict(self) -> dict:
        """Convert listing to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class SkillOption:
    """A (label, value) skill pair, either predefined or user-created."""
    label: str
    value: str

    @classmethod
    def coerce(cls, option: Any) -> "SkillOption":
        """Normalize a multiselect value into a skill pair.

        Accepts SkillOption instances, {"label", "value"} dicts, and bare
        strings (skills typed in by the user, where label and value match).
        """
        if isinstance(option, SkillOption):
            return option
        if isinstance(option, dict):
            label = str(option.get("label", option.get("value", "")))
            value = str(option.get("value", label))
            return cls(label=label, value=value)
        text = str(option)
        return cls(label=text, value=text)

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value}


PROFILE_TEXT_FIELDS = ("name", "email", "college", "interests")
REQUIRED_TEXT_FIELDS = ("name", "college", "interests")


@dataclass(frozen=True)
class ProfileFormState:
    """Snapshot of the profile form; updates return a new snapshot."""
    name: str = ""
    email: str = ""
    college: str = ""
    interests: str = ""
    skills: tuple[SkillOption, ...] = ()

    def with_field(self, name: str, value: str) -> "ProfileFormState":
        if name not in PROFILE_TEXT_FIELDS:
            raise ValueError(f"Unknown profile field: {name!r}")
        return replace(self, **{name: "" if value is None else str(value)})

    def with_skills(self, selected: Optional[Iterable[Any]]) -> "ProfileFormState":
        # Duplicates are kept as selected.
        skills = tuple(SkillOption.coerce(opt) for opt in (selected or ()))
        return replace(self, skills=skills)

    def missing_fields(self) -> list[str]:
        """Names of required fields that are still empty."""
        missing = [f for f in REQUIRED_TEXT_FIELDS if not getattr(self, f)]
        if not self.skills:
            missing.append("skills")
        return missing

    def skills_payload(self) -> list[dict]:
        return [skill.to_dict() for skill in self.skills]


@dataclass(frozen=True)
class NavItem:
    """A header navigation link."""
    name: str
    link: str


@dataclass(frozen=True)
class NavLink:
    """A NavItem resolved against the current path."""
    name: str
    link: str
    active: bool = False


@dataclass(frozen=True)
class Notice:
    """User-facing message produced by a state transition."""
    level: str  # 'success', 'error', 'warning', 'info'
    message: str
    toast: bool = False  # Transient notification instead of an inline message


@dataclass(frozen=True)
class SessionFlags:
    """Durable UI flags, read once per page load."""
    logged_in: bool = False
    profile_submitted: bool = False
