"""Profile loading, validation and completeness utilities."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from recommender.config.settings import Settings, get_settings
from recommender.scoring.models import UserProfile, is_blank

# Fields counted by the completeness estimator, each worth 100/6.
COMPLETENESS_FIELDS: tuple[str, ...] = (
    "skills",
    "experience",
    "preferred_location",
    "salary_expectation",
    "bio",
    "preferred_job_type",
)

# Points per field for the profile strength score (capped at 100).
STRENGTH_POINTS: tuple[tuple[str, int], ...] = (
    ("full_name", 10),
    ("email", 10),
    ("username", 10),
    ("bio", 20),
    ("skills", 20),
    ("experience", 15),
    ("preferred_job_type", 5),
    ("preferred_location", 5),
    ("salary_expectation", 5),
)


def completeness(profile: UserProfile) -> float:
    """Return the percentage (0-100) of recommendation fields filled in."""
    completed = sum(
        1 for name in COMPLETENESS_FIELDS if not is_blank(getattr(profile, name))
    )
    return completed / len(COMPLETENESS_FIELDS) * 100


def profile_strength(profile: UserProfile) -> int:
    """Return a 0-100 strength score that also credits identity fields."""
    score = sum(
        points
        for name, points in STRENGTH_POINTS
        if not is_blank(getattr(profile, name))
    )
    return min(score, 100)


def missing_fields(profile: UserProfile) -> list[str]:
    """Return the recommendation fields that are still empty."""
    return [name for name in COMPLETENESS_FIELDS if is_blank(getattr(profile, name))]


class ProfileService:
    """Service for loading and validating user profiles."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_profile(self, path: Path | str | None = None) -> UserProfile:
        """Load and validate a profile from YAML or JSON."""
        profile_path = Path(path) if path is not None else self.settings.profile_path
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile_path}")

        suffix = profile_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(profile_path)
        elif suffix == ".json":
            data = self._load_json(profile_path)
        else:
            data = self._load_unknown(profile_path)

        return UserProfile.model_validate(data)

    def validate_profile(self, profile: UserProfile) -> list[str]:
        """Return warnings for profiles that will score poorly."""
        warnings: list[str] = []

        if is_blank(profile.skills):
            warnings.append("Skills are empty; skill matching will score 0")
        if is_blank(profile.preferred_location):
            warnings.append("Missing preferred location")
        if is_blank(profile.preferred_job_type):
            warnings.append("Missing preferred job type")
        if is_blank(profile.experience):
            warnings.append("Missing experience level")
        if is_blank(profile.bio):
            warnings.append("Missing bio")

        return warnings

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML profile: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON profile: {path}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data

    def _load_unknown(self, path: Path) -> dict:
        """Auto-detect and load a profile when the file extension is unknown."""
        raw = path.read_text(encoding="utf-8")

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if raw.lstrip().startswith(("{", "[")):
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                pass
            else:
                if not isinstance(data, dict):
                    raise ValueError(f"Profile must be a mapping/dict: {path}")
                return data

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile format: {path}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {path}")
        return data
