"""Prompt builders for LLM-phrased profile suggestions."""

from __future__ import annotations

from recommender.scoring.models import UserProfile

SUGGESTION_SYSTEM_PROMPT = """You are a career coach reviewing a job seeker's profile on a job board.

You must follow these rules:
- Base your advice only on the profile fields provided. Do NOT invent experience or skills.
- Prioritize fields marked "Not provided".
- Reply with plain text only (no markdown, no lists), at most 100 words.
"""

NOT_PROVIDED = "Not provided"


def _field(value: str | None) -> str:
    if value is None or not value.strip():
        return NOT_PROVIDED
    return value.strip()


def build_suggestion_prompt(*, profile: UserProfile, score: int) -> str:
    """Build the user prompt asking for one improvement suggestion."""
    return "\n".join(
        [
            "Analyze this job seeker's profile and provide personalized improvement suggestions:",
            "",
            f"Profile Completeness Score: {score}/100",
            f"Name: {_field(profile.full_name)}",
            f"Bio: {_field(profile.bio)}",
            f"Skills: {_field(profile.skills)}",
            f"Experience: {_field(profile.experience)}",
            f"Preferred Job Type: {_field(profile.preferred_job_type)}",
            f"Preferred Location: {_field(profile.preferred_location)}",
            "",
            (
                "Provide a concise, actionable suggestion (max 100 words) to improve "
                "their profile for better job matches."
            ),
        ]
    )
