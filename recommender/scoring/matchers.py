"""Skill, text and single-factor matching utilities for recommendations."""

from __future__ import annotations

import re
from types import MappingProxyType

EXACT_SKILL_WEIGHT = 1.0
PARTIAL_SKILL_WEIGHT = 0.5
HIGH_MATCH_THRESHOLD = 0.7
HIGH_MATCH_BOOST = 1.1

# Related terms that earn partial credit for a skill, checked both ways.
_SKILL_SYNONYMS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "javascript": ("js", "node", "react", "angular", "vue"),
        "js": ("javascript", "node", "react", "angular", "vue"),
        "python": ("django", "flask", "fastapi", "py"),
        "java": ("spring", "springboot", "hibernate"),
        "c#": ("csharp", "dotnet", ".net", "asp.net"),
        "react": ("javascript", "js", "frontend", "reactjs"),
        "angular": ("javascript", "js", "frontend", "typescript"),
        "node": ("nodejs", "javascript", "js", "backend"),
        "sql": ("mysql", "postgresql", "database", "db"),
        "html": ("frontend", "web", "css"),
        "css": ("frontend", "web", "html", "scss", "sass"),
    }
)

_JOB_TYPE_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "full-time": ("full-time", "full time", "permanent", "regular"),
        "part-time": ("part-time", "part time", "flexible", "hourly"),
        "contract": ("contract", "contractor", "freelance", "temporary", "temp"),
        "remote": ("remote", "work from home", "telecommute", "distributed"),
    }
)

ENTRY, MID, SENIOR = "entry", "mid", "senior"

_USER_LEVEL_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        ENTRY: ("entry", "junior", "beginner"),
        MID: ("mid", "intermediate", "3-5", "2-4"),
        SENIOR: ("senior", "lead", "5+", "expert"),
    }
)

_JOB_LEVEL_KEYWORDS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        ENTRY: ("entry", "junior", "0-2 years"),
        MID: ("mid", "intermediate", "3-5", "2-4"),
        SENIOR: ("senior", "lead", "5+", "manager"),
    }
)

_ADJACENT_LEVELS = frozenset(
    {(ENTRY, MID), (MID, ENTRY), (MID, SENIOR), (SENIOR, MID)}
)

_NON_WORD = re.compile(r"\W+", re.ASCII)


def split_skills(skills: str | None) -> list[str]:
    """Split a comma-separated skills string into lower-cased, non-empty skills."""
    if not skills:
        return []
    return [s.strip() for s in skills.lower().split(",") if s.strip()]


def has_related_skill(skill: str, job_text: str) -> bool:
    """Return True if the synonym table links `skill` to something in `job_text`.

    Both arguments are expected lower-cased.
    """
    for term in _SKILL_SYNONYMS.get(skill, ()):
        if term in job_text:
            return True

    for key, related in _SKILL_SYNONYMS.items():
        if key in job_text and skill in related:
            return True

    return False


def skills_match(user_skills: str | None, job_text: str | None) -> float:
    """Score how well comma-separated user skills cover a job's text.

    Exact substring hits are worth 1.0, synonym hits 0.5; the average is
    boosted by 10% (capped at 1.0) when it exceeds 0.7.
    """
    skills = split_skills(user_skills)
    if not skills:
        return 0.0

    text = (job_text or "").lower()
    exact = 0
    partial = 0
    for skill in skills:
        if skill in text:
            exact += 1
        elif has_related_skill(skill, text):
            partial += 1

    score = (exact * EXACT_SKILL_WEIGHT + partial * PARTIAL_SKILL_WEIGHT) / len(skills)
    if score > HIGH_MATCH_THRESHOLD:
        score = min(1.0, score * HIGH_MATCH_BOOST)
    return score


def matched_skills(user_skills: str | None, job_text: str | None) -> list[str]:
    """Return the user's skills found verbatim in the job text, in input order."""
    text = (job_text or "").lower()
    return [skill for skill in split_skills(user_skills) if skill in text]


def location_match(preferred: str | None, actual: str | None) -> float:
    """Score a preferred location against a job location.

    A blank location on either side counts as missing.
    """
    pref = (preferred or "").lower().strip()
    job = (actual or "").lower().strip()
    if not pref or not job:
        return 0.0

    if pref == job:
        return 1.0
    if pref in job or job in pref:
        return 0.7

    pref_words = pref.split()
    job_words = job.split()
    longest = max(len(pref_words), len(job_words))

    shared = sum(1 for word in pref_words if len(word) > 2 and word in job_words)
    return min(1.0, shared / longest)


def job_type_match(preferred_type: str | None, description: str | None) -> float:
    """Score a preferred job type against a job description."""
    if preferred_type is None or description is None:
        return 0.0

    pref = preferred_type.lower()
    desc = description.lower()

    if pref in desc:
        return 1.0

    for keyword in _JOB_TYPE_KEYWORDS.get(pref, ()):
        if keyword in desc:
            return 0.8

    return 0.0


def experience_levels(text: str, *, for_job: bool = False) -> frozenset[str]:
    """Return every experience level whose keywords appear in `text`."""
    table = _JOB_LEVEL_KEYWORDS if for_job else _USER_LEVEL_KEYWORDS
    lowered = text.lower()
    return frozenset(
        level
        for level, keywords in table.items()
        if any(keyword in lowered for keyword in keywords)
    )


def experience_match(user_experience: str | None, description: str | None) -> float:
    """Score the user's experience level against the level a job asks for.

    A shared level scores 1.0 and an adjacent one 0.6. Anything else,
    including no detectable level, keeps a 0.3 floor.
    """
    if user_experience is None or description is None:
        return 0.0

    user_levels = experience_levels(user_experience)
    job_levels = experience_levels(description, for_job=True)

    if user_levels & job_levels:
        return 1.0
    if any((u, j) in _ADJACENT_LEVELS for u in user_levels for j in job_levels):
        return 0.6
    return 0.3


def _word_set(text: str) -> set[str]:
    return {word for word in _NON_WORD.split(text.lower()) if len(word) > 3}


def text_similarity(a: str | None, b: str | None) -> float:
    """Jaccard similarity of the words longer than three characters."""
    if a is None or b is None:
        return 0.0

    words_a = _word_set(a)
    words_b = _word_set(b)
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)
