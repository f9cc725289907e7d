"""Base and history-aware recommendation scoring.

Both scorers accumulate a (score, max_weight) pair and only add a
factor's weight to the denominator when that factor applies to the
user, so the result is always renormalized to [0, 1].
"""

from __future__ import annotations

from collections.abc import Sequence

from recommender.scoring.matchers import (
    experience_match,
    job_type_match,
    location_match,
    skills_match,
    text_similarity,
)
from recommender.scoring.models import (
    JobPosting,
    PreferenceSummary,
    UserProfile,
    is_blank,
)

WEIGHT_SKILLS = 0.40
WEIGHT_LOCATION = 0.20
WEIGHT_JOB_TYPE = 0.15
WEIGHT_EXPERIENCE = 0.15
WEIGHT_BIO = 0.10

# Profile share of the history-aware score, by history volume.
PROFILE_WEIGHT_EXPERIENCED = 0.4
PROFILE_WEIGHT_DEFAULT = 0.6
EXPERIENCED_APPLICATION_COUNT = 5

HISTORY_WEIGHT_PER_APPLICATION = 0.1
MAX_HISTORY_WEIGHT = 0.6

# Fractions of the history weight.
SHARE_HISTORICAL_KEYWORDS = 0.30
SHARE_SUCCESSFUL_KEYWORDS = 0.40
SHARE_COMPANY = 0.15
SHARE_LOCATION = 0.15

LOCATION_RANK_DECAY = 0.1


def job_skills_text(job: JobPosting) -> str:
    """Text searched for skills: title, description and the skills field."""
    text = f"{job.title} {job.description or ''}"
    if not is_blank(job.skills):
        text += f" {job.skills}"
    return text


def job_text(job: JobPosting) -> str:
    """Lower-cased title and description used for keyword matching."""
    return f"{job.title} {job.description or ''}".lower()


def base_score(user: UserProfile, job: JobPosting) -> float:
    """Score a job against the user's profile alone."""
    score = skills_match(user.skills, job_skills_text(job)) * WEIGHT_SKILLS
    max_score = WEIGHT_SKILLS

    if not is_blank(user.preferred_location):
        score += location_match(user.preferred_location, job.location) * WEIGHT_LOCATION
        max_score += WEIGHT_LOCATION

    if not is_blank(user.preferred_job_type):
        score += job_type_match(user.preferred_job_type, job.description) * WEIGHT_JOB_TYPE
        max_score += WEIGHT_JOB_TYPE

    if not is_blank(user.experience):
        score += experience_match(user.experience, job.description) * WEIGHT_EXPERIENCE
        max_score += WEIGHT_EXPERIENCE

    if not is_blank(user.bio):
        score += text_similarity(user.bio, job.description) * WEIGHT_BIO
        max_score += WEIGHT_BIO

    return score / max_score if max_score > 0 else 0.0


def keyword_match(job: JobPosting, keywords: Sequence[str]) -> float:
    """Fraction of `keywords` that appear in the job's title or description."""
    if not keywords:
        return 0.0
    text = job_text(job)
    matched = sum(1 for keyword in keywords if keyword.lower() in text)
    return matched / len(keywords)


def location_history_match(
    job_location: str | None, preferred_locations: Sequence[str]
) -> float:
    """Score a job location against frequency-ranked past locations.

    The first matching location scores 1.0 minus 0.1 per rank.
    """
    if not job_location or not preferred_locations:
        return 0.0

    location = job_location.lower()
    for rank, preferred in enumerate(preferred_locations):
        if preferred in location or location in preferred:
            return max(0.0, 1.0 - rank * LOCATION_RANK_DECAY)
    return 0.0


def history_weight(prefs: PreferenceSummary) -> float:
    return min(MAX_HISTORY_WEIGHT, prefs.total_applications * HISTORY_WEIGHT_PER_APPLICATION)


def history_score(user: UserProfile, job: JobPosting, prefs: PreferenceSummary) -> float:
    """Blend the base score with signals mined from application history.

    With no history the result equals `base_score`.
    """
    profile_score = base_score(user, job)
    weight = history_weight(prefs)
    if weight <= 0:
        # Only the profile term applies, which renormalizes to itself.
        return profile_score

    if prefs.total_applications > EXPERIENCED_APPLICATION_COUNT:
        profile_weight = PROFILE_WEIGHT_EXPERIENCED
    else:
        profile_weight = PROFILE_WEIGHT_DEFAULT

    score = profile_score * profile_weight
    max_score = profile_weight

    if prefs.historical_keywords:
        share = weight * SHARE_HISTORICAL_KEYWORDS
        score += keyword_match(job, prefs.historical_keywords) * share
        max_score += share

    if prefs.has_successful_applications and prefs.successful_keywords:
        share = weight * SHARE_SUCCESSFUL_KEYWORDS
        score += keyword_match(job, prefs.successful_keywords) * share
        max_score += share

    if prefs.preferred_companies:
        share = weight * SHARE_COMPANY
        if (job.company or "").lower() in prefs.preferred_companies:
            score += share
        max_score += share

    if prefs.preferred_locations:
        share = weight * SHARE_LOCATION
        score += location_history_match(job.location, prefs.preferred_locations) * share
        max_score += share

    return score / max_score if max_score > 0 else 0.0
