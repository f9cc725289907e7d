"""Mine a user's application history into preference signals."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from recommender.scoring.models import (
    ApplicationRecord,
    JobPosting,
    PreferenceSummary,
    UserProfile,
)
from recommender.store.protocols import JobStore
from recommender.utils.logging import get_logger

logger = get_logger(__name__)

JOB_KEYWORDS: frozenset[str] = frozenset(
    {
        "developer",
        "engineer",
        "manager",
        "analyst",
        "designer",
        "consultant",
        "specialist",
        "coordinator",
        "director",
        "lead",
        "senior",
        "junior",
        "software",
        "data",
        "marketing",
        "sales",
        "finance",
        "hr",
        "operations",
    }
)

MAX_PREFERRED_LOCATIONS = 5

_NON_LETTER = re.compile(r"[^a-zA-Z]")


def extract_keywords(
    titles: Iterable[str], descriptions: Iterable[str] = ()
) -> list[str]:
    """Return the sorted job-domain keywords found in titles and descriptions.

    Titles are matched word by word; descriptions by substring.
    """
    keywords: set[str] = set()

    for title in titles:
        for word in title.split():
            token = _NON_LETTER.sub("", word).lower()
            if len(token) > 2 and token in JOB_KEYWORDS:
                keywords.add(token)

    for description in descriptions:
        lowered = description.lower()
        keywords.update(keyword for keyword in JOB_KEYWORDS if keyword in lowered)

    return sorted(keywords)


class HistoryAnalyzer:
    """Build a PreferenceSummary from past applications.

    Jobs are resolved one by one through the job store. A record whose
    job cannot be resolved is skipped, so a single bad lookup never
    fails the whole request.
    """

    def __init__(self, job_store: JobStore) -> None:
        self.job_store = job_store

    def _resolve_job(self, application: ApplicationRecord) -> JobPosting | None:
        try:
            return self.job_store.get_job(application.job_id)
        except Exception as e:
            logger.debug(
                "Skipping application %s: job %s lookup failed: %s",
                application.id,
                application.job_id,
                e,
            )
            return None

    def analyze(
        self, user: UserProfile, history: Sequence[ApplicationRecord]
    ) -> PreferenceSummary:
        """Summarize the companies, locations and keywords a user gravitates to."""
        summary = PreferenceSummary(
            total_applications=len(history),
            successful_applications=sum(1 for a in history if a.is_accepted),
        )
        if not history:
            return summary

        company_counts: Counter[str] = Counter()
        location_counts: Counter[str] = Counter()
        titles: list[str] = []
        descriptions: list[str] = []
        accepted_titles: list[str] = []

        for application in history:
            job = self._resolve_job(application)
            if job is None:
                continue

            if job.company:
                company_counts[job.company.lower()] += 1
            if job.location:
                location_counts[job.location.lower()] += 1

            title = job.title.lower()
            titles.append(title)
            if job.description:
                descriptions.append(job.description.lower())

            if application.is_accepted:
                accepted_titles.append(title)
                summary.has_successful_applications = True

        summary.preferred_companies = sorted(
            company for company, count in company_counts.items() if count > 1
        )
        summary.preferred_locations = [
            location
            for location, _ in location_counts.most_common(MAX_PREFERRED_LOCATIONS)
        ]
        summary.historical_keywords = extract_keywords(titles, descriptions)
        summary.successful_keywords = extract_keywords(accepted_titles)

        logger.debug(
            "User %s history: %d applications, %d accepted, keywords=%s",
            user.id,
            summary.total_applications,
            summary.successful_applications,
            summary.historical_keywords,
        )
        return summary
