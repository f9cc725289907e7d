"""In-memory store implementations."""

from __future__ import annotations

from collections.abc import Iterable

from recommender.scoring.models import ApplicationRecord, JobPosting


class InMemoryJobStore:
    """Job store over a list of postings, keyed by job id."""

    def __init__(self, jobs: Iterable[JobPosting] = ()) -> None:
        self._jobs: dict[int, JobPosting] = {}
        for job in jobs:
            self.add(job)

    def add(self, job: JobPosting) -> None:
        """Add or replace a job posting."""
        self._jobs[job.id] = job

    def list_jobs(self) -> list[JobPosting]:
        return list(self._jobs.values())

    def get_job(self, job_id: int) -> JobPosting | None:
        return self._jobs.get(job_id)


class InMemoryApplicationStore:
    """Application store over a list of records."""

    def __init__(self, applications: Iterable[ApplicationRecord] = ()) -> None:
        self._applications: list[ApplicationRecord] = list(applications)

    def add(self, application: ApplicationRecord) -> None:
        """Record a new application."""
        self._applications.append(application)

    def list_applications_by_user(self, user_id: int) -> list[ApplicationRecord]:
        return [a for a in self._applications if a.user_id == user_id]

    def list_applications_by_job(self, job_id: int) -> list[ApplicationRecord]:
        return [a for a in self._applications if a.job_id == job_id]
