"""Query interfaces implemented by the persistence layer."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from recommender.scoring.models import ApplicationRecord, JobPosting


@runtime_checkable
class JobStore(Protocol):
    """Read-only access to job postings."""

    def list_jobs(self) -> Sequence[JobPosting]: ...

    def get_job(self, job_id: int) -> JobPosting | None: ...


@runtime_checkable
class ApplicationStore(Protocol):
    """Read-only access to application records."""

    def list_applications_by_user(self, user_id: int) -> Sequence[ApplicationRecord]: ...

    def list_applications_by_job(self, job_id: int) -> Sequence[ApplicationRecord]: ...
