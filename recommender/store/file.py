"""Stores backed by a YAML or JSON job board document.

The document is a mapping with two lists::

    jobs:
      - {id: 1, title: Java Developer, company: Acme, posted_by: 7}
    applications:
      - {user_id: 3, job_id: 1, status: Accepted}
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from recommender.scoring.models import ApplicationRecord, JobPosting
from recommender.store.memory import InMemoryApplicationStore, InMemoryJobStore
from recommender.utils.logging import get_logger

logger = get_logger(__name__)


class DataFileError(ValueError):
    """Raised when a job board data file cannot be read or parsed."""


def load_data_file(path: Path | str) -> tuple[list[JobPosting], list[ApplicationRecord]]:
    """Load and validate the jobs and applications held in a data file."""
    data_path = Path(path)
    try:
        raw = data_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DataFileError(f"Cannot read data file: {data_path}") from e

    try:
        if data_path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DataFileError(f"Invalid data file: {data_path}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DataFileError(f"Data file must be a mapping/dict: {data_path}")

    try:
        jobs = [JobPosting.from_dict(item) for item in data.get("jobs") or []]
        applications = [
            ApplicationRecord.from_dict(item)
            for item in data.get("applications") or []
        ]
    except ValidationError as e:
        raise DataFileError(f"Invalid records in data file {data_path}: {e}") from e

    logger.debug(
        "Loaded %d jobs and %d applications from %s",
        len(jobs),
        len(applications),
        data_path,
    )
    return jobs, applications


class FileDataStore:
    """Job and application store read from a data file on first use."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._jobs: InMemoryJobStore | None = None
        self._applications: InMemoryApplicationStore | None = None

    def _ensure_loaded(self) -> tuple[InMemoryJobStore, InMemoryApplicationStore]:
        if self._jobs is None or self._applications is None:
            jobs, applications = load_data_file(self.path)
            self._jobs = InMemoryJobStore(jobs)
            self._applications = InMemoryApplicationStore(applications)
        return self._jobs, self._applications

    def list_jobs(self) -> list[JobPosting]:
        return self._ensure_loaded()[0].list_jobs()

    def get_job(self, job_id: int) -> JobPosting | None:
        return self._ensure_loaded()[0].get_job(job_id)

    def list_applications_by_user(self, user_id: int) -> list[ApplicationRecord]:
        return self._ensure_loaded()[1].list_applications_by_user(user_id)

    def list_applications_by_job(self, job_id: int) -> list[ApplicationRecord]:
        return self._ensure_loaded()[1].list_applications_by_job(job_id)
