"""Read-only data access for the recommendation engine.

Public API:
    - JobStore / ApplicationStore: query protocols the engine depends on
    - InMemoryJobStore / InMemoryApplicationStore: in-process implementations
    - FileDataStore: stores backed by a YAML/JSON job board document
    - DataFileError: raised for unreadable or malformed data files
"""

from recommender.store.file import DataFileError, FileDataStore, load_data_file
from recommender.store.memory import InMemoryApplicationStore, InMemoryJobStore
from recommender.store.protocols import ApplicationStore, JobStore

__all__ = [
    "JobStore",
    "ApplicationStore",
    "InMemoryJobStore",
    "InMemoryApplicationStore",
    "FileDataStore",
    "DataFileError",
    "load_data_file",
]
