"""Unit tests for the in-memory stores."""


class TestInMemoryJobStore:
    """Test InMemoryJobStore."""

    def test_list_and_get(self, job_board):
        from recommender.store.memory import InMemoryJobStore

        store = InMemoryJobStore(job_board)

        assert [job.id for job in store.list_jobs()] == [1, 2, 3, 4]
        assert store.get_job(2).title == "Sales Associate"
        assert store.get_job(42) is None

    def test_add_replaces_by_id(self):
        from recommender.scoring.models import JobPosting
        from recommender.store.memory import InMemoryJobStore

        store = InMemoryJobStore([JobPosting(id=1, title="Old")])
        store.add(JobPosting(id=1, title="New"))

        assert [job.title for job in store.list_jobs()] == ["New"]

    def test_satisfies_protocol(self):
        from recommender.store.memory import InMemoryJobStore
        from recommender.store.protocols import JobStore

        assert isinstance(InMemoryJobStore(), JobStore)


class TestInMemoryApplicationStore:
    """Test InMemoryApplicationStore."""

    def test_filters_by_user_and_job(self):
        from recommender.scoring.models import ApplicationRecord
        from recommender.store.memory import InMemoryApplicationStore

        store = InMemoryApplicationStore(
            [
                ApplicationRecord(user_id=1, job_id=10),
                ApplicationRecord(user_id=2, job_id=10),
            ]
        )
        store.add(ApplicationRecord(user_id=1, job_id=11))

        assert [a.job_id for a in store.list_applications_by_user(1)] == [10, 11]
        assert [a.user_id for a in store.list_applications_by_job(10)] == [1, 2]
        assert store.list_applications_by_user(3) == []

    def test_satisfies_protocol(self):
        from recommender.store.memory import InMemoryApplicationStore
        from recommender.store.protocols import ApplicationStore

        assert isinstance(InMemoryApplicationStore(), ApplicationStore)
