"""Unit tests for single-factor matchers."""

import pytest


class TestSkillsMatch:
    """Test comma-separated skill matching against job text."""

    def test_empty_skills_score_zero(self):
        """No skills means no skill credit, whatever the job says."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("", "java developer") == 0.0
        assert skills_match(None, "java developer") == 0.0
        assert skills_match(" , ,", "java developer") == 0.0

    def test_exact_match_is_case_insensitive(self):
        """Skills should match verbatim regardless of case."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("Java", "JAVA Engineer") == 1.0

    def test_synonym_earns_partial_credit(self):
        """A related framework in the job text counts half."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("python, sql", "django and postgres") == pytest.approx(0.25)

    def test_reverse_synonym_lookup(self):
        """A job mentioning a table key links back to skills listed under it."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("typescript", "angular developer") == pytest.approx(0.5)

    def test_high_match_is_boosted(self):
        """Scores above 0.7 are boosted by 10%."""
        from recommender.scoring.matchers import skills_match

        score = skills_match(
            "java, spring, docker, kubernetes", "java spring docker developer"
        )
        assert score == pytest.approx(0.825)

    def test_boost_is_capped(self):
        """Boosted scores never exceed 1.0."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("java, react", "java react") == 1.0

    def test_missing_job_text(self):
        """A missing job text matches nothing."""
        from recommender.scoring.matchers import skills_match

        assert skills_match("java", None) == 0.0

    def test_matched_skills_preserves_input_order(self):
        """matched_skills lists verbatim hits in the user's order."""
        from recommender.scoring.matchers import matched_skills

        assert matched_skills("Java, React, SQL", "react and java") == ["java", "react"]


class TestLocationMatch:
    """Test preferred location scoring."""

    def test_identical_locations(self):
        from recommender.scoring.matchers import location_match

        assert location_match("Remote", "Remote") == 1.0
        assert location_match(" remote ", "REMOTE") == 1.0

    def test_missing_location(self):
        from recommender.scoring.matchers import location_match

        assert location_match(None, "NYC") == 0.0
        assert location_match("NYC", None) == 0.0

    def test_blank_location_counts_as_missing(self):
        """An empty or whitespace location scores like a missing one."""
        from recommender.scoring.matchers import location_match

        assert location_match("Remote", "") == 0.0
        assert location_match("Remote", "   ") == 0.0
        assert location_match("", "Remote") == 0.0

    def test_containment(self):
        """One location inside the other scores 0.7."""
        from recommender.scoring.matchers import location_match

        assert location_match("New York", "New York, NY") == 0.7

    def test_word_overlap(self):
        """Shared words longer than two letters score proportionally."""
        from recommender.scoring.matchers import location_match

        assert location_match("San Francisco Bay", "Francisco Area") == pytest.approx(
            1 / 3
        )

    def test_no_overlap(self):
        from recommender.scoring.matchers import location_match

        assert location_match("Berlin", "Tokyo") == 0.0


class TestJobTypeMatch:
    """Test job type scoring against descriptions."""

    def test_type_named_in_description(self):
        from recommender.scoring.matchers import job_type_match

        assert job_type_match("Full-time", "This is a full-time role") == 1.0

    def test_type_keyword_in_description(self):
        """A keyword from the type table scores 0.8."""
        from recommender.scoring.matchers import job_type_match

        assert job_type_match("full-time", "Permanent position") == 0.8

    def test_no_keyword(self):
        from recommender.scoring.matchers import job_type_match

        assert job_type_match("contract", "Permanent role") == 0.0

    def test_unknown_type(self):
        """Types outside the table only match verbatim."""
        from recommender.scoring.matchers import job_type_match

        assert job_type_match("internship", "great team") == 0.0

    def test_missing_description(self):
        from recommender.scoring.matchers import job_type_match

        assert job_type_match("remote", None) == 0.0


class TestExperienceMatch:
    """Test experience level matching."""

    def test_same_level(self):
        from recommender.scoring.matchers import experience_match

        assert experience_match("Senior engineer", "Looking for a senior developer") == 1.0

    def test_adjacent_level(self):
        from recommender.scoring.matchers import experience_match

        assert experience_match("junior developer", "mid-level role") == 0.6

    def test_distant_level_keeps_floor(self):
        from recommender.scoring.matchers import experience_match

        assert experience_match("junior", "Senior manager position") == 0.3

    def test_undetectable_level_keeps_floor(self):
        from recommender.scoring.matchers import experience_match

        assert experience_match("10 years", "great team") == 0.3

    def test_missing_input(self):
        from recommender.scoring.matchers import experience_match

        assert experience_match(None, "senior") == 0.0
        assert experience_match("senior", None) == 0.0

    def test_job_levels_use_job_keywords(self):
        """Job descriptions detect levels from their own keyword table."""
        from recommender.scoring.matchers import experience_levels

        assert experience_levels("0-2 years required", for_job=True) == {"entry"}
        assert experience_levels("engineering manager", for_job=True) == {"senior"}
        assert experience_levels("engineering manager") == frozenset()

    def test_text_can_carry_several_levels(self):
        from recommender.scoring.matchers import experience_levels

        assert experience_levels("junior to mid") == {"entry", "mid"}


class TestTextSimilarity:
    """Test Jaccard similarity of long words."""

    def test_overlap(self):
        from recommender.scoring.matchers import text_similarity

        score = text_similarity(
            "Python developer building data pipelines", "Data pipelines in Python"
        )
        assert score == pytest.approx(0.6)

    def test_short_words_ignored(self):
        """Texts made only of short words have nothing to compare."""
        from recommender.scoring.matchers import text_similarity

        assert text_similarity("a b c", "xyz") == 0.0

    def test_missing_text(self):
        from recommender.scoring.matchers import text_similarity

        assert text_similarity(None, "something") == 0.0
