"""
Unit tests for the job matcher.
"""

import unittest
from datetime import timedelta

from resume_engine.core.matcher import JobMatcher
from resume_engine.core.models import MatchBreakdown, OutcomeStatus
from resume_engine.core.scoring import clamp_score
from tests.samples import NOW, days_ago, engineer, fixed_clock, make_job, make_resume


class TestSkillMatch(unittest.TestCase):
    """Test the required-skill partition."""

    def setUp(self):
        self.matcher = JobMatcher(clock=fixed_clock)

    def test_partial_match(self):
        resume = make_resume(skills=["python", "react"])
        job = make_job(required_skills=["python", "react", "aws"])

        match = self.matcher.match_job(resume, job)

        self.assertEqual(match.matched_skills, ("python", "react"))
        self.assertEqual(match.missing_skills, ("aws",))
        self.assertEqual(match.breakdown.skill_match, 67)

    def test_all_skills_get_bonus(self):
        resume = make_resume(skills=["go", "docker"])
        job = make_job(required_skills=["go", "docker"])
        self.assertEqual(self.matcher.match_job(resume, job).breakdown.skill_match, 100)

    def test_no_required_skills_is_neutral(self):
        match = self.matcher.match_job(make_resume(skills=["python"]), make_job())
        self.assertEqual(match.breakdown.skill_match, 50)
        self.assertEqual(match.matched_skills, ())
        self.assertEqual(match.missing_skills, ())

    def test_partition_keeps_job_casing_and_order(self):
        resume = make_resume(skills=["python", "aws"])
        job = make_job(required_skills=["AWS", "Kubernetes", "Python", "Go"])

        match = self.matcher.match_job(resume, job)

        self.assertEqual(match.matched_skills, ("AWS", "Python"))
        self.assertEqual(match.missing_skills, ("Kubernetes", "Go"))
        self.assertEqual(
            sorted(match.matched_skills + match.missing_skills),
            sorted(job.required_skills),
        )


class TestKeywordScore(unittest.TestCase):
    """Test description keyword overlap."""

    def setUp(self):
        self.matcher = JobMatcher(clock=fixed_clock)

    def test_overlap(self):
        resume = make_resume(raw_text="Python and Django with Redis")
        job = make_job(description="python django postgres redis kafka")
        self.assertEqual(self.matcher.match_job(resume, job).breakdown.keyword_score, 60)

    def test_empty_description_is_neutral(self):
        match = self.matcher.match_job(make_resume(raw_text="python"), make_job())
        self.assertEqual(match.breakdown.keyword_score, 50)

    def test_only_stop_words_is_neutral(self):
        job = make_job(description="The team and the job")
        match = self.matcher.match_job(make_resume(raw_text="python"), job)
        self.assertEqual(match.breakdown.keyword_score, 50)

    def test_short_words_ignored(self):
        job = make_job(description="api sql python")
        match = self.matcher.match_job(make_resume(raw_text="api sql"), job)
        self.assertEqual(match.breakdown.keyword_score, 0)

    def test_rebuilt_text_used_without_raw_text(self):
        resume = make_resume(summary="Python and Django")
        job = make_job(description="python django")
        self.assertEqual(self.matcher.match_job(resume, job).breakdown.keyword_score, 100)


class TestExperienceScore(unittest.TestCase):
    """Test role similarity against the posting title."""

    def setUp(self):
        self.matcher = JobMatcher(clock=fixed_clock)

    def _score(self, experience, title):
        resume = make_resume(experience=experience)
        return self.matcher.match_job(resume, make_job(title=title)).breakdown.experience_score

    def test_title_overlap(self):
        self.assertEqual(self._score([engineer("Python Developer")], "Senior Python Developer"), 67)

    def test_description_counts_half(self):
        exp = engineer("Barista", description=["Wrote python tools"])
        self.assertEqual(self._score([exp], "Python Developer"), 25)

    def test_best_entry_wins(self):
        experience = [engineer("Barista"), engineer("Python Developer")]
        self.assertEqual(self._score(experience, "Python Developer"), 100)

    def test_no_experience(self):
        self.assertEqual(self._score([], "Python Developer"), 30)

    def test_title_without_words(self):
        self.assertEqual(self._score([engineer()], "!!!"), 30)


class TestRecencyScore(unittest.TestCase):
    """Test posting age steps."""

    def setUp(self):
        self.matcher = JobMatcher(clock=fixed_clock)

    def _score(self, posted_at):
        job = make_job(posted_at=posted_at)
        return self.matcher.match_job(make_resume(), job).breakdown.recency_score

    def test_steps(self):
        cases = [
            (0, 100), (3, 100), (7, 100), (8, 80), (14, 80),
            (15, 60), (30, 60), (45, 40), (60, 40), (61, 20), (365, 20),
        ]
        for days, expected in cases:
            with self.subTest(days=days):
                self.assertEqual(self._score(days_ago(days)), expected)

    def test_unknown_date_is_neutral(self):
        self.assertEqual(self._score(None), 50)

    def test_future_posting(self):
        self.assertEqual(self._score(days_ago(-2)), 100)

    def test_naive_datetime_treated_as_utc(self):
        self.assertEqual(self._score(days_ago(45).replace(tzinfo=None)), 40)

    def test_partial_days_are_truncated(self):
        self.assertEqual(self._score(NOW - timedelta(days=7, hours=23)), 100)


class TestJobMatcher(unittest.TestCase):
    """Test the combined score and error paths."""

    def setUp(self):
        self.matcher = JobMatcher(clock=fixed_clock)

    def test_weighted_total(self):
        resume = make_resume(skills=["go", "docker"])
        job = make_job(required_skills=["go", "docker"])

        match = self.matcher.match_job(resume, job)

        # 100 * 0.60 + 50 * 0.25 + 30 * 0.10 + 50 * 0.05
        self.assertEqual(match.score, 78)
        self.assertEqual(match.job_id, job.id)
        self.assertEqual(
            match.breakdown,
            MatchBreakdown(skill_match=100, keyword_score=50, experience_score=30, recency_score=50),
        )

    def test_score_matches_breakdown_fields(self):
        required = ["python", "react", "aws", "docker", "go", "rust", "java"]
        descriptions = ["", "python django postgres", "python services with kafka and redis pipelines"]
        for count in range(1, len(required) + 1):
            for description in descriptions:
                with self.subTest(count=count, description=description):
                    resume = make_resume(
                        skills=["python", "docker"],
                        raw_text="python redis",
                        experience=[engineer("Backend Developer")],
                    )
                    job = make_job(
                        title="Senior Python Developer",
                        required_skills=required[:count],
                        description=description,
                        posted_at=days_ago(count * 9),
                    )
                    match = self.matcher.match_job(resume, job)
                    expected = clamp_score(sum(
                        getattr(match.breakdown, name) * weight
                        for name, weight in JobMatcher.WEIGHTS.items()
                    ))
                    self.assertEqual(match.score, expected, match.breakdown)

    def test_missing_title_is_rejected(self):
        with self.assertRaises(ValueError):
            self.matcher.match_job(make_resume(), make_job(title=None))

    def test_failure_returns_degraded_zero_score(self):
        resume = make_resume(skills=(123,))
        job = make_job(required_skills=["python"])

        with self.assertLogs("JobMatcher", level="ERROR"):
            outcome = self.matcher.evaluate(resume, job)

        self.assertEqual(outcome.status, OutcomeStatus.DEGRADED)
        self.assertEqual(outcome.value.job_id, job.id)
        self.assertEqual(outcome.value.score, 0)
        self.assertEqual(outcome.value.breakdown, MatchBreakdown())


if __name__ == "__main__":
    unittest.main()
