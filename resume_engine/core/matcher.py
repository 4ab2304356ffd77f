"""
Job Matcher - Scoring algorithm for matching job postings to resumes.

Calculates four sub-scores (0-100):
- Skill match: share of the posting's required skills found on the resume
- Keyword score: share of description keywords that also appear in the resume
- Experience score: how closely past roles resemble the posting's title
- Recency score: how recently the job was posted
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from typing import Callable, Optional
import logging
import re

from .models import (
    ExperienceEntry,
    JobPosting,
    MatchBreakdown,
    MatchScore,
    Outcome,
    OutcomeStatus,
    StructuredResume,
)
from .scoring import clamp_score, weighted_total
from .vocabulary import Vocabulary


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JobMatcher:
    """Scores how well a resume fits a job posting."""

    WEIGHTS = {
        "skill_match": 0.60,
        "keyword_score": 0.25,
        "experience_score": 0.10,
        "recency_score": 0.05,
    }

    NEUTRAL_SCORE = 50
    NO_EXPERIENCE_SCORE = 30

    # (max age in days, score), checked in order
    RECENCY_STEPS = ((7, 100), (14, 80), (30, 60), (60, 40))
    STALE_SCORE = 20

    ALL_SKILLS_BONUS = 20

    WORD_SPLIT = re.compile(r"\W+")

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.vocabulary = vocabulary or Vocabulary.default()
        self.clock = clock
        self.logger = logging.getLogger(self.__class__.__name__)

    def validate(self, job: JobPosting) -> None:
        """Reject postings that break the caller's contract."""
        if job.title is None:
            raise ValueError(f"Job posting {job.id} has no title")

    def match_job(self, resume: StructuredResume, job: JobPosting) -> MatchScore:
        """Calculate the match score; a zero score if matching fails."""
        return self.evaluate(resume, job).value

    def evaluate(self, resume: StructuredResume, job: JobPosting) -> Outcome[MatchScore]:
        self.validate(job)

        try:
            skill_match, matched, missing = self._calculate_skill_match(
                resume.skills, job.required_skills
            )
            scores = {
                "skill_match": skill_match,
                "keyword_score": self._calculate_keyword_score(resume.text, job.description),
                "experience_score": self._calculate_experience_score(resume.experience, job.title),
                "recency_score": self._calculate_recency_score(job.posted_at),
            }
            rounded = {name: clamp_score(value) for name, value in scores.items()}
            match = MatchScore(
                job_id=job.id,
                score=weighted_total(rounded, self.WEIGHTS),
                breakdown=MatchBreakdown(**rounded),
                matched_skills=matched,
                missing_skills=missing,
            )
        except Exception as e:
            self.logger.error(f"Error calculating match score for job {job.id}: {e}", exc_info=True)
            return Outcome(
                value=MatchScore(job_id=job.id),
                status=OutcomeStatus.DEGRADED,
                error=str(e),
            )

        return Outcome(value=match)

    def _calculate_skill_match(
        self, resume_skills, job_skills
    ) -> tuple[float, tuple[str, ...], tuple[str, ...]]:
        """Partition required skills into matched/missing and score the share matched."""
        if not job_skills:
            return self.NEUTRAL_SCORE, (), ()

        user_skills_lower = {s.lower() for s in resume_skills}

        matched = tuple(s for s in job_skills if s.lower() in user_skills_lower)
        missing = tuple(s for s in job_skills if s.lower() not in user_skills_lower)

        percentage = len(matched) / len(job_skills) * 100
        bonus = self.ALL_SKILLS_BONUS if len(matched) == len(job_skills) else 0

        return min(100, percentage + bonus), matched, missing

    def _tokenize(self, text: str) -> set[str]:
        return {w for w in self.WORD_SPLIT.split(text.lower()) if len(w) > 3}

    def _calculate_keyword_score(self, resume_text: str, description: str) -> float:
        if not description:
            return self.NEUTRAL_SCORE

        resume_words = self._tokenize(resume_text or "")
        description_words = {
            w for w in self._tokenize(description) if w not in self.vocabulary.stop_words
        }

        if not description_words:
            return self.NEUTRAL_SCORE

        matched = description_words & resume_words
        return min(100, len(matched) / len(description_words) * 100)

    def _calculate_experience_score(
        self, experience: tuple[ExperienceEntry, ...], job_title: str
    ) -> float:
        if not experience:
            return self.NO_EXPERIENCE_SCORE

        title_keywords = [w for w in self.WORD_SPLIT.split(job_title.lower()) if w]
        if not title_keywords:
            return self.NO_EXPERIENCE_SCORE

        max_relevance = 0.0

        for exp in experience:
            if exp.title:
                title_words = [w for w in self.WORD_SPLIT.split(exp.title.lower()) if w]
                overlap = sum(
                    1 for word in title_keywords
                    if any(tw in word or word in tw for tw in title_words)
                )
                max_relevance = max(max_relevance, overlap / len(title_keywords) * 100)

            if exp.description:
                description = " ".join(exp.description).lower()
                found = sum(1 for word in title_keywords if word in description)
                # Description evidence counts half
                max_relevance = max(max_relevance, found / len(title_keywords) * 50)

        return min(100, max_relevance)

    def _calculate_recency_score(self, posted_at: Optional[datetime]) -> float:
        if posted_at is None:
            return self.NEUTRAL_SCORE

        if posted_at.tzinfo is None:
            posted_at = posted_at.replace(tzinfo=timezone.utc)

        age_days = (self.clock() - posted_at).total_seconds() // 86400

        for max_days, score in self.RECENCY_STEPS:
            if age_days <= max_days:
                return score
        return self.STALE_SCORE


class MatchRanker:
    """Applies the job matcher across many postings and keeps the best."""

    DEFAULT_LIMIT = 20

    def __init__(
        self,
        matcher: JobMatcher,
        max_workers: int = 8,
        parallel: bool = True,
    ):
        self.matcher = matcher
        self.max_workers = max(1, max_workers)
        self.parallel = parallel
        self.logger = logging.getLogger(self.__class__.__name__)

    def rank(
        self,
        resume: StructuredResume,
        jobs: list[JobPosting],
        limit: int = DEFAULT_LIMIT,
    ) -> list[MatchScore]:
        """
        Rank job postings by match score.

        Args:
            resume: The resume to match
            jobs: Candidate postings, already filtered by the caller
            limit: Maximum number of results

        Returns:
            Match scores sorted by score descending; equal scores keep the
            order the postings were given in
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        jobs = list(jobs)
        for job in jobs:
            self.matcher.validate(job)

        if self.parallel and len(jobs) > 1:
            matches = self._match_parallel(resume, jobs)
        else:
            matches = [self.matcher.match_job(resume, job) for job in jobs]

        # sorted() is stable under reverse=True
        ranked = sorted(matches, key=lambda m: m.score, reverse=True)

        self.logger.info(f"Ranked {len(jobs)} jobs, returning top {min(limit, len(ranked))}")
        return ranked[:limit]

    def _match_parallel(self, resume: StructuredResume, jobs: list[JobPosting]) -> list[MatchScore]:
        """Score postings on a thread pool, keeping input order."""
        results: list[Optional[MatchScore]] = [None] * len(jobs)

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(jobs))) as executor:
            futures = {
                executor.submit(self.matcher.match_job, resume, job): index
                for index, job in enumerate(jobs)
            }

            for future in as_completed(futures):
                results[futures[future]] = future.result()

        return results
