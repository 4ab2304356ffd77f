"""
Resume Engine - the four operations offered to the rest of the product.

    parse_resume(raw_text)             -> StructuredResume
    score_resume(resume)               -> ScoreBreakdown
    score_match(resume, job)           -> MatchScore
    rank_matches(resume, jobs, limit)  -> list[MatchScore]

None of them raise for bad resume or posting content; the evaluate_*
variants return an Outcome that says whether a fallback value was used.
"""

from datetime import datetime
from typing import Callable, Optional, TYPE_CHECKING
import logging

from .models import (
    JobPosting,
    MatchScore,
    Outcome,
    ScoreBreakdown,
    StructuredResume,
)
from .vocabulary import Vocabulary
from .resume_parser import ResumeParser
from .ats_scorer import AtsScorer
from .matcher import JobMatcher, MatchRanker, utc_now

if TYPE_CHECKING:
    from resume_engine.utils.config import Config


class ResumeEngine:
    """Owns one vocabulary and the components built from it."""

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        max_workers: int = 8,
        parallel: bool = True,
        default_limit: int = MatchRanker.DEFAULT_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the engine.

        Args:
            vocabulary: Term catalogs shared by every component
            max_workers: Thread pool size used when ranking
            parallel: Whether ranking scores postings concurrently
            default_limit: Result count when rank_matches gets no limit
            clock: Source of "now" for posting recency
        """
        self.vocabulary = vocabulary or Vocabulary.default()
        self.default_limit = default_limit
        self.logger = logging.getLogger(self.__class__.__name__)

        self.parser = ResumeParser(self.vocabulary)
        self.scorer = AtsScorer(self.vocabulary)
        self.matcher = JobMatcher(self.vocabulary, clock=clock)
        self.ranker = MatchRanker(self.matcher, max_workers=max_workers, parallel=parallel)

    @classmethod
    def from_config(cls, config: "Config") -> "ResumeEngine":
        """Build an engine from the matching and vocabulary config sections."""
        vocabulary = Vocabulary.default().extended(
            extra_skills=config.get("vocabulary.extra_skills", []),
            extra_industry_keywords=config.get("vocabulary.extra_industry_keywords", []),
        )
        return cls(
            vocabulary=vocabulary,
            max_workers=int(config.get("matching.max_workers", 8)),
            parallel=bool(config.get("matching.parallel", True)),
            default_limit=int(config.get("matching.default_limit", MatchRanker.DEFAULT_LIMIT)),
        )

    def parse_resume(self, raw_text: str) -> StructuredResume:
        return self.parser.parse_text(raw_text)

    def score_resume(self, resume: StructuredResume) -> ScoreBreakdown:
        return self.evaluate_resume(resume).value

    def evaluate_resume(self, resume: StructuredResume) -> Outcome[ScoreBreakdown]:
        return self.scorer.evaluate(resume)

    def score_match(self, resume: StructuredResume, job: JobPosting) -> MatchScore:
        return self.evaluate_match(resume, job).value

    def evaluate_match(self, resume: StructuredResume, job: JobPosting) -> Outcome[MatchScore]:
        return self.matcher.evaluate(resume, job)

    def rank_matches(
        self,
        resume: StructuredResume,
        jobs: list[JobPosting],
        limit: Optional[int] = None,
    ) -> list[MatchScore]:
        return self.ranker.rank(resume, jobs, self.default_limit if limit is None else limit)

    def extract_job_skills(self, description: str) -> tuple[str, ...]:
        """Lexicon skills mentioned in a job description, for ingestion."""
        return self.parser.extract_skills(description or "")


_default_engine: Optional[ResumeEngine] = None


def default_engine() -> ResumeEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = ResumeEngine()
    return _default_engine


def parse_resume(raw_text: str) -> StructuredResume:
    return default_engine().parse_resume(raw_text)


def score_resume(resume: StructuredResume) -> ScoreBreakdown:
    return default_engine().score_resume(resume)


def score_match(resume: StructuredResume, job: JobPosting) -> MatchScore:
    return default_engine().score_match(resume, job)


def rank_matches(
    resume: StructuredResume,
    jobs: list[JobPosting],
    limit: int = MatchRanker.DEFAULT_LIMIT,
) -> list[MatchScore]:
    return default_engine().rank_matches(resume, jobs, limit)
