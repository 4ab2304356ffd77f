"""Core models, parsing and scoring for resume analysis."""

from .models import (
    StructuredResume,
    PersonalInfo,
    ExperienceEntry,
    ProjectEntry,
    EducationEntry,
    JobPosting,
    ScoreBreakdown,
    MatchBreakdown,
    MatchScore,
    Outcome,
    OutcomeStatus,
)
from .vocabulary import Vocabulary
from .resume_parser import ResumeParser
from .ats_scorer import AtsScorer
from .matcher import JobMatcher, MatchRanker
from .engine import ResumeEngine

__all__ = [
    "StructuredResume",
    "PersonalInfo",
    "ExperienceEntry",
    "ProjectEntry",
    "EducationEntry",
    "JobPosting",
    "ScoreBreakdown",
    "MatchBreakdown",
    "MatchScore",
    "Outcome",
    "OutcomeStatus",
    "Vocabulary",
    "ResumeParser",
    "AtsScorer",
    "JobMatcher",
    "MatchRanker",
    "ResumeEngine",
]
