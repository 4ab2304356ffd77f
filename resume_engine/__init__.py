"""
Resume Engine - Resume analysis and job matching

This package:
1. Parses raw resume text into a structured profile
2. Scores the profile for applicant-tracking-system friendliness
3. Scores the fit between a resume and a job posting
4. Ranks a set of job postings for one resume
"""

from resume_engine.core.engine import (
    ResumeEngine,
    parse_resume,
    score_resume,
    score_match,
    rank_matches,
)

__version__ = "1.0.0"

__all__ = [
    "ResumeEngine",
    "parse_resume",
    "score_resume",
    "score_match",
    "rank_matches",
]
