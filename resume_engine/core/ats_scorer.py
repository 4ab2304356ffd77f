"""
ATS Scorer - estimates how well a resume would fare in applicant tracking software.

Calculates six sub-scores (0-100) and a weighted total:
- Skill match: breadth of recognized skills, with a high-demand bonus
- Project strength: detail, tech stack, links and measurable impact
- Experience relevance: role titles, industry keywords, achievements
- Resume structure: presence of key sections and contact details
- Keyword density: share of technical terms, penalizing stuffing
- Action verbs: share of bullets that open with a strong verb
"""

from typing import Optional
import logging
import re

from .models import (
    Outcome,
    OutcomeStatus,
    ProjectEntry,
    ExperienceEntry,
    ScoreBreakdown,
    StructuredResume,
)
from .scoring import clamp_score, weighted_total
from .vocabulary import Vocabulary


class AtsScorer:
    """Scores a structured resume for ATS friendliness."""

    WEIGHTS = {
        "skill_match": 0.40,
        "project_strength": 0.20,
        "experience_relevance": 0.15,
        "resume_structure": 0.10,
        "keyword_density": 0.10,
        "action_verbs": 0.05,
    }

    SECTION_POINTS = {
        "summary": 15,
        "skills": 20,
        "experience": 25,
        "projects": 20,
        "education": 20,
    }
    CONTACT_POINTS = 5

    PERCENTAGE = re.compile(r"\d+%")
    AUDIENCE = re.compile(r"\d+ users|\d+ customers", re.IGNORECASE)
    IMPACT = re.compile(r"reduced|increased|improved|optimized", re.IGNORECASE)
    LEADERSHIP = re.compile(r"led|managed|responsible for", re.IGNORECASE)
    COLLABORATION = re.compile(r"team|collaborated|cross-functional", re.IGNORECASE)

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or Vocabulary.default()
        self.logger = logging.getLogger(self.__class__.__name__)

    def score(self, resume: StructuredResume) -> ScoreBreakdown:
        """Calculate the ATS breakdown; all zeros if scoring fails."""
        return self.evaluate(resume).value

    def evaluate(self, resume: StructuredResume) -> Outcome[ScoreBreakdown]:
        try:
            scores = {
                "skill_match": self._calculate_skill_match(resume.skills),
                "project_strength": self._calculate_project_strength(resume.projects),
                "experience_relevance": self._calculate_experience_relevance(resume.experience),
                "resume_structure": self._calculate_resume_structure(resume),
                "keyword_density": self._calculate_keyword_density(resume),
                "action_verbs": self._calculate_action_verbs(resume),
            }
            # The total is taken over the reported integer sub-scores
            rounded = {name: clamp_score(value) for name, value in scores.items()}
            breakdown = ScoreBreakdown(total=weighted_total(rounded, self.WEIGHTS), **rounded)
        except Exception as e:
            self.logger.error(f"Error calculating ATS score: {e}", exc_info=True)
            return Outcome(value=ScoreBreakdown(), status=OutcomeStatus.DEGRADED, error=str(e))

        self.logger.debug(f"ATS score {breakdown.total}: {breakdown.to_dict()}")
        return Outcome(value=breakdown)

    def _calculate_skill_match(self, skills) -> float:
        """More skills score higher up to 70, plus 30 for any high-demand skill."""
        if not skills:
            return 0

        base_score = min(len(skills) * 5, 70)
        has_high_demand = any(
            demand in skill.lower()
            for demand in self.vocabulary.high_demand_skills
            for skill in skills
        )
        bonus = 30 if has_high_demand else 0

        return min(100, base_score + bonus)

    def _calculate_project_strength(self, projects: tuple[ProjectEntry, ...]) -> float:
        if not projects:
            return 0

        total_score = 0.0
        for project in projects:
            total_score += self._score_project(project)

        average_score = total_score / len(projects)
        project_count_bonus = min(len(projects) * 5, 20)

        return min(100, average_score + project_count_bonus)

    def _score_project(self, project: ProjectEntry) -> float:
        description = project.description or ""

        score = min(len(description) / 20, 30)
        score += min(len(project.technologies) * 5, 30)

        if project.url:
            score += 20

        if description:
            if self.PERCENTAGE.search(description):
                score += 10
            if self.AUDIENCE.search(description):
                score += 10
            if self.IMPACT.search(description):
                score += 10

        return min(score, 100)

    def _calculate_experience_relevance(self, experience: tuple[ExperienceEntry, ...]) -> float:
        if not experience:
            return 0

        total_score = 0.0
        for exp in experience:
            total_score += self._score_experience(exp)

        return total_score / len(experience)

    def _score_experience(self, exp: ExperienceEntry) -> float:
        score = 0

        title = (exp.title or "").lower()
        if "developer" in title or "engineer" in title:
            score += 30
        if "senior" in title or "lead" in title:
            score += 20
        if "full stack" in title or "fullstack" in title:
            score += 20

        description = " ".join(exp.description).lower()
        keyword_matches = self._count_industry_keywords(description)
        score += min(keyword_matches * 5, 30)

        if self.PERCENTAGE.search(description):
            score += 10
        if self.LEADERSHIP.search(description):
            score += 10
        if self.COLLABORATION.search(description):
            score += 10

        return min(score, 100)

    def _calculate_resume_structure(self, resume: StructuredResume) -> float:
        score = 0

        if resume.summary:
            score += self.SECTION_POINTS["summary"]
        if resume.skills:
            score += self.SECTION_POINTS["skills"]
        if resume.experience:
            score += self.SECTION_POINTS["experience"]
        if resume.projects:
            score += self.SECTION_POINTS["projects"]
        if resume.education:
            score += self.SECTION_POINTS["education"]

        info = resume.personal_info
        if info is not None:
            for value in (info.email, info.phone, info.linkedin, info.github):
                if value:
                    score += self.CONTACT_POINTS

        return min(100, score)

    def _calculate_keyword_density(self, resume: StructuredResume) -> float:
        """Score keyword share, best between 20% and 30%."""
        parts = [resume.summary or ""]
        parts.extend(resume.skills)
        for exp in resume.experience:
            parts.extend(exp.description)
        for project in resume.projects:
            parts.extend([project.name, project.description])
        all_text = " ".join(parts).lower()

        words = [w for w in all_text.split() if len(w) > 2]
        if not words:
            return 0

        tech_count = sum(1 for w in words if w in self.vocabulary.skills)
        industry_count = self._count_industry_keywords(all_text)
        density = (tech_count + industry_count * 2) / len(words) * 100

        if density < 10:
            return 30
        if density < 20:
            return 60
        if density <= 30:
            return 100
        if density <= 40:
            return 80
        # Keyword stuffing
        return 60

    def _calculate_action_verbs(self, resume: StructuredResume) -> float:
        bullets = []
        for exp in resume.experience:
            bullets.extend(exp.description)
        for project in resume.projects:
            bullets.append(project.description)

        if not bullets:
            return 0

        action_count = 0
        for bullet in bullets:
            words = bullet.lower().split()
            if words and words[0] in self.vocabulary.action_verbs:
                action_count += 1

        percentage = action_count / len(bullets) * 100

        if percentage >= 80:
            return 100
        if percentage >= 60:
            return 80
        if percentage >= 40:
            return 60
        if percentage >= 20:
            return 40
        return 20

    def _count_industry_keywords(self, text: str) -> int:
        return sum(1 for keyword in self.vocabulary.industry_keywords if keyword in text)
