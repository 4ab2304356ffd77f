"""
Core data models for the resume analysis engine.

All values are immutable and computed fresh per request.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar
import uuid

from .vocabulary import Vocabulary


T = TypeVar("T")


class OutcomeStatus(Enum):
    """Whether a computation finished normally or fell back to a default."""
    OK = "ok"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """A result plus the path that produced it."""
    value: T
    status: OutcomeStatus = OutcomeStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK

    @property
    def degraded(self) -> bool:
        return self.status is OutcomeStatus.DEGRADED


def _sorted_unique(values) -> tuple[str, ...]:
    return tuple(sorted(set(values)))


def _known_skills(values, vocabulary: Vocabulary) -> tuple[str, ...]:
    return _sorted_unique(v.lower() for v in values if vocabulary.is_skill(v))


@dataclass(frozen=True)
class PersonalInfo:
    """Contact details found in the leading lines of a resume."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None

    def has_contact(self) -> bool:
        """A name alone is not contact information."""
        return any((self.email, self.phone, self.linkedin, self.github))

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "linkedin": self.linkedin,
            "github": self.github,
        }
        return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class ExperienceEntry:
    """One job held."""
    company: str
    title: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    description: tuple[str, ...] = ()
    technologies: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        data = {
            "company": self.company,
            "title": self.title,
            "description": list(self.description),
            "technologies": list(self.technologies),
        }
        if self.start_date:
            data["startDate"] = self.start_date
        if self.end_date:
            data["endDate"] = self.end_date
        if self.current:
            data["current"] = True
        return data


@dataclass(frozen=True)
class ProjectEntry:
    """One project built."""
    name: str
    description: str = ""
    technologies: tuple[str, ...] = ()
    url: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "description": self.description,
            "technologies": list(self.technologies),
        }
        if self.url:
            data["url"] = self.url
        return data


@dataclass(frozen=True)
class EducationEntry:
    """One educational credential."""
    institution: str
    degree: str = ""

    def to_dict(self) -> dict:
        return {"institution": self.institution, "degree": self.degree}


@dataclass(frozen=True)
class StructuredResume:
    """Normalized, section-decomposed resume."""
    personal_info: Optional[PersonalInfo] = None
    summary: Optional[str] = None
    skills: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    projects: tuple[ProjectEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    certifications: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    raw_text: str = field(default="", compare=False, repr=False)

    @property
    def text(self) -> str:
        """The source text, or one rebuilt from the structured fields."""
        if self.raw_text:
            return self.raw_text

        parts = [self.summary or ""]
        parts.extend(self.skills)
        for exp in self.experience:
            parts.extend([exp.company, exp.title])
            parts.extend(exp.description)
        for project in self.projects:
            parts.extend([project.name, project.description])
        for edu in self.education:
            parts.extend([edu.institution, edu.degree])
        return "\n".join(p for p in parts if p)

    def to_dict(self) -> dict:
        data = {
            "skills": list(self.skills),
            "experience": [e.to_dict() for e in self.experience],
            "projects": [p.to_dict() for p in self.projects],
            "education": [e.to_dict() for e in self.education],
        }
        if self.personal_info is not None:
            data["personalInfo"] = self.personal_info.to_dict()
        if self.summary:
            data["summary"] = self.summary
        if self.certifications:
            data["certifications"] = list(self.certifications)
        if self.languages:
            data["languages"] = list(self.languages)
        return data

    @classmethod
    def from_dict(
        cls,
        data: dict,
        raw_text: str = "",
        vocabulary: Optional[Vocabulary] = None,
    ) -> "StructuredResume":
        """
        Build a resume from its persisted JSON shape.

        Skills and technologies outside the vocabulary are dropped, as the
        parser would never have produced them.
        """
        vocabulary = vocabulary or Vocabulary.default()
        info_data = data.get("personalInfo") or {}
        personal_info = PersonalInfo(
            name=info_data.get("name"),
            email=info_data.get("email"),
            phone=info_data.get("phone"),
            linkedin=info_data.get("linkedin"),
            github=info_data.get("github"),
        )

        experience = tuple(
            ExperienceEntry(
                company=exp.get("company", ""),
                title=exp.get("title", ""),
                start_date=exp.get("startDate"),
                end_date=exp.get("endDate"),
                current=bool(exp.get("current", False)),
                description=tuple(exp.get("description") or ()),
                technologies=_known_skills(exp.get("technologies") or (), vocabulary),
            )
            for exp in data.get("experience", [])
        )
        projects = tuple(
            ProjectEntry(
                name=proj.get("name", ""),
                description=proj.get("description", ""),
                technologies=_known_skills(proj.get("technologies") or (), vocabulary),
                url=proj.get("url"),
            )
            for proj in data.get("projects", [])
        )
        education = tuple(
            EducationEntry(
                institution=edu.get("institution", ""),
                degree=edu.get("degree", ""),
            )
            for edu in data.get("education", [])
        )

        return cls(
            personal_info=personal_info if personal_info.has_contact() else None,
            summary=data.get("summary") or None,
            skills=_known_skills(data.get("skills", []), vocabulary),
            experience=experience,
            projects=projects,
            education=education,
            certifications=tuple(data.get("certifications") or ()),
            languages=tuple(data.get("languages") or ()),
            raw_text=raw_text or data.get("rawText", ""),
        )


@dataclass(frozen=True)
class JobPosting:
    """A job posting, consumed read-only."""
    title: str
    description: str = ""
    required_skills: tuple[str, ...] = ()
    posted_at: Optional[datetime] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    company: str = ""
    location: str = ""
    url: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "description": self.description,
            "requiredSkills": list(self.required_skills),
            "postedAt": self.posted_at.isoformat() if self.posted_at else None,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        posted_at = data.get("postedAt") or data.get("posted_at")
        if isinstance(posted_at, str):
            posted_at = datetime.fromisoformat(posted_at.replace("Z", "+00:00"))

        kwargs = {}
        if data.get("id") is not None:
            kwargs["id"] = str(data["id"])

        return cls(
            title=data.get("title"),
            description=data.get("description") or "",
            required_skills=tuple(data.get("requiredSkills") or data.get("required_skills") or ()),
            posted_at=posted_at,
            company=data.get("company", ""),
            location=data.get("location", ""),
            url=data.get("url", ""),
            **kwargs,
        )


@dataclass(frozen=True)
class ScoreBreakdown:
    """Six-factor ATS score, every field an integer in [0, 100]."""
    skill_match: int = 0
    project_strength: int = 0
    experience_relevance: int = 0
    resume_structure: int = 0
    keyword_density: int = 0
    action_verbs: int = 0
    total: int = 0

    def to_dict(self) -> dict:
        return {
            "skillMatch": self.skill_match,
            "projectStrength": self.project_strength,
            "experienceRelevance": self.experience_relevance,
            "resumeStructure": self.resume_structure,
            "keywordDensity": self.keyword_density,
            "actionVerbs": self.action_verbs,
            "total": self.total,
        }


@dataclass(frozen=True)
class MatchBreakdown:
    """Four-factor job match sub-scores."""
    skill_match: int = 0
    keyword_score: int = 0
    experience_score: int = 0
    recency_score: int = 0

    def to_dict(self) -> dict:
        return {
            "skillMatch": self.skill_match,
            "keywordScore": self.keyword_score,
            "experienceScore": self.experience_score,
            "recencyScore": self.recency_score,
        }


@dataclass(frozen=True)
class MatchScore:
    """Fit between one resume and one job posting."""
    job_id: str
    score: int = 0
    breakdown: MatchBreakdown = field(default_factory=MatchBreakdown)
    matched_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "jobId": self.job_id,
            "score": self.score,
            "breakdown": self.breakdown.to_dict(),
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
        }
