"""
Resume Parser - turns raw resume text into a StructuredResume.

Supports plain text and markdown resumes, and JSON files holding an already
structured resume. PDF/DOCX decoding happens upstream of this package.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .models import Outcome, OutcomeStatus, StructuredResume
from .vocabulary import Vocabulary
from .skills import SkillExtractor
from .sections import (
    SectionSplitter,
    SUMMARY,
    SKILLS,
    EXPERIENCE,
    PROJECTS,
    EDUCATION,
    CERTIFICATIONS,
    LANGUAGES,
)
from .extractors import (
    ExperienceExtractor,
    ProjectExtractor,
    EducationExtractor,
    PersonalInfoExtractor,
)


class ResumeParser:
    """Parses resume text into structured sections and entries."""

    # Lines searched for contact details
    CONTACT_ZONE_LINES = 10

    LIST_SEPARATORS = (",", "|", "•", ";")

    def __init__(self, vocabulary: Optional[Vocabulary] = None):
        self.vocabulary = vocabulary or Vocabulary.default()
        self.logger = logging.getLogger(self.__class__.__name__)

        self.skill_extractor = SkillExtractor(self.vocabulary)
        self.splitter = SectionSplitter()
        self.experience_extractor = ExperienceExtractor(self.skill_extractor)
        self.project_extractor = ProjectExtractor(self.skill_extractor)
        self.education_extractor = EducationExtractor()
        self.personal_info_extractor = PersonalInfoExtractor()

    def parse_file(self, file_path: str) -> StructuredResume:
        """Parse a resume file."""
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        extension = path.suffix.lower()

        if extension == ".json":
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return StructuredResume.from_dict(data, vocabulary=self.vocabulary)
        elif extension in [".txt", ".md"]:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
            return self.parse_text(text)
        else:
            raise ValueError(f"Unsupported file format: {extension}")

    def parse_text(self, raw_text: str) -> StructuredResume:
        """Parse raw text; never raises for text content."""
        return self.parse(raw_text).value

    def parse(self, raw_text: str) -> Outcome[StructuredResume]:
        """Parse raw text, reporting whether the fallback path was taken."""
        try:
            resume = self._parse_text_content(raw_text or "")
        except Exception as e:
            self.logger.error(f"Error parsing resume: {e}", exc_info=True)
            return Outcome(
                value=StructuredResume(raw_text=raw_text or ""),
                status=OutcomeStatus.DEGRADED,
                error=str(e),
            )

        self.logger.debug(
            f"Parsed resume: {len(resume.skills)} skills, "
            f"{len(resume.experience)} positions, {len(resume.projects)} projects, "
            f"{len(resume.education)} education entries"
        )
        return Outcome(value=resume)

    def extract_skills(self, text: str) -> tuple[str, ...]:
        """Find lexicon skills in any text, e.g. a job description."""
        return self.skill_extractor.extract(text)

    def _parse_text_content(self, text: str) -> StructuredResume:
        lines = [line for line in text.splitlines() if line.strip()]
        sections = self.splitter.split(lines)

        summary = None
        if SUMMARY in sections:
            summary = " ".join(sections[SUMMARY]).strip() or None

        skills = ()
        if SKILLS in sections:
            skills = self.skill_extractor.extract(" ".join(sections[SKILLS]))

        personal_info = self.personal_info_extractor.extract(
            "\n".join(lines[:self.CONTACT_ZONE_LINES]),
            headers=self.splitter.detect_header,
        )

        return StructuredResume(
            personal_info=personal_info,
            summary=summary,
            skills=skills,
            experience=self.experience_extractor.extract(sections.get(EXPERIENCE, [])),
            projects=self.project_extractor.extract(sections.get(PROJECTS, [])),
            education=self.education_extractor.extract(sections.get(EDUCATION, [])),
            certifications=tuple(sections.get(CERTIFICATIONS, [])),
            languages=self._split_list(sections.get(LANGUAGES, [])),
            raw_text=text,
        )

    def _split_list(self, lines: list[str]) -> tuple[str, ...]:
        """Split list-style lines ("English, Spanish | French") into items."""
        items = []
        for line in lines:
            for separator in self.LIST_SEPARATORS:
                line = line.replace(separator, "\n")
            items.extend(item.strip() for item in line.split("\n") if item.strip())
        return tuple(items)
