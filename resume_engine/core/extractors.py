"""
Entry Extractors - turn the lines of one section into structured entries.

Experience and project extraction share one accumulation strategy: a line is
either an entry header, which closes the open entry and starts a new one, or
a detail line, which is folded into the open entry. Detail lines seen before
the first header have no entry to join and are dropped.
"""

from dataclasses import dataclass, field
from typing import Optional
import re

from .models import (
    ExperienceEntry,
    ProjectEntry,
    EducationEntry,
    PersonalInfo,
)
from .skills import SkillExtractor


@dataclass
class _DraftExperience:
    company: str
    title: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    description: list[str] = field(default_factory=list)
    technologies: set[str] = field(default_factory=set)

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(
            company=self.company,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            current=self.current,
            description=tuple(self.description),
            technologies=tuple(sorted(self.technologies)),
        )


@dataclass
class _DraftProject:
    name: str
    description: list[str] = field(default_factory=list)
    technologies: set[str] = field(default_factory=set)
    url: Optional[str] = None

    def build(self) -> ProjectEntry:
        return ProjectEntry(
            name=self.name,
            description=" ".join(self.description),
            technologies=tuple(sorted(self.technologies)),
            url=self.url,
        )


class ExperienceExtractor:
    """Extracts work experience entries from the experience section."""

    COMPANY_PREFIX = re.compile(r"^(company|inc|llc|technologies|software|systems)", re.IGNORECASE)
    ROLE_KEYWORD = re.compile(r"(developer|engineer|architect|lead|manager)", re.IGNORECASE)
    MONTH_YEAR = re.compile(
        r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+\d{4}",
        re.IGNORECASE,
    )
    CURRENT = re.compile(r"\b(present|current)\b", re.IGNORECASE)

    def __init__(self, skill_extractor: SkillExtractor):
        self.skill_extractor = skill_extractor

    def is_header(self, line: str) -> bool:
        """Check if a line opens a new experience entry."""
        return bool(
            self.COMPANY_PREFIX.search(line)
            or "|" in line
            or self.ROLE_KEYWORD.search(line)
        )

    def extract(self, lines: list[str]) -> tuple[ExperienceEntry, ...]:
        entries = []
        current: Optional[_DraftExperience] = None

        for line in lines:
            if self.is_header(line):
                if current is not None and current.company:
                    entries.append(current.build())
                current = self._start_entry(line)
            elif current is not None and line.strip():
                current.description.append(line.strip())
                current.technologies.update(self.skill_extractor.extract(line))

        if current is not None and current.company:
            entries.append(current.build())

        return tuple(entries)

    def _start_entry(self, line: str) -> _DraftExperience:
        parts = [p.strip() for p in line.split("|")]
        draft = _DraftExperience(
            company=parts[0],
            title=parts[1] if len(parts) > 1 else "",
        )

        dates = [m.group(0) for m in self.MONTH_YEAR.finditer(line)]
        if dates:
            draft.start_date = dates[0]
        if len(dates) > 1:
            draft.end_date = dates[1]
        draft.current = bool(self.CURRENT.search(line))

        return draft


class ProjectExtractor:
    """Extracts project entries from the projects section."""

    NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z\s]{2,}$")
    SENTENCE_END = re.compile(r"[.!?]$")
    URL_PATTERN = re.compile(r"https?://\S+|(?:www\.)?github\.com/[\w./-]+", re.IGNORECASE)

    def __init__(self, skill_extractor: SkillExtractor):
        self.skill_extractor = skill_extractor

    def is_header(self, line: str) -> bool:
        """Check if a line looks like a project name rather than a sentence."""
        return bool(
            self.NAME_PATTERN.match(line)
            and 3 < len(line) < 50
            and not self.SENTENCE_END.search(line)
        )

    def extract(self, lines: list[str]) -> tuple[ProjectEntry, ...]:
        entries = []
        current: Optional[_DraftProject] = None

        for line in lines:
            if self.is_header(line):
                if current is not None and current.name:
                    entries.append(current.build())
                current = _DraftProject(name=line.strip())
            elif current is not None:
                current.description.append(line.strip())
                current.technologies.update(self.skill_extractor.extract(line))
                if current.url is None:
                    current.url = self._find_url(line)

        if current is not None and current.name:
            entries.append(current.build())

        return tuple(entries)

    def _find_url(self, line: str) -> Optional[str]:
        match = self.URL_PATTERN.search(line)
        if not match:
            return None
        return match.group(0).rstrip(".,;)")


class EducationExtractor:
    """Extracts education entries, pairing an institution with the degree line after it."""

    INSTITUTION = re.compile(
        r"(university|college|institute|bachelor|master|ph\.?d|\b[bm]\.?sc?\b)",
        re.IGNORECASE,
    )
    DEGREE = re.compile(r"(bachelor|master|ph\.?d|\b[bm]\.?sc?\b)", re.IGNORECASE)

    def extract(self, lines: list[str]) -> tuple[EducationEntry, ...]:
        entries = []
        i = 0

        while i < len(lines):
            line = lines[i]
            if self.INSTITUTION.search(line):
                degree = ""
                if i + 1 < len(lines) and self.DEGREE.search(lines[i + 1]):
                    degree = lines[i + 1].strip()
                    i += 1
                entries.append(EducationEntry(institution=line.strip(), degree=degree))
            i += 1

        return tuple(entries)


class PersonalInfoExtractor:
    """Extracts contact details from the top of a resume."""

    EMAIL = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
    PHONE = re.compile(r"(?<![\w(+])(?:\+\d{1,2}\s?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")
    LINKEDIN = re.compile(r"linkedin\.com/in/[A-Za-z0-9-]+", re.IGNORECASE)
    GITHUB = re.compile(r"github\.com/[A-Za-z0-9-]+", re.IGNORECASE)
    NOT_A_NAME = re.compile(r"@|\.com|https?:|resume|curriculum|\bcv\b", re.IGNORECASE)

    def extract(self, text: str, headers=None) -> Optional[PersonalInfo]:
        """
        Extract contact fields from the leading block of a resume.

        Args:
            text: The first lines of the resume, newline-joined
            headers: Optional callable telling whether a line is a section header

        Returns:
            PersonalInfo with the fields found, or None if nothing was found
        """
        info = PersonalInfo(
            name=self._extract_name(text, headers),
            email=self._first(self.EMAIL, text),
            phone=self._first(self.PHONE, text),
            linkedin=self._first(self.LINKEDIN, text),
            github=self._first(self.GITHUB, text),
        )
        return info if info.has_contact() else None

    @staticmethod
    def _first(pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(0) if match else None

    def _extract_name(self, text: str, headers=None) -> Optional[str]:
        for line in text.split("\n"):
            line = line.strip()
            if not line:
                continue
            if line.lower().startswith("name:"):
                return line.split(":", 1)[1].strip() or None
            if headers is not None and headers(line):
                # The contact block ends where the sections begin
                return None
            if self.NOT_A_NAME.search(line):
                continue

            words = line.split()
            if 1 <= len(words) <= 4 and all(
                re.sub(r"[.'-]", "", w).isalpha() for w in words
            ):
                return line

        return None
