"""
Section Splitter - partitions resume lines into labeled sections.

The splitter is a two-state accumulator: before the first recognized header
it is outside any section and lines are left unassigned; after a header it
appends every following non-header line to that section until the next
header. Re-opening a section clears what it held before.
"""

import re
from typing import Optional


SUMMARY = "summary"
SKILLS = "skills"
EXPERIENCE = "experience"
PROJECTS = "projects"
EDUCATION = "education"
CERTIFICATIONS = "certifications"
LANGUAGES = "languages"


class SectionSplitter:
    """Splits resume lines into canonical sections by header matching."""

    # Checked in order, first match wins
    HEADER_PATTERNS = (
        (re.compile(r"^(summary|profile|about)", re.IGNORECASE), SUMMARY),
        (re.compile(r"^(skills|technologies|tech stack)", re.IGNORECASE), SKILLS),
        (re.compile(r"^(experience|work experience|employment)", re.IGNORECASE), EXPERIENCE),
        (re.compile(r"^(projects|personal projects)", re.IGNORECASE), PROJECTS),
        (re.compile(r"^(education|academic|qualifications)", re.IGNORECASE), EDUCATION),
        (re.compile(r"^(certifications|certificates)", re.IGNORECASE), CERTIFICATIONS),
        (re.compile(r"^(languages)", re.IGNORECASE), LANGUAGES),
    )

    def detect_header(self, line: str) -> Optional[str]:
        """Return the canonical section a header line opens, or None."""
        for pattern, name in self.HEADER_PATTERNS:
            if pattern.match(line):
                return name
        return None

    def split(self, lines: list[str]) -> dict[str, list[str]]:
        """
        Split lines into sections.

        Args:
            lines: Non-blank lines of the resume, in document order

        Returns:
            Mapping of canonical section name to its trimmed lines; sections
            never seen are absent
        """
        sections: dict[str, list[str]] = {}
        current: Optional[str] = None

        for line in lines:
            trimmed = line.strip()
            if not trimmed:
                continue

            header = self.detect_header(trimmed)
            if header is not None:
                current = header
                sections[current] = []
            elif current is not None:
                sections[current].append(trimmed)

        return sections
