"""
Skill Extractor - finds lexicon skills in a fragment of free text.
"""

import re

from .vocabulary import Vocabulary


class SkillExtractor:
    """Extracts lexicon skills from text, case-insensitively."""

    SPLIT_PATTERN = re.compile(r"[\s,|•·;]+")
    CLEAN_PATTERN = re.compile(r"[^\w.#+]")

    def __init__(self, vocabulary: Vocabulary):
        self.vocabulary = vocabulary
        self._compound_skills = vocabulary.compound_skills

    def extract(self, text: str) -> tuple[str, ...]:
        """Return the sorted, deduplicated lexicon skills found in text."""
        if not text:
            return ()

        text_lower = text.lower()
        found = set()

        for word in self.SPLIT_PATTERN.split(text_lower):
            token = self.CLEAN_PATTERN.sub("", word)
            if not token:
                continue
            if self.vocabulary.is_skill(token):
                found.add(token)
            # "Python." at the end of a sentence
            elif self.vocabulary.is_skill(token.rstrip(".")):
                found.add(token.rstrip("."))

        # Multi-word and punctuated entries are matched as raw substrings
        for skill in self._compound_skills:
            if skill in text_lower:
                found.add(skill)

        return tuple(sorted(found))
