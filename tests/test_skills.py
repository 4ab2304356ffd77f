"""
Unit tests for skill extraction and the vocabulary.
"""

import unittest

from resume_engine.core.skills import SkillExtractor
from resume_engine.core.vocabulary import Vocabulary


class TestSkillExtractor(unittest.TestCase):
    """Test lexicon lookups over free text."""

    def setUp(self):
        self.extractor = SkillExtractor(Vocabulary.default())

    def test_case_insensitive_and_deduplicated(self):
        skills = self.extractor.extract("React, react and REACT")
        self.assertEqual(skills, ("react",))

    def test_symbol_tokens(self):
        skills = self.extractor.extract("C++ | C# | Node.js • ASP.NET")
        self.assertEqual(skills, ("asp.net", "c#", "c++", "node.js"))

    def test_sorted_output(self):
        skills = self.extractor.extract("Python, Docker, AWS")
        self.assertEqual(skills, ("aws", "docker", "python"))

    def test_multi_word_and_punctuated_entries(self):
        skills = self.extractor.extract("Responsive Design with CI/CD and Material-UI")
        self.assertIn("responsive design", skills)
        self.assertIn("ci/cd", skills)
        self.assertIn("material-ui", skills)

    def test_trailing_period(self):
        self.assertEqual(self.extractor.extract("Wrote it all in Python."), ("python",))

    def test_parentheses_are_stripped(self):
        self.assertEqual(self.extractor.extract("(Docker)"), ("docker",))

    def test_unknown_words_ignored(self):
        self.assertEqual(self.extractor.extract("Managed a bakery"), ())

    def test_empty_text(self):
        self.assertEqual(self.extractor.extract(""), ())

    def test_compound_entries_match_as_substrings(self):
        # Raw substring match, even inside a longer word
        skills = self.extractor.extract("adobe xdesign")
        self.assertIn("adobe xd", skills)


class TestVocabulary(unittest.TestCase):
    """Test vocabulary construction and substitution."""

    def test_default_contents(self):
        vocabulary = Vocabulary.default()
        self.assertIn("python", vocabulary.skills)
        self.assertIn("microservices", vocabulary.industry_keywords)
        self.assertIn("spearheaded", vocabulary.action_verbs)
        self.assertIn("experience", vocabulary.stop_words)
        self.assertEqual(
            vocabulary.high_demand_skills,
            ("react", "node.js", "python", "typescript", "aws", "docker"),
        )

    def test_is_skill(self):
        vocabulary = Vocabulary.default()
        self.assertTrue(vocabulary.is_skill("Python"))
        self.assertTrue(vocabulary.is_skill("CI/CD"))
        self.assertFalse(vocabulary.is_skill("basket weaving"))

    def test_compound_skills(self):
        compounds = Vocabulary.default().compound_skills
        self.assertIn("ci/cd", compounds)
        self.assertIn("adobe xd", compounds)
        self.assertNotIn("node.js", compounds)
        self.assertNotIn("c++", compounds)

    def test_extended_returns_new_vocabulary(self):
        base = Vocabulary.default()
        extended = base.extended(extra_skills=["Elixir", " "], extra_industry_keywords=["Observability"])
        self.assertIn("elixir", extended.skills)
        self.assertIn("observability", extended.industry_keywords)
        self.assertNotIn("elixir", base.skills)
        self.assertNotIn("", extended.skills)

    def test_substituted_vocabulary(self):
        vocabulary = Vocabulary(
            skills=frozenset({"cobol", "mainframe ops"}),
            industry_keywords=frozenset(),
            action_verbs=frozenset(),
            high_demand_skills=(),
            stop_words=frozenset(),
        )
        extractor = SkillExtractor(vocabulary)
        self.assertEqual(
            extractor.extract("COBOL, Python and Mainframe Ops"),
            ("cobol", "mainframe ops"),
        )


if __name__ == "__main__":
    unittest.main()
