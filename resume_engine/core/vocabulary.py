"""
Vocabulary - the fixed term catalogs every component reads.

A Vocabulary is built once and handed to each component at construction
time; nothing in the engine reads these lists from module state directly.
"""

from dataclasses import dataclass, replace
from typing import Iterable
import re


# Characters the token cleaner keeps; lexicon entries made only of these can
# be matched token by token, anything else needs the substring scan.
_TOKEN_SAFE = re.compile(r"^[\w.#+]+$")


@dataclass(frozen=True)
class Vocabulary:
    """Immutable catalogs of skills, keywords and verbs."""

    skills: frozenset
    industry_keywords: frozenset
    action_verbs: frozenset
    high_demand_skills: tuple
    stop_words: frozenset

    @property
    def compound_skills(self) -> tuple[str, ...]:
        """Lexicon entries that can only be found as raw substrings."""
        return tuple(sorted(s for s in self.skills if not _TOKEN_SAFE.match(s)))

    def is_skill(self, term: str) -> bool:
        return term.lower() in self.skills

    def extended(
        self,
        extra_skills: Iterable[str] = (),
        extra_industry_keywords: Iterable[str] = (),
    ) -> "Vocabulary":
        """Return a copy with additional skill and industry terms."""
        return replace(
            self,
            skills=self.skills | {s.strip().lower() for s in extra_skills if s.strip()},
            industry_keywords=self.industry_keywords | {
                k.strip().lower() for k in extra_industry_keywords if k.strip()
            },
        )

    @classmethod
    def default(cls) -> "Vocabulary":
        return cls(
            skills=frozenset(_SKILLS),
            industry_keywords=frozenset(_INDUSTRY_KEYWORDS),
            action_verbs=frozenset(_ACTION_VERBS),
            high_demand_skills=_HIGH_DEMAND_SKILLS,
            stop_words=frozenset(_STOP_WORDS),
        )


_SKILLS = (
    # Languages
    "javascript", "typescript", "python", "java", "c#", "c++", "ruby", "php",
    "go", "rust", "swift", "kotlin",
    # Frameworks and libraries
    "react", "angular", "vue", "node.js", "express", "django", "flask",
    "spring", "asp.net", "redux", "mobx", "graphql",
    # Web
    "html", "css", "sass", "less", "tailwind", "bootstrap", "material-ui",
    "rest", "api",
    # Data
    "database", "sql", "postgresql", "mysql", "mongodb", "firebase", "supabase",
    # Cloud and ops
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "serverless",
    "lambda", "vercel", "netlify", "heroku", "render",
    # Tooling
    "git", "github", "gitlab", "bitbucket", "jira", "confluence", "vscode",
    "webpack", "babel", "eslint", "jest", "mocha", "chai", "cypress",
    "selenium", "storybook",
    # Design
    "figma", "sketch", "adobe xd", "photoshop", "illustrator",
    # Practices
    "agile", "scrum", "kanban", "tdd", "ci/cd", "devops", "frontend",
    "backend", "fullstack", "responsive design", "cross-browser",
    "performance", "accessibility", "seo", "security", "authentication",
    "authorization", "jwt", "oauth", "websockets", "microservices",
)

_INDUSTRY_KEYWORDS = (
    "agile", "scrum", "git", "version control", "ci/cd", "testing",
    "debugging", "optimization", "performance", "scalability", "security",
    "authentication", "api", "rest", "graphql", "database", "cloud", "aws",
    "azure", "docker", "kubernetes", "microservices", "architecture",
    "design patterns", "algorithms", "data structures",
)

_ACTION_VERBS = (
    "developed", "built", "created", "designed", "implemented", "engineered",
    "architected", "delivered", "launched", "deployed", "managed", "led",
    "coordinated", "collaborated", "improved", "optimized", "enhanced",
    "refactored", "debugged", "tested", "validated", "analyzed", "researched",
    "documented", "mentored", "trained", "presented", "communicated",
    "negotiated", "achieved", "exceeded", "reduced", "increased",
    "accelerated", "streamlined", "automated", "spearheaded", "pioneered",
    "championed", "orchestrated",
)

_HIGH_DEMAND_SKILLS = ("react", "node.js", "python", "typescript", "aws", "docker")

_STOP_WORDS = (
    "the", "and", "for", "with", "this", "that", "from", "your", "have",
    "will", "work", "team", "role", "position", "job", "company",
    "experience", "skills",
)
