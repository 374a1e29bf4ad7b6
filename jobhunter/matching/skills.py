"""Skill overlap scoring with category-based relatedness."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from jobhunter.config import NEUTRAL_SKILL_SCORE

RELATED_SUFFIX = " (related)"


@dataclass(frozen=True)
class SkillCategories:
    """Ordered, immutable table of skill categories.

    Each category maps to a set of lowercase skill names. Iteration order is
    the order the categories were given in.
    """

    entries: tuple[tuple[str, frozenset[str]], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "SkillCategories":
        return cls(
            entries=tuple(
                (name, frozenset(skill.lower() for skill in skills))
                for name, skills in mapping.items()
            )
        )

    def __iter__(self) -> Iterator[tuple[str, frozenset[str]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def categories_of(self, skill: str) -> list[str]:
        """Return names of all categories containing the skill, in table order."""
        skill_lower = skill.lower()
        return [name for name, skills in self.entries if skill_lower in skills]


DEFAULT_SKILL_CATEGORIES = SkillCategories.from_mapping({
    "frontend": [
        "react", "vue", "angular", "svelte", "next.js", "nuxt", "html", "css",
        "sass", "tailwind", "bootstrap", "javascript", "typescript",
    ],
    "backend": [
        "node.js", "express", "django", "flask", "spring", "rails", "laravel",
        "graphql", "rest", "python", "java", "go", "rust", "php",
    ],
    "database": [
        "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "dynamodb",
        "firebase", "supabase", "sql",
    ],
    "cloud": ["aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins", "ci/cd"],
    "data": [
        "machine learning", "deep learning", "tensorflow", "pytorch", "pandas",
        "numpy", "spark", "data science",
    ],
    "mobile": ["react native", "flutter", "swift", "kotlin", "ios", "android"],
    "design": ["figma", "sketch", "adobe xd", "ui/ux", "design systems"],
})


@dataclass(frozen=True)
class SkillMatch:
    """Outcome of comparing candidate skills to a job's skills."""

    score: float
    matched: list[str]
    missing: list[str]


def match_skills(
    resume_skills: list[str],
    job_skills: list[str],
    categories: SkillCategories = DEFAULT_SKILL_CATEGORIES,
) -> SkillMatch:
    """Compare candidate skills against the skills a job asks for.

    Exact matches are case-insensitive and reported verbatim. A job skill the
    candidate lacks still counts as matched, suffixed with "(related)", when
    it sits in a category where the candidate holds some other skill.

    Args:
        resume_skills: Candidate's skills.
        job_skills: Skills listed by the job.
        categories: Category table used for the relatedness fallback.

    Returns:
        SkillMatch with an unrounded 0-100 score and the matched and missing
        skills in job order. A job without skills scores a neutral 50.
    """
    candidate_skills = {skill.lower() for skill in resume_skills}

    matched = []
    missing = []

    for skill in job_skills:
        skill_lower = skill.lower()
        if skill_lower in candidate_skills:
            matched.append(skill)
            continue

        related = any(
            skill_lower in category_skills and not category_skills.isdisjoint(candidate_skills)
            for _, category_skills in categories
        )
        if related:
            matched.append(skill + RELATED_SUFFIX)
        else:
            missing.append(skill)

    if job_skills:
        score = len(matched) / len(job_skills) * 100
    else:
        score = NEUTRAL_SKILL_SCORE

    return SkillMatch(score=score, matched=matched, missing=missing)
