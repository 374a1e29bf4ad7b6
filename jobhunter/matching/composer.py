"""Weighted score composition and recommendations for a resume/job pair."""

from datetime import date

from jobhunter.config import MAX_RECOMMENDATIONS, SCORE_WEIGHTS
from jobhunter.matching.experience import ExperienceMatch, score_experience
from jobhunter.matching.keywords import score_keywords
from jobhunter.matching.location import score_location
from jobhunter.matching.skills import DEFAULT_SKILL_CATEGORIES, SkillCategories, SkillMatch, match_skills
from jobhunter.schemas.job import Job, Seniority
from jobhunter.schemas.match import MatchBreakdown, MatchResult
from jobhunter.schemas.resume import Resume
from jobhunter.utils import round_score

MAX_NAMED_MISSING_SKILLS = 3
JUNIOR_YEARS_THRESHOLD = 2
WEAK_EXPERIENCE_SCORE = 60

STRONG_MATCH_MESSAGE = (
    "Your profile is a strong match! Customize your cover letter to highlight relevant achievements."
)
PROJECTS_MESSAGE = "Highlight relevant projects, internships, or coursework to strengthen your application."
TAILOR_MESSAGE = "Tailor your resume to include keywords from the job requirements."


def score_seniority(candidate: Seniority, job: Seniority) -> int:
    """Score alignment between the estimated and the declared seniority."""
    if candidate == job:
        return 100
    if abs(candidate.level - job.level) == 1:
        return 70
    return 40


def compute_overall_score(
    skills: float,
    experience: float,
    keywords: float,
    location: float,
    seniority: float,
) -> int:
    """Combine sub-scores with the configured weights.

    Returns:
        Weighted score rounded half-up and clamped to 0-100.
    """
    weighted = (
        skills * SCORE_WEIGHTS["skills"]
        + experience * SCORE_WEIGHTS["experience"]
        + keywords * SCORE_WEIGHTS["keywords"]
        + location * SCORE_WEIGHTS["location"]
        + seniority * SCORE_WEIGHTS["seniority"]
    )
    return round_score(weighted)


def _has_missing_requirement_keyword(resume: Resume, job: Job) -> bool:
    resume_text = resume.raw_text.lower()
    return any(
        requirement.lower().split(" ")[0] not in resume_text
        for requirement in job.requirements
    )


def generate_recommendations(
    resume: Resume,
    job: Job,
    skill_match: SkillMatch,
    experience_match: ExperienceMatch,
) -> list[str]:
    """Build up to three suggestions for strengthening an application.

    Args:
        resume: Candidate resume.
        job: Job posting.
        skill_match: Result of skill matching.
        experience_match: Result of experience scoring.

    Returns:
        Suggestions in priority order; a single encouragement if none apply.
    """
    recommendations = []

    missing = skill_match.missing
    if 0 < len(missing) <= MAX_NAMED_MISSING_SKILLS:
        recommendations.append(
            f"Consider highlighting or developing these skills: {', '.join(missing)}"
        )
    elif len(missing) > MAX_NAMED_MISSING_SKILLS:
        named = ", ".join(missing[:MAX_NAMED_MISSING_SKILLS])
        remaining = len(missing) - MAX_NAMED_MISSING_SKILLS
        recommendations.append(
            f"This role requires several skills you may want to develop: {named}, and {remaining} more."
        )

    if (
        experience_match.score < WEAK_EXPERIENCE_SCORE
        and experience_match.years < JUNIOR_YEARS_THRESHOLD
    ):
        recommendations.append(PROJECTS_MESSAGE)

    if job.requirements and _has_missing_requirement_keyword(resume, job):
        recommendations.append(TAILOR_MESSAGE)

    if not recommendations:
        recommendations.append(STRONG_MATCH_MESSAGE)

    return recommendations[:MAX_RECOMMENDATIONS]


def calculate_match(
    resume: Resume,
    job: Job,
    categories: SkillCategories = DEFAULT_SKILL_CATEGORIES,
    today: date | None = None,
) -> MatchResult:
    """Score a resume against a single job posting.

    Args:
        resume: Candidate resume.
        job: Job posting.
        categories: Skill category table for related-skill matching.
        today: Date substituted for "present" in work history.

    Returns:
        MatchResult with the overall score, breakdown and recommendations.
    """
    skill_match = match_skills(resume.skills, job.skills, categories)
    experience_match = score_experience(resume, job, today)
    keyword_score = score_keywords(resume, job)
    location_score = score_location(resume, job)
    seniority_score = score_seniority(experience_match.seniority, job.seniority)

    overall = compute_overall_score(
        skills=skill_match.score,
        experience=experience_match.score,
        keywords=keyword_score,
        location=location_score,
        seniority=seniority_score,
    )

    return MatchResult(
        job=job,
        score=overall,
        breakdown=MatchBreakdown(
            skills_match=round_score(skill_match.score),
            experience_match=round_score(experience_match.score),
            keyword_match=round_score(keyword_score),
            location_match=round_score(location_score),
            seniority_match=round_score(seniority_score),
        ),
        matched_skills=skill_match.matched,
        missing_skills=skill_match.missing,
        experience_relevance=experience_match.relevance,
        recommendations=generate_recommendations(resume, job, skill_match, experience_match),
    )
