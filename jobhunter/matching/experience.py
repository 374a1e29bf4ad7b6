"""Years-of-experience estimation and experience-level scoring."""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from jobhunter.config import DEFAULT_EXPERIENCE_YEARS, TITLE_MATCH_BONUS
from jobhunter.schemas.job import Job, Seniority
from jobhunter.schemas.resume import Experience, Resume
from jobhunter.utils import round_half_up

logger = logging.getLogger(__name__)

PRESENT = "present"
MIN_TITLE_WORD_LENGTH = 4

_DATE_FORMATS = (
    "%Y",
    "%Y-%m",
    "%Y/%m",
    "%m/%Y",
    "%m/%d/%Y",
    "%b %Y",
    "%B %Y",
    "%b. %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_MONTH_YEAR_PATTERN = re.compile(r"([A-Za-z]+)\.?,?\s+(\d{4})")
_YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

# (upper bound in years, bucket); anything beyond the last bound is executive
_SENIORITY_THRESHOLDS = (
    (1, Seniority.INTERN),
    (2, Seniority.ENTRY),
    (5, Seniority.MID),
    (8, Seniority.SENIOR),
    (12, Seniority.LEAD),
)

# Score by absolute level difference; 3 or more falls through to the last entry
_LEVEL_DIFF_SCORES = {0: 100, 1: 80, 2: 50}
_FAR_LEVEL_SCORE = 20


@dataclass(frozen=True)
class ExperienceMatch:
    """How a candidate's experience level fits a job."""

    score: int
    relevance: str
    years: float
    seniority: Seniority


def parse_date(value: str, today: date | None = None) -> date | None:
    """Parse a free-form resume date.

    Args:
        value: Date string such as "2020", "Sept 2020", "2020-01-15" or "Present".
        today: Date substituted for "present" (defaults to today).

    Returns:
        Parsed date, or None if the string is not recognised.
    """
    text = value.strip()
    if text.lower() == PRESENT:
        return today or date.today()

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    # Month names matched on their first three letters ("Sept 2019")
    match = _MONTH_YEAR_PATTERN.fullmatch(text)
    if match and match.group(1)[:3].lower() in _MONTHS:
        return date(int(match.group(2)), _MONTHS.index(match.group(1)[:3].lower()) + 1, 1)

    # Leading words that are not months are skipped ("Corp 2015")
    year_match = _YEAR_PATTERN.search(text)
    if year_match:
        return date(int(year_match.group(0)), 1, 1)

    return None


def _entry_years(entry: Experience, today: date | None) -> float:
    if not entry.start_date or not entry.end_date:
        return DEFAULT_EXPERIENCE_YEARS

    start = parse_date(entry.start_date, today)
    end = parse_date(entry.end_date, today)
    if start is None or end is None:
        logger.debug(
            f"Unparseable dates for {entry.title!r}: {entry.start_date!r} - {entry.end_date!r}"
        )
        return 0.0

    return max(0.0, (end - start).days / 365)


def calculate_years_of_experience(
    experience: list[Experience],
    today: date | None = None,
) -> float:
    """Sum years of experience across work-history entries.

    Entries missing a start or end date count as a flat two years. Entries
    with dates that cannot be parsed, or that end before they start,
    contribute nothing.

    Args:
        experience: Work-history entries.
        today: Date substituted for "present" (defaults to today).

    Returns:
        Total years rounded to one decimal.
    """
    total = sum(_entry_years(entry, today) for entry in experience)
    return round_half_up(total, 1)


def estimate_seniority(years: float) -> Seniority:
    """Map years of experience to a seniority bucket."""
    for upper_bound, seniority in _SENIORITY_THRESHOLDS:
        if years < upper_bound:
            return seniority
    return Seniority.EXECUTIVE


def _relevance_sentence(years: float, candidate_level: int, job: Job) -> str:
    level_diff = abs(candidate_level - job.seniority.level)
    overqualified = candidate_level > job.seniority.level
    role = job.seniority.value

    if level_diff == 0:
        return f"Your {years:.1f} years of experience is an excellent match for this {role} position."
    if level_diff == 1:
        if overqualified:
            return (
                f"You may be overqualified with {years:.1f} years of experience "
                f"for this {role} role, but could be a strong candidate."
            )
        return f"This {role} role is a stretch opportunity for your {years:.1f} years of experience."
    if level_diff == 2:
        if overqualified:
            return f"You appear significantly overqualified for this {role} position."
        return f"This {role} role may require more experience than your current {years:.1f} years."
    return f"There's a significant experience gap between your background and this {role} position."


def has_similar_title(resume: Resume, job_title: str) -> bool:
    """Check whether any past job title shares a significant word with job_title."""
    job_words = set(re.split(r"\s+", job_title.lower()))
    for entry in resume.experience:
        title_words = re.split(r"\s+", entry.title.lower())
        if any(len(word) >= MIN_TITLE_WORD_LENGTH and word in job_words for word in title_words):
            return True
    return False


def score_experience(resume: Resume, job: Job, today: date | None = None) -> ExperienceMatch:
    """Score how well the candidate's experience level fits the job.

    Args:
        resume: Candidate resume.
        job: Job posting.
        today: Date substituted for "present" (defaults to today).

    Returns:
        ExperienceMatch with a 0-100 score and a one-sentence explanation.
    """
    years = calculate_years_of_experience(resume.experience, today)
    seniority = estimate_seniority(years)
    level_diff = abs(seniority.level - job.seniority.level)

    score = _LEVEL_DIFF_SCORES.get(level_diff, _FAR_LEVEL_SCORE)
    relevance = _relevance_sentence(years, seniority.level, job)

    if has_similar_title(resume, job.title):
        score = min(100, score + TITLE_MATCH_BONUS)
        relevance += " Your previous job titles are relevant to this role."

    return ExperienceMatch(score=score, relevance=relevance, years=years, seniority=seniority)
