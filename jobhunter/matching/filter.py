"""Deterministic filters for jobs and match results."""

from datetime import UTC, datetime, timedelta

from jobhunter.schemas.job import Job, JobFilter
from jobhunter.schemas.match import MatchResult

POSTED_WITHIN_WINDOWS = {
    "24h": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}


def _contains_any(text: str, needles: list[str]) -> bool:
    text_lower = text.lower()
    return any(needle.lower() in text_lower for needle in needles)


def _parse_posted_date(value: str) -> datetime | None:
    try:
        posted = datetime.fromisoformat(value)
    except ValueError:
        return None
    if posted.tzinfo is None:
        posted = posted.replace(tzinfo=UTC)
    return posted


def is_posted_within(job: Job, posted_within: str | None, now: datetime) -> bool:
    """Check whether a job was posted inside the requested window.

    Jobs whose posting date cannot be parsed are kept.
    """
    window = POSTED_WITHIN_WINDOWS.get(posted_within or "all")
    if window is None:
        return True

    posted = _parse_posted_date(job.posted_date)
    if posted is None:
        return True
    return now - posted <= window


def job_matches_filter(job: Job, filters: JobFilter, now: datetime | None = None) -> bool:
    """Check a single job against every job-level criterion in filters.

    Args:
        job: Job posting to check.
        filters: Criteria to apply; empty criteria are ignored.
        now: Reference time for the posted-within window (defaults to now).

    Returns:
        True if the job passes all criteria.
    """
    if filters.roles and not _contains_any(job.title, filters.roles):
        return False

    if filters.locations and not _contains_any(job.location, filters.locations):
        return False

    if filters.location_type and job.location_type not in filters.location_type:
        return False

    # Salary bounds only exclude jobs that advertise the opposite bound
    if filters.salary_min is not None and job.salary and job.salary.max:
        if job.salary.max < filters.salary_min:
            return False
    if filters.salary_max is not None and job.salary and job.salary.min:
        if job.salary.min > filters.salary_max:
            return False

    if filters.seniority and job.seniority not in filters.seniority:
        return False

    if filters.job_type and job.job_type not in filters.job_type:
        return False

    if filters.companies and not _contains_any(job.company, filters.companies):
        return False

    if filters.keywords:
        job_text = f"{job.title} {job.description} {' '.join(job.skills)}"
        if not _contains_any(job_text, filters.keywords):
            return False

    if filters.sources and job.source not in filters.sources:
        return False

    return is_posted_within(job, filters.posted_within, now or datetime.now(UTC))


def filter_jobs(
    jobs: list[Job],
    filters: JobFilter | None,
    now: datetime | None = None,
) -> list[Job]:
    """Keep jobs passing all job-level criteria, preserving order.

    Args:
        jobs: Jobs to filter.
        filters: Criteria to apply (None keeps everything).
        now: Reference time for the posted-within window.

    Returns:
        List of jobs matching the criteria.
    """
    if filters is None:
        return jobs
    now = now or datetime.now(UTC)
    return [job for job in jobs if job_matches_filter(job, filters, now)]


def apply_filters(
    results: list[MatchResult],
    filters: JobFilter | None,
    now: datetime | None = None,
) -> list[MatchResult]:
    """Apply the minimum score and all job-level criteria to match results.

    Args:
        results: Match results, typically already ranked.
        filters: Criteria to apply (None keeps everything).
        now: Reference time for the posted-within window.

    Returns:
        Results passing all criteria, in their original order.
    """
    if filters is None:
        return results

    now = now or datetime.now(UTC)
    filtered = []
    for result in results:
        if filters.min_match_score is not None and result.score < filters.min_match_score:
            continue
        if job_matches_filter(result.job, filters, now):
            filtered.append(result)
    return filtered
