"""Match service for running the resume-to-jobs matching pipeline.

This service handles:
- Attaching embeddings to the resume and jobs
- Batch scoring and ranking
- Filtering and top-N selection of results
"""

import logging
from datetime import date

from jobhunter.config import DEFAULT_TOP_N
from jobhunter.embeddings.vectorizer import embed_job, embed_resume
from jobhunter.matching.filter import apply_filters
from jobhunter.matching.ranker import match_jobs_to_resume
from jobhunter.schemas.job import Job, JobFilter
from jobhunter.schemas.match import MatchResult
from jobhunter.schemas.resume import Resume

logger = logging.getLogger(__name__)


def prepare_resume(resume: Resume) -> Resume:
    """Return the resume with its embedding attached (reused if already present)."""
    if resume.embedding is not None:
        return resume
    return resume.with_embedding(embed_resume(resume))


def prepare_jobs(jobs: list[Job]) -> list[Job]:
    """Return the jobs with embeddings attached (reused if already present)."""
    return [job if job.embedding is not None else job.with_embedding(embed_job(job)) for job in jobs]


def match_resume(
    resume: Resume,
    jobs: list[Job],
    filters: JobFilter | None = None,
    top_n: int | None = DEFAULT_TOP_N,
    today: date | None = None,
) -> list[MatchResult]:
    """Run the full matching pipeline for a resume.

    Pipeline:
    1. Attach embeddings to resume and jobs
    2. Score and rank every job
    3. Apply result filters (minimum score, job criteria)
    4. Keep the top N

    Args:
        resume: Parsed candidate resume.
        jobs: Candidate job postings.
        filters: Optional criteria applied to the ranked results.
        top_n: Number of results to return (None for all).
        today: Date substituted for "present" in work history.

    Returns:
        Ranked MatchResult objects.
    """
    if not jobs:
        logger.warning("No jobs to match against")
        return []

    logger.info(f"Preparing embeddings for resume and {len(jobs)} jobs...")
    resume = prepare_resume(resume)
    jobs = prepare_jobs(jobs)

    logger.info("Scoring jobs...")
    ranked = match_jobs_to_resume(resume, jobs, today=today)

    filtered = apply_filters(ranked, filters)
    if len(filtered) != len(ranked):
        logger.info(f"{len(filtered)} of {len(ranked)} results passed filters")

    if top_n is not None:
        filtered = filtered[:top_n]

    if filtered:
        logger.info(f"Selected {len(filtered)} matches (best score {filtered[0].score})")
    else:
        logger.info("No matches passed filters")

    return filtered
