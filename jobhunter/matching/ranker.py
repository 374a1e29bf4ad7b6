"""Batch matching and ranking of jobs for one resume."""

from datetime import date

import numpy as np

from jobhunter.embeddings.vectorizer import compute_similarities_batch, embed_job, embed_resume
from jobhunter.matching.composer import calculate_match
from jobhunter.matching.skills import DEFAULT_SKILL_CATEGORIES, SkillCategories
from jobhunter.schemas.job import Job
from jobhunter.schemas.match import MatchResult
from jobhunter.schemas.resume import Resume


def match_jobs_to_resume(
    resume: Resume,
    jobs: list[Job],
    top_n: int | None = None,
    categories: SkillCategories = DEFAULT_SKILL_CATEGORIES,
    today: date | None = None,
) -> list[MatchResult]:
    """Score every job against a resume and rank the results.

    Args:
        resume: Candidate resume.
        jobs: Job postings to score.
        top_n: Maximum number of results to return (None for all).
        categories: Skill category table for related-skill matching.
        today: Date substituted for "present" in work history.

    Returns:
        MatchResult objects sorted by score descending. Jobs with equal
        scores keep their input order.
    """
    results = [calculate_match(resume, job, categories, today) for job in jobs]

    # list.sort is stable, so ties keep input order
    results.sort(key=lambda r: r.score, reverse=True)

    if top_n is not None:
        results = results[:top_n]

    return results


def rank_by_similarity(resume: Resume, jobs: list[Job]) -> list[tuple[Job, float]]:
    """Order jobs by embedding similarity to a resume.

    Embeddings already attached to the resume or jobs are reused; missing
    ones are generated on the fly.

    Args:
        resume: Candidate resume.
        jobs: Job postings to compare.

    Returns:
        List of (job, similarity) tuples sorted by similarity descending.
    """
    if not jobs:
        return []

    resume_embedding = (
        np.asarray(resume.embedding) if resume.embedding is not None else embed_resume(resume)
    )
    job_embeddings = np.vstack([
        np.asarray(job.embedding) if job.embedding is not None else embed_job(job)
        for job in jobs
    ])

    similarities = compute_similarities_batch(resume_embedding, job_embeddings)

    ranked = [(job, float(score)) for job, score in zip(jobs, similarities)]
    ranked.sort(key=lambda pair: pair[1], reverse=True)
    return ranked
