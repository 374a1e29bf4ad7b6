"""Keyword overlap scoring between resume and job text."""

from jobhunter.matching.tokenizer import tokenize
from jobhunter.schemas.job import Job
from jobhunter.schemas.resume import Resume


def resume_keyword_text(resume: Resume) -> str:
    """Build the candidate-side text: raw resume text plus skills."""
    return f"{resume.raw_text} {' '.join(resume.skills)}"


def job_keyword_text(job: Job) -> str:
    """Build the job-side text: description, requirements and skills."""
    return f"{job.description} {' '.join(job.requirements)} {' '.join(job.skills)}"


def calculate_keyword_score(resume_text: str, job_text: str) -> float:
    """Compute the share of job tokens that also occur in the resume.

    Repeated job tokens count once per occurrence.

    Args:
        resume_text: Candidate-side text.
        job_text: Job-side text.

    Returns:
        Unrounded score in 0-100; 0 when the job text has no tokens.
    """
    job_tokens = tokenize(job_text)
    if not job_tokens:
        return 0.0

    resume_tokens = set(tokenize(resume_text))
    match_count = sum(1 for token in job_tokens if token in resume_tokens)

    return match_count / len(job_tokens) * 100


def score_keywords(resume: Resume, job: Job) -> float:
    """Keyword overlap score for a resume and job."""
    return calculate_keyword_score(resume_keyword_text(resume), job_keyword_text(job))
