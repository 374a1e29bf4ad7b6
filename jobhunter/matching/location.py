"""Location compatibility scoring."""

import re

from jobhunter.schemas.job import Job, LocationType
from jobhunter.schemas.resume import Resume

REMOTE_SCORE = 100
SHARED_LOCATION_SCORE = 100
UNKNOWN_LOCATION_HYBRID_SCORE = 70
UNKNOWN_LOCATION_SCORE = 50
HYBRID_SCORE = 60
MISMATCH_SCORE = 30

_PART_SPLIT = re.compile(r"[,\s]+")
MIN_PART_LENGTH = 3


def _location_parts(location: str) -> list[str]:
    return [part for part in _PART_SPLIT.split(location.lower()) if part]


def locations_overlap(resume_location: str, job_location: str) -> bool:
    """Check whether a resume location part appears inside a job location part.

    Parts are split on commas and whitespace; resume parts shorter than three
    characters are ignored so state codes like "CA" do not match everything.
    """
    job_parts = _location_parts(job_location)
    return any(
        len(part) >= MIN_PART_LENGTH and any(part in job_part for job_part in job_parts)
        for part in _location_parts(resume_location)
    )


def score_location(resume: Resume, job: Job) -> int:
    """Score location compatibility between a candidate and a job.

    Rules apply in order: remote jobs always fit; a candidate without a
    location gets a partial score; shared city/state tokens fit; hybrid jobs
    keep some flexibility; anything else scores low.

    Args:
        resume: Candidate resume.
        job: Job posting.

    Returns:
        Score in 0-100.
    """
    if job.location_type == LocationType.REMOTE:
        return REMOTE_SCORE

    if not resume.location:
        if job.location_type == LocationType.HYBRID:
            return UNKNOWN_LOCATION_HYBRID_SCORE
        return UNKNOWN_LOCATION_SCORE

    if locations_overlap(resume.location, job.location):
        return SHARED_LOCATION_SCORE

    if job.location_type == LocationType.HYBRID:
        return HYBRID_SCORE

    return MISMATCH_SCORE
