"""JSON-file job source and job list helpers."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from jobhunter.matching.filter import filter_jobs
from jobhunter.schemas.job import Job, JobFilter

logger = logging.getLogger(__name__)


def _normalize_posting(posting: dict) -> dict:
    """Normalize a raw posting dict so it validates against the Job schema.

    Args:
        posting: Raw posting dict from a job feed.

    Returns:
        Normalized posting dict ready for the Job model.
    """
    normalized = posting.copy()

    # Some feeds nest the location; schema expects a string
    location = normalized.get("location")
    if isinstance(location, dict):
        normalized["location"] = location.get("city") or location.get("name") or ""

    # Drop blank optional fields so they read as unknown
    for key, value in posting.items():
        if value is None or value == "":
            if key not in ("location", "description"):
                normalized.pop(key)

    return normalized


def load_jobs_from_file(file_path: Path) -> list[Job]:
    """Load job postings from a JSON file containing a list of posting dicts.

    Postings that fail validation are logged and skipped.

    Args:
        file_path: Path to the JSON file.

    Returns:
        List of valid jobs, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file does not contain a JSON list.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Jobs file not found: {path}")

    with open(path, encoding="utf-8") as f:
        postings = json.load(f)

    if not isinstance(postings, list):
        raise ValueError(f"Jobs file must contain a JSON list: {path}")

    jobs = []
    for index, posting in enumerate(postings):
        if not isinstance(posting, dict):
            logger.warning(f"Skipping non-object job at index {index} in {path}")
            continue
        try:
            jobs.append(Job(**_normalize_posting(posting)))
        except (TypeError, ValidationError) as e:
            logger.warning(f"Skipping invalid job at index {index} in {path}: {e}")

    logger.info(f"Loaded {len(jobs)} of {len(postings)} jobs from {path}")
    return jobs


def deduplicate_jobs(jobs: list[Job]) -> list[Job]:
    """Drop jobs repeating an earlier title and company, ignoring case."""
    seen = set()
    unique = []
    for job in jobs:
        key = f"{job.title.lower()}-{job.company.lower()}"
        if key in seen:
            continue
        seen.add(key)
        unique.append(job)
    return unique


def matches_query(job: Job, query: str) -> bool:
    """Check whether a free-text query appears in a job's title, company, description or skills."""
    if not query.strip():
        return True
    query_lower = query.strip().lower()
    haystack = f"{job.title} {job.company} {job.description} {' '.join(job.skills)}".lower()
    return query_lower in haystack


class JsonFileJobSource:
    """Job source backed by a local JSON file of normalized postings."""

    name = "json-file"

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    def fetch_jobs(self, query: str = "", filters: JobFilter | None = None) -> list[Job]:
        """Return postings matching a query and filter set.

        Args:
            query: Free-text query; empty returns everything.
            filters: Optional job-level criteria.

        Returns:
            De-duplicated list of matching jobs.
        """
        jobs = load_jobs_from_file(self.file_path)
        jobs = [job for job in jobs if matches_query(job, query)]
        jobs = filter_jobs(jobs, filters)
        jobs = deduplicate_jobs(jobs)

        logger.info(f"{self.name}: {len(jobs)} jobs match query {query!r}")
        return jobs
