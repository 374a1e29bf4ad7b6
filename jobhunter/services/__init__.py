"""Service layer for JobHunter operations."""

from jobhunter.services.match_service import (
    match_resume,
    prepare_jobs,
    prepare_resume,
)

__all__ = [
    "match_resume",
    "prepare_jobs",
    "prepare_resume",
]
