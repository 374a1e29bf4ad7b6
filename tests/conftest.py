"""Shared pytest fixtures for all tests."""

import json
from datetime import date

import pytest

SAMPLE_RESUME_TEXT = """\
Jane Smith
jane.smith@email.com | (555) 123-4567 | Austin, TX

SUMMARY
Backend engineer who enjoys building reliable APIs and data pipelines.

EXPERIENCE
Software Engineer | Initech | Austin | 2019 - 2022
- Built REST APIs in Python and Django
- Maintained PostgreSQL databases and Docker deployments
Backend Developer @ Globex, Remote, Jan 2022 - Present
- Migrated services to AWS and Kubernetes

EDUCATION
B.Sc. Computer Science | University of Texas | 2019

SKILLS
Python, Django, PostgreSQL, Docker, AWS, Kubernetes, Git, Agile

CERTIFICATIONS
AWS Certified Developer
"""

SAMPLE_JOBS = [
    {
        "id": "job-1",
        "title": "Backend Engineer",
        "company": "Initrode",
        "location": "Austin, TX",
        "locationType": "onsite",
        "seniority": "mid",
        "jobType": "full-time",
        "description": "Build Python services with Django and PostgreSQL.",
        "requirements": ["Python experience", "Django knowledge"],
        "skills": ["Python", "Django", "PostgreSQL"],
        "postedDate": "2026-10-10",
        "applicationUrl": "https://example.com/jobs/1",
        "source": "test",
    },
    {
        "id": "job-2",
        "title": "iOS Developer",
        "company": "Appsy",
        "location": "Paris, France",
        "locationType": "onsite",
        "seniority": "executive",
        "jobType": "contract",
        "description": "Ship native iOS apps in Swift.",
        "requirements": ["Swift expertise", "Xcode mastery"],
        "skills": ["Swift", "Objective-C", "Xcode", "CoreData"],
        "postedDate": "2026-09-01",
        "source": "test",
    },
    {
        "id": "job-3",
        "title": "Platform Engineer",
        "company": "Cloudy",
        "location": "Anywhere",
        "locationType": "remote",
        "seniority": "senior",
        "jobType": "full-time",
        "description": "Operate Kubernetes clusters on AWS.",
        "requirements": ["Kubernetes operations"],
        "skills": ["Kubernetes", "AWS", "Terraform"],
        "postedDate": "2026-10-15",
        "source": "test",
    },
]


@pytest.fixture
def today():
    """Fixed reference date so 'Present' resolves deterministically."""
    return date(2026, 10, 17)


@pytest.fixture
def resume_file(tmp_path):
    """Write the sample resume to a text file."""
    path = tmp_path / "resume.txt"
    path.write_text(SAMPLE_RESUME_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def jobs_file(tmp_path):
    """Write the sample jobs to a JSON file."""
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps(SAMPLE_JOBS), encoding="utf-8")
    return path
