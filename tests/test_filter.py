"""Tests for job and result filters."""

from datetime import UTC, datetime

import pytest

from jobhunter.matching.filter import (
    apply_filters,
    filter_jobs,
    is_posted_within,
    job_matches_filter,
)
from jobhunter.schemas.job import JobFilter
from jobhunter.schemas.match import MatchBreakdown, MatchResult
from tests.test_utils import make_test_job

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)


def make_result(job, score):
    return MatchResult(
        job=job,
        score=score,
        breakdown=MatchBreakdown(
            skills_match=score,
            experience_match=score,
            keyword_match=score,
            location_match=score,
            seniority_match=score,
        ),
        matched_skills=[],
        missing_skills=[],
        experience_relevance="",
        recommendations=[],
    )


class TestJobMatchesFilter:
    def test_empty_filter_matches(self):
        assert job_matches_filter(make_test_job(), JobFilter(), NOW)

    def test_roles_substring_case_insensitive(self):
        job = make_test_job(title="Senior Backend Engineer")
        assert job_matches_filter(job, JobFilter(roles=["backend"]), NOW)
        assert not job_matches_filter(job, JobFilter(roles=["designer"]), NOW)

    def test_locations(self):
        job = make_test_job(location="Austin, TX")
        assert job_matches_filter(job, JobFilter(locations=["austin", "denver"]), NOW)
        assert not job_matches_filter(job, JobFilter(locations=["denver"]), NOW)

    def test_location_type(self):
        job = make_test_job(location_type="hybrid")
        assert job_matches_filter(job, JobFilter(location_type=["remote", "hybrid"]), NOW)
        assert not job_matches_filter(job, JobFilter(location_type=["remote"]), NOW)

    def test_seniority_and_job_type(self):
        job = make_test_job(seniority="senior", job_type="contract")
        assert job_matches_filter(job, JobFilter(seniority=["Senior"], job_type=["contract"]), NOW)
        assert not job_matches_filter(job, JobFilter(job_type=["full-time"]), NOW)

    def test_companies(self):
        job = make_test_job(company="Globex Corporation")
        assert job_matches_filter(job, JobFilter(companies=["globex"]), NOW)
        assert not job_matches_filter(job, JobFilter(companies=["initech"]), NOW)

    def test_keywords_search_title_description_and_skills(self):
        job = make_test_job(title="Engineer", description="Build APIs", skills=["Terraform"])
        assert job_matches_filter(job, JobFilter(keywords=["terraform"]), NOW)
        assert job_matches_filter(job, JobFilter(keywords=["apis"]), NOW)
        assert not job_matches_filter(job, JobFilter(keywords=["haskell"]), NOW)

    def test_sources_exact(self):
        job = make_test_job(source="remoteok")
        assert job_matches_filter(job, JobFilter(sources=["remoteok"]), NOW)
        assert not job_matches_filter(job, JobFilter(sources=["remote"]), NOW)

    def test_salary_min_excludes_lower_max(self):
        job = make_test_job(salary={"min": 50000, "max": 80000})
        assert not job_matches_filter(job, JobFilter(salary_min=100000), NOW)
        assert job_matches_filter(job, JobFilter(salary_min=70000), NOW)

    def test_salary_max_excludes_higher_min(self):
        job = make_test_job(salary={"min": 150000})
        assert not job_matches_filter(job, JobFilter(salary_max=120000), NOW)

    def test_salary_bounds_ignore_jobs_without_salary(self):
        job = make_test_job()
        assert job_matches_filter(job, JobFilter(salary_min=100000, salary_max=10), NOW)


class TestIsPostedWithin:
    @pytest.mark.parametrize(
        "posted_date,window,expected",
        [
            ("2026-10-17T00:00:00Z", "24h", True),
            ("2026-10-15", "24h", False),
            ("2026-10-12", "7d", True),
            ("2026-10-01", "7d", False),
            ("2026-10-01", "30d", True),
            ("2026-08-01", "30d", False),
            ("2020-01-01", "all", True),
            ("2020-01-01", None, True),
        ],
    )
    def test_windows(self, posted_date, window, expected):
        job = make_test_job(posted_date=posted_date)
        assert is_posted_within(job, window, NOW) is expected

    def test_unparseable_date_is_kept(self):
        job = make_test_job(posted_date="last week")
        assert is_posted_within(job, "24h", NOW)


class TestFilterJobs:
    def test_none_filter_keeps_all(self):
        jobs = [make_test_job("1"), make_test_job("2")]
        assert filter_jobs(jobs, None) == jobs

    def test_preserves_order(self):
        jobs = [
            make_test_job("1", "Backend Engineer"),
            make_test_job("2", "Designer"),
            make_test_job("3", "Backend Lead"),
        ]

        result = filter_jobs(jobs, JobFilter(roles=["backend"]), NOW)

        assert [job.id for job in result] == ["1", "3"]


class TestApplyFilters:
    def test_min_match_score(self):
        results = [make_result(make_test_job("1"), 80), make_result(make_test_job("2"), 40)]

        filtered = apply_filters(results, JobFilter(min_match_score=50), NOW)

        assert [r.job.id for r in filtered] == ["1"]

    def test_min_score_is_inclusive(self):
        results = [make_result(make_test_job("1"), 50)]
        assert len(apply_filters(results, JobFilter(min_match_score=50), NOW)) == 1

    def test_combines_score_and_job_criteria(self):
        results = [
            make_result(make_test_job("1", location_type="remote"), 90),
            make_result(make_test_job("2", location_type="onsite"), 95),
            make_result(make_test_job("3", location_type="remote"), 10),
        ]

        filtered = apply_filters(
            results, JobFilter(location_type=["remote"], min_match_score=50), NOW
        )

        assert [r.job.id for r in filtered] == ["1"]

    def test_none_filter_keeps_all(self):
        results = [make_result(make_test_job("1"), 10)]
        assert apply_filters(results, None) == results
