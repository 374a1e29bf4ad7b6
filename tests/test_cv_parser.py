"""Tests for heuristic resume parsing."""

import pytest

from jobhunter.cv.parser import (
    ResumeParsingError,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_location,
    extract_name,
    extract_skills,
    extract_summary,
    parse_resume,
    parse_resume_file,
)
from jobhunter.matching.experience import calculate_years_of_experience
from jobhunter.schemas.resume import ParsingStage
from tests.conftest import SAMPLE_RESUME_TEXT


class TestExtractSkills:
    def test_finds_known_skills_in_list_order(self):
        skills = extract_skills(SAMPLE_RESUME_TEXT)
        assert skills == [
            "python", "django", "rest", "postgresql", "aws", "docker", "kubernetes", "git", "agile",
        ]

    def test_requires_word_boundaries(self):
        # "sql" inside "PostgreSQL" and "go" inside "Django" are not separate skills
        skills = extract_skills("PostgreSQL and Django")
        assert "sql" not in skills
        assert "go" not in skills

    def test_no_skills(self):
        assert extract_skills("I enjoy long walks") == []


class TestExtractExperience:
    def test_structured_section(self):
        entries = extract_experience(SAMPLE_RESUME_TEXT)

        assert len(entries) == 2
        first, second = entries
        assert first.title == "Software Engineer"
        assert first.company == "Initech"
        assert (first.start_date, first.end_date) == ("2019", "2022")
        assert first.highlights == [
            "Built REST APIs in Python and Django",
            "Maintained PostgreSQL databases and Docker deployments",
        ]
        assert second.title == "Backend Developer"
        assert second.company == "Globex"
        assert (second.start_date, second.end_date) == ("Jan 2022", "Present")

    def test_current_end_date_normalized(self):
        text = "EXPERIENCE\nData Engineer | Hooli | 2020 - current\n"
        entries = extract_experience(text)
        assert entries[0].end_date == "Present"

    def test_dated_line_without_known_title(self):
        text = "Work History\nBarista, Cafe Luna, 2015 - 2017\n"

        entries = extract_experience(text)

        assert entries[0].title == "Position"
        assert entries[0].company == "Company"
        assert entries[0].start_date == "2015"

    def test_falls_back_to_company_mentions(self):
        entries = extract_experience("Previously at Initech.")

        assert len(entries) == 1
        assert entries[0].title == "Professional Role"
        assert entries[0].company == "Initech"

    def test_comma_separated_header(self):
        entries = extract_experience("EXPERIENCE\nSoftware Engineer, Acme Corp 2015 - 2021\n")

        assert entries[0].title == "Software Engineer"
        assert entries[0].company == "Acme Corp"
        assert (entries[0].start_date, entries[0].end_date) == ("2015", "2021")

    def test_abbreviated_month_and_company_year_dates_count(self, today):
        text = (
            "EXPERIENCE\n"
            "Software Engineer, Acme Corp 2015 - 2021\n"
            "Backend Developer | Beta | Sept 2021 - Present\n"
        )

        entries = extract_experience(text)

        assert entries[1].company == "Beta"
        assert (entries[1].start_date, entries[1].end_date) == ("Sept 2021", "Present")
        assert calculate_years_of_experience(entries, today) == 11.1

    def test_parsed_dates_feed_years_estimate(self, today):
        entries = extract_experience(SAMPLE_RESUME_TEXT)
        assert calculate_years_of_experience(entries, today) == 7.8


class TestExtractEducation:
    def test_degree_line(self):
        education = extract_education(SAMPLE_RESUME_TEXT)

        assert len(education) == 1
        assert education[0].degree == "B.Sc."
        assert "University of Texas" in education[0].institution
        assert education[0].graduation_date == "2019"

    def test_university_mention_without_degree(self):
        education = extract_education("Studied at Springfield College 2010")

        assert education[0].degree == "Degree"
        assert education[0].graduation_date == "2010"

    def test_no_education(self):
        assert extract_education("Just some text") == []


class TestExtractName:
    def test_first_line(self):
        assert extract_name(SAMPLE_RESUME_TEXT) == "Jane Smith"

    def test_all_caps_first_line(self):
        assert extract_name("JOHN DOE\nEngineer") == "John Doe"

    def test_near_email(self):
        text = "curriculum vitae\nReach me, Maria Garcia, at maria@example.com"
        assert extract_name(text) == "Maria Garcia"

    def test_fallback(self):
        assert extract_name("hello world") == "Candidate"


class TestExtractLocation:
    def test_city_and_state(self):
        assert extract_location(SAMPLE_RESUME_TEXT) == "Austin, TX"

    def test_based_in(self):
        assert extract_location("Engineer based in Berlin, Germany\nMore") == "Berlin, Germany"

    def test_none(self):
        assert extract_location("no place here") is None


class TestExtractSummary:
    def test_summary_section(self):
        assert extract_summary(SAMPLE_RESUME_TEXT) == (
            "Backend engineer who enjoys building reliable APIs and data pipelines."
        )

    def test_no_summary(self):
        assert extract_summary("EXPERIENCE\nEngineer") is None


class TestExtractCertifications:
    def test_finds_certifications(self):
        certifications = extract_certifications(SAMPLE_RESUME_TEXT)
        assert "Certified Developer" in certifications

    def test_none_when_absent(self):
        assert extract_certifications("nothing to see") is None


class TestParseResume:
    def test_full_resume(self):
        resume = parse_resume(SAMPLE_RESUME_TEXT)

        assert resume.name == "Jane Smith"
        assert resume.email == "jane.smith@email.com"
        assert resume.phone == "(555) 123-4567"
        assert resume.location == "Austin, TX"
        assert "python" in resume.skills
        assert len(resume.experience) == 2
        assert len(resume.education) == 1
        assert resume.raw_text == SAMPLE_RESUME_TEXT

    def test_reports_progress(self):
        updates = []

        parse_resume(SAMPLE_RESUME_TEXT, on_progress=updates.append)

        assert [u.progress for u in updates] == [20, 40, 60, 80, 100]
        assert updates[-1].stage == ParsingStage.COMPLETE

    def test_sparse_text_still_parses(self):
        resume = parse_resume("hello world")

        assert resume.name == "Candidate"
        assert resume.email is None
        assert resume.skills == []
        assert resume.experience == []


class TestParseResumeFile:
    def test_parses_text_file(self, resume_file):
        updates = []

        resume = parse_resume_file(resume_file, on_progress=updates.append)

        assert resume.name == "Jane Smith"
        assert updates[0].stage == ParsingStage.UPLOADING

    def test_too_little_text(self, tmp_path):
        path = tmp_path / "short.txt"
        path.write_text("Jane Smith", encoding="utf-8")

        with pytest.raises(ResumeParsingError):
            parse_resume_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_resume_file(tmp_path / "missing.txt")
