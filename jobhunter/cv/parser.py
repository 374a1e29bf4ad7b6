"""Heuristic resume parsing from plain text.

Extraction is regex based and best effort: section detection relies on
common headers ("Experience", "Education", ...) and a fixed list of skills
and job titles. The output schema is stable regardless of how much could be
recovered.
"""

import logging
import re
from collections.abc import Callable
from pathlib import Path

from jobhunter.config import MIN_RESUME_TEXT_LENGTH
from jobhunter.cv.extractor import extract_text
from jobhunter.schemas.resume import Education, Experience, ParsingProgress, ParsingStage, Resume

logger = logging.getLogger(__name__)

COMMON_SKILLS = [
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "ruby", "go", "rust",
    "php", "swift", "kotlin", "scala", "r", "matlab",
    # Frontend
    "react", "vue", "angular", "svelte", "next.js", "nuxt", "html", "css", "sass",
    "less", "tailwind", "bootstrap", "material-ui", "chakra",
    # Backend
    "node.js", "express", "fastify", "django", "flask", "spring", "rails", "laravel",
    "asp.net", "graphql", "rest", "grpc",
    # Databases
    "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "dynamodb", "firebase",
    "supabase", "sqlite", "oracle", "sql server", "sql",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "ansible", "jenkins",
    "github actions", "gitlab ci", "circleci",
    # Data & ML
    "machine learning", "deep learning", "tensorflow", "pytorch", "scikit-learn",
    "pandas", "numpy", "spark", "hadoop", "airflow",
    # Tools
    "git", "jira", "confluence", "figma", "sketch", "adobe xd", "postman", "swagger",
    "linux", "bash",
    # Soft skills
    "agile", "scrum", "kanban", "leadership", "communication", "problem-solving",
    "teamwork", "project management",
]

JOB_TITLES = [
    "software engineer", "senior software engineer", "staff engineer", "principal engineer",
    "frontend developer", "backend developer", "full stack developer", "fullstack developer",
    "data scientist", "data engineer", "machine learning engineer", "ml engineer",
    "devops engineer", "sre", "site reliability engineer", "platform engineer",
    "product manager", "project manager", "engineering manager", "tech lead",
    "ux designer", "ui designer", "product designer", "graphic designer",
    "qa engineer", "test engineer", "automation engineer",
    "solutions architect", "cloud architect", "system architect",
    "intern", "junior", "associate", "consultant", "analyst",
]

DEGREE_PATTERNS = [
    re.compile(r"\b(?:bachelor(?:'s)?|b\.?sc?\.?|b\.?a\.?)\s+(?:of\s+)?(?:science|arts|engineering)?", re.I),
    re.compile(r"\b(?:master(?:'s)?|m\.?sc?\.?|m\.?a\.?|mba)\s+(?:of\s+)?(?:science|arts|business|engineering)?", re.I),
    re.compile(r"\b(?:ph\.?d\.?|doctorate|doctor)\s+(?:of\s+)?(?:philosophy|science|engineering)?", re.I),
    re.compile(r"\b(?:associate(?:'s)?|a\.?s\.?|a\.?a\.?)\s+(?:of\s+)?(?:science|arts)", re.I),
]

UNIVERSITY_KEYWORDS = ["university", "college", "institute", "school", "academy"]

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
NAME_PATTERN = re.compile(r"[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3}")
UPPERCASE_NAME_PATTERN = re.compile(r"[A-Z]+(?:\s+[A-Z]+){1,3}")
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")

LOCATION_PATTERNS = [
    re.compile(r"(?:located|based|living)\s+in\s+([A-Za-z ,]+)", re.I),
    re.compile(r"[A-Z][a-z]+(?: [A-Z][a-z]+)?, *[A-Z]{2}\b"),
    re.compile(r"[A-Z][a-z]+(?: [A-Z][a-z]+)?, *[A-Z][a-z]+ +\d{5}"),
]

CERTIFICATION_PATTERNS = [
    re.compile(r"(?:certified|certification)[ \t]+[A-Za-z \t]+", re.I),
    re.compile(r"\b(?:AWS|Azure|GCP|PMP|CISSP|CPA|CFA)\b(?:[ \t]+(?:certified|certification))?", re.I),
]

EXPERIENCE_HEADER = re.compile(r"^(?:professional\s*experience|experience|work\s*history|employment)", re.I)
EXPERIENCE_END = re.compile(r"^(?:education|skills|certifications|projects|awards)", re.I)
EDUCATION_HEADER = re.compile(r"^education", re.I)
EDUCATION_END = re.compile(r"^(?:experience|skills|certifications|projects|professional)", re.I)
SUMMARY_HEADER = re.compile(r"^(?:professional\s+)?(?:summary|objective|profile|about)", re.I)
SUMMARY_END = re.compile(r"^(?:experience|education|skills|work|technical|professional\s+experience)", re.I)

DATE_HINT = re.compile(r"\d{4}|present|current", re.I)
MONTH_YEAR = r"\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+\d{4}"
DATE_RANGE = re.compile(
    r"(" + MONTH_YEAR + r"|\d{1,2}/\d{4}|\d{4})\s*(?:[-–—]|to)+\s*"
    r"(" + MONTH_YEAR + r"|\d{1,2}/\d{4}|\d{4}|present|current)",
    re.I,
)
TITLE_COMPANY_SPLIT = re.compile(r"\s*[|@,–—]\s*|\s+-\s+|\s+at\s+")
BULLET_PATTERN = re.compile(r"^[•\-*]\s*")

ProgressCallback = Callable[[ParsingProgress], None]


class ResumeParsingError(Exception):
    """Raised when a resume does not contain enough text to parse."""

    pass


def _contains_word(text: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text, re.I) is not None


def extract_skills(text: str) -> list[str]:
    """Find known skills mentioned in the text, in skill-list order."""
    return [skill for skill in COMMON_SKILLS if _contains_word(text, skill)]


def _normalize_end_date(value: str | None) -> str | None:
    if value and value.lower() in ("present", "current"):
        return "Present"
    return value


def _start_entry(line: str, has_job_title: bool) -> dict:
    date_match = DATE_RANGE.search(line)
    header = line[:date_match.start()] + line[date_match.end():] if date_match else line
    parts = [part.strip() for part in TITLE_COMPANY_SPLIT.split(header) if part.strip()]

    company = "Company"
    if has_job_title and len(parts) > 1:
        company = parts[1]

    return {
        "title": parts[0].strip() if has_job_title and parts else "Position",
        "company": company,
        "start_date": date_match.group(1) if date_match else None,
        "end_date": _normalize_end_date(date_match.group(2)) if date_match else None,
        "description": "",
        "highlights": [],
    }


def _finish_entry(entry: dict) -> Experience:
    return Experience(
        title=entry["title"],
        company=entry["company"],
        start_date=entry["start_date"],
        end_date=entry["end_date"],
        description=entry["description"].strip() or None,
        highlights=entry["highlights"] or None,
    )


def extract_experience(text: str) -> list[Experience]:
    """Extract work-history entries from the experience section.

    Falls back to "at <Company>" mentions anywhere in the text when no
    structured section is found.
    """
    experiences = []
    current = None
    in_section = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        lower_line = line.lower()

        if EXPERIENCE_HEADER.match(line) and len(line) < 40:
            in_section = True
            continue

        if EXPERIENCE_END.match(line):
            if current is not None:
                experiences.append(_finish_entry(current))
                current = None
            in_section = False
            continue

        if not in_section or not line:
            continue

        is_bullet = BULLET_PATTERN.match(line) is not None
        has_job_title = any(title in lower_line for title in JOB_TITLES)
        has_date = DATE_HINT.search(line) is not None

        if not is_bullet and (has_job_title or (has_date and len(line) < 100)):
            if current is not None:
                experiences.append(_finish_entry(current))
            current = _start_entry(line, has_job_title)
        elif current is not None and is_bullet:
            current["highlights"].append(BULLET_PATTERN.sub("", line))
        elif current is not None and len(line) > 20:
            current["description"] += " " + line

    if current is not None:
        experiences.append(_finish_entry(current))

    if not experiences:
        for match in list(re.finditer(r"(?:\bat|@)\s+([A-Z][a-zA-Z &]+(?:Inc|LLC|Corp|Ltd|Company)?)", text))[:3]:
            experiences.append(
                Experience(
                    title="Professional Role",
                    company=match.group(1).strip(),
                    description="Experience extracted from resume",
                )
            )

    return experiences


def _clean_institution(line: str, degree: str) -> str:
    institution = line.replace(degree, "", 1)
    institution = re.sub(r"\d{4}", "", institution)
    return institution.strip(" |,-–—\t") or "Institution"


def extract_education(text: str) -> list[Education]:
    """Extract education entries from the education section or university mentions."""
    education = []
    in_section = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        lower_line = line.lower()

        if EDUCATION_HEADER.match(line):
            in_section = True
            continue

        if EDUCATION_END.match(line):
            in_section = False
            continue

        mentions_university = any(keyword in lower_line for keyword in UNIVERSITY_KEYWORDS)
        if not (in_section or mentions_university):
            continue

        year_match = YEAR_PATTERN.search(line)
        graduation_date = year_match.group(0) if year_match else None

        degree_match = next(
            (match for pattern in DEGREE_PATTERNS if (match := pattern.search(line))),
            None,
        )
        if degree_match:
            degree = degree_match.group(0).strip()
            education.append(
                Education(
                    degree=degree,
                    institution=_clean_institution(line, degree),
                    graduation_date=graduation_date,
                )
            )
        elif mentions_university:
            education.append(
                Education(
                    degree="Degree",
                    institution=_clean_institution(line, ""),
                    graduation_date=graduation_date,
                )
            )

    return education


def extract_name(text: str) -> str:
    """Guess the candidate's name from the first line or the text near the email."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]

    if lines and NAME_PATTERN.fullmatch(lines[0]):
        return lines[0]
    if lines and UPPERCASE_NAME_PATTERN.fullmatch(lines[0]):
        return lines[0].title()

    email_match = EMAIL_PATTERN.search(text)
    if email_match:
        nearby = text[max(0, email_match.start() - 100):email_match.start()]
        name_match = NAME_PATTERN.search(nearby)
        if name_match:
            return name_match.group(0)

    return "Candidate"


def extract_location(text: str) -> str | None:
    """Find a location such as "Austin, TX" or "based in Berlin"."""
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(text)
        if match:
            location = re.sub(r"^(?:located|based|living)\s+in\s+", "", match.group(0), flags=re.I)
            return location.strip(" ,")
    return None


def extract_summary(text: str) -> str | None:
    """Collect the lines under a summary/objective/profile header."""
    summary_lines = []
    in_section = False

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not in_section:
            if SUMMARY_HEADER.match(line) and len(line) < 40:
                in_section = True
            continue
        if SUMMARY_END.match(line):
            break
        if line:
            summary_lines.append(line)

    return " ".join(summary_lines) or None


def extract_certifications(text: str) -> list[str] | None:
    """Find certification mentions, de-duplicated in order of appearance."""
    found = []
    for pattern in CERTIFICATION_PATTERNS:
        for match in pattern.finditer(text):
            certification = match.group(0).strip()
            if certification not in found:
                found.append(certification)
    return found or None


def parse_resume(text: str, on_progress: ProgressCallback | None = None) -> Resume:
    """Parse resume text into a structured Resume.

    Args:
        text: Plain resume text.
        on_progress: Optional callback receiving progress updates.

    Returns:
        Resume with every field that could be recovered.
    """

    def report(stage: ParsingStage, progress: int, message: str) -> None:
        if on_progress is not None:
            on_progress(ParsingProgress(stage=stage, progress=progress, message=message))

    report(ParsingStage.EXTRACTING, 20, "Extracting contact information...")
    email_match = EMAIL_PATTERN.search(text)
    phone_match = PHONE_PATTERN.search(text)
    name = extract_name(text)
    location = extract_location(text)

    report(ParsingStage.PARSING, 40, "Parsing skills and experience...")
    skills = extract_skills(text)
    experience = extract_experience(text)

    report(ParsingStage.PARSING, 60, "Extracting education...")
    education = extract_education(text)
    summary = extract_summary(text)

    report(ParsingStage.ANALYZING, 80, "Analyzing resume content...")
    certifications = extract_certifications(text)

    logger.info(
        f"Parsed resume for {name}: {len(skills)} skills, "
        f"{len(experience)} experience entries, {len(education)} education entries"
    )
    report(ParsingStage.COMPLETE, 100, "Resume parsed successfully!")

    return Resume(
        name=name,
        email=email_match.group(0) if email_match else None,
        phone=phone_match.group(0) if phone_match else None,
        location=location,
        summary=summary,
        skills=skills,
        experience=experience,
        education=education,
        certifications=certifications,
        raw_text=text,
    )


def parse_resume_file(file_path: Path, on_progress: ProgressCallback | None = None) -> Resume:
    """Extract text from a resume file and parse it.

    Args:
        file_path: Path to a .pdf, .txt or .md resume.
        on_progress: Optional callback receiving progress updates.

    Returns:
        Parsed Resume.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file type is not supported.
        ResumeParsingError: If too little text could be extracted.
    """
    if on_progress is not None:
        on_progress(ParsingProgress(stage=ParsingStage.UPLOADING, progress=10, message="Reading file..."))

    text = extract_text(file_path)
    if len(text.strip()) < MIN_RESUME_TEXT_LENGTH:
        raise ResumeParsingError(
            "Could not extract sufficient text from the file. "
            "Please try providing your resume as plain text."
        )

    return parse_resume(text, on_progress)
