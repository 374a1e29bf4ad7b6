import uuid
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Experience(BaseModel):
    """A single work-history entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(description="Job title held")
    company: str = Field(description="Employer name")
    location: str | None = Field(default=None, description="Where the role was based")
    start_date: str | None = Field(default=None, alias="startDate", description="Free-form start date")
    end_date: str | None = Field(
        default=None,
        alias="endDate",
        description="Free-form end date, or 'present' for an ongoing role",
    )
    description: str | None = Field(default=None, description="Role description")
    highlights: list[str] | None = Field(default=None, description="Achievement bullets")


class Education(BaseModel):
    """A single education entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    degree: str = Field(description="Degree or qualification")
    institution: str = Field(description="School or university")
    location: str | None = Field(default=None, description="Institution location")
    graduation_date: str | None = Field(default=None, alias="graduationDate", description="Graduation year or date")
    gpa: str | None = Field(default=None, description="Grade point average")


class Resume(BaseModel):
    """Structured representation of a candidate's resume."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique resume id")
    name: str = Field(description="Candidate name")
    email: str | None = Field(default=None, description="Contact email")
    phone: str | None = Field(default=None, description="Contact phone")
    location: str | None = Field(default=None, description="Candidate location")
    summary: str | None = Field(default=None, description="Professional summary")
    skills: list[str] = Field(default_factory=list, description="Skills, unique ignoring case")
    experience: list[Experience] = Field(default_factory=list, description="Work history, most recent first")
    education: list[Education] = Field(default_factory=list, description="Education history")
    certifications: list[str] | None = Field(default=None, description="Certifications held")
    languages: list[str] | None = Field(default=None, description="Spoken languages")
    raw_text: str = Field(default="", alias="rawText", description="Original resume text")
    embedding: list[float] | None = Field(default=None, description="Bag-of-words embedding")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        alias="createdAt",
        description="When the resume was parsed",
    )

    @field_validator("skills")
    @classmethod
    def _dedupe_skills(cls, skills: list[str]) -> list[str]:
        """Drop case-insensitive duplicates, keeping the first spelling."""
        seen = set()
        unique = []
        for skill in skills:
            key = skill.strip().lower()
            if not key or key in seen:
                continue
            seen.add(key)
            unique.append(skill.strip())
        return unique

    def with_embedding(self, embedding) -> "Resume":
        """Return a copy of this resume carrying the given embedding.

        The embedding is set once; replacing it requires building a new Resume.

        Raises:
            ValueError: If the resume already has an embedding.
        """
        if self.embedding is not None:
            raise ValueError(f"Resume {self.id} already has an embedding")
        return self.model_copy(update={"embedding": [float(v) for v in embedding]})


class ParsingStage(str, Enum):
    UPLOADING = "uploading"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    ANALYZING = "analyzing"
    COMPLETE = "complete"
    ERROR = "error"


class ParsingProgress(BaseModel):
    """Progress update emitted while a resume is being parsed."""

    stage: ParsingStage
    progress: int = Field(ge=0, le=100, description="Completion percentage")
    message: str
