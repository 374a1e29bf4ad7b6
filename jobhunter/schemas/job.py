from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CaseInsensitiveEnum(str, Enum):
    """String enum that accepts values in any letter case."""

    @classmethod
    def _missing_(cls, value):
        """Allow case-insensitive lookup for values coming from job sources."""
        if isinstance(value, str):
            value_lower = value.strip().lower()
            for member in cls:
                if member.value == value_lower:
                    return member
        return None


class LocationType(_CaseInsensitiveEnum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class Seniority(_CaseInsensitiveEnum):
    """Seniority buckets in ascending order.

    Declaration order defines the ordinal used for distance comparisons.
    """

    INTERN = "intern"
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"

    @property
    def level(self) -> int:
        return list(Seniority).index(self)


class JobType(_CaseInsensitiveEnum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    FREELANCE = "freelance"
    INTERNSHIP = "internship"


class PayPeriod(_CaseInsensitiveEnum):
    HOURLY = "hourly"
    YEARLY = "yearly"


class Salary(BaseModel):
    """Advertised salary range."""

    model_config = ConfigDict(frozen=True)

    min: float | None = Field(default=None, description="Lower bound of the range")
    max: float | None = Field(default=None, description="Upper bound of the range")
    currency: str = Field(default="USD", description="ISO currency code")
    period: PayPeriod = Field(default=PayPeriod.YEARLY, description="Pay period")


class Job(BaseModel):
    """A normalized job posting as returned by a job source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(description="Unique identifier for the job")
    title: str = Field(description="Job title")
    company: str = Field(description="Hiring company name")
    company_logo: str | None = Field(default=None, alias="companyLogo", description="Logo URL")
    location: str = Field(description="Free-form job location")
    location_type: LocationType = Field(alias="locationType", description="remote, hybrid or onsite")
    salary: Salary | None = Field(default=None, description="Salary range, if advertised")
    seniority: Seniority = Field(description="Declared seniority of the role")
    job_type: JobType = Field(alias="jobType", description="Employment type")
    description: str = Field(description="Plain-text job description")
    requirements: list[str] = Field(default_factory=list, description="Requirement bullets")
    benefits: list[str] | None = Field(default=None, description="Benefit bullets")
    skills: list[str] = Field(default_factory=list, description="Required skills")
    posted_date: str = Field(alias="postedDate", description="Posting date (ISO 8601)")
    application_url: str | None = Field(default=None, alias="applicationUrl", description="Where to apply")
    source: str = Field(description="Identifier of the job source")
    source_id: str | None = Field(default=None, alias="sourceId", description="Source-native job id")
    embedding: list[float] | None = Field(default=None, description="Bag-of-words embedding")

    @field_validator("company_logo", "application_url", "source_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def with_embedding(self, embedding) -> "Job":
        """Return a copy of this job carrying the given embedding."""
        if self.embedding is not None:
            raise ValueError(f"Job {self.id} already has an embedding")
        return self.model_copy(update={"embedding": [float(v) for v in embedding]})


class JobFilter(BaseModel):
    """Criteria for narrowing jobs or match results. Empty fields match everything."""

    model_config = ConfigDict(populate_by_name=True)

    roles: list[str] | None = None
    locations: list[str] | None = None
    location_type: list[LocationType] | None = Field(default=None, alias="locationType")
    salary_min: float | None = Field(default=None, alias="salaryMin")
    salary_max: float | None = Field(default=None, alias="salaryMax")
    seniority: list[Seniority] | None = None
    job_type: list[JobType] | None = Field(default=None, alias="jobType")
    companies: list[str] | None = None
    keywords: list[str] | None = None
    sources: list[str] | None = None
    posted_within: str | None = Field(
        default=None,
        alias="postedWithin",
        pattern=r"^(24h|7d|30d|all)$",
        description="Maximum posting age: 24h, 7d, 30d or all",
    )
    min_match_score: int | None = Field(default=None, alias="minMatchScore", ge=0, le=100)
