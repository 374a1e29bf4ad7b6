from pydantic import BaseModel, ConfigDict, Field

from jobhunter.schemas.job import Job


class MatchBreakdown(BaseModel):
    """Per-factor scores behind an overall match score."""

    model_config = ConfigDict(frozen=True)

    skills_match: int = Field(ge=0, le=100, description="Skill overlap score")
    experience_match: int = Field(ge=0, le=100, description="Experience level fit")
    keyword_match: int = Field(ge=0, le=100, description="Keyword overlap with the posting")
    location_match: int = Field(ge=0, le=100, description="Location compatibility")
    seniority_match: int = Field(ge=0, le=100, description="Seniority bucket alignment")


class MatchResult(BaseModel):
    """Result of matching a resume to a job posting."""

    model_config = ConfigDict(frozen=True)

    job: Job = Field(description="The matched job posting")
    score: int = Field(ge=0, le=100, description="Weighted overall score")
    breakdown: MatchBreakdown = Field(description="Individual factor scores")
    matched_skills: list[str] = Field(
        description="Job skills the candidate has; related matches are suffixed '(related)'"
    )
    missing_skills: list[str] = Field(
        description="Job skills not found in the candidate's skills or related categories"
    )
    experience_relevance: str = Field(
        description="One-sentence explanation of how the candidate's experience fits"
    )
    recommendations: list[str] = Field(
        max_length=3,
        description="Up to three actionable suggestions for the application",
    )
