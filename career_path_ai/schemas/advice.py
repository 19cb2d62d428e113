"""Career advice and job matches produced by the advice call."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JobListing(BaseModel):
    """A live job listing found by the AI service's web search."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Hiring company")
    location: str = Field(default="", description="Job location")
    platform: str = Field(default="", description="Where the listing was found (LinkedIn, Indeed, ...)")
    url: str = Field(default="", description="Link to the listing")
    match_score: Optional[float] = Field(default=None, alias="matchScore", description="Optional fit score")


class GroundingSource(BaseModel):
    """Web source the service cited while producing the advice."""

    title: str = Field(default="Source", description="Page title")
    uri: str = Field(default="#", description="Page URL")


class CareerAdvice(BaseModel):
    """Immutable result of one Refine submission."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resume_score: float = Field(default=0.0, alias="resumeScore", description="Score out of 10")
    resume_critique: str = Field(default="", alias="resumeCritique")
    executive_summary: str = Field(default="", alias="executiveSummary")
    skill_gap_analysis: str = Field(default="", alias="skillGapAnalysis")
    improvement_suggestion: str = Field(default="", alias="improvementSuggestion")
    recommended_role_title: str = Field(default="", alias="recommendedRoleTitle")
    jobs: List[JobListing] = Field(default_factory=list, description="Matching job listings")
    grounding_urls: List[GroundingSource] = Field(
        default_factory=list,
        alias="groundingUrls",
        description="Citations attached out-of-band by the service",
    )
