"""Schema exports."""

from .advice import CareerAdvice, GroundingSource, JobListing
from .ai_schemas import ADVICE_SCHEMA, RESUME_REQUIRED_FIELDS, RESUME_SCHEMA
from .criteria import JobSearchCriteria
from .profile import (
    Education,
    Language,
    Project,
    UserLinks,
    UserProfile,
    WorkExperience,
    create_empty_profile,
)

__all__ = [
    "CareerAdvice",
    "GroundingSource",
    "JobListing",
    "JobSearchCriteria",
    "UserProfile",
    "WorkExperience",
    "Education",
    "Language",
    "Project",
    "UserLinks",
    "create_empty_profile",
    "RESUME_SCHEMA",
    "ADVICE_SCHEMA",
    "RESUME_REQUIRED_FIELDS",
]
