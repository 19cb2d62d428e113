"""Job search criteria captured on the Upload step."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from career_path_ai.config import ACCEPTED_MIME_TYPES


class JobSearchCriteria(BaseModel):
    """Immutable per submission; replaced wholesale on re-submission."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_country: str = Field(..., alias="targetCountry", description="Country to search jobs in")
    target_job_title: str = Field(..., alias="targetJobTitle", description="Role the user is targeting")
    resume_file_base64: str = Field(..., alias="resumeFileBase64", description="Resume file content, base64")
    resume_mime_type: str = Field(..., alias="resumeMimeType", description="MIME type of the resume file")

    @field_validator("resume_mime_type")
    @classmethod
    def _accepted_mime_type(cls, value: str) -> str:
        if value not in ACCEPTED_MIME_TYPES:
            raise ValueError(f"unsupported resume MIME type: {value}")
        return value

    @property
    def cache_key(self) -> Tuple[str, str, str, str]:
        """Identity used to decide whether extraction can be skipped."""
        return (
            self.target_country,
            self.target_job_title,
            self.resume_file_base64,
            self.resume_mime_type,
        )

    def same_as(self, other: Optional["JobSearchCriteria"]) -> bool:
        """True when other is field-wise identical on all four fields."""
        return other is not None and self.cache_key == other.cache_key
