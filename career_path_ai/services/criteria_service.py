"""Upload step validation: turns form input into JobSearchCriteria. No UI logic."""

import base64
from typing import Optional

from career_path_ai.config import ACCEPTED_MIME_TYPES, DEFAULT_COUNTRY
from career_path_ai.errors import InputValidationError
from career_path_ai.schemas.criteria import JobSearchCriteria
from career_path_ai.utils.logger import get_logger

logger = get_logger(__name__)

MISSING_INPUT_MESSAGE = "Please ensure a resume is uploaded and job title is set."
UNSUPPORTED_FILE_MESSAGE = "Please upload a PDF or Image file."


def is_accepted_mime_type(mime_type: Optional[str]) -> bool:
    return (mime_type or "") in ACCEPTED_MIME_TYPES


def encode_resume(file_bytes: bytes) -> str:
    """Base64 text used to carry the resume to the AI service."""
    return base64.b64encode(file_bytes).decode("ascii")


def build_criteria(
    target_country: str,
    target_job_title: str,
    file_bytes: Optional[bytes] = None,
    mime_type: Optional[str] = None,
    previous: Optional[JobSearchCriteria] = None,
) -> JobSearchCriteria:
    """
    Build criteria for one Upload submission.
    A newly selected file overrides the previously uploaded one; without a new
    file the previous criteria's file is reused. Raises InputValidationError
    when no resume is available, the job title is blank, or the file type is
    not accepted.
    """
    job_title = (target_job_title or "").strip()
    has_new_file = bool(file_bytes)
    if (not has_new_file and previous is None) or not job_title:
        logger.warning("Upload rejected: resume or job title missing")
        raise InputValidationError(MISSING_INPUT_MESSAGE)

    if has_new_file:
        if not is_accepted_mime_type(mime_type):
            logger.warning("Upload rejected: unsupported MIME type %s", mime_type)
            raise InputValidationError(UNSUPPORTED_FILE_MESSAGE)
        resume_file_base64 = encode_resume(file_bytes)
        resume_mime_type = mime_type
    else:
        resume_file_base64 = previous.resume_file_base64
        resume_mime_type = previous.resume_mime_type

    return JobSearchCriteria(
        target_country=(target_country or "").strip() or DEFAULT_COUNTRY,
        target_job_title=job_title,
        resume_file_base64=resume_file_base64,
        resume_mime_type=resume_mime_type,
    )
