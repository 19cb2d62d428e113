"""Extractor Agent: resume file -> structured UserProfile via one schema-constrained AI call."""

from typing import Optional

from openai import AsyncOpenAI

from career_path_ai.errors import ExtractionError
from career_path_ai.schemas.ai_schemas import RESUME_SCHEMA
from career_path_ai.schemas.profile import UserProfile
from career_path_ai.services.normalizer import normalize_profile
from career_path_ai.services.openai_service import (
    build_file_part,
    create_structured_response,
    get_client,
    response_text,
)
from career_path_ai.utils.helpers import parse_llm_json
from career_path_ai.utils.logger import get_logger

logger = get_logger(__name__)

EXTRACTION_PROMPT = (
    "Extract the resume data. Be precise. "
    "For languages, estimate proficiency if not stated. "
    "Look for links to LinkedIn or Portfolios."
)


def _build_extraction_input(
    resume_file_base64: str,
    mime_type: str,
    target_job_title: str,
    target_country: str,
) -> list:
    """One user message: the resume file followed by the instruction text."""
    instruction = (
        f"{EXTRACTION_PROMPT}\n"
        f"The candidate is targeting '{target_job_title}' roles in '{target_country}'."
    )
    return [
        {
            "role": "user",
            "content": [
                build_file_part(resume_file_base64, mime_type),
                {"type": "input_text", "text": instruction},
            ],
        }
    ]


async def run_extractor_agent(
    resume_file_base64: str,
    mime_type: str,
    target_job_title: str,
    target_country: str,
    client: Optional[AsyncOpenAI] = None,
) -> UserProfile:
    """
    Run the extraction call and return a fully-populated UserProfile.
    Raises ExtractionError on missing credential, service failure, empty
    output, or output that does not match the profile schema. Not retried.
    """
    try:
        client = client or get_client()
        response = await create_structured_response(
            client,
            _build_extraction_input(resume_file_base64, mime_type, target_job_title, target_country),
            schema_name="user_profile",
            schema=RESUME_SCHEMA,
        )
        text = response_text(response)
        if not text:
            raise ExtractionError("No response from AI")
        parsed = parse_llm_json(text)
        if parsed is None:
            raise ExtractionError("AI response is not valid JSON")
        profile = normalize_profile(parsed)
    except ExtractionError as e:
        logger.error("Extraction failed: %s", e)
        raise
    except Exception as e:
        logger.exception("Extraction failed: %s", e)
        raise ExtractionError("Failed to extract resume data.") from e

    logger.info(
        "Extractor Agent finished: experience=%s education=%s skills=%s",
        len(profile.experience),
        len(profile.education),
        len(profile.skills),
    )
    return profile
