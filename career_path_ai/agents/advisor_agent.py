"""Advisor Agent: profile + target role -> CareerAdvice with live job search and citations."""

import json
from typing import Optional

from openai import AsyncOpenAI

from career_path_ai.errors import AdviceGenerationError
from career_path_ai.schemas.advice import CareerAdvice
from career_path_ai.schemas.ai_schemas import ADVICE_SCHEMA
from career_path_ai.schemas.profile import UserProfile
from career_path_ai.services.normalizer import normalize_advice
from career_path_ai.services.openai_service import (
    collect_citations,
    create_structured_response,
    get_client,
    response_text,
)
from career_path_ai.utils.helpers import parse_llm_json
from career_path_ai.utils.logger import get_logger

logger = get_logger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search"}

ADVICE_PROMPT_TEMPLATE = """Analyze this user profile: {profile_json}.
Target Role: {target_job_title}
Target Country: {target_country}

1. Score the resume out of 10 based on ATS friendliness and content quality for the target role.
2. Provide a critique of the resume.
3. Analyze skill gaps.
4. Suggest improvements.
5. Search for current job listings for '{target_job_title}' in '{target_country}'.

Return JSON matching schema."""


def build_advice_prompt(profile: UserProfile, target_job_title: str, target_country: str) -> str:
    return ADVICE_PROMPT_TEMPLATE.format(
        profile_json=json.dumps(profile.to_wire(), ensure_ascii=False),
        target_job_title=target_job_title,
        target_country=target_country,
    )


async def run_advisor_agent(
    profile: UserProfile,
    target_job_title: str,
    target_country: str,
    client: Optional[AsyncOpenAI] = None,
) -> CareerAdvice:
    """
    Run the advice call with web search enabled. The returned advice always
    carries grounding_urls (possibly empty), collected from the response's
    citation annotations rather than the JSON body.
    Raises AdviceGenerationError on any failure. Not retried.
    """
    try:
        client = client or get_client()
        response = await create_structured_response(
            client,
            build_advice_prompt(profile, target_job_title, target_country),
            schema_name="career_advice",
            schema=ADVICE_SCHEMA,
            tools=[WEB_SEARCH_TOOL],
        )
        text = response_text(response)
        if not text:
            raise AdviceGenerationError("No response from AI")
        parsed = parse_llm_json(text)
        if parsed is None:
            raise AdviceGenerationError("AI response is not valid JSON")
        advice = normalize_advice(parsed, collect_citations(response))
    except AdviceGenerationError as e:
        logger.error("Advice generation failed: %s", e)
        raise
    except Exception as e:
        logger.exception("Advice generation failed: %s", e)
        raise AdviceGenerationError("Failed to generate career advice.") from e

    logger.info(
        "Advisor Agent finished: score=%s jobs=%s sources=%s",
        advice.resume_score,
        len(advice.jobs),
        len(advice.grounding_urls),
    )
    return advice
