"""AI Gateway: the two calls the wizard makes, bound to one client configuration."""

from typing import Optional

from openai import AsyncOpenAI

from career_path_ai.agents.advisor_agent import run_advisor_agent
from career_path_ai.agents.extractor_agent import run_extractor_agent
from career_path_ai.schemas.advice import CareerAdvice
from career_path_ai.schemas.profile import UserProfile


class CareerGateway:
    """
    Extraction and advice calls. Without an injected client a fresh
    AsyncOpenAI client is built per call, so each call owns its event loop's
    connections.
    """

    def __init__(self, client: Optional[AsyncOpenAI] = None):
        self._client = client

    async def extract_profile(
        self,
        resume_file_base64: str,
        mime_type: str,
        target_job_title: str,
        target_country: str,
    ) -> UserProfile:
        return await run_extractor_agent(
            resume_file_base64,
            mime_type,
            target_job_title,
            target_country,
            client=self._client,
        )

    async def generate_advice(
        self,
        profile: UserProfile,
        target_job_title: str,
        target_country: str,
    ) -> CareerAdvice:
        return await run_advisor_agent(
            profile,
            target_job_title,
            target_country,
            client=self._client,
        )
