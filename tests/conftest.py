"""Shared fixtures: fake AI responses, a recording gateway, sample payloads."""

import asyncio
from types import SimpleNamespace
from typing import List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from career_path_ai.schemas import CareerAdvice, JobListing, UserProfile, WorkExperience

# Smallest byte string that looks like a PDF to a human reader
PDF_BYTES = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF\n"


def make_response(text: Optional[str], citations: Optional[List[tuple]] = None):
    """Stand-in for an openai Response: output_text plus url_citation annotations."""
    annotations = [
        SimpleNamespace(type="url_citation", title=title, url=url)
        for title, url in (citations or [])
    ]
    message = SimpleNamespace(
        type="message",
        content=[SimpleNamespace(type="output_text", text=text or "", annotations=annotations)],
    )
    return SimpleNamespace(output_text=text, output=[message])


def make_client(response=None, error: Optional[Exception] = None) -> MagicMock:
    client = MagicMock()
    if error is not None:
        client.responses.create = AsyncMock(side_effect=error)
    else:
        client.responses.create = AsyncMock(return_value=response)
    return client


class RecordingGateway:
    """Gateway double that records every call; optionally fails or blocks."""

    def __init__(
        self,
        profile: Optional[UserProfile] = None,
        advice: Optional[CareerAdvice] = None,
        extract_error: Optional[Exception] = None,
        advice_error: Optional[Exception] = None,
    ):
        self.profile = profile or UserProfile(
            full_name="Ada Lovelace",
            email="ada@example.com",
            experience=[WorkExperience(company="Analytical Engines", role="Product Manager")],
        )
        self.advice = advice or CareerAdvice(
            resume_score=7.5,
            resume_critique="Clear structure, few metrics.",
            jobs=[
                JobListing(
                    title="Product Manager",
                    company="Acme",
                    location="New York, NY",
                    platform="LinkedIn",
                    url="https://example.com/jobs/1",
                )
            ],
        )
        self.extract_error = extract_error
        self.advice_error = advice_error
        self.extract_calls: list = []
        self.advice_calls: list = []
        self.release: Optional[asyncio.Event] = None

    async def extract_profile(self, resume_file_base64, mime_type, target_job_title, target_country):
        self.extract_calls.append((resume_file_base64, mime_type, target_job_title, target_country))
        if self.release is not None:
            await self.release.wait()
        if self.extract_error is not None:
            raise self.extract_error
        return self.profile

    async def generate_advice(self, profile, target_job_title, target_country):
        self.advice_calls.append((profile, target_job_title, target_country))
        if self.release is not None:
            await self.release.wait()
        if self.advice_error is not None:
            raise self.advice_error
        return self.advice


@pytest.fixture
def gateway() -> RecordingGateway:
    return RecordingGateway()


@pytest.fixture
def extraction_payload() -> dict:
    return {
        "fullName": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "+1 555 0100",
        "summary": "Product leader.",
        "skills": ["Roadmapping", "SQL"],
        "experience": [
            {
                "company": "Analytical Engines",
                "role": "Product Manager",
                "duration": "2019 - 2024",
                "description": "Shipped the difference engine.",
            }
        ],
        "languages": [{"language": "English", "proficiency": "Native"}],
        "links": {"linkedin": "https://linkedin.com/in/ada"},
    }


@pytest.fixture
def advice_payload() -> dict:
    return {
        "resumeScore": 8,
        "resumeCritique": "Strong impact statements.",
        "executiveSummary": "Seasoned PM.",
        "skillGapAnalysis": "Needs more data tooling.",
        "improvementSuggestion": "Quantify outcomes.",
        "recommendedRoleTitle": "Senior Product Manager",
        "jobs": [
            {
                "title": "Product Manager",
                "company": "Acme",
                "location": "Remote",
                "platform": "LinkedIn",
                "url": "https://example.com/jobs/1",
                "matchScore": 87,
            }
        ],
    }
