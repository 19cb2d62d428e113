"""Tests for the extraction and advice calls against a fake OpenAI client."""

import json

import httpx
import pytest
from openai import APIConnectionError, AuthenticationError

from career_path_ai.agents import CareerGateway, run_advisor_agent, run_extractor_agent
from career_path_ai.agents.advisor_agent import build_advice_prompt
from career_path_ai.errors import AdviceGenerationError, CredentialError, ExtractionError
from career_path_ai.schemas import Project, UserProfile
from conftest import make_client, make_response

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/responses")


# ----- Extraction -----

@pytest.mark.asyncio
async def test_extraction_returns_fully_populated_profile(extraction_payload):
    client = make_client(make_response(json.dumps(extraction_payload)))

    profile = await run_extractor_agent("JVBERi0=", "application/pdf", "Product Manager", "United States", client=client)

    assert profile.full_name == "Ada Lovelace"
    assert profile.experience[0].role == "Product Manager"
    assert profile.education == []
    assert profile.links.portfolio == ""


@pytest.mark.asyncio
async def test_extraction_request_is_multimodal(extraction_payload):
    client = make_client(make_response(json.dumps(extraction_payload)))

    await run_extractor_agent("iVBORw0=", "image/png", "Designer", "Canada", client=client)

    kwargs = client.responses.create.await_args.kwargs
    content = kwargs["input"][0]["content"]
    assert content[0] == {"type": "input_image", "image_url": "data:image/png;base64,iVBORw0=", "detail": "auto"}
    assert content[1]["type"] == "input_text"
    assert "estimate proficiency" in content[1]["text"]
    assert kwargs["text"]["format"]["schema"]["required"] == ["fullName", "experience"]
    assert "tools" not in kwargs


@pytest.mark.asyncio
async def test_extraction_accepts_fenced_json(extraction_payload):
    fenced = "```json\n" + json.dumps(extraction_payload) + "\n```"
    client = make_client(make_response(fenced))

    profile = await run_extractor_agent("JVBERi0=", "application/pdf", "PM", "India", client=client)

    assert profile.email == "ada@example.com"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, "", "not json", '{"email": "a@b.c"}', "[1, 2]"])
async def test_extraction_failures_raise_extraction_error(text):
    client = make_client(make_response(text))

    with pytest.raises(ExtractionError):
        await run_extractor_agent("JVBERi0=", "application/pdf", "PM", "India", client=client)


@pytest.mark.asyncio
async def test_extraction_wraps_rejected_credential():
    error = AuthenticationError("bad key", response=httpx.Response(401, request=_REQUEST), body=None)
    client = make_client(error=error)

    with pytest.raises(ExtractionError) as excinfo:
        await run_extractor_agent("JVBERi0=", "application/pdf", "PM", "India", client=client)

    assert isinstance(excinfo.value.__cause__, CredentialError)


@pytest.mark.asyncio
async def test_extraction_wraps_transport_errors():
    client = make_client(error=APIConnectionError(request=_REQUEST))

    with pytest.raises(ExtractionError):
        await run_extractor_agent("JVBERi0=", "application/pdf", "PM", "India", client=client)


@pytest.mark.asyncio
async def test_extraction_without_api_key_fails_cleanly(monkeypatch):
    monkeypatch.setattr("career_path_ai.services.openai_service.OPENAI_API_KEY", "")

    with pytest.raises(ExtractionError) as excinfo:
        await run_extractor_agent("JVBERi0=", "application/pdf", "PM", "India")

    assert isinstance(excinfo.value.__cause__, CredentialError)


# ----- Advice -----

@pytest.mark.asyncio
async def test_advice_merges_citations(advice_payload):
    response = make_response(
        json.dumps(advice_payload),
        citations=[("Acme careers", "https://acme.example/jobs"), (None, "https://b.example"), ("No link", None)],
    )
    client = make_client(response)

    advice = await run_advisor_agent(UserProfile(full_name="Ada"), "Product Manager", "United States", client=client)

    assert advice.resume_score == 8.0
    assert advice.jobs[0].title == "Product Manager"
    assert [(g.title, g.uri) for g in advice.grounding_urls] == [
        ("Acme careers", "https://acme.example/jobs"),
        ("Source", "https://b.example"),
        ("No link", "#"),
    ]


@pytest.mark.asyncio
async def test_advice_always_has_grounding_urls():
    client = make_client(make_response("{}"))

    advice = await run_advisor_agent(UserProfile(), "PM", "India", client=client)

    assert advice.grounding_urls == []


@pytest.mark.asyncio
async def test_advice_request_enables_web_search(advice_payload):
    client = make_client(make_response(json.dumps(advice_payload)))
    profile = UserProfile(full_name="Ada", projects=[Project(name="X", description="Y")])

    await run_advisor_agent(profile, "Product Manager", "United States", client=client)

    kwargs = client.responses.create.await_args.kwargs
    assert kwargs["tools"] == [{"type": "web_search"}]
    assert kwargs["text"]["format"]["name"] == "career_advice"
    assert '"fullName": "Ada"' in kwargs["input"]
    assert "Target Role: Product Manager" in kwargs["input"]
    assert "Target Country: United States" in kwargs["input"]


def test_advice_prompt_contains_instruction_block():
    prompt = build_advice_prompt(UserProfile(), "Data Engineer", "Germany")

    assert "Score the resume out of 10" in prompt
    assert "Search for current job listings for 'Data Engineer' in 'Germany'" in prompt


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, "", "{broken", '"just a string"'])
async def test_advice_failures_raise_advice_generation_error(text):
    client = make_client(make_response(text))

    with pytest.raises(AdviceGenerationError):
        await run_advisor_agent(UserProfile(), "PM", "India", client=client)


@pytest.mark.asyncio
async def test_advice_wraps_rejected_credential():
    error = AuthenticationError("bad key", response=httpx.Response(401, request=_REQUEST), body=None)
    client = make_client(error=error)

    with pytest.raises(AdviceGenerationError) as excinfo:
        await run_advisor_agent(UserProfile(), "PM", "India", client=client)

    assert isinstance(excinfo.value.__cause__, CredentialError)


# ----- Gateway -----

@pytest.mark.asyncio
async def test_gateway_uses_injected_client(extraction_payload, advice_payload):
    client = make_client(make_response(json.dumps(extraction_payload)))
    gateway = CareerGateway(client=client)

    profile = await gateway.extract_profile("JVBERi0=", "application/pdf", "PM", "India")

    client.responses.create.return_value = make_response(json.dumps(advice_payload))
    advice = await gateway.generate_advice(profile, "PM", "India")

    assert profile.full_name == "Ada Lovelace"
    assert advice.recommended_role_title == "Senior Product Manager"
    assert client.responses.create.await_count == 2
