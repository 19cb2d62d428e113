"""OpenAI Responses API access: client setup, structured requests, citations."""

from typing import Any, List, Optional

from openai import AsyncOpenAI, AuthenticationError, PermissionDeniedError

from career_path_ai.config import MODEL_NAME, OPENAI_API_KEY, REQUEST_TIMEOUT_SECONDS
from career_path_ai.errors import CredentialError
from career_path_ai.schemas.advice import GroundingSource
from career_path_ai.utils.logger import get_logger

logger = get_logger(__name__)

PDF_MIME_TYPE = "application/pdf"


def get_client(api_key: Optional[str] = None) -> AsyncOpenAI:
    """Build an AsyncOpenAI client; a missing key is a call failure, not a crash."""
    key = api_key if api_key is not None else OPENAI_API_KEY
    if not key:
        logger.error("OPENAI_API_KEY is not set; cannot call the AI service")
        raise CredentialError("OPENAI_API_KEY is not set")
    return AsyncOpenAI(api_key=key, timeout=REQUEST_TIMEOUT_SECONDS)


def build_file_part(file_base64: str, mime_type: str) -> dict:
    """Multimodal content part carrying the resume: PDFs as files, everything else as images."""
    data_url = f"data:{mime_type};base64,{file_base64}"
    if mime_type == PDF_MIME_TYPE:
        return {"type": "input_file", "filename": "resume.pdf", "file_data": data_url}
    return {"type": "input_image", "image_url": data_url, "detail": "auto"}


async def create_structured_response(
    client: AsyncOpenAI,
    input_items: Any,
    schema_name: str,
    schema: dict,
    tools: Optional[List[dict]] = None,
) -> Any:
    """
    Send one Responses API request constrained to a JSON Schema.
    Credential rejections are raised as CredentialError; other SDK errors propagate.
    """
    kwargs: dict = {
        "model": MODEL_NAME,
        "input": input_items,
        "text": {
            "format": {
                "type": "json_schema",
                "name": schema_name,
                "schema": schema,
                "strict": False,
            }
        },
    }
    if tools:
        kwargs["tools"] = tools
    try:
        return await client.responses.create(**kwargs)
    except (AuthenticationError, PermissionDeniedError) as e:
        logger.error("AI service rejected the credential: %s", e)
        raise CredentialError("The AI service rejected the API key") from e


def response_text(response: Any) -> str:
    """Aggregated output text of a response; empty string when there is none."""
    if response is None:
        return ""
    return getattr(response, "output_text", None) or ""


def collect_citations(response: Any) -> List[GroundingSource]:
    """
    Web citations attached to the response envelope (url_citation annotations),
    in order of appearance. Missing title becomes "Source", missing url "#".
    """
    sources: List[GroundingSource] = []
    for item in getattr(response, "output", None) or []:
        if getattr(item, "type", None) != "message":
            continue
        for part in getattr(item, "content", None) or []:
            for annotation in getattr(part, "annotations", None) or []:
                if getattr(annotation, "type", None) != "url_citation":
                    continue
                sources.append(
                    GroundingSource(
                        title=getattr(annotation, "title", None) or "Source",
                        uri=getattr(annotation, "url", None) or "#",
                    )
                )
    return sources
