"""Helper utilities for the CareerPath AI wizard."""

import asyncio
import json
import re
from typing import Any, Awaitable, Optional, TypeVar

T = TypeVar("T")


def parse_llm_json(text: str) -> Optional[Any]:
    """Parse JSON from LLM response, stripping markdown code blocks if present."""
    raw = (text or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def run_async(coro: Awaitable[T]) -> T:
    """
    Run a coroutine to completion on a fresh event loop.
    Safe to call from sync context (e.g. Streamlit callbacks).
    """
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()
